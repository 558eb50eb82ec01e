"""
Data Transfer Objects (DTOs) for import operations.

``ImportRunResult`` doubles as the run-scoped accumulator: the extractor,
mapper and persistence gate update its counters in place as rows flow
through a single import run, and the import service returns it to the
caller once the bulk flush succeeds.
"""
from typing import List, Optional

from pydantic import BaseModel, Field


class ImportRunResult(BaseModel):
    """
    Summary of one legacy import run.
    """
    entries_imported: int = Field(0, description="Entries accepted and flushed to the store")
    duplicates_skipped: int = Field(0, description="Entries skipped as duplicates (not errors)")
    entries_skipped: int = Field(0, description="Rows or entries skipped because of errors")
    total_processed: int = Field(0, description="Rows read from the source table")
    errors: List[str] = Field(
        default_factory=list,
        description="Row and entry level error messages in processing order",
    )
    warnings: List[str] = Field(
        default_factory=list,
        description="Non-fatal observations that did not cause a skip",
    )
    source_table: Optional[str] = Field(None, description="Table the entries were read from")

    def record_error(self, message: str) -> None:
        """Record a skipped row or entry."""
        self.errors.append(message)
        self.entries_skipped += 1

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)
