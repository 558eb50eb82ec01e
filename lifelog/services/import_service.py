"""
Import service for bringing legacy life-logging databases into the entry store.

Rows flow through the pipeline one at a time: extraction, normalization,
validation and the duplicate check all finish for one row before the next row
is read. Accepted entries are held back and written in a single flush at the
end, so a run that fails or is cancelled leaves the store as it was.
"""
import threading
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple, Union

from sqlmodel import Session

from lifelog.core.exceptions import EntryValidationError, LegacyImportError
from lifelog.core.logging_config import log_error, log_info, log_warning
from lifelog.core.time_utils import utc_now
from lifelog.data_transfer.legacy_sqlite import (
    DatabaseSchema,
    LegacyEntry,
    LegacyRowExtractor,
    LegacySchemaInspector,
    LegacyToJournalMapper,
    field_for_column,
)
from lifelog.schemas.dto import ImportRunResult
from lifelog.services.entry_store import EntryStore, SQLEntryStore
from lifelog.services.persistence_gate import CommitOutcome, PersistenceGate
from lifelog.utils.import_export.constants import ImportConfig
from lifelog.utils.import_export.progress_utils import ImportCheckpoint, ProgressCallback


class ImportService:
    """Service for importing legacy databases."""

    def __init__(self, db: Session, store: Optional[EntryStore] = None):
        """
        Initialize import service.

        Args:
            db: Database session of the entry store
            store: Alternative entry store; defaults to one backed by ``db``
        """
        self.db = db
        self.store = store or SQLEntryStore(db)

    @staticmethod
    def inspect_source(file_path: Union[str, Path]) -> Tuple[DatabaseSchema, int]:
        """
        Inspect a legacy database without importing it.

        Returns:
            Tuple of (schema, row count of the entries table)
        """
        with LegacySchemaInspector.open_database(file_path) as connection:
            schema = LegacySchemaInspector.inspect(connection)
            row_count = 0
            if schema.entries_table:
                row_count = LegacyRowExtractor(connection).count_rows(schema.entries_table)
        return schema, row_count

    def import_from(
        self,
        file_path: Union[str, Path],
        *,
        progress_callback: Optional[ProgressCallback] = None,
        cancel_event: Optional[threading.Event] = None,
        checkpoint: Optional[ImportCheckpoint] = None,
    ) -> ImportRunResult:
        """
        Import every entry of a legacy database.

        Re-running against the same source and store is safe: entries already
        stored are counted as duplicates and not inserted again.

        Args:
            file_path: Path to the legacy SQLite file
            progress_callback: Receives (processed, total) after every row
            cancel_event: Set it to cancel the run at the next checkpoint
            checkpoint: Custom checkpoint (overrides ``cancel_event``)

        Returns:
            ImportRunResult with counters and row/entry level errors

        Raises:
            DatabaseOpenError: If the file cannot be opened
            NoEntriesTableFoundError: If no entries table can be identified
            QueryFailedError: If the source cannot be queried
            PersistenceError: If accepted entries cannot be saved
            ImportCancelledError: If the run was cancelled before the flush
        """
        file_path = Path(file_path)
        log_info(f"Starting legacy import from {file_path.name}", file_path=str(file_path))

        summary = ImportRunResult()
        imported_at = utc_now()
        checkpoint = checkpoint or ImportCheckpoint(cancel_event=cancel_event)

        try:
            with LegacySchemaInspector.open_database(file_path) as connection:
                schema = LegacySchemaInspector.inspect(connection)
                summary.source_table = schema.entries_table
                for warning in self._schema_warnings(schema):
                    summary.warnings.append(warning)
                    log_warning(warning, file_path=str(file_path))

                gate = PersistenceGate(self.store, summary)
                extractor = LegacyRowExtractor(
                    connection,
                    progress_callback=progress_callback,
                    checkpoint=checkpoint,
                )
                for ordinal, legacy_entry in extractor.extract(schema, summary):
                    self._import_entry(
                        ordinal,
                        legacy_entry,
                        gate=gate,
                        summary=summary,
                        source_table=schema.entries_table,
                        imported_at=imported_at,
                    )

            # Last chance to cancel before anything is written
            checkpoint.raise_if_cancelled()
            gate.flush()

        except LegacyImportError as e:
            self.db.rollback()
            log_error(e, file_path=str(file_path))
            raise
        except Exception as e:
            self.db.rollback()
            log_error(e, file_path=str(file_path), context="unexpected_import_error")
            raise

        log_info(
            f"Legacy import completed: {summary.entries_imported} entries, "
            f"{summary.duplicates_skipped} duplicates, {summary.entries_skipped} skipped",
            file_path=str(file_path),
            source_table=summary.source_table,
            total_processed=summary.total_processed,
        )
        if summary.has_errors:
            log_info(
                f"Legacy import completed with {summary.error_count} errors",
                error_count=summary.error_count,
            )
        return summary

    @staticmethod
    def _schema_warnings(schema: DatabaseSchema) -> List[str]:
        """Observations about the source layout that do not stop the import."""
        warnings: List[str] = []
        table = schema.entries_table
        if not table:
            return warnings
        if table.lower() not in ImportConfig.ENTRIES_TABLE_CANDIDATES:
            warnings.append(f"Entries table '{table}' was selected by name heuristics")

        mapped = {field_for_column(name) for name in schema.column_names}
        if "content" not in mapped:
            warnings.append("No content column found; every row will be rejected as empty")
        if "timestamp" not in mapped:
            warnings.append("No timestamp column found; entries are dated at import time")
        return warnings

    @staticmethod
    def _import_entry(
        ordinal: int,
        legacy_entry: LegacyEntry,
        *,
        gate: PersistenceGate,
        summary: ImportRunResult,
        source_table: Optional[str],
        imported_at: datetime,
    ) -> Optional[CommitOutcome]:
        """Map, validate and offer one entry to the gate; validation failures are recorded."""
        try:
            candidate = LegacyToJournalMapper.map_entry(
                legacy_entry,
                source_table=source_table,
                imported_at=imported_at,
            )
        except EntryValidationError as entry_error:
            summary.record_error(f"Entry {ordinal}: {entry_error}")
            log_warning(
                f"Skipped entry due to error: {entry_error}",
                row=ordinal,
                original_id=legacy_entry.original_id,
            )
            return None

        return gate.commit(candidate)
