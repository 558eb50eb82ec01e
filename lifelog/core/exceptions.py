"""
Exception taxonomy for legacy imports.

``LegacyImportError`` subclasses are fatal: the run stops and no result is
reported. ``EntryValidationError`` and ``RowParseError`` are local to one row;
the import records them and moves on.
"""
from typing import Optional


class LegacyImportError(Exception):
    """Base class for errors that abort an import run."""


class DatabaseOpenError(LegacyImportError):
    """Raised when the source database cannot be opened or read."""

    def __init__(self, message: str = "Failed to open the database file"):
        super().__init__(message)


class NoEntriesTableFoundError(LegacyImportError):
    """Raised when no table in the source database looks like an entries table."""

    def __init__(self, message: str = "No entries table found in the database"):
        super().__init__(message)


class QueryFailedError(LegacyImportError):
    """Raised when a read query against the source database cannot be prepared."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Database query failed: {detail}")


class PersistenceError(LegacyImportError):
    """Raised when accepted entries cannot be flushed to the entry store."""


class ImportCancelledError(LegacyImportError):
    """Raised at a checkpoint when the caller has requested cancellation."""

    def __init__(self, message: str = "Import cancelled"):
        super().__init__(message)


class RowParseError(Exception):
    """Raised when a source row cannot be coerced into a legacy entry."""


class EntryValidationError(Exception):
    """Base class for canonical entry validation failures."""

    message = "Invalid entry data"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class EmptyContentError(EntryValidationError):
    message = "Entry content cannot be empty"


class ContentTooLongError(EntryValidationError):
    message = "Entry content exceeds maximum length"


class InvalidLocationError(EntryValidationError):
    message = "Invalid location coordinates"
