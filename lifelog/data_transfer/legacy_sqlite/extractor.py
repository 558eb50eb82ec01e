"""
Row extraction for legacy life-logging databases.

Rows of the detected entries table are streamed one at a time and mapped to
``LegacyEntry`` records by column name. Column names are matched
case-insensitively against an alias table; anything unrecognised is kept as
string metadata.
"""
from __future__ import annotations

from typing import Any, Dict, FrozenSet, Iterator, Optional, Sequence, Tuple

from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from lifelog.core.exceptions import (
    NoEntriesTableFoundError,
    QueryFailedError,
    RowParseError,
)
from lifelog.core.logging_config import log_error, log_info, log_warning
from lifelog.core.time_utils import from_unix_seconds
from lifelog.schemas.dto import ImportRunResult
from lifelog.utils.import_export.progress_utils import ImportCheckpoint, ProgressCallback

from .inspector import quote_identifier
from .models import ColumnInfo, DatabaseSchema, LegacyEntry

COLUMN_ALIASES: Dict[str, FrozenSet[str]] = {
    "original_id": frozenset({"id", "entry_id", "_id"}),
    "content": frozenset({"content", "text", "description", "note", "entry"}),
    "timestamp": frozenset({"timestamp", "date", "created_at", "time"}),
    "latitude": frozenset({"latitude", "lat"}),
    "longitude": frozenset({"longitude", "lng", "lon"}),
    "mood": frozenset({"mood", "emotion", "feeling"}),
    "activity": frozenset({"activity", "category", "type", "action"}),
    "tags": frozenset({"tags", "labels"}),
}

_FIELD_BY_COLUMN: Dict[str, str] = {
    alias: field for field, aliases in COLUMN_ALIASES.items() for alias in aliases
}


def field_for_column(column_name: str) -> Optional[str]:
    """LegacyEntry field a source column maps to, or None for metadata columns."""
    return _FIELD_BY_COLUMN.get(column_name.lower())


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray, memoryview)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise RowParseError(f"value is not valid UTF-8 text: {exc}") from exc
    return str(value)


def _as_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value)
    text = _as_text(value)
    if text is None or not text.strip():
        return None
    try:
        return float(text.strip())
    except ValueError as exc:
        raise RowParseError(f"cannot read {text!r} as a number") from exc


def _as_coordinate(value: Any) -> Optional[float]:
    # Legacy exports write 0 for "no location"
    number = _as_float(value)
    if number is None or number == 0:
        return None
    return number


def _as_epoch_seconds(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        seconds: float = value
    else:
        text = _as_text(value)
        if text is None or not text.strip():
            return None
        text = text.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            seconds = float(text)
        except ValueError as exc:
            raise RowParseError(f"invalid timestamp {text!r}: expected Unix epoch seconds") from exc
    try:
        return int(seconds)
    except (OverflowError, ValueError) as exc:
        raise RowParseError(f"invalid timestamp {value!r}") from exc


def _split_tags(text: str) -> list[str]:
    return [piece.strip() for piece in text.split(",")]


class LegacyRowExtractor:
    """
    Streams ``LegacyEntry`` records out of the entries table.

    Rows that cannot be coerced are recorded on the run summary with their
    1-based ordinal and skipped; they never abort the run.
    """

    def __init__(
        self,
        connection: Connection,
        *,
        progress_callback: Optional[ProgressCallback] = None,
        checkpoint: Optional[ImportCheckpoint] = None,
    ):
        self.connection = connection
        self.progress_callback = progress_callback
        self.checkpoint = checkpoint or ImportCheckpoint()

    def count_rows(self, table: str) -> int:
        try:
            count = self.connection.exec_driver_sql(
                f"SELECT COUNT(*) FROM {quote_identifier(self.connection, table)}"
            ).scalar()
        except SQLAlchemyError as exc:
            log_error(exc, table=table)
            raise QueryFailedError(f"Failed to count rows in {table}") from exc
        return int(count or 0)

    def build_select_query(self, table: str, columns: Sequence[ColumnInfo]) -> str:
        column_list = ", ".join(quote_identifier(self.connection, c.name) for c in columns)
        # Table scan order; no ORDER BY rowid, WITHOUT ROWID tables lack it
        return f"SELECT {column_list} FROM {quote_identifier(self.connection, table)}"

    def extract(
        self,
        schema: DatabaseSchema,
        summary: ImportRunResult,
    ) -> Iterator[Tuple[int, LegacyEntry]]:
        """
        Yield ``(row_ordinal, entry)`` for every parseable row, in table scan order.

        Progress is reported after each row has been handed on, so the caller
        has finished with the previous entry when ``(processed, total)`` is sent.

        Raises:
            NoEntriesTableFoundError: If the schema has no entries table
            QueryFailedError: If the select or count query cannot be run
        """
        if not schema.entries_table:
            raise NoEntriesTableFoundError()
        table = schema.entries_table
        if not schema.columns:
            raise QueryFailedError(f"Table {table} has no readable columns")

        total = self.count_rows(table)
        query = self.build_select_query(table, schema.columns)
        try:
            result = self.connection.exec_driver_sql(query)
        except SQLAlchemyError as exc:
            log_error(exc, table=table)
            raise QueryFailedError("Failed to prepare select statement") from exc

        log_info(f"Extracting entries from {table}", table=table, total_rows=total)
        processed = 0
        try:
            for row in result:
                processed += 1
                summary.total_processed += 1
                try:
                    entry = self.parse_row(row, schema.columns)
                except RowParseError as exc:
                    message = f"Row {processed}: {exc}"
                    summary.record_error(message)
                    log_warning(f"Failed to parse row: {exc}", table=table, row=processed)
                else:
                    yield processed, entry

                if self.progress_callback:
                    self.progress_callback(processed, total)
                self.checkpoint.tick(processed)
        except SQLAlchemyError as exc:
            log_error(exc, table=table, row=processed)
            raise QueryFailedError(f"Failed reading row {processed + 1} of {table}") from exc
        finally:
            result.close()

    @staticmethod
    def parse_row(row: Sequence[Any], columns: Sequence[ColumnInfo]) -> LegacyEntry:
        """
        Map one row onto a ``LegacyEntry``.

        Raises:
            RowParseError: If a recognised column holds a value of the wrong shape
        """
        entry = LegacyEntry()

        for index, column in enumerate(columns):
            column_name = column.name.lower()
            value = row[index]
            field = _FIELD_BY_COLUMN.get(column_name)
            try:
                if field == "original_id":
                    text = _as_text(value)
                    if text is not None:
                        entry.original_id = text
                elif field == "content":
                    text = _as_text(value)
                    if text is not None:
                        entry.content = text
                elif field == "timestamp":
                    seconds = _as_epoch_seconds(value)
                    if seconds is not None:
                        entry.timestamp = from_unix_seconds(seconds)
                elif field == "latitude":
                    entry.latitude = _as_coordinate(value)
                elif field == "longitude":
                    entry.longitude = _as_coordinate(value)
                elif field == "mood":
                    text = _as_text(value)
                    if text is not None:
                        entry.mood = text
                elif field == "activity":
                    text = _as_text(value)
                    if text is not None:
                        entry.activity = text
                elif field == "tags":
                    text = _as_text(value)
                    if text is not None:
                        entry.tags = _split_tags(text)
                else:
                    text = _as_text(value)
                    if text is not None:
                        entry.metadata[column_name] = text
            except RowParseError as exc:
                raise RowParseError(f"column '{column.name}': {exc}") from exc
            except ValueError as exc:
                raise RowParseError(f"column '{column.name}': {exc}") from exc

        return entry
