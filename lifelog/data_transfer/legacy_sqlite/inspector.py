"""
Schema inspection for legacy life-logging databases.

The source schema is unknown up front: the inspector lists the tables in the
SQLite catalog, picks the table most likely to hold journal entries and reads
its column definitions.
"""
from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, List, Optional, Sequence, Union
from urllib.parse import quote

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool

from lifelog.core.exceptions import DatabaseOpenError, QueryFailedError
from lifelog.core.logging_config import log_error, log_info
from lifelog.utils.import_export.constants import ImportConfig

from .models import ColumnInfo, DatabaseSchema


def quote_identifier(connection: Connection, name: str) -> str:
    """Quote a table or column name for use in raw SQL."""
    return connection.dialect.identifier_preparer.quote_identifier(name)


def _connect_read_only(uri: str) -> sqlite3.Connection:
    conn = sqlite3.connect(uri, uri=True, check_same_thread=False)
    # TEXT arrives undecoded so a bad value fails its own row, not the fetch
    conn.text_factory = bytes
    return conn


def _catalog_text(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return "" if value is None else str(value)


class LegacySchemaInspector:
    """Opens legacy databases and infers where their entries live."""

    @staticmethod
    @contextmanager
    def open_database(path: Union[str, Path]) -> Iterator[Connection]:
        """
        Open a legacy database read-only for the duration of the block.

        The connection is closed and the engine disposed on every exit path.

        Raises:
            DatabaseOpenError: If the file is missing or is not a readable SQLite database
        """
        db_path = Path(path)
        if not db_path.is_file():
            raise DatabaseOpenError(f"Failed to open the database file: {db_path} not found")

        uri = f"file:{quote(str(db_path.resolve()))}?mode=ro"
        engine = create_engine(
            "sqlite://",
            creator=lambda: _connect_read_only(uri),
            poolclass=NullPool,
        )
        try:
            try:
                connection = engine.connect()
            except SQLAlchemyError as exc:
                log_error(exc, file_path=str(db_path))
                raise DatabaseOpenError(f"Failed to open the database file: {db_path}") from exc

            try:
                # sqlite3 defers reading the header until the first statement
                connection.exec_driver_sql("SELECT count(*) FROM sqlite_master").scalar()
            except SQLAlchemyError as exc:
                connection.close()
                log_error(exc, file_path=str(db_path))
                raise DatabaseOpenError(
                    f"Failed to open the database file: {db_path} is not a readable SQLite database"
                ) from exc

            try:
                yield connection
            finally:
                connection.close()
        finally:
            engine.dispose()

    @classmethod
    def inspect(cls, connection: Connection) -> DatabaseSchema:
        """
        Enumerate tables, select the entries table and read its columns.

        ``entries_table`` is None when no table qualifies; the extractor turns
        that into ``NoEntriesTableFoundError``.
        """
        tables = cls.list_tables(connection)
        entries_table = cls.detect_entries_table(tables)
        columns: List[ColumnInfo] = []
        if entries_table is not None:
            columns = cls.get_table_columns(connection, entries_table)

        schema = DatabaseSchema(tables=tables, entries_table=entries_table, columns=columns)
        log_info(
            f"Detected legacy schema: {len(tables)} tables, entries table {entries_table!r}",
            entries_table=entries_table,
            columns=",".join(schema.column_names) or None,
        )
        return schema

    @staticmethod
    def list_tables(connection: Connection) -> List[str]:
        try:
            rows = connection.exec_driver_sql(
                "SELECT name FROM sqlite_master WHERE type='table'"
            ).all()
        except SQLAlchemyError as exc:
            log_error(exc)
            raise QueryFailedError("Failed to read table list") from exc
        return [_catalog_text(row[0]) for row in rows]

    @staticmethod
    def detect_entries_table(tables: Sequence[str]) -> Optional[str]:
        """
        Pick the table most likely to hold entries.

        Priority: exact (case-insensitive) candidate names in list order, then
        the first table whose name contains "entry" or "log", then the first
        non-system table.
        """
        by_lower = {}
        for table in tables:
            by_lower.setdefault(table.lower(), table)

        for candidate in ImportConfig.ENTRIES_TABLE_CANDIDATES:
            if candidate in by_lower:
                return by_lower[candidate]

        for table in tables:
            lowered = table.lower()
            if any(keyword in lowered for keyword in ImportConfig.ENTRIES_TABLE_KEYWORDS):
                return table

        return next(
            (table for table in tables if not table.startswith(ImportConfig.SYSTEM_TABLE_PREFIX)),
            None,
        )

    @staticmethod
    def get_table_columns(connection: Connection, table: str) -> List[ColumnInfo]:
        """Column names and declared types in table-definition order."""
        try:
            rows = connection.exec_driver_sql(
                f"PRAGMA table_info({quote_identifier(connection, table)})"
            ).all()
        except SQLAlchemyError as exc:
            log_error(exc, table=table)
            raise QueryFailedError(f"Failed to read columns of table {table}") from exc
        # PRAGMA table_info rows: cid, name, type, notnull, dflt_value, pk
        return [ColumnInfo(name=_catalog_text(row[1]), type=_catalog_text(row[2])) for row in rows]
