from .legacy_db import (
    DIARY_COLUMNS,
    create_database_from_sql,
    create_empty_database,
    create_legacy_database,
)

__all__ = [
    "DIARY_COLUMNS",
    "create_database_from_sql",
    "create_empty_database",
    "create_legacy_database",
]
