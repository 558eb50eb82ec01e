"""
Constants for legacy imports.
"""


class ImportConfig:
    """Limits and defaults applied to every legacy import."""

    MAX_CONTENT_LENGTH = 10000
    MIN_LATITUDE = -90.0
    MAX_LATITUDE = 90.0
    MIN_LONGITUDE = -180.0
    MAX_LONGITUDE = 180.0

    # Table names tried first (case-insensitive) when locating the entries table
    ENTRIES_TABLE_CANDIDATES = (
        "entries",
        "journal_entries",
        "logs",
        "life_entries",
        "diary_entries",
        "activities",
    )
    ENTRIES_TABLE_KEYWORDS = ("entry", "log")
    SYSTEM_TABLE_PREFIX = "sqlite_"

    # Entries whose content is longer than this render as orbs
    LONG_CONTENT_THRESHOLD = 200
