"""
Legacy SQLite import module.

Handles inspecting, extracting and normalizing entries from life-logging
SQLite databases with an unknown schema.
"""
from .extractor import COLUMN_ALIASES, LegacyRowExtractor, field_for_column
from .inspector import LegacySchemaInspector
from .mappers import LegacyToJournalMapper
from .models import ColumnInfo, DatabaseSchema, LegacyEntry
from .normalizers import (
    SpatialPosition,
    classify_visualization,
    normalize_activity,
    normalize_mood,
    spatial_position,
)

__all__ = [
    "COLUMN_ALIASES",
    "ColumnInfo",
    "DatabaseSchema",
    "LegacyEntry",
    "LegacyRowExtractor",
    "LegacySchemaInspector",
    "LegacyToJournalMapper",
    "SpatialPosition",
    "classify_visualization",
    "field_for_column",
    "normalize_activity",
    "normalize_mood",
    "spatial_position",
]
