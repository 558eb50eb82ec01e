"""
Legacy entry to journal entry mapper.

Converts extracted ``LegacyEntry`` records into validated ``JournalEntry``
models.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from lifelog.core.exceptions import EmptyContentError
from lifelog.core.time_utils import ensure_utc, utc_now
from lifelog.models.enums import ActivityType, ImportSourceType, MoodType, VisualizationType
from lifelog.models.journal_entry import JournalEntry
from lifelog.utils.import_export.validators import validate_journal_entry

from .models import LegacyEntry
from .normalizers import (
    SpatialPosition,
    classify_visualization,
    normalize_activity,
    normalize_mood,
    spatial_position,
)


class LegacyToJournalMapper:
    """
    Maps legacy entries to canonical journal entries.

    Handles:
    - Mood and activity normalization
    - Visualization type and spatial position
    - Tag and content cleanup
    - Validation of the assembled entry
    - Import provenance (legacy id, unknown columns)
    """

    @staticmethod
    def clean_tags(tags: Iterable[str]) -> List[str]:
        """Trim, drop empties and lower-case, keeping the original order."""
        cleaned = []
        for tag in tags:
            value = tag.strip()
            if value:
                cleaned.append(value.lower())
        return cleaned

    @staticmethod
    def build_import_metadata(
        legacy_entry: LegacyEntry,
        source_table: Optional[str] = None,
        imported_at: Optional[datetime] = None,
    ) -> Dict[str, Any]:
        imported_at = imported_at or utc_now()
        return {
            "source": ImportSourceType.LEGACY_SQLITE.value,
            "source_table": source_table,
            "original_id": legacy_entry.original_id,
            "imported_at": imported_at.isoformat().replace("+00:00", "Z"),
            "raw_mood": legacy_entry.mood,
            "raw_activity": legacy_entry.activity,
            "metadata": dict(legacy_entry.metadata),
        }

    @staticmethod
    def build_entry(
        legacy_entry: LegacyEntry,
        mood: MoodType,
        activity: ActivityType,
        visualization_type: VisualizationType,
        position: SpatialPosition,
        import_metadata: Optional[Dict[str, Any]] = None,
    ) -> JournalEntry:
        """
        Assemble and validate a journal entry from already-normalized fields.

        Raises:
            EmptyContentError: If the trimmed content is empty
            ContentTooLongError: If the content exceeds the length ceiling
            InvalidLocationError: If coordinates are partial or out of range
        """
        content = legacy_entry.content.strip()
        if not content:
            raise EmptyContentError()

        entry = JournalEntry(
            timestamp=ensure_utc(legacy_entry.timestamp),
            content=content,
            latitude=legacy_entry.latitude,
            longitude=legacy_entry.longitude,
            tags=LegacyToJournalMapper.clean_tags(legacy_entry.tags),
            mood=mood,
            activity=activity,
            visualization_type=visualization_type,
            spatial_position_x=position.x,
            spatial_position_y=position.y,
            spatial_position_z=position.z,
            import_metadata=import_metadata,
        )
        return validate_journal_entry(entry)

    @staticmethod
    def map_entry(
        legacy_entry: LegacyEntry,
        source_table: Optional[str] = None,
        imported_at: Optional[datetime] = None,
    ) -> JournalEntry:
        """
        Normalize, classify and build a journal entry.

        Args:
            legacy_entry: Entry extracted from the source row
            source_table: Name of the table the row came from
            imported_at: Timestamp recorded in the import metadata

        Returns:
            A validated, not yet persisted JournalEntry
        """
        mood = normalize_mood(legacy_entry.mood)
        activity = normalize_activity(legacy_entry.activity)
        visualization_type = classify_visualization(legacy_entry, mood, activity)
        position = spatial_position(mood, activity)

        return LegacyToJournalMapper.build_entry(
            legacy_entry,
            mood,
            activity,
            visualization_type,
            position,
            import_metadata=LegacyToJournalMapper.build_import_metadata(
                legacy_entry, source_table=source_table, imported_at=imported_at
            ),
        )
