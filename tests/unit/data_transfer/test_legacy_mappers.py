"""
Unit tests for LegacyToJournalMapper.
"""
from datetime import datetime, timezone

import pytest

from lifelog.core.exceptions import ContentTooLongError, EmptyContentError, InvalidLocationError
from lifelog.data_transfer.legacy_sqlite.mappers import LegacyToJournalMapper
from lifelog.data_transfer.legacy_sqlite.models import LegacyEntry
from lifelog.data_transfer.legacy_sqlite.normalizers import SpatialPosition
from lifelog.models.enums import ActivityType, MoodType, VisualizationType


def _legacy(**overrides) -> LegacyEntry:
    values = {
        "original_id": "1",
        "content": "Great hike today",
        "timestamp": datetime(2024, 6, 19, 23, 40, tzinfo=timezone.utc),
        "mood": "happy",
        "activity": "exercise",
    }
    values.update(overrides)
    return LegacyEntry(**values)


class TestMapEntry:
    def test_maps_normalized_fields(self):
        entry = LegacyToJournalMapper.map_entry(_legacy(), source_table="diary_entries")

        assert entry.content == "Great hike today"
        assert entry.mood == MoodType.HAPPY
        assert entry.activity == ActivityType.EXERCISE
        assert entry.visualization_type == VisualizationType.PATH
        assert entry.spatial_position == pytest.approx((0.0, 0.6, -1.0))
        assert entry.timestamp == datetime(2024, 6, 19, 23, 40, tzinfo=timezone.utc)

    def test_content_is_trimmed(self):
        entry = LegacyToJournalMapper.map_entry(_legacy(content="  padded text \n"))
        assert entry.content == "padded text"

    def test_naive_timestamp_is_treated_as_utc(self):
        entry = LegacyToJournalMapper.map_entry(_legacy(timestamp=datetime(2024, 1, 1, 12, 0)))
        assert entry.timestamp == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def test_import_metadata_records_provenance(self):
        imported_at = datetime(2025, 3, 1, 8, 30, tzinfo=timezone.utc)
        legacy = _legacy(original_id="42", metadata={"weather": "sunny"})

        entry = LegacyToJournalMapper.map_entry(
            legacy, source_table="diary_entries", imported_at=imported_at
        )

        assert entry.import_metadata == {
            "source": "legacy_sqlite",
            "source_table": "diary_entries",
            "original_id": "42",
            "imported_at": "2025-03-01T08:30:00Z",
            "raw_mood": "happy",
            "raw_activity": "exercise",
            "metadata": {"weather": "sunny"},
        }

    @pytest.mark.parametrize("content", ["", "   ", "\n\t"])
    def test_empty_content_is_rejected(self, content):
        with pytest.raises(EmptyContentError, match="Entry content cannot be empty"):
            LegacyToJournalMapper.map_entry(_legacy(content=content))

    def test_content_at_max_length_is_accepted(self):
        entry = LegacyToJournalMapper.map_entry(_legacy(content="a" * 10000))
        assert len(entry.content) == 10000

    def test_content_over_max_length_is_rejected(self):
        with pytest.raises(ContentTooLongError):
            LegacyToJournalMapper.map_entry(_legacy(content="a" * 10001))

    def test_out_of_range_latitude_is_rejected(self):
        with pytest.raises(InvalidLocationError):
            LegacyToJournalMapper.map_entry(_legacy(latitude=200.0, longitude=10.0))

    def test_partial_location_is_rejected(self):
        with pytest.raises(InvalidLocationError):
            LegacyToJournalMapper.map_entry(_legacy(latitude=42.28))

    def test_located_entry_is_a_cluster(self):
        entry = LegacyToJournalMapper.map_entry(_legacy(latitude=42.28, longitude=-83.74))
        assert entry.has_location
        assert entry.visualization_type == VisualizationType.CLUSTER


class TestCleanTags:
    def test_trims_lowercases_and_drops_empty(self):
        assert LegacyToJournalMapper.clean_tags([" Work ", "", "  ", "FUN", "work"]) == [
            "work",
            "fun",
            "work",
        ]

    def test_tags_are_cleaned_on_map(self):
        entry = LegacyToJournalMapper.map_entry(_legacy(tags=["Hiking", " ", "Outdoors "]))
        assert entry.tags == ["hiking", "outdoors"]


class TestBuildEntry:
    def test_uses_given_classification(self):
        entry = LegacyToJournalMapper.build_entry(
            _legacy(),
            MoodType.SAD,
            ActivityType.WORK,
            VisualizationType.ORB,
            SpatialPosition(1.0, 2.0, 3.0),
        )

        assert entry.mood == MoodType.SAD
        assert entry.activity == ActivityType.WORK
        assert entry.visualization_type == VisualizationType.ORB
        assert entry.spatial_position == (1.0, 2.0, 3.0)
        assert entry.import_metadata is None
