"""
Unit tests for legacy mood/activity normalization and visualization classification.
"""
import pytest

from lifelog.data_transfer.legacy_sqlite.models import LegacyEntry
from lifelog.data_transfer.legacy_sqlite.normalizers import (
    classify_visualization,
    mood_from_score,
    normalize_activity,
    normalize_mood,
    spatial_position,
)
from lifelog.models.enums import ActivityType, MoodType, VisualizationType


class TestNormalizeMood:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("very happy", MoodType.VERY_HAPPY),
            ("Excited", MoodType.VERY_HAPPY),
            ("  joyful  ", MoodType.VERY_HAPPY),
            ("happy", MoodType.HAPPY),
            ("Content", MoodType.HAPPY),
            ("okay", MoodType.NEUTRAL),
            ("average", MoodType.NEUTRAL),
            ("melancholy", MoodType.SAD),
            ("unhappy", MoodType.SAD),
            ("VERY SAD", MoodType.VERY_SAD),
            ("devastated", MoodType.VERY_SAD),
        ],
    )
    def test_word_lists(self, raw, expected):
        assert normalize_mood(raw) == expected

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("5", MoodType.VERY_HAPPY),
            ("4", MoodType.HAPPY),
            ("3", MoodType.NEUTRAL),
            ("2", MoodType.SAD),
            ("1", MoodType.VERY_SAD),
        ],
    )
    def test_single_digit_words(self, raw, expected):
        assert normalize_mood(raw) == expected

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("10", MoodType.VERY_HAPPY),
            ("9", MoodType.VERY_HAPPY),
            ("8", MoodType.HAPPY),
            ("7", MoodType.HAPPY),
            ("6", MoodType.NEUTRAL),
            ("04", MoodType.HAPPY),
            ("05", MoodType.VERY_HAPPY),
            ("+3", MoodType.NEUTRAL),
        ],
    )
    def test_integer_scores_use_first_matching_band(self, raw, expected):
        assert normalize_mood(raw) == expected

    @pytest.mark.parametrize("score", [0, 11, 42, -2])
    def test_scores_outside_bands_are_neutral(self, score):
        assert mood_from_score(score) == MoodType.NEUTRAL
        assert normalize_mood(str(score)) == MoodType.NEUTRAL

    def test_overlapping_band_values_resolve_in_order(self):
        assert mood_from_score(5) == MoodType.VERY_HAPPY
        assert mood_from_score(4) == MoodType.HAPPY
        assert mood_from_score(3) == MoodType.NEUTRAL
        assert mood_from_score(2) == MoodType.SAD

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("feeling great", MoodType.HAPPY),
            ("excellent day", MoodType.HAPPY),
            ("not bad", MoodType.SAD),
            ("pretty awful honestly", MoodType.SAD),
        ],
    )
    def test_keyword_fallback(self, raw, expected):
        assert normalize_mood(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "   ", "5.0", "meh", "🙂", "x" * 500])
    def test_unrecognised_values_are_neutral(self, raw):
        assert normalize_mood(raw) == MoodType.NEUTRAL

    def test_every_input_maps_to_a_member(self):
        samples = [None, "", "happy", "7", "-1", "1e3", "sad-ish", "\t", "Very Very Happy"]
        for raw in samples:
            assert isinstance(normalize_mood(raw), MoodType)


class TestNormalizeActivity:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("work", ActivityType.WORK),
            ("Meeting", ActivityType.WORK),
            ("gym", ActivityType.EXERCISE),
            ("running", ActivityType.EXERCISE),
            ("party", ActivityType.SOCIAL),
            ("dinner", ActivityType.FOOD),
            ("vacation", ActivityType.TRAVEL),
            ("reading", ActivityType.LEARNING),
            ("TV", ActivityType.ENTERTAINMENT),
            ("doctor", ActivityType.HEALTH),
            ("kids", ActivityType.FAMILY),
        ],
    )
    def test_exact_phrases(self, raw, expected):
        assert normalize_activity(raw) == expected

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("office party", ActivityType.WORK),
            ("homework", ActivityType.WORK),
            ("gym session", ActivityType.EXERCISE),
            ("coffee with a friend", ActivityType.SOCIAL),
            ("eating out", ActivityType.FOOD),
            ("road trip", ActivityType.TRAVEL),
            ("studying", ActivityType.LEARNING),
            ("back home", ActivityType.FAMILY),
        ],
    )
    def test_keyword_fallback(self, raw, expected):
        assert normalize_activity(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "  ", "concerts", "medical checkup", "gardening"])
    def test_unrecognised_values_are_unknown(self, raw):
        assert normalize_activity(raw) == ActivityType.UNKNOWN


def _entry(**overrides) -> LegacyEntry:
    values = {"content": "A quiet afternoon"}
    values.update(overrides)
    return LegacyEntry(**values)


class TestClassifyVisualization:
    def test_located_entries_are_clusters(self):
        entry = _entry(latitude=42.28, longitude=-83.74, activity="exercise")
        assert classify_visualization(entry, MoodType.HAPPY, ActivityType.EXERCISE) == VisualizationType.CLUSTER

    def test_single_coordinate_is_not_a_location(self):
        entry = _entry(latitude=42.28)
        assert classify_visualization(entry, MoodType.NEUTRAL, ActivityType.UNKNOWN) == VisualizationType.PARTICLE

    @pytest.mark.parametrize("activity", [ActivityType.TRAVEL, ActivityType.EXERCISE])
    def test_movement_activities_are_paths(self, activity):
        assert classify_visualization(_entry(), MoodType.HAPPY, activity) == VisualizationType.PATH

    @pytest.mark.parametrize("activity", [ActivityType.SOCIAL, ActivityType.FAMILY])
    def test_people_activities_are_constellations(self, activity):
        entry = _entry(content="x" * 500, mood="very happy")
        assert classify_visualization(entry, MoodType.VERY_HAPPY, activity) == VisualizationType.CONSTELLATION

    def test_long_content_is_an_orb(self):
        entry = _entry(content="x" * 201)
        assert classify_visualization(entry, MoodType.NEUTRAL, ActivityType.WORK) == VisualizationType.ORB

    def test_content_at_threshold_is_a_particle(self):
        entry = _entry(content="x" * 200)
        assert classify_visualization(entry, MoodType.NEUTRAL, ActivityType.WORK) == VisualizationType.PARTICLE

    def test_very_in_raw_mood_is_an_orb(self):
        entry = _entry(mood="Very tired")
        assert classify_visualization(entry, MoodType.NEUTRAL, ActivityType.UNKNOWN) == VisualizationType.ORB

    def test_default_is_particle(self):
        assert classify_visualization(_entry(mood="fine"), MoodType.NEUTRAL, ActivityType.FOOD) == VisualizationType.PARTICLE


class TestSpatialPosition:
    @pytest.mark.parametrize(
        "mood,expected_y",
        [
            (MoodType.VERY_HAPPY, 1.0),
            (MoodType.HAPPY, 0.6),
            (MoodType.NEUTRAL, 0.0),
            (MoodType.SAD, -0.4),
            (MoodType.VERY_SAD, -0.8),
        ],
    )
    def test_height_follows_mood_intensity(self, mood, expected_y):
        position = spatial_position(mood, ActivityType.UNKNOWN)
        assert position.x == 0.0
        assert position.y == pytest.approx(expected_y)

    @pytest.mark.parametrize(
        "activity,expected_z",
        [
            (ActivityType.HEALTH, -2.0),
            (ActivityType.WORK, -1.5),
            (ActivityType.EXERCISE, -1.0),
            (ActivityType.SOCIAL, -0.5),
            (ActivityType.FOOD, 0.0),
            (ActivityType.TRAVEL, 0.5),
            (ActivityType.LEARNING, 1.0),
            (ActivityType.ENTERTAINMENT, 1.5),
            (ActivityType.FAMILY, 2.0),
            (ActivityType.UNKNOWN, 0.0),
        ],
    )
    def test_depth_is_activity_lane(self, activity, expected_z):
        assert spatial_position(MoodType.NEUTRAL, activity).z == expected_z

    def test_every_activity_has_a_lane(self):
        for activity in ActivityType:
            spatial_position(MoodType.HAPPY, activity)
