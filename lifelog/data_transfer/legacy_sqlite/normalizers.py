"""
Normalization of free-form legacy values into canonical enumerations.

Every function here is pure and total: any input, including None, empty
strings and unrecognised text, maps to a member of the target enumeration.
"""
from __future__ import annotations

import re
from typing import Dict, NamedTuple, Optional, Sequence, Tuple

from lifelog.models.enums import ActivityType, MoodType, VisualizationType
from lifelog.utils.import_export.constants import ImportConfig

from .models import LegacyEntry

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

MOOD_WORDS: Dict[MoodType, frozenset[str]] = {
    MoodType.VERY_HAPPY: frozenset({"very happy", "excited", "ecstatic", "joyful", "elated", "5"}),
    MoodType.HAPPY: frozenset({"happy", "good", "positive", "cheerful", "content", "4"}),
    MoodType.NEUTRAL: frozenset({"neutral", "okay", "fine", "normal", "average", "3"}),
    MoodType.SAD: frozenset({"sad", "down", "low", "unhappy", "melancholy", "2"}),
    MoodType.VERY_SAD: frozenset({"very sad", "depressed", "terrible", "awful", "devastated", "1"}),
}

# Legacy apps mixed 1-10 and 1-5 scales. The bands overlap; the first band
# containing the value wins, so 5 is very happy and 3/4 are neutral/happy.
MOOD_SCORE_BANDS: Tuple[Tuple[frozenset[int], MoodType], ...] = (
    (frozenset({9, 10, 5}), MoodType.VERY_HAPPY),
    (frozenset({7, 8, 4}), MoodType.HAPPY),
    (frozenset({5, 6, 3}), MoodType.NEUTRAL),
    (frozenset({3, 4, 2}), MoodType.SAD),
    (frozenset({1, 2}), MoodType.VERY_SAD),
)

MOOD_KEYWORDS: Tuple[Tuple[Tuple[str, ...], MoodType], ...] = (
    (("happy", "great", "excellent"), MoodType.HAPPY),
    (("sad", "bad", "awful"), MoodType.SAD),
)

ACTIVITY_PHRASES: Dict[ActivityType, frozenset[str]] = {
    ActivityType.WORK: frozenset(
        {"work", "job", "office", "meeting", "business", "career", "professional"}
    ),
    ActivityType.EXERCISE: frozenset(
        {"exercise", "workout", "gym", "running", "fitness", "sports", "training"}
    ),
    ActivityType.SOCIAL: frozenset(
        {"social", "friends", "party", "gathering", "socializing", "meetup"}
    ),
    ActivityType.FOOD: frozenset(
        {"food", "eating", "meal", "restaurant", "cooking", "dining", "lunch", "dinner", "breakfast"}
    ),
    ActivityType.TRAVEL: frozenset(
        {"travel", "trip", "vacation", "journey", "adventure", "touring", "exploring"}
    ),
    ActivityType.LEARNING: frozenset(
        {"learning", "study", "education", "reading", "course", "school"}
    ),
    ActivityType.ENTERTAINMENT: frozenset(
        {"entertainment", "movie", "tv", "gaming", "music", "concert", "show", "fun"}
    ),
    ActivityType.HEALTH: frozenset(
        {"health", "medical", "doctor", "therapy", "wellness", "healthcare"}
    ),
    ActivityType.FAMILY: frozenset(
        {"family", "parents", "children", "relatives", "home", "kids"}
    ),
}

ACTIVITY_KEYWORDS: Tuple[Tuple[Tuple[str, ...], ActivityType], ...] = (
    (("work", "office"), ActivityType.WORK),
    (("exercise", "gym"), ActivityType.EXERCISE),
    (("friend", "social"), ActivityType.SOCIAL),
    (("food", "eat"), ActivityType.FOOD),
    (("travel", "trip"), ActivityType.TRAVEL),
    (("learn", "study"), ActivityType.LEARNING),
    (("family", "home"), ActivityType.FAMILY),
)

# Depth lane per activity for the timeline rendering
ACTIVITY_LANES: Dict[ActivityType, float] = {
    ActivityType.WORK: -1.5,
    ActivityType.EXERCISE: -1.0,
    ActivityType.SOCIAL: -0.5,
    ActivityType.FOOD: 0.0,
    ActivityType.TRAVEL: 0.5,
    ActivityType.LEARNING: 1.0,
    ActivityType.ENTERTAINMENT: 1.5,
    ActivityType.HEALTH: -2.0,
    ActivityType.FAMILY: 2.0,
    ActivityType.UNKNOWN: 0.0,
}


class SpatialPosition(NamedTuple):
    x: float
    y: float
    z: float


def _clean(raw: Optional[str]) -> str:
    return (raw or "").strip().lower()


def _match_keywords(text: str, table: Sequence[Tuple[Tuple[str, ...], object]]):
    for keywords, member in table:
        if any(keyword in text for keyword in keywords):
            return member
    return None


def mood_from_score(score: int) -> MoodType:
    """Map a numeric mood score through the legacy bands; unmatched scores are neutral."""
    for band, mood in MOOD_SCORE_BANDS:
        if score in band:
            return mood
    return MoodType.NEUTRAL


def normalize_mood(raw: Optional[str]) -> MoodType:
    """
    Map a legacy mood value to a ``MoodType``.

    Tries, in order: exact word lists, integer scores, substring keywords.
    Anything else (including None and blank strings) is neutral.
    """
    text = _clean(raw)
    if not text:
        return MoodType.NEUTRAL

    for mood, words in MOOD_WORDS.items():
        if text in words:
            return mood

    if _INTEGER_RE.fullmatch(text):
        return mood_from_score(int(text))

    matched = _match_keywords(text, MOOD_KEYWORDS)
    return matched if matched is not None else MoodType.NEUTRAL


def normalize_activity(raw: Optional[str]) -> ActivityType:
    """Map a legacy activity or category value to an ``ActivityType``."""
    text = _clean(raw)
    if not text:
        return ActivityType.UNKNOWN

    for activity, phrases in ACTIVITY_PHRASES.items():
        if text in phrases:
            return activity

    matched = _match_keywords(text, ACTIVITY_KEYWORDS)
    return matched if matched is not None else ActivityType.UNKNOWN


def classify_visualization(
    entry: LegacyEntry,
    mood: MoodType,
    activity: ActivityType,
) -> VisualizationType:
    """
    Choose a visualization type; the first matching rule wins.

    Located entries are clusters, travel/exercise are paths, social/family are
    constellations, long or "very ..." entries are orbs, the rest particles.
    ``mood`` is accepted so callers pass the full classification context; the
    orb rule looks at the raw mood text.
    """
    if entry.latitude is not None and entry.longitude is not None:
        return VisualizationType.CLUSTER
    if activity in (ActivityType.TRAVEL, ActivityType.EXERCISE):
        return VisualizationType.PATH
    if activity in (ActivityType.SOCIAL, ActivityType.FAMILY):
        return VisualizationType.CONSTELLATION
    if len(entry.content) > ImportConfig.LONG_CONTENT_THRESHOLD or "very" in _clean(entry.mood):
        return VisualizationType.ORB
    return VisualizationType.PARTICLE


def spatial_position(mood: MoodType, activity: ActivityType) -> SpatialPosition:
    """
    Placement hint: x is left at 0 for the timeline to assign, y follows mood
    intensity in [-1, 1], z is the activity lane.
    """
    return SpatialPosition(
        x=0.0,
        y=mood.intensity * 2.0 - 1.0,
        z=ACTIVITY_LANES[activity],
    )
