"""
Enumerations shared by models, mappers and schemas.
"""
from enum import Enum


class MoodType(str, Enum):
    VERY_HAPPY = "very_happy"
    HAPPY = "happy"
    NEUTRAL = "neutral"
    SAD = "sad"
    VERY_SAD = "very_sad"

    @property
    def intensity(self) -> float:
        """Fixed mood intensity in [0, 1], highest for very happy."""
        return _MOOD_INTENSITY[self]


_MOOD_INTENSITY = {
    MoodType.VERY_HAPPY: 1.0,
    MoodType.HAPPY: 0.8,
    MoodType.NEUTRAL: 0.5,
    MoodType.SAD: 0.3,
    MoodType.VERY_SAD: 0.1,
}


class ActivityType(str, Enum):
    WORK = "work"
    EXERCISE = "exercise"
    SOCIAL = "social"
    FOOD = "food"
    TRAVEL = "travel"
    LEARNING = "learning"
    ENTERTAINMENT = "entertainment"
    HEALTH = "health"
    FAMILY = "family"
    UNKNOWN = "unknown"


class VisualizationType(str, Enum):
    """Rendering hint attached to each entry for downstream presentation."""
    PARTICLE = "particle"
    ORB = "orb"
    CONSTELLATION = "constellation"
    PATH = "path"
    CLUSTER = "cluster"


class ImportSourceType(str, Enum):
    LEGACY_SQLITE = "legacy_sqlite"
