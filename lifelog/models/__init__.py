# Import all models for easy access
from .base import BaseModel
from .enums import ActivityType, ImportSourceType, MoodType, VisualizationType
from .journal_entry import JournalEntry

__all__ = [
    "BaseModel",
    "JournalEntry",
    "MoodType",
    "ActivityType",
    "VisualizationType",
    "ImportSourceType",
]
