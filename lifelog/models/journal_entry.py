"""
Canonical journal entry model.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, Column, DateTime, Float
from sqlmodel import CheckConstraint, Field, Index

from lifelog.core.time_utils import ensure_utc, utc_now

from .base import BaseModel
from .enums import ActivityType, MoodType, VisualizationType


class JournalEntry(BaseModel, table=True):
    """
    A validated journal entry.

    Mood, activity and visualization type always hold a member of their closed
    enumeration; the spatial position is a rendering hint derived from mood and
    activity.
    """
    __tablename__ = "journal_entry"

    timestamp: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
    )
    content: str = Field(..., min_length=1, max_length=10000)
    latitude: Optional[float] = Field(default=None, sa_column=Column(Float, nullable=True))
    longitude: Optional[float] = Field(default=None, sa_column=Column(Float, nullable=True))
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    mood: MoodType = Field(default=MoodType.NEUTRAL, nullable=False)
    activity: ActivityType = Field(default=ActivityType.UNKNOWN, nullable=False)
    visualization_type: VisualizationType = Field(
        default=VisualizationType.PARTICLE, nullable=False
    )
    spatial_position_x: Optional[float] = Field(default=None)
    spatial_position_y: Optional[float] = Field(default=None)
    spatial_position_z: Optional[float] = Field(default=None)
    import_metadata: Optional[Dict[str, Any]] = Field(
        default=None,
        sa_column=Column(JSON, nullable=True),
    )

    __table_args__ = (
        CheckConstraint('length(content) > 0', name='check_journal_entry_content_not_empty'),
        CheckConstraint(
            'latitude IS NULL OR (latitude >= -90 AND latitude <= 90)',
            name='check_journal_entry_latitude_range',
        ),
        CheckConstraint(
            'longitude IS NULL OR (longitude >= -180 AND longitude <= 180)',
            name='check_journal_entry_longitude_range',
        ),
        Index('idx_journal_entry_content_timestamp', 'content', 'timestamp'),
    )

    @property
    def has_location(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def spatial_position(self) -> Optional[tuple[float, float, float]]:
        if (
            self.spatial_position_x is None
            or self.spatial_position_y is None
            or self.spatial_position_z is None
        ):
            return None
        return (self.spatial_position_x, self.spatial_position_y, self.spatial_position_z)

    def dedup_key(self) -> tuple[str, Optional[datetime]]:
        """Key used for duplicate detection: exact content and UTC timestamp."""
        return self.content, ensure_utc(self.timestamp)
