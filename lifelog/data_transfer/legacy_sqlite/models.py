"""
Data structures describing a legacy life-logging database.
"""
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from lifelog.core.time_utils import utc_now


class ColumnInfo(BaseModel):
    """A column of the entries table as declared in the table definition."""
    model_config = ConfigDict(frozen=True)

    name: str
    type: str = ""


class DatabaseSchema(BaseModel):
    """
    Inferred structure of a legacy database.

    Built once per run by the schema inspector; ``entries_table`` is None when
    no table could be selected.
    """
    model_config = ConfigDict(frozen=True)

    tables: List[str] = Field(default_factory=list)
    entries_table: Optional[str] = None
    columns: List[ColumnInfo] = Field(default_factory=list)

    @property
    def column_names(self) -> List[str]:
        return [column.name for column in self.columns]


class LegacyEntry(BaseModel):
    """
    A loosely typed entry read from one source row, before normalization.
    """
    original_id: Optional[str] = None
    content: str = ""
    timestamp: datetime = Field(default_factory=utc_now)
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    mood: Optional[str] = None
    activity: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    metadata: Dict[str, str] = Field(default_factory=dict)
