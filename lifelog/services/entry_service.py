"""
Entry service for reading persisted journal entries.
"""
from typing import List, Optional

from sqlmodel import Session, col, func, select

from lifelog.models.journal_entry import JournalEntry


class EntryService:
    """Service class for journal entry queries."""

    def __init__(self, session: Session):
        self.session = session

    def get_timeline_entries(
        self,
        limit: Optional[int] = None,
        newest_first: bool = False,
    ) -> List[JournalEntry]:
        """Entries ordered by timestamp, oldest first unless ``newest_first``."""
        order = col(JournalEntry.timestamp).desc() if newest_first else col(JournalEntry.timestamp)
        statement = select(JournalEntry).order_by(order)
        if limit is not None and limit > 0:
            statement = statement.limit(limit)
        return list(self.session.exec(statement).all())

    def count_entries(self) -> int:
        return self.session.exec(select(func.count(col(JournalEntry.id)))).one()
