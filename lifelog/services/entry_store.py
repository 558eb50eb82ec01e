"""
Persisted entry store used by the import pipeline.
"""
from typing import List, Protocol, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from lifelog.core.exceptions import PersistenceError
from lifelog.core.logging_config import log_error, log_info
from lifelog.models.journal_entry import JournalEntry


class EntryStore(Protocol):
    """Storage collaborator: read every entry, then write a batch atomically."""

    def fetch_all(self) -> Sequence[JournalEntry]:
        ...

    def insert_and_flush(self, entries: Sequence[JournalEntry]) -> None:
        ...


class SQLEntryStore:
    """``EntryStore`` backed by a SQLModel session."""

    def __init__(self, session: Session):
        self.session = session

    def fetch_all(self) -> List[JournalEntry]:
        try:
            return list(self.session.exec(select(JournalEntry)).all())
        except SQLAlchemyError as exc:
            log_error(exc)
            raise PersistenceError(f"Failed to load existing entries: {exc}") from exc

    def insert_and_flush(self, entries: Sequence[JournalEntry]) -> None:
        """
        Insert all entries in one transaction.

        Raises:
            PersistenceError: If the commit fails; nothing is written in that case
        """
        if not entries:
            return
        try:
            self.session.add_all(entries)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            log_error(exc, entry_count=len(entries))
            raise PersistenceError(f"Failed to save imported entries: {exc}") from exc
        log_info(f"Saved {len(entries)} journal entries", entry_count=len(entries))
