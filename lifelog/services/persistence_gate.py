"""
Duplicate detection and deferred persistence for imported entries.
"""
from datetime import datetime
from enum import Enum
from typing import List, Optional, Set, Tuple

from lifelog.core.logging_config import log_debug
from lifelog.models.journal_entry import JournalEntry
from lifelog.schemas.dto import ImportRunResult
from lifelog.services.entry_store import EntryStore

DedupKey = Tuple[str, Optional[datetime]]


class CommitOutcome(str, Enum):
    ACCEPTED = "accepted"
    DUPLICATE = "duplicate"


class PersistenceGate:
    """
    Accepts or rejects candidates, then writes all accepted entries in one flush.

    A candidate is a duplicate when an entry with the same content and the same
    timestamp is already stored or was accepted earlier in this run. Candidates
    must be committed one at a time, in row order.
    """

    def __init__(self, store: EntryStore, summary: ImportRunResult):
        self.store = store
        self.summary = summary
        self._pending: List[JournalEntry] = []
        self._seen: Set[DedupKey] = {entry.dedup_key() for entry in store.fetch_all()}

    @property
    def pending(self) -> List[JournalEntry]:
        return list(self._pending)

    def is_duplicate(self, candidate: JournalEntry) -> bool:
        return candidate.dedup_key() in self._seen

    def commit(self, candidate: JournalEntry) -> CommitOutcome:
        """Queue the candidate unless it duplicates an existing or queued entry."""
        key = candidate.dedup_key()
        if key in self._seen:
            self.summary.duplicates_skipped += 1
            log_debug("Skipping duplicate entry", timestamp=key[1])
            return CommitOutcome.DUPLICATE

        self._seen.add(key)
        self._pending.append(candidate)
        self.summary.entries_imported += 1
        return CommitOutcome.ACCEPTED

    def flush(self) -> int:
        """
        Write every accepted entry to the store.

        Raises:
            PersistenceError: If the store rejects the batch
        """
        count = len(self._pending)
        self.store.insert_and_flush(self._pending)
        self._pending = []
        return count
