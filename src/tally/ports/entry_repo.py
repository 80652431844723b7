"""Entry repository interface."""

from datetime import datetime
from typing import Protocol

from tally.core.entries import Entry, Priority


class EntryRepository(Protocol):
    """Interface for persisting entries to any backend."""

    def fetch_all(self) -> list[Entry]:
        """Fetch every stored entry, in no particular order."""
        ...

    def insert(self, description: str, priority: Priority, created_at: datetime) -> int:
        """Persist a new entry and return the id assigned to it."""
        ...
