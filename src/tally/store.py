"""In-memory entry collection backed by a repository."""

import logging
from datetime import datetime, tzinfo

from .core.entries import Entry, Priority
from .ports.entry_repo import EntryRepository

logger = logging.getLogger(__name__)


class EntryStore:
    """
    All entries for one invocation.

    Entries are loaded from the repository once, at construction. New
    entries are written through to the repository as they are added.
    """

    def __init__(self, repository: EntryRepository, tz: tzinfo | None = None):
        self._repository = repository
        self._tz = tz
        self._entries = list(repository.fetch_all())
        logger.debug(f"Loaded {len(self._entries)} entries")

    def __len__(self) -> int:
        return len(self._entries)

    def list_all(self) -> list[Entry]:
        """All entries, in the order the repository returned them."""
        return list(self._entries)

    def add(
        self,
        description: str,
        priority: Priority = Priority.NORMAL,
        created_at: datetime | None = None,
    ) -> Entry:
        """Create and persist a new entry."""
        description = description.strip()
        if not description:
            raise ValueError("Description cannot be empty")

        if created_at is None:
            created_at = datetime.now(self._tz) if self._tz is not None else datetime.now().astimezone()
        elif created_at.tzinfo is None:
            raise ValueError("created_at must be timezone-aware")

        entry_id = self._repository.insert(description, priority, created_at)
        entry = Entry(
            id=entry_id,
            description=description,
            priority=priority,
            created_at=created_at,
        )
        self._entries.append(entry)
        return entry
