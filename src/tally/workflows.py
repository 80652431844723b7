"""Shared workflows used by the CLI.

Each function wires config, storage and the query engine for one command.
"""

from .adapters.sqlite_store import SqliteEntryRepository
from .config import Config
from .core.entries import Entry, Priority
from .core.query import Query, run_query
from .store import EntryStore


def open_store(config: Config) -> EntryStore:
    """Load the entry store configured for this run."""
    repository = SqliteEntryRepository(config.database_path)
    return EntryStore(repository, tz=config.tz())


def add_entry(config: Config, description: str, priority: Priority = Priority.NORMAL) -> Entry:
    """Append a new entry, timestamped now."""
    store = open_store(config)
    return store.add(description, priority)


def get_entries(config: Config, query: Query) -> list[Entry]:
    """Entries matching the query, in display order."""
    store = open_store(config)
    return run_query(store.list_all(), query)
