"""Adapters - I/O implementations of ports."""

from .sqlite_store import SqliteEntryRepository, StoreError

__all__ = [
    "SqliteEntryRepository",
    "StoreError",
]
