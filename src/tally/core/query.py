"""Query engine - filtering and ordering of entries.

Pure functions - no I/O. Nothing here mutates the entries or the query it
is given.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable

from .entries import Entry, Priority


class InvalidQueryError(ValueError):
    """Raised when a Query is structurally invalid."""


@dataclass(frozen=True)
class Query:
    """Filter and ordering parameters for one listing."""

    priority: Priority | None = None
    since: datetime | None = None
    until: datetime | None = None
    chronological: bool = False
    reversed: bool = False
    extended: bool = False


def validate_query(query: Query) -> None:
    """
    Reject queries the engine cannot evaluate.

    Timestamps must carry a UTC offset so they compare against entry
    timestamps. A `since` later than `until` is valid and simply matches
    nothing.
    """
    if query.priority is not None and not isinstance(query.priority, Priority):
        raise InvalidQueryError(f"priority filter must be a Priority, got {query.priority!r}")

    for name in ("since", "until"):
        value = getattr(query, name)
        if value is None:
            continue
        if not isinstance(value, datetime):
            raise InvalidQueryError(f"{name} must be a datetime, got {value!r}")
        if value.tzinfo is None or value.utcoffset() is None:
            raise InvalidQueryError(f"{name} must be timezone-aware: {value.isoformat()}")


def matches(entry: Entry, query: Query) -> bool:
    """True if the entry satisfies every filter set on the query."""
    if query.priority is not None and entry.priority != query.priority:
        return False
    if query.since is not None and entry.created_at < query.since:
        return False
    if query.until is not None and entry.created_at > query.until:
        return False
    return True


def filter_entries(entries: Iterable[Entry], query: Query) -> list[Entry]:
    """Keep entries matching the query, in their original order."""
    return [e for e in entries if matches(e, query)]


def sort_entries(entries: Iterable[Entry], chronological: bool = False) -> list[Entry]:
    """
    Sort newest first, grouped by priority (highest first) unless chronological.

    Both passes are stable, so entries equal on every key keep their
    input order.
    """
    ordered = sorted(entries, key=lambda e: e.created_at, reverse=True)
    if not chronological:
        ordered.sort(key=lambda e: e.priority, reverse=True)
    return ordered


def reverse_entries(entries: Iterable[Entry]) -> list[Entry]:
    """Reverse a whole sequence."""
    return list(reversed(list(entries)))


def order_entries(entries: Iterable[Entry], query: Query) -> list[Entry]:
    """
    Order entries for display.

    The sort always runs in its default direction; `query.reversed` flips
    the finished sequence. This is not the same as flipping each sort key:
    reversed priority-first output lists Normal entries first, oldest
    first within each tier.
    """
    ordered = sort_entries(entries, chronological=query.chronological)
    if query.reversed:
        ordered = reverse_entries(ordered)
    return ordered


def run_query(entries: Iterable[Entry], query: Query) -> list[Entry]:
    """Validate, filter and order. An empty result is not an error."""
    validate_query(query)
    return order_entries(filter_entries(entries, query), query)
