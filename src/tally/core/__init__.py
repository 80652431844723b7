"""Functional core - pure business logic with no I/O."""

from .entries import Entry, Priority
from .query import (
    InvalidQueryError,
    Query,
    filter_entries,
    order_entries,
    run_query,
    validate_query,
)
from .display import NO_RESULTS, entries_to_json, format_entries, format_entry_line

__all__ = [
    # Entries
    "Entry",
    "Priority",
    # Query engine
    "Query",
    "InvalidQueryError",
    "validate_query",
    "filter_entries",
    "order_entries",
    "run_query",
    # Display
    "NO_RESULTS",
    "format_entry_line",
    "format_entries",
    "entries_to_json",
]
