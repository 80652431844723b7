"""Entry formatting for terminal output."""

import json
from typing import Iterable

from .entries import Entry

NO_RESULTS = "No results found."


def format_timestamp(entry: Entry, extended: bool = False) -> str:
    if extended:
        return entry.created_at.strftime("%Y-%m-%d %H:%M:%S %z")
    return entry.created_at.strftime("%Y-%m-%d")


def format_entry_line(entry: Entry, extended: bool = False) -> str:
    """
    Format an entry as a single line.

    Plain:    #3   [critical ]  2023-02-25  Buy scissors
    Extended: #3   [critical ]  2023-02-25 14:03:11 +0100  Buy scissors
    """
    return (
        f"#{entry.id:<3} [{entry.priority.label:9}]  "
        f"{format_timestamp(entry, extended)}  {entry.description}"
    )


def format_entries(entries: Iterable[Entry], extended: bool = False) -> str:
    lines = [format_entry_line(e, extended) for e in entries]
    return "\n".join(lines) if lines else NO_RESULTS


def entries_to_json(entries: Iterable[Entry]) -> str:
    return json.dumps([e.to_dict() for e in entries], indent=2)
