"""Pure entry domain logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Any, Mapping


class Priority(IntEnum):
    """Entry priority. Integer values give the total order Critical > Important > Normal."""

    NORMAL = 1
    IMPORTANT = 2
    CRITICAL = 3

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def from_name(cls, name: str) -> "Priority":
        """Parse a case-insensitive priority name (normal, important, critical)."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            choices = ", ".join(p.label for p in cls)
            raise ValueError(f"Unknown priority {name!r} (expected one of: {choices})") from None


@dataclass(frozen=True)
class Entry:
    """A single task on the list."""

    id: int
    description: str
    priority: Priority
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "priority": self.priority.label,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_record(cls, data: Mapping[str, Any]) -> "Entry":
        """Create Entry from a stored record (the inverse of to_dict)."""
        created_at = datetime.fromisoformat(data["created_at"])
        if created_at.tzinfo is None:
            raise ValueError(f"Timestamp has no UTC offset: {data['created_at']}")
        return cls(
            id=int(data["id"]),
            description=data["description"],
            priority=Priority.from_name(data.get("priority") or "normal"),
            created_at=created_at,
        )
