"""Task and priority models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Priority(str, Enum):
    """Task priority levels.

    The value is the persisted identifier. Display label, sort rank and
    chip colour come from the lookup tables below.
    """

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def label(self) -> str:
        """Display label, e.g. "High"."""
        return _LABELS[self]

    @property
    def rank(self) -> int:
        """Sort rank. Lower sorts first."""
        return _RANKS[self]

    @property
    def color(self) -> str:
        """Rich colour name for the priority chip."""
        return _COLORS[self]

    @classmethod
    def from_identifier(cls, identifier: object) -> Priority:
        """Parse a persisted identifier, falling back to LOW.

        Args:
            identifier: Stored value, usually "high", "medium" or "low".

        Returns:
            The matching priority, or LOW for anything unrecognised.
        """
        if isinstance(identifier, str):
            for priority in cls:
                if priority.value == identifier:
                    return priority
        return cls.LOW


_LABELS: dict[Priority, str] = {
    Priority.HIGH: "High",
    Priority.MEDIUM: "Medium",
    Priority.LOW: "Low",
}

_RANKS: dict[Priority, int] = {
    Priority.HIGH: 0,
    Priority.MEDIUM: 1,
    Priority.LOW: 2,
}

_COLORS: dict[Priority, str] = {
    Priority.HIGH: "red",
    Priority.MEDIUM: "dark_orange",
    Priority.LOW: "green",
}


@dataclass
class Task:
    """A single to-do item."""

    name: str
    completed: bool = False
    priority: Priority = Priority.LOW

    def to_dict(self) -> dict:
        """Convert to the persisted record shape."""
        return {
            "name": self.name,
            "completed": self.completed,
            "priority": self.priority.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Task:
        """Create from a persisted record, defaulting missing fields."""
        name = data.get("name", "")
        completed = data.get("completed", False)
        return cls(
            name=name if isinstance(name, str) else "",
            completed=completed if isinstance(completed, bool) else False,
            priority=Priority.from_identifier(data.get("priority")),
        )
