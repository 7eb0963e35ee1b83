"""Exception types for taskdeck."""

from __future__ import annotations


class TaskdeckError(Exception):
    """Base class for taskdeck errors."""


class TaskIndexError(TaskdeckError, IndexError):
    """A task position outside the collection bounds."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        if length:
            message = f"Task index {index} out of range (0-{length - 1})"
        else:
            message = f"Task index {index} out of range (no tasks)"
        super().__init__(message)


class TaskFormatError(TaskdeckError, ValueError):
    """Persisted task data is not a list of records."""
