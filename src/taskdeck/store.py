"""In-memory task collection kept in display order.

Every mutator re-establishes the ordering before returning:

1. priority rank (High first)
2. completion (incomplete before completed)
3. name, case-insensitively

The sort is stable, so tasks whose keys tie exactly keep their previous
relative order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace

from taskdeck.errors import TaskIndexError
from taskdeck.models import Priority, Task

logger = logging.getLogger(__name__)


def sort_key(task: Task) -> tuple[int, bool, str]:
    """Ordering key for a task."""
    # str.lower() then codepoint comparison, no locale collation.
    return (task.priority.rank, task.completed, task.name.lower())


def sort_tasks(tasks: list[Task]) -> None:
    """Sort a task list in place into display order."""
    tasks.sort(key=sort_key)


class TaskStore:
    """Ordered collection of tasks with sort-preserving mutators."""

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks) if tasks is not None else []
        sort_tasks(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise TaskIndexError(index, len(self._tasks))

    def add(self, name: str, priority: Priority = Priority.MEDIUM) -> Task | None:
        """Add a new incomplete task.

        Blank or whitespace-only names are ignored.

        Returns:
            A copy of the added task, or None if the name was blank.
        """
        text = name.strip()
        if not text:
            logger.debug("Ignoring blank task name")
            return None

        task = Task(name=text, completed=False, priority=priority)
        self._tasks.append(task)
        sort_tasks(self._tasks)
        logger.debug("Added task %r (%s)", text, priority.value)
        return replace(task)

    def set_completed(self, index: int, value: bool) -> None:
        """Set the completion flag of the task at index.

        Raises:
            TaskIndexError: If index is out of range.
        """
        self._check_index(index)
        self._tasks[index].completed = value
        sort_tasks(self._tasks)

    def toggle_completed(self, index: int) -> None:
        """Flip the completion flag of the task at index."""
        self._check_index(index)
        self.set_completed(index, not self._tasks[index].completed)

    def set_priority(self, index: int, priority: Priority) -> None:
        """Change the priority of the task at index.

        Raises:
            TaskIndexError: If index is out of range.
        """
        self._check_index(index)
        self._tasks[index].priority = priority
        sort_tasks(self._tasks)

    def rename(self, index: int, new_name: str) -> None:
        """Rename the task at index. Blank names are ignored.

        Raises:
            TaskIndexError: If index is out of range.
        """
        self._check_index(index)
        text = new_name.strip()
        if not text:
            logger.debug("Ignoring blank rename for task %d", index)
            return
        self._tasks[index].name = text
        sort_tasks(self._tasks)

    def remove(self, index: int) -> Task:
        """Remove and return the task at index.

        Removal keeps the remaining tasks in order, so no re-sort happens.

        Raises:
            TaskIndexError: If index is out of range.
        """
        self._check_index(index)
        task = self._tasks.pop(index)
        logger.debug("Removed task %r", task.name)
        return task

    def replace_all(self, tasks: Iterable[Task]) -> None:
        """Replace the whole collection, e.g. after loading from storage."""
        self._tasks = list(tasks)
        sort_tasks(self._tasks)

    def snapshot(self) -> tuple[Task, ...]:
        """Return copies of the tasks in display order."""
        return tuple(replace(task) for task in self._tasks)
