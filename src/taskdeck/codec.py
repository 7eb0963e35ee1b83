"""Conversion between tasks and their persisted form.

Tasks are stored as a JSON array of flat records::

    [{"name": "Buy milk", "completed": false, "priority": "high"}, ...]

The theme flag is stored as a plain boolean.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable

from taskdeck.errors import TaskFormatError
from taskdeck.models import Task

logger = logging.getLogger(__name__)

DEFAULT_DARK = False


def encode_tasks(tasks: Iterable[Task]) -> str:
    """Serialise tasks to JSON text, preserving order."""
    return json.dumps([task.to_dict() for task in tasks])


def decode_tasks(text: str | None) -> list[Task]:
    """Deserialise tasks from JSON text.

    Missing fields fall back to defaults (empty name, not completed, low
    priority) and entries that are not objects are skipped.

    Args:
        text: Stored JSON text. None or blank means nothing saved yet.

    Returns:
        The decoded tasks in stored order.

    Raises:
        TaskFormatError: If the text is not JSON or not a JSON array.
    """
    if text is None or not text.strip():
        return []

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise TaskFormatError(f"Stored tasks are not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise TaskFormatError(f"Stored tasks must be a list, got {type(data).__name__}")

    tasks = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            logger.warning("Skipping task record %d: expected object, got %s", i, type(item).__name__)
            continue
        tasks.append(Task.from_dict(item))

    return tasks


def encode_theme(is_dark: bool) -> bool:
    """Convert the theme flag to its stored form."""
    return bool(is_dark)


def decode_theme(stored: object, default: bool = DEFAULT_DARK) -> bool:
    """Convert a stored theme flag back, using default when none is stored."""
    if isinstance(stored, bool):
        return stored
    if stored is not None:
        logger.warning("Ignoring stored theme flag %r", stored)
    return default
