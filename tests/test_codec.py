"""Tests for taskdeck.codec module."""

from __future__ import annotations

import json
import logging

import pytest

from taskdeck.codec import DEFAULT_DARK, decode_tasks, decode_theme, encode_tasks, encode_theme
from taskdeck.errors import TaskFormatError
from taskdeck.models import Priority, Task


class TestEncodeTasks:
    """Tests for encode_tasks function."""

    def test_empty(self) -> None:
        """Test an empty list encodes to an empty array."""
        assert json.loads(encode_tasks([])) == []

    def test_record_shape(self) -> None:
        """Test each task becomes a flat record with a lowercase priority."""
        tasks = [
            Task(name="Buy milk", completed=False, priority=Priority.HIGH),
            Task(name="Pay rent", completed=True, priority=Priority.MEDIUM),
        ]
        assert json.loads(encode_tasks(tasks)) == [
            {"name": "Buy milk", "completed": False, "priority": "high"},
            {"name": "Pay rent", "completed": True, "priority": "medium"},
        ]

    def test_round_trip(self, sample_task_records: list[dict]) -> None:
        """Test decoding an encoded list gives the same tasks."""
        tasks = [Task.from_dict(r) for r in sample_task_records]
        assert decode_tasks(encode_tasks(tasks)) == tasks

    def test_non_ascii_names(self) -> None:
        """Test names outside ASCII survive encoding."""
        tasks = [Task(name="Café ☕", priority=Priority.MEDIUM)]
        assert decode_tasks(encode_tasks(tasks)) == tasks


class TestDecodeTasks:
    """Tests for decode_tasks function."""

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_nothing_saved(self, text: str | None) -> None:
        """Test absent or empty text yields no tasks."""
        assert decode_tasks(text) == []

    def test_missing_name_and_priority(self) -> None:
        """Test missing fields take their defaults."""
        tasks = decode_tasks('[{"completed":true}]')
        assert tasks == [Task(name="", completed=True, priority=Priority.LOW)]

    def test_missing_completed(self) -> None:
        """Test missing completion defaults to false."""
        tasks = decode_tasks('[{"name":"Buy milk","priority":"high"}]')
        assert tasks == [Task(name="Buy milk", completed=False, priority=Priority.HIGH)]

    def test_unknown_priority(self) -> None:
        """Test unknown priority identifiers become low."""
        tasks = decode_tasks('[{"name":"x","priority":"urgent"}]')
        assert tasks[0].priority is Priority.LOW

    def test_keeps_stored_order(self) -> None:
        """Test decoding does not re-sort."""
        text = json.dumps([{"name": "z", "priority": "low"}, {"name": "a", "priority": "high"}])
        assert [t.name for t in decode_tasks(text)] == ["z", "a"]

    def test_skips_non_object_records(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test entries that are not objects are skipped with a warning."""
        with caplog.at_level(logging.WARNING, logger="taskdeck.codec"):
            tasks = decode_tasks('[1, "x", {"name": "kept"}, null]')
        assert tasks == [Task(name="kept")]
        assert "Skipping task record 0" in caplog.text

    @pytest.mark.parametrize("text", ['{"name": "x"}', '"tasks"', "42", "null", "true"])
    def test_not_a_list(self, text: str) -> None:
        """Test a non-list top level raises TaskFormatError."""
        with pytest.raises(TaskFormatError):
            decode_tasks(text)

    def test_invalid_json(self) -> None:
        """Test text that is not JSON raises TaskFormatError."""
        with pytest.raises(TaskFormatError) as exc_info:
            decode_tasks("[{")
        assert isinstance(exc_info.value, ValueError)


class TestTheme:
    """Tests for encode_theme and decode_theme."""

    def test_default_is_light(self) -> None:
        """Test the default theme is light."""
        assert DEFAULT_DARK is False
        assert decode_theme(None) is False

    def test_custom_default(self) -> None:
        """Test a caller-chosen default is used when nothing is stored."""
        assert decode_theme(None, default=True) is True

    @pytest.mark.parametrize("value", [True, False])
    def test_stored_value_wins(self, value: bool) -> None:
        """Test a stored flag overrides either default."""
        assert decode_theme(encode_theme(value), default=not value) is value

    def test_non_bool_uses_default(self) -> None:
        """Test a stored value of the wrong type is ignored."""
        assert decode_theme("yes", default=False) is False
        assert decode_theme(1, default=False) is False
