"""Shared fixtures for taskdeck tests."""

from __future__ import annotations

import json
import os
from collections.abc import Generator
from pathlib import Path

import pytest


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory and change to it."""
    original_dir = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_dir)


@pytest.fixture
def temp_taskdeck_dir(temp_project: Path) -> Path:
    """Create a temporary .taskdeck directory."""
    taskdeck_dir = temp_project / ".taskdeck"
    taskdeck_dir.mkdir()
    return taskdeck_dir


@pytest.fixture
def sample_task_records() -> list[dict]:
    """Persisted task records, already in display order."""
    return [
        {"name": "Buy milk", "completed": False, "priority": "high"},
        {"name": "Pay rent", "completed": True, "priority": "high"},
        {"name": "book dentist", "completed": False, "priority": "medium"},
        {"name": "Call mom", "completed": False, "priority": "low"},
    ]


@pytest.fixture
def sample_store_file(temp_taskdeck_dir: Path, sample_task_records: list[dict]) -> Path:
    """Create a store file holding the sample tasks and a dark theme flag."""
    store_path = temp_taskdeck_dir / "store.json"
    data = {"tasks_v1": json.dumps(sample_task_records), "isDark": True}
    store_path.write_text(json.dumps(data))
    return store_path


@pytest.fixture
def sample_config_data() -> dict:
    """Sample configuration data."""
    return {
        "storage": {"path": "data/todo.json", "tasks_key": "tasks", "theme_key": "dark"},
        "theme": {"default_dark": True},
        "defaults": {"priority": "high"},
        "log_level": "INFO",
    }
