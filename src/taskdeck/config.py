"""Configuration models for taskdeck."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from taskdeck.models import Priority


class StorageConfig(BaseModel):
    """Where and under which keys data is persisted."""

    path: str = ".taskdeck/store.json"
    tasks_key: str = "tasks_v1"
    theme_key: str = "isDark"


class ThemeConfig(BaseModel):
    """Theme settings."""

    # Used until a preference has been stored.
    default_dark: bool = False


class DefaultsConfig(BaseModel):
    """Defaults applied when adding tasks."""

    priority: Priority = Priority.MEDIUM


class TaskdeckConfig(BaseModel):
    """Main configuration for taskdeck."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    theme: ThemeConfig = Field(default_factory=ThemeConfig)
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @classmethod
    def load(cls, path: Path | None = None) -> TaskdeckConfig:
        """Load configuration from file or return defaults."""
        if path is None:
            path = CONFIG_FILE

        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        return cls.model_validate(data)

    def save(self, path: Path | None = None) -> None:
        """Save configuration to file."""
        if path is None:
            path = CONFIG_FILE

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2)


# Default config directory
TASKDECK_DIR = Path(".taskdeck")
CONFIG_FILE = TASKDECK_DIR / "config.json"
