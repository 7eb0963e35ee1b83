"""Session state: the task store, the theme flag and where they persist.

A session replaces process-wide state. The front end owns one, calls the
store's mutators, then calls :meth:`TodoSession.save_tasks`. Every save
returns whether the write succeeded.
"""

from __future__ import annotations

import logging
from pathlib import Path

from taskdeck.blobstore import BlobStore, JsonFileBlobStore
from taskdeck.codec import DEFAULT_DARK, decode_theme, decode_tasks, encode_tasks, encode_theme
from taskdeck.config import TaskdeckConfig
from taskdeck.errors import TaskFormatError
from taskdeck.store import TaskStore

logger = logging.getLogger(__name__)

TASKS_KEY = "tasks_v1"
THEME_KEY = "isDark"


class TodoSession:
    """A task store and theme preference bound to a blob store."""

    def __init__(
        self,
        blob_store: BlobStore,
        tasks_key: str = TASKS_KEY,
        theme_key: str = THEME_KEY,
        default_dark: bool = DEFAULT_DARK,
    ) -> None:
        self.blob_store = blob_store
        self.tasks_key = tasks_key
        self.theme_key = theme_key
        self.default_dark = default_dark
        self.store = TaskStore()
        self._is_dark = default_dark

    @classmethod
    def from_config(cls, config: TaskdeckConfig, root: Path | None = None) -> TodoSession:
        """Create a session over the file store named in config.

        Args:
            config: Loaded configuration.
            root: Directory that a relative storage path is resolved against.
        """
        path = Path(config.storage.path)
        if root is not None and not path.is_absolute():
            path = root / path

        return cls(
            JsonFileBlobStore(path),
            tasks_key=config.storage.tasks_key,
            theme_key=config.storage.theme_key,
            default_dark=config.theme.default_dark,
        )

    @property
    def is_dark(self) -> bool:
        return self._is_dark

    def load(self) -> None:
        """Load tasks and the theme flag from the blob store.

        Unreadable task data is logged and treated as an empty list.
        """
        text = self.blob_store.get_string(self.tasks_key)
        try:
            tasks = decode_tasks(text)
        except TaskFormatError as e:
            logger.warning("Discarding saved tasks: %s", e)
            tasks = []

        self.store.replace_all(tasks)
        self._is_dark = decode_theme(self.blob_store.get_bool(self.theme_key), self.default_dark)
        logger.debug("Loaded %d tasks (dark=%s)", len(self.store), self._is_dark)

    def save_tasks(self) -> bool:
        """Persist the current task list.

        Returns:
            True if the write succeeded.
        """
        ok = self.blob_store.set_string(self.tasks_key, encode_tasks(self.store.snapshot()))
        if not ok:
            logger.warning("Failed to save %d tasks", len(self.store))
        return ok

    def set_dark(self, value: bool) -> bool:
        """Set and persist the theme flag. Returns whether the write succeeded."""
        self._is_dark = value
        ok = self.blob_store.set_bool(self.theme_key, encode_theme(value))
        if not ok:
            logger.warning("Failed to save theme preference")
        return ok

    def toggle_theme(self) -> bool:
        """Flip and persist the theme flag. Returns whether the write succeeded."""
        return self.set_dark(not self._is_dark)
