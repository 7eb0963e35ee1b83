"""Key-value storage for persisted blobs.

The session only needs four calls, captured by :class:`BlobStore`. Writes
report success as a bool rather than raising, so callers decide whether to
warn or retry.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class BlobStore(Protocol):
    """Key-value store for strings and booleans."""

    def get_string(self, key: str) -> str | None: ...

    def set_string(self, key: str, value: str) -> bool: ...

    def get_bool(self, key: str) -> bool | None: ...

    def set_bool(self, key: str, value: bool) -> bool: ...


class MemoryBlobStore:
    """Dict-backed blob store.

    Args:
        data: Initial contents.
        fail_writes: Make every write report failure without storing.
    """

    def __init__(self, data: dict | None = None, fail_writes: bool = False) -> None:
        self.data: dict = dict(data or {})
        self.fail_writes = fail_writes

    def get_string(self, key: str) -> str | None:
        value = self.data.get(key)
        return value if isinstance(value, str) else None

    def set_string(self, key: str, value: str) -> bool:
        return self._set(key, value)

    def get_bool(self, key: str) -> bool | None:
        value = self.data.get(key)
        return value if isinstance(value, bool) else None

    def set_bool(self, key: str, value: bool) -> bool:
        return self._set(key, value)

    def _set(self, key: str, value: str | bool) -> bool:
        if self.fail_writes:
            return False
        self.data[key] = value
        return True


class JsonFileBlobStore:
    """Blob store backed by a single JSON object file.

    A missing or unreadable file reads as empty. Each write rewrites the
    whole file through a temporary file and an atomic replace.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path).expanduser()

    def _read(self) -> dict:
        if not self.path.exists():
            return {}

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s: %s", self.path, e)
            return {}

        if not isinstance(data, dict):
            logger.warning("Ignoring %s: expected a JSON object, got %s", self.path, type(data).__name__)
            return {}

        return data

    def _write(self, key: str, value: str | bool) -> bool:
        data = self._read()
        data[key] = value

        temp_path: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(
                dir=self.path.parent,
                prefix=self.path.name + ".",
                suffix=".tmp",
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
                f.flush()
                os.fsync(f.fileno())
            Path(temp_path).replace(self.path)
        except OSError as e:
            logger.warning("Could not write %r to %s: %s", key, self.path, e)
            if temp_path is not None:
                Path(temp_path).unlink(missing_ok=True)
            return False

        return True

    def get_string(self, key: str) -> str | None:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set_string(self, key: str, value: str) -> bool:
        return self._write(key, value)

    def get_bool(self, key: str) -> bool | None:
        value = self._read().get(key)
        return value if isinstance(value, bool) else None

    def set_bool(self, key: str, value: bool) -> bool:
        return self._write(key, value)
