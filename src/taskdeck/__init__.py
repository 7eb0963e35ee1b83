"""taskdeck - a small prioritised to-do list."""

from __future__ import annotations

__version__ = "0.1.0"
