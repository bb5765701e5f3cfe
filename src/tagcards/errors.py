"""
Exceptions raised by tagcards.

Line-level problems in a source file are reported as data
(see `tagcards.models.ErrorLine`), not as exceptions.
"""
from __future__ import annotations

from pathlib import Path


class TagcardsError(Exception):
    """Base class for all tagcards errors."""


class SourceReadError(TagcardsError):
    """The source file could not be opened or read."""

    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot read file {self.path}: {reason}")


class ConfigError(TagcardsError):
    """The configuration file is missing or invalid."""
