"""World discovery and catalog cache exceptions."""

from __future__ import annotations

from mcbackup.exceptions.base import McBackupError


class NoWorldsFoundError(McBackupError):
    """Raised when no candidate root yields any world directory."""

    def __init__(self, roots: tuple[str, ...]) -> None:
        self.roots = roots
        super().__init__("No worlds found in: " + ", ".join(roots))


class CacheError(McBackupError):
    """Base class for catalog cache failures."""


class CacheCorruptError(CacheError, ValueError):
    """Raised when a cached snapshot cannot be parsed."""


class CacheWriteError(CacheError, OSError):
    """Raised when a catalog snapshot cannot be persisted."""
