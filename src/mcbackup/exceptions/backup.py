"""Backup, archive, and selection exceptions."""

from __future__ import annotations

from mcbackup.exceptions.base import McBackupError


class BackupError(McBackupError):
    """Raised when copying a single world fails."""


class ArchiveError(BackupError):
    """Raised when packaging a world as a .mcworld archive fails."""


class SelectionError(McBackupError, ValueError):
    """Raised when a world selector matches nothing in the catalog."""
