"""Shared exception hierarchy for mcbackup."""

from __future__ import annotations

from .backup import ArchiveError, BackupError, SelectionError
from .base import McBackupError
from .bridge import BridgeCommandError, BridgeError, BridgeUnavailableError
from .catalog import CacheCorruptError, CacheError, CacheWriteError, NoWorldsFoundError
from .config import ConfigError

__all__ = [
    "ArchiveError",
    "BackupError",
    "BridgeCommandError",
    "BridgeError",
    "BridgeUnavailableError",
    "CacheCorruptError",
    "CacheError",
    "CacheWriteError",
    "ConfigError",
    "McBackupError",
    "NoWorldsFoundError",
    "SelectionError",
]
