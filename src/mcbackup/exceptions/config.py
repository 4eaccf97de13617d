"""Configuration-related exceptions."""

from __future__ import annotations

from mcbackup.exceptions.base import McBackupError


class ConfigError(McBackupError, ValueError):
    """Raised when backup configuration is invalid."""
