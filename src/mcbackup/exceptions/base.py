"""Root exception for mcbackup."""

from __future__ import annotations


class McBackupError(Exception):
    """Base class for all mcbackup errors."""
