"""Configuration loading and normalization for mcbackup."""

from __future__ import annotations

from mcbackup.config.loader import load_config
from mcbackup.config.model import BackupConfig

__all__ = ["BackupConfig", "load_config"]
