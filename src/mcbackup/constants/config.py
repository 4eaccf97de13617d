"""Configuration defaults and filenames."""

from __future__ import annotations

import tempfile
from pathlib import Path

from mcbackup.constants.bridge import DEFAULT_WORLD_ROOTS
from mcbackup.constants.cache import CACHE_FILENAME

CONFIG_FILENAME: str = "mcbackup.yaml"

DEFAULT_BACKUP_DIR: Path = Path("~/Downloads/Minecraft-Worlds-Backups")
DEFAULT_CACHE_FILE: Path = Path(tempfile.gettempdir()) / CACHE_FILENAME
DEFAULT_WORLD_ROOTS_CONFIG: tuple[str, ...] = DEFAULT_WORLD_ROOTS

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "adb_bin",
        "world_roots",
        "backup_dir",
        "cache_file",
        "cache_ttl_seconds",
    }
)
