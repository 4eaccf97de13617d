"""Config data model for mcbackup."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from mcbackup.constants.bridge import DEFAULT_ADB_BIN
from mcbackup.constants.cache import DEFAULT_FRESHNESS_SECONDS
from mcbackup.constants.config import DEFAULT_BACKUP_DIR, DEFAULT_CACHE_FILE, DEFAULT_WORLD_ROOTS_CONFIG


@dataclass(frozen=True)
class BackupConfig:
    """Resolved backup tool config.

    ``world_roots`` is the ordered fallback list used for discovery and
    ``cache_ttl_seconds`` is the catalog cache hit threshold.
    """

    adb_bin: str = DEFAULT_ADB_BIN
    world_roots: tuple[str, ...] = DEFAULT_WORLD_ROOTS_CONFIG
    backup_dir: Path = DEFAULT_BACKUP_DIR.expanduser()
    cache_file: Path = DEFAULT_CACHE_FILE
    cache_ttl_seconds: int = DEFAULT_FRESHNESS_SECONDS
