"""Backup layout, naming, and archive constants."""

from __future__ import annotations

import re

BACKUP_MODE_FOLDER: str = "folder"
BACKUP_MODE_MCWORLD: str = "mcworld"
VALID_BACKUP_MODES: frozenset[str] = frozenset({BACKUP_MODE_FOLDER, BACKUP_MODE_MCWORLD})

WORLD_FOLDERS_DIRNAME: str = "world-folders"
MCWORLD_FILES_DIRNAME: str = "mcworld-files"
MCWORLD_SUFFIX: str = ".mcworld"
TEMP_PULL_PREFIX: str = ".temp_"

SESSION_TIMESTAMP_FORMAT: str = "%Y-%m-%d__%I-%M-%S-%p"
NAME_SEPARATOR: str = "__"

WORLD_NAME_FALLBACK: str = "unnamed-world"
NON_ALNUM_PATTERN: re.Pattern[str] = re.compile(r"[^A-Za-z0-9]")
COLLAPSE_DASH_PATTERN: re.Pattern[str] = re.compile(r"-{2,}")
