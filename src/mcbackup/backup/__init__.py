"""Backup orchestration and world copy helpers."""

from __future__ import annotations

from .archive import package_as_archive
from .orchestrator import backup_all, backup_worlds, load_catalog, resolve_world_root, select_entries
from .writer import backup_world_folder, export_mcworld

__all__ = [
    "backup_all",
    "backup_world_folder",
    "backup_worlds",
    "export_mcworld",
    "load_catalog",
    "package_as_archive",
    "resolve_world_root",
    "select_entries",
]
