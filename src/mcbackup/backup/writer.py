"""Copy one world from the device into a timestamped local session folder.

Folder backups land in ``world-folders/<name>__<ts>/<name>__<id>/``; archive
exports land in ``mcworld-files/<name>__<ts>/<name>.mcworld``. The world icon
is copied next to each session folder when the device provides one.
"""

from __future__ import annotations

import logging
import shutil
from datetime import datetime
from pathlib import Path

from mcbackup.backup.archive import package_as_archive
from mcbackup.bridge.base import DeviceBridge, join_remote
from mcbackup.constants.backup import (
    MCWORLD_FILES_DIRNAME,
    MCWORLD_SUFFIX,
    NAME_SEPARATOR,
    TEMP_PULL_PREFIX,
    WORLD_FOLDERS_DIRNAME,
)
from mcbackup.constants.bridge import WORLD_ICON_FILENAME
from mcbackup.exceptions import BackupError, BridgeCommandError
from mcbackup.model import BackupOutcome, CatalogEntry
from mcbackup.utils import sanitize_world_name, session_timestamp

logger = logging.getLogger(__name__)


def backup_world_folder(
    *,
    bridge: DeviceBridge,
    remote_root: str,
    entry: CatalogEntry,
    backup_root: Path,
    moment: datetime | None = None,
) -> BackupOutcome:
    """Pull the full world directory, preserving the device layout."""
    safe_name = sanitize_world_name(entry.display_name)
    session_dir = backup_root / WORLD_FOLDERS_DIRNAME / f"{safe_name}{NAME_SEPARATOR}{session_timestamp(moment)}"
    dest_dir = session_dir / f"{safe_name}{NAME_SEPARATOR}{entry.world_id}"

    logger.info("Backing up world: %s", entry.display_name)
    logger.info("Destination: %s", dest_dir)
    try:
        dest_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise BackupError(f"Cannot create {dest_dir}: {exc}") from exc

    try:
        bridge.pull(join_remote(remote_root, entry.world_id), dest_dir)
    except BridgeCommandError as exc:
        raise BackupError(f"Failed to back up {entry.display_name}: {exc}") from exc

    # adb pull nests the world under dest_dir/<id> because dest_dir already exists.
    _copy_icon(
        (dest_dir / entry.world_id / WORLD_ICON_FILENAME, dest_dir / WORLD_ICON_FILENAME),
        session_dir,
    )
    return BackupOutcome(entry=entry, mode="folder", session_dir=session_dir, destination=dest_dir)


def export_mcworld(
    *,
    bridge: DeviceBridge,
    remote_root: str,
    entry: CatalogEntry,
    backup_root: Path,
    moment: datetime | None = None,
) -> BackupOutcome:
    """Pull the world to a scratch folder and zip it as ``<name>.mcworld``."""
    safe_name = sanitize_world_name(entry.display_name)
    session_dir = backup_root / MCWORLD_FILES_DIRNAME / f"{safe_name}{NAME_SEPARATOR}{session_timestamp(moment)}"
    out_file = session_dir / f"{safe_name}{MCWORLD_SUFFIX}"
    temp_dir = session_dir / f"{TEMP_PULL_PREFIX}{entry.world_id}"
    world_dir = temp_dir / entry.world_id

    logger.info("Exporting world: %s", entry.display_name)
    logger.info("Destination: %s", out_file)
    try:
        temp_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise BackupError(f"Cannot create {temp_dir}: {exc}") from exc

    try:
        try:
            bridge.pull(join_remote(remote_root, entry.world_id), world_dir)
        except BridgeCommandError as exc:
            raise BackupError(f"Failed to pull world files for {entry.display_name}: {exc}") from exc

        _copy_icon((world_dir / WORLD_ICON_FILENAME,), session_dir)
        package_as_archive(world_dir, out_file)
    finally:
        shutil.rmtree(temp_dir, ignore_errors=True)

    return BackupOutcome(entry=entry, mode="mcworld", session_dir=session_dir, destination=out_file)


def _copy_icon(candidates: tuple[Path, ...], session_dir: Path) -> None:
    for icon in candidates:
        if not icon.is_file():
            continue
        try:
            shutil.copy2(icon, session_dir / WORLD_ICON_FILENAME)
        except OSError as exc:
            logger.debug("Could not copy world icon %s: %s", icon, exc)
            return
        logger.info("Copied world icon to backup folder")
        return
