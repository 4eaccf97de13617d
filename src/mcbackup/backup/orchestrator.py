"""Catalog retrieval and sequential backup runs.

``load_catalog`` remains the single way callers obtain a catalog: cache first,
device on a miss. Bulk runs always rediscover from the device.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from datetime import datetime
from pathlib import Path
from typing import TypeAlias

from mcbackup.backup.writer import backup_world_folder, export_mcworld
from mcbackup.bridge.base import DeviceBridge
from mcbackup.catalog import CatalogCache, build_catalog
from mcbackup.constants.backup import BACKUP_MODE_FOLDER, VALID_BACKUP_MODES
from mcbackup.exceptions import BackupError, BridgeCommandError, CacheWriteError, SelectionError
from mcbackup.model import BackupFailure, BackupOutcome, BackupReport, Catalog, CatalogEntry
from mcbackup.types import BackupMode

logger = logging.getLogger(__name__)

WorldWriter: TypeAlias = Callable[..., BackupOutcome]


def load_catalog(
    *,
    bridge: DeviceBridge,
    cache: CatalogCache,
    roots: Sequence[str],
    refresh: bool = False,
) -> Catalog:
    """Return the cached catalog while fresh, otherwise rebuild and store it."""
    if not refresh:
        lookup = cache.lookup()
        if lookup.catalog is not None:
            return lookup.catalog
        logger.info("World list cache %s, fetching from device", lookup.state)

    logger.info("Fetching world list from Android device...")
    catalog = build_catalog(bridge, roots)
    try:
        cache.store(catalog)
    except CacheWriteError as exc:
        logger.warning("%s", exc)
    return catalog


def select_entries(catalog: Catalog, selectors: Iterable[str]) -> list[CatalogEntry]:
    """Resolve selectors (world id, or display name ignoring case) in catalog order.

    Raises ``SelectionError`` naming every selector that matched nothing.
    """
    wanted = [selector.strip() for selector in selectors if selector.strip()]
    chosen: set[str] = set()
    unmatched: list[str] = []
    for selector in wanted:
        matches = [
            entry
            for entry in catalog.entries
            if entry.world_id == selector or entry.display_name.casefold() == selector.casefold()
        ]
        if not matches:
            unmatched.append(selector)
        chosen.update(entry.world_id for entry in matches)

    if unmatched:
        raise SelectionError(f"No world matches: {', '.join(unmatched)}")
    return [entry for entry in catalog.entries if entry.world_id in chosen]


def resolve_world_root(
    *,
    bridge: DeviceBridge,
    catalog: Catalog,
    roots: Sequence[str],
    world_id: str,
) -> str:
    """Return the device root holding *world_id*.

    Catalogs read from cache do not record their root, so the candidates are
    probed in order.
    """
    if catalog.root is not None:
        return catalog.root
    for root in roots:
        try:
            if world_id in {name.strip() for name in bridge.list_directories(root)}:
                return root
        except BridgeCommandError as exc:
            logger.debug("Listing failed for %s: %s", root, exc)
    raise BackupError(f"World {world_id} was not found under any candidate path")


def backup_worlds(
    *,
    bridge: DeviceBridge,
    catalog: Catalog,
    entries: Sequence[CatalogEntry],
    roots: Sequence[str],
    backup_root: Path,
    mode: BackupMode = BACKUP_MODE_FOLDER,
    moment: datetime | None = None,
) -> BackupReport:
    """Back up *entries* one after another.

    A failure on one world is logged and recorded, and the run moves on.
    ``BridgeUnavailableError`` is not caught and ends the run.
    """
    if mode not in VALID_BACKUP_MODES:
        raise ValueError(f"Unknown backup mode: {mode!r}")

    report = BackupReport(mode=mode)
    if not entries:
        logger.info("Nothing to back up")
        return report

    writer: WorldWriter = backup_world_folder if mode == BACKUP_MODE_FOLDER else export_mcworld
    for entry in entries:
        logger.info("Processing: %s", entry.display_name)
        try:
            remote_root = resolve_world_root(bridge=bridge, catalog=catalog, roots=roots, world_id=entry.world_id)
            outcome = writer(
                bridge=bridge,
                remote_root=remote_root,
                entry=entry,
                backup_root=backup_root,
                moment=moment,
            )
        except BackupError as exc:
            logger.warning("Failed to back up %s: %s", entry.display_name, exc)
            report.failed.append(BackupFailure(entry=entry, message=str(exc)))
            continue
        report.succeeded.append(outcome)

    return report


def backup_all(
    *,
    bridge: DeviceBridge,
    cache: CatalogCache,
    roots: Sequence[str],
    backup_root: Path,
    mode: BackupMode = BACKUP_MODE_FOLDER,
    moment: datetime | None = None,
) -> BackupReport:
    """Rediscover every world from the device and back each one up."""
    catalog = load_catalog(bridge=bridge, cache=cache, roots=roots, refresh=True)
    logger.info("Backing up all worlds...")
    return backup_worlds(
        bridge=bridge,
        catalog=catalog,
        entries=catalog.entries,
        roots=roots,
        backup_root=backup_root,
        mode=mode,
        moment=moment,
    )
