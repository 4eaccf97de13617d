"""World discovery over the device bridge."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence

from mcbackup.bridge.base import DeviceBridge, join_remote
from mcbackup.constants.bridge import LEVELNAME_FILENAME, LISTING_ERROR_MARKERS
from mcbackup.exceptions import BridgeCommandError, NoWorldsFoundError
from mcbackup.model import Catalog, CatalogEntry

logger = logging.getLogger(__name__)


def build_catalog(
    bridge: DeviceBridge,
    roots: Sequence[str],
    *,
    clock: Callable[[], float] = time.time,
) -> Catalog:
    """Discover worlds under the first root that lists any, newest first.

    Every entry is kept even when its name or access time cannot be read; it
    falls back to its id and a recency key of ``0``. Raises
    ``NoWorldsFoundError`` when no root yields a world directory.
    """
    if not roots:
        raise ValueError("at least one candidate root is required")

    for root in roots:
        logger.info("Trying path: %s", root)
        world_ids = _list_world_ids(bridge, root)
        if not world_ids:
            continue

        logger.info("Reading world names (%d worlds)...", len(world_ids))
        entries = [_build_entry(bridge, root, world_id) for world_id in world_ids]
        logger.info("Found %d world(s) in %s", len(entries), root)
        return Catalog(entries=sort_by_recency(entries), built_at=clock(), root=root, source="device")

    raise NoWorldsFoundError(tuple(roots))


def sort_by_recency(entries: Sequence[CatalogEntry]) -> tuple[CatalogEntry, ...]:
    """Order entries newest first; equal keys keep discovery order."""
    return tuple(sorted(entries, key=lambda entry: entry.recency_key, reverse=True))


def read_display_name(raw: bytes, fallback: str) -> str:
    """Return the first non-blank line of a ``levelname.txt`` payload, trimmed."""
    text = raw.decode("utf-8-sig", errors="replace")
    for line in text.splitlines():
        name = line.strip()
        if name:
            return name
    return fallback


def _list_world_ids(bridge: DeviceBridge, root: str) -> list[str]:
    try:
        raw_names = bridge.list_directories(root)
    except BridgeCommandError as exc:
        logger.info("Listing failed for %s: %s", root, exc)
        return []

    world_ids: list[str] = []
    seen: set[str] = set()
    for raw_name in raw_names:
        name = raw_name.strip()
        if not name or any(marker in name for marker in LISTING_ERROR_MARKERS):
            continue
        if name in seen:
            continue
        seen.add(name)
        world_ids.append(name)
    return world_ids


def _build_entry(bridge: DeviceBridge, root: str, world_id: str) -> CatalogEntry:
    world_path = join_remote(root, world_id)

    display_name = world_id
    try:
        display_name = read_display_name(bridge.read_file(join_remote(world_path, LEVELNAME_FILENAME)), world_id)
    except BridgeCommandError as exc:
        logger.debug("No level name for %s: %s", world_id, exc)

    recency_key = 0
    try:
        recency_key = max(int(bridge.stat_access_time(world_path)), 0)
    except (BridgeCommandError, ValueError, TypeError) as exc:
        logger.debug("No access time for %s: %s", world_id, exc)

    return CatalogEntry(world_id=world_id, display_name=display_name, recency_key=recency_key)
