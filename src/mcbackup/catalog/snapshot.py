"""Text codec for persisted catalog snapshots.

Layout: the first line is the entry count ``N``, followed by exactly ``2*N``
lines alternating world id and display name, in catalog order.
"""

from __future__ import annotations

from collections.abc import Iterable

from mcbackup.exceptions import CacheCorruptError
from mcbackup.model import CatalogEntry


def serialize_snapshot(entries: Iterable[CatalogEntry]) -> str:
    """Render entries in snapshot format. Recency keys are not persisted."""
    items = list(entries)
    lines = [str(len(items))]
    for entry in items:
        lines.append(_single_line(entry.world_id))
        lines.append(_single_line(entry.display_name))
    return "\n".join(lines) + "\n"


def parse_snapshot(text: str) -> tuple[CatalogEntry, ...]:
    """Parse snapshot text, raising ``CacheCorruptError`` on any inconsistency."""
    lines = text.replace("\r", "").split("\n")
    if text.endswith("\n"):
        lines.pop()
    if not lines:
        raise CacheCorruptError("snapshot is empty")

    header = lines[0].strip()
    if not (header.isascii() and header.isdigit()):
        raise CacheCorruptError(f"snapshot count is not a number: {header!r}")
    count = int(header)
    if count <= 0:
        raise CacheCorruptError("snapshot declares no entries")

    body = lines[1:]
    if len(body) < 2 * count:
        raise CacheCorruptError(f"snapshot declares {count} entries but holds {len(body) // 2}")

    entries: list[CatalogEntry] = []
    seen: set[str] = set()
    for index in range(count):
        world_id = body[2 * index].strip()
        display_name = body[2 * index + 1].strip()
        if not world_id:
            raise CacheCorruptError(f"snapshot entry {index} has an empty id")
        if world_id in seen:
            raise CacheCorruptError(f"snapshot repeats id {world_id!r}")
        seen.add(world_id)
        entries.append(CatalogEntry(world_id=world_id, display_name=display_name or world_id))
    return tuple(entries)


def _single_line(value: str) -> str:
    return " ".join(value.splitlines())
