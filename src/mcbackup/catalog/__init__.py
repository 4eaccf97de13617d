"""World catalog discovery and caching."""

from .builder import build_catalog, read_display_name, sort_by_recency
from .cache import CatalogCache
from .snapshot import parse_snapshot, serialize_snapshot

__all__ = [
    "CatalogCache",
    "build_catalog",
    "parse_snapshot",
    "read_display_name",
    "serialize_snapshot",
    "sort_by_recency",
]
