"""Shared type aliases for mcbackup."""

from .common import BackupMode, CacheState, CatalogSource, JsonObject, JsonScalar, JsonValue

__all__ = [
    "BackupMode",
    "CacheState",
    "CatalogSource",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
]
