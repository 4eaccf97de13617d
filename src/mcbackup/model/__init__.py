"""Core data models for mcbackup."""

from .entities import (
    BackupFailure,
    BackupOutcome,
    BackupReport,
    CacheClearResult,
    CacheLookup,
    Catalog,
    CatalogEntry,
)

__all__ = [
    "BackupFailure",
    "BackupOutcome",
    "BackupReport",
    "CacheClearResult",
    "CacheLookup",
    "Catalog",
    "CatalogEntry",
]
