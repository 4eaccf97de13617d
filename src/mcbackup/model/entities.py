"""Core dataclasses for catalogs, cache lookups, and backup runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from mcbackup.types import BackupMode, CacheState, CatalogSource, JsonObject


@dataclass(frozen=True)
class CatalogEntry:
    """One discovered world: stable id, display name, and recency sort key."""

    world_id: str
    display_name: str
    recency_key: int = 0

    def label(self) -> str:
        """Return the ``Name (id)`` label shown in listings."""
        return f"{self.display_name} ({self.world_id})"


@dataclass(frozen=True)
class Catalog:
    """Immutable snapshot of discovered worlds for one query."""

    entries: tuple[CatalogEntry, ...]
    built_at: float
    root: str | None = None
    source: CatalogSource = "device"

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)

    def find(self, world_id: str) -> CatalogEntry | None:
        """Return the entry with ``world_id``, if present."""
        for entry in self.entries:
            if entry.world_id == world_id:
                return entry
        return None

    def to_dict(self) -> JsonObject:
        return {
            "built_at": self.built_at,
            "source": self.source,
            "root": self.root,
            "worlds": [
                {
                    "id": entry.world_id,
                    "name": entry.display_name,
                    "recency": entry.recency_key,
                }
                for entry in self.entries
            ],
        }


@dataclass(frozen=True)
class CacheLookup:
    """Outcome of a single cache lookup."""

    state: CacheState
    catalog: Catalog | None = None
    age_seconds: float | None = None

    @property
    def hit(self) -> bool:
        return self.state == "fresh" and self.catalog is not None


@dataclass(frozen=True)
class CacheClearResult:
    """Outcome of clearing the cache file."""

    path: Path
    existed: bool
    age_seconds: float | None = None
    modified_at: float | None = None


@dataclass(frozen=True)
class BackupOutcome:
    """A world copied to local storage."""

    entry: CatalogEntry
    mode: BackupMode
    session_dir: Path
    destination: Path


@dataclass(frozen=True)
class BackupFailure:
    """A world that could not be backed up, with the reason."""

    entry: CatalogEntry
    message: str


@dataclass
class BackupReport:
    """Accumulated results for one backup run."""

    mode: BackupMode
    succeeded: list[BackupOutcome] = field(default_factory=list)
    failed: list[BackupFailure] = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return len(self.succeeded) + len(self.failed)

    @property
    def ok(self) -> bool:
        return not self.failed
