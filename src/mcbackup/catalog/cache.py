"""Time-boxed on-disk cache for the world catalog.

The snapshot file's own modification time is the freshness clock. Any file
that is expired, unreadable, or malformed is deleted on lookup so stale state
never lingers.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from pathlib import Path

from mcbackup.catalog.snapshot import parse_snapshot, serialize_snapshot
from mcbackup.constants.cache import CACHE_TEMP_PREFIX, CACHE_TEMP_SUFFIX, DEFAULT_FRESHNESS_SECONDS
from mcbackup.exceptions import CacheCorruptError, CacheWriteError
from mcbackup.io import write_text_atomic
from mcbackup.model import CacheClearResult, CacheLookup, Catalog

logger = logging.getLogger(__name__)


class CatalogCache:
    """Persists the last built catalog and serves it while fresh."""

    def __init__(
        self,
        path: Path,
        *,
        freshness_seconds: float = DEFAULT_FRESHNESS_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if freshness_seconds <= 0:
            raise ValueError("freshness_seconds must be positive")
        self.path = path
        self.freshness_seconds = freshness_seconds
        self._clock = clock

    def load(self) -> Catalog | None:
        """Return the cached catalog, or ``None`` on any miss."""
        return self.lookup().catalog

    def lookup(self) -> CacheLookup:
        """Classify the cache file as fresh, expired, missing, or corrupt."""
        if not self.path.is_file():
            return CacheLookup(state="missing")

        mtime = self._mtime()
        if mtime is None:
            logger.warning("Cannot determine cache file age, deleting cache: %s", self.path)
            self._discard()
            return CacheLookup(state="corrupt")

        age = self._clock() - mtime
        if age > self.freshness_seconds:
            logger.info("Cache is %d seconds old (expired), deleting", int(age))
            self._discard()
            return CacheLookup(state="expired", age_seconds=age)

        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return CacheLookup(state="missing")
        except (OSError, UnicodeDecodeError) as exc:
            logger.info("Cache file unreadable (%s), deleting", exc)
            self._discard()
            return CacheLookup(state="corrupt", age_seconds=age)

        try:
            entries = parse_snapshot(text)
        except CacheCorruptError as exc:
            logger.warning("Cache file is empty or corrupted (%s), deleting", exc)
            self._discard()
            return CacheLookup(state="corrupt", age_seconds=age)

        logger.info("Loaded %d world(s) from cache (age: %ds)", len(entries), int(age))
        catalog = Catalog(entries=entries, built_at=mtime, root=None, source="cache")
        return CacheLookup(state="fresh", catalog=catalog, age_seconds=age)

    def store(self, catalog: Catalog) -> None:
        """Overwrite the snapshot atomically; raises ``CacheWriteError``."""
        try:
            write_text_atomic(
                path=self.path,
                content=serialize_snapshot(catalog.entries),
                temp_prefix=CACHE_TEMP_PREFIX,
                temp_suffix=CACHE_TEMP_SUFFIX,
            )
        except OSError as exc:
            raise CacheWriteError(f"Unable to write cache file {self.path}: {exc}") from exc

    def clear(self) -> CacheClearResult:
        """Delete the snapshot, reporting the prior file's age when known."""
        if not self.path.exists():
            return CacheClearResult(path=self.path, existed=False)

        mtime = self._mtime()
        age = None if mtime is None else max(self._clock() - mtime, 0.0)
        try:
            self.path.unlink(missing_ok=True)
        except OSError as exc:
            raise CacheWriteError(f"Unable to delete cache file {self.path}: {exc}") from exc
        return CacheClearResult(path=self.path, existed=True, age_seconds=age, modified_at=mtime)

    def _mtime(self) -> float | None:
        try:
            return self.path.stat().st_mtime
        except OSError:
            return None

    def _discard(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as exc:
            logger.warning("Unable to delete cache file %s: %s", self.path, exc)
