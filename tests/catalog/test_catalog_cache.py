"""Tests for catalog cache freshness, self-healing, and persistence."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from mcbackup.catalog import CatalogCache
from mcbackup.exceptions import CacheWriteError
from mcbackup.model import Catalog, CatalogEntry

NOW: float = 1_700_000_000.0


def _catalog(*pairs: tuple[str, str, int]) -> Catalog:
    entries = tuple(CatalogEntry(world_id=wid, display_name=name, recency_key=key) for wid, name, key in pairs)
    return Catalog(entries=entries, built_at=NOW, root="/worlds")


def _cache(path: Path, *, now: float = NOW, freshness: float = 300) -> CatalogCache:
    return CatalogCache(path, freshness_seconds=freshness, clock=lambda: now)


def _age(path: Path, seconds: float) -> None:
    stamp = NOW - seconds
    os.utime(path, (stamp, stamp))


def test_store_then_load_round_trips_ids_and_names(tmp_path: Path) -> None:
    path = tmp_path / "cache.txt"
    cache = _cache(path)
    catalog = _catalog(("def", "def", 2000), ("abc", "Survival", 1000), ("x y", "Name with spaces", 0))

    cache.store(catalog)
    _age(path, 10)
    loaded = cache.load()

    assert loaded is not None
    assert [(e.world_id, e.display_name) for e in loaded.entries] == [
        ("def", "def"),
        ("abc", "Survival"),
        ("x y", "Name with spaces"),
    ]
    assert all(entry.recency_key == 0 for entry in loaded.entries)
    assert loaded.source == "cache"
    assert loaded.root is None
    assert loaded.built_at == pytest.approx(NOW - 10)


def test_store_writes_count_then_alternating_lines(tmp_path: Path) -> None:
    path = tmp_path / "cache.txt"

    _cache(path).store(_catalog(("a", "Alpha", 3), ("b", "Beta", 1)))

    assert path.read_text(encoding="utf-8") == "2\na\nAlpha\nb\nBeta\n"


def test_store_leaves_no_temp_files(tmp_path: Path) -> None:
    path = tmp_path / "cache.txt"
    cache = _cache(path)

    cache.store(_catalog(("a", "Alpha", 0)))
    cache.store(_catalog(("b", "Beta", 0)))

    assert sorted(item.name for item in tmp_path.iterdir()) == ["cache.txt"]
    assert path.read_text(encoding="utf-8") == "1\nb\nBeta\n"


def test_store_failure_raises_cache_write_error(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(CacheWriteError):
        _cache(blocker / "cache.txt").store(_catalog(("a", "Alpha", 0)))


def test_cache_written_299_seconds_ago_is_a_hit(tmp_path: Path) -> None:
    path = tmp_path / "cache.txt"
    cache = _cache(path)
    cache.store(_catalog(("a", "Alpha", 0)))
    _age(path, 299)

    lookup = cache.lookup()

    assert lookup.state == "fresh"
    assert lookup.hit
    assert path.exists()


def test_cache_exactly_at_window_is_still_a_hit(tmp_path: Path) -> None:
    path = tmp_path / "cache.txt"
    cache = _cache(path)
    cache.store(_catalog(("a", "Alpha", 0)))
    _age(path, 300)

    assert cache.load() is not None


def test_cache_written_301_seconds_ago_is_expired_and_deleted(tmp_path: Path) -> None:
    path = tmp_path / "cache.txt"
    cache = _cache(path)
    cache.store(_catalog(("a", "Alpha", 0)))
    _age(path, 301)

    lookup = cache.lookup()

    assert lookup.state == "expired"
    assert lookup.catalog is None
    assert lookup.age_seconds == pytest.approx(301)
    assert not path.exists()


def test_short_freshness_window_is_honored(tmp_path: Path) -> None:
    path = tmp_path / "cache.txt"
    cache = _cache(path, freshness=5)
    cache.store(_catalog(("a", "Alpha", 0)))
    _age(path, 6)

    assert cache.load() is None
    assert not path.exists()


def test_truncated_snapshot_is_corrupt_and_deleted(tmp_path: Path) -> None:
    path = tmp_path / "cache.txt"
    path.write_text("3\na\nAlpha\n", encoding="utf-8")
    _age(path, 1)

    lookup = _cache(path).lookup()

    assert lookup.state == "corrupt"
    assert lookup.catalog is None
    assert not path.exists()


@pytest.mark.parametrize(
    "content",
    [
        "",
        "three\na\nAlpha\n",
        "0\n",
        "-1\na\nAlpha\n",
        "1\n\nAlpha\n",
        "2\na\nAlpha\na\nAgain\n",
        "²\na\nAlpha\n",
    ],
)
def test_malformed_snapshots_self_heal(tmp_path: Path, content: str) -> None:
    path = tmp_path / "cache.txt"
    path.write_text(content, encoding="utf-8")
    _age(path, 1)

    assert _cache(path).load() is None
    assert not path.exists()


def test_undecodable_snapshot_is_corrupt(tmp_path: Path) -> None:
    path = tmp_path / "cache.txt"
    path.write_bytes(b"1\n\xff\xfe\nname\n")
    _age(path, 1)

    assert _cache(path).lookup().state == "corrupt"
    assert not path.exists()


def test_missing_file_is_a_miss_without_deletion(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "cache.txt"
    cache = _cache(path)
    discarded: list[Path] = []
    monkeypatch.setattr(cache, "_discard", lambda: discarded.append(path))

    lookup = cache.lookup()

    assert lookup.state == "missing"
    assert cache.load() is None
    assert discarded == []


def test_undeterminable_mtime_deletes_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "cache.txt"
    cache = _cache(path)
    cache.store(_catalog(("a", "Alpha", 0)))
    monkeypatch.setattr(cache, "_mtime", lambda: None)

    lookup = cache.lookup()

    assert lookup.state == "corrupt"
    assert not path.exists()


def test_extra_trailing_lines_are_ignored(tmp_path: Path) -> None:
    path = tmp_path / "cache.txt"
    path.write_text("1\na\nAlpha\nleftover\n", encoding="utf-8")
    _age(path, 1)

    loaded = _cache(path).load()

    assert loaded is not None
    assert [entry.world_id for entry in loaded.entries] == ["a"]


def test_clear_reports_age_and_deletes(tmp_path: Path) -> None:
    path = tmp_path / "cache.txt"
    cache = _cache(path)
    cache.store(_catalog(("a", "Alpha", 0)))
    _age(path, 90)

    result = cache.clear()

    assert result.existed
    assert result.age_seconds == pytest.approx(90)
    assert result.modified_at == pytest.approx(NOW - 90)
    assert not path.exists()


def test_clear_missing_file_is_noop(tmp_path: Path) -> None:
    result = _cache(tmp_path / "cache.txt").clear()

    assert not result.existed
    assert result.age_seconds is None


def test_freshness_must_be_positive(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        CatalogCache(tmp_path / "cache.txt", freshness_seconds=0)
