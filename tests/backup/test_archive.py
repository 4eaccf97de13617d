"""Tests for .mcworld packaging."""

from __future__ import annotations

import zipfile
from pathlib import Path

import pytest

from mcbackup.backup import package_as_archive
from mcbackup.exceptions import ArchiveError


def test_package_uses_paths_relative_to_world_folder(tmp_path: Path) -> None:
    world = tmp_path / "abc"
    (world / "db").mkdir(parents=True)
    (world / "level.dat").write_bytes(b"level")
    (world / "db" / "CURRENT").write_bytes(b"MANIFEST-1")

    out = package_as_archive(world, tmp_path / "out" / "My-World.mcworld")

    with zipfile.ZipFile(out) as archive:
        assert sorted(archive.namelist()) == ["db/CURRENT", "level.dat"]
        assert archive.read("level.dat") == b"level"


def test_package_missing_source_raises(tmp_path: Path) -> None:
    with pytest.raises(ArchiveError):
        package_as_archive(tmp_path / "missing", tmp_path / "x.mcworld")

    assert not (tmp_path / "x.mcworld").exists()


def test_package_failure_removes_partial_archive(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    world = tmp_path / "abc"
    world.mkdir()
    (world / "level.dat").write_bytes(b"level")
    dest = tmp_path / "x.mcworld"

    def _boom(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        raise OSError("disk full")

    monkeypatch.setattr(zipfile.ZipFile, "write", _boom)

    with pytest.raises(ArchiveError, match="disk full"):
        package_as_archive(world, dest)

    assert not dest.exists()
