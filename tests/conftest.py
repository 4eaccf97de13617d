"""Shared pytest fixtures: an in-memory device bridge and config helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from mcbackup.bridge import DeviceBridge, join_remote
from mcbackup.constants.bridge import LEVELNAME_FILENAME
from mcbackup.exceptions import BridgeCommandError, BridgeUnavailableError

ROOT_A: str = "/storage/emulated/0/games/com.mojang/minecraftWorlds"
ROOT_B: str = "/sdcard/games/com.mojang/minecraftWorlds"


class FakeBridge(DeviceBridge):
    """In-memory device: directory listings, files, access times, and pullable trees."""

    def __init__(self) -> None:
        self.listings: dict[str, list[str]] = {}
        self.files: dict[str, bytes] = {}
        self.atimes: dict[str, object] = {}
        self.trees: dict[str, dict[str, bytes]] = {}
        self.failing_listings: set[str] = set()
        self.failing_pulls: set[str] = set()
        self.unavailable = False
        self.calls: list[tuple[str, str]] = []

    def add_world(
        self,
        root: str,
        world_id: str,
        *,
        name: str | bytes | None = None,
        atime: object = None,
        files: dict[str, bytes] | None = None,
    ) -> None:
        self.listings.setdefault(root, []).append(world_id)
        world_path = join_remote(root, world_id)
        if name is not None:
            raw = name.encode("utf-8") if isinstance(name, str) else name
            self.files[join_remote(world_path, LEVELNAME_FILENAME)] = raw
        if atime is not None:
            self.atimes[world_path] = atime
        self.trees[world_path] = dict(files or {"level.dat": b"level"})

    def ensure_device(self) -> None:
        self.calls.append(("ensure_device", ""))
        self._check()

    def list_directories(self, path: str) -> list[str]:
        self.calls.append(("list", path))
        self._check()
        if path in self.failing_listings:
            raise BridgeCommandError(f"listing failed: {path}")
        return list(self.listings.get(path, []))

    def read_file(self, path: str) -> bytes:
        self.calls.append(("read", path))
        self._check()
        if path not in self.files:
            raise BridgeCommandError(f"No such file: {path}")
        return self.files[path]

    def stat_access_time(self, path: str) -> int:
        self.calls.append(("stat", path))
        self._check()
        if path not in self.atimes:
            raise BridgeCommandError(f"stat failed: {path}")
        return self.atimes[path]  # type: ignore[return-value]

    def pull(self, remote_path: str, local_path: Path) -> None:
        self.calls.append(("pull", remote_path))
        self._check()
        if remote_path in self.failing_pulls or remote_path not in self.trees:
            raise BridgeCommandError(f"remote object '{remote_path}' does not exist")
        # Like adb, pulling into an existing directory nests the source basename.
        target = local_path / remote_path.rsplit("/", 1)[-1] if local_path.is_dir() else local_path
        for relative, content in self.trees[remote_path].items():
            destination = target / relative
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_bytes(content)

    def count(self, kind: str) -> int:
        return sum(1 for call, _ in self.calls if call == kind)

    def _check(self) -> None:
        if self.unavailable:
            raise BridgeUnavailableError("No adb device found.")


@pytest.fixture()
def bridge() -> FakeBridge:
    """Return an empty fake device."""
    return FakeBridge()


@pytest.fixture()
def write_config(tmp_path: Path):  # type: ignore[no-untyped-def]
    """Return a helper that writes ``mcbackup.yaml`` into a temp directory."""

    def _write(content: str, name: str = "mcbackup.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def roots() -> tuple[str, str]:
    """Return the primary and alternative candidate world roots."""
    return (ROOT_A, ROOT_B)
