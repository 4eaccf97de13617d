"""Device bridge interface used by catalog discovery and backups."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class DeviceBridge(ABC):
    """Remote file access on a connected device.

    Implementations raise ``BridgeCommandError`` when one remote call fails and
    ``BridgeUnavailableError`` when the transport itself cannot be reached.
    """

    @abstractmethod
    def ensure_device(self) -> None:
        """Raise ``BridgeUnavailableError`` unless a device is ready."""

    @abstractmethod
    def list_directories(self, path: str) -> list[str]:
        """Return names of the immediate subdirectories of *path*."""

    @abstractmethod
    def read_file(self, path: str) -> bytes:
        """Return the raw contents of the remote file at *path*."""

    @abstractmethod
    def stat_access_time(self, path: str) -> int:
        """Return the last-access time of *path* in epoch seconds."""

    @abstractmethod
    def pull(self, remote_path: str, local_path: Path) -> None:
        """Copy *remote_path* (file or directory) to *local_path*."""


def join_remote(*parts: str) -> str:
    """Join device path segments with ``/`` regardless of the host OS."""
    cleaned = [parts[0].rstrip("/")] + [part.strip("/") for part in parts[1:]]
    return "/".join(part for part in cleaned if part) or "/"
