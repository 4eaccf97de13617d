"""``adb``-backed implementation of the device bridge."""

from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
from pathlib import Path

from mcbackup.bridge.base import DeviceBridge
from mcbackup.constants.bridge import ADB_DEVICE_STATE, DEFAULT_ADB_BIN
from mcbackup.exceptions import BridgeCommandError, BridgeUnavailableError

logger = logging.getLogger(__name__)


class AdbBridge(DeviceBridge):
    """Runs remote commands through ``adb shell`` and ``adb pull``."""

    def __init__(self, adb_bin: str = DEFAULT_ADB_BIN) -> None:
        self.adb_bin = adb_bin

    def ensure_device(self) -> None:
        if shutil.which(self.adb_bin) is None:
            raise BridgeUnavailableError(
                f"{self.adb_bin} not found. Install Android platform-tools and make sure it is on PATH."
            )
        result = self._run(["devices"])
        if count_ready_devices(_decode(result.stdout)) < 1:
            raise BridgeUnavailableError("No adb device found. Connect your phone and enable USB debugging.")

    def list_directories(self, path: str) -> list[str]:
        quoted = shlex.quote(path.rstrip("/"))
        script = f'for item in {quoted}/*; do [ -d "$item" ] && basename "$item"; done 2>/dev/null'
        result = self._shell(script)
        output = _decode(result.stdout)
        # The loop exits non-zero when its last item is a file, so only an empty
        # listing together with a failure status counts as an error.
        if result.returncode != 0 and not output.strip():
            raise BridgeCommandError(f"Unable to list {path}: {_decode(result.stderr).strip() or 'no output'}")
        return [line for line in output.splitlines() if line.strip()]

    def read_file(self, path: str) -> bytes:
        result = self._shell(f"cat {shlex.quote(path)} 2>/dev/null")
        if result.returncode != 0:
            raise BridgeCommandError(f"Unable to read {path}: {_decode(result.stderr).strip() or 'no output'}")
        return result.stdout.replace(b"\r\n", b"\n")

    def stat_access_time(self, path: str) -> int:
        quoted = shlex.quote(path)
        result = self._shell(f"stat -c %X {quoted} 2>/dev/null || stat -f %a {quoted} 2>/dev/null")
        raw = _decode(result.stdout).strip()
        if result.returncode != 0 or not (raw.isascii() and raw.isdigit()):
            raise BridgeCommandError(f"Unable to stat {path}: {raw or 'no output'}")
        return int(raw)

    def pull(self, remote_path: str, local_path: Path) -> None:
        logger.debug("adb pull %s -> %s", remote_path, local_path)
        result = self._run(["pull", remote_path, str(local_path)])
        if result.returncode != 0:
            detail = _decode(result.stderr).strip() or _decode(result.stdout).strip() or "no output"
            raise BridgeCommandError(f"adb pull failed for {remote_path}: {detail}")

    def _shell(self, script: str) -> subprocess.CompletedProcess[bytes]:
        return self._run(["shell", script])

    def _run(self, args: list[str]) -> subprocess.CompletedProcess[bytes]:
        try:
            return subprocess.run([self.adb_bin, *args], capture_output=True, check=False)
        except FileNotFoundError as exc:
            raise BridgeUnavailableError(f"{self.adb_bin} not found: {exc}") from exc
        except OSError as exc:
            raise BridgeUnavailableError(f"Unable to run {self.adb_bin}: {exc}") from exc


def count_ready_devices(devices_output: str) -> int:
    """Count ``adb devices`` rows in the ready state, skipping the header line."""
    count = 0
    for line in devices_output.splitlines()[1:]:
        fields = line.split()
        if len(fields) >= 2 and fields[1] == ADB_DEVICE_STATE:
            count += 1
    return count


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace").replace("\r", "")
