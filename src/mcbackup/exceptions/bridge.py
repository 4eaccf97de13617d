"""Device bridge exceptions."""

from __future__ import annotations

from mcbackup.exceptions.base import McBackupError


class BridgeError(McBackupError):
    """Base class for device bridge failures."""


class BridgeUnavailableError(BridgeError):
    """Raised when the bridge binary is missing or no device is attached."""


class BridgeCommandError(BridgeError):
    """Raised when a single remote call fails or returns unusable output."""
