"""Device bridge clients."""

from .adb import AdbBridge
from .base import DeviceBridge, join_remote

__all__ = ["AdbBridge", "DeviceBridge", "join_remote"]
