"""Constants used by the world catalog cache."""

from __future__ import annotations

CACHE_FILENAME: str = "minecraft-worlds-cache.txt"
CACHE_TEMP_PREFIX: str = ".minecraft-worlds-cache-"
CACHE_TEMP_SUFFIX: str = ".tmp"
DEFAULT_FRESHNESS_SECONDS: int = 300
