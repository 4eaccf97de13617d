"""Config loading and normalization for mcbackup."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from mcbackup.config.model import BackupConfig
from mcbackup.constants.bridge import DEFAULT_ADB_BIN
from mcbackup.constants.cache import DEFAULT_FRESHNESS_SECONDS
from mcbackup.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_BACKUP_DIR,
    DEFAULT_CACHE_FILE,
    DEFAULT_WORLD_ROOTS_CONFIG,
)
from mcbackup.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> BackupConfig:
    """Load and validate config from ``mcbackup.yaml`` in *root* or an explicit path."""
    root = root.resolve()
    path = config_path.expanduser().resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return BackupConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Unable to read config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        hints = [_suggest_key(key, ALLOWED_CONFIG_KEYS) for key in unknown]
        detail = "; ".join(f"{key} {hint}".strip() for key, hint in zip(unknown, hints, strict=True))
        raise ConfigError(f"Unknown config key(s) in {path}: {detail}")

    adb_bin = raw.get("adb_bin", DEFAULT_ADB_BIN)
    if not isinstance(adb_bin, str) or not adb_bin.strip():
        raise ConfigError("adb_bin must be a non-empty string")

    world_roots = tuple(
        root_path.strip().rstrip("/")
        for root_path in _ensure_string_list(raw.get("world_roots", list(DEFAULT_WORLD_ROOTS_CONFIG)), "world_roots")
        if root_path.strip()
    )
    if not world_roots:
        raise ConfigError("world_roots must contain at least one path")

    cache_ttl_seconds = raw.get("cache_ttl_seconds", DEFAULT_FRESHNESS_SECONDS)
    if isinstance(cache_ttl_seconds, bool) or not isinstance(cache_ttl_seconds, int) or cache_ttl_seconds <= 0:
        raise ConfigError("cache_ttl_seconds must be a positive integer")

    return BackupConfig(
        adb_bin=adb_bin.strip(),
        world_roots=world_roots,
        backup_dir=_ensure_path(raw.get("backup_dir"), "backup_dir", DEFAULT_BACKUP_DIR),
        cache_file=_ensure_path(raw.get("cache_file"), "cache_file", DEFAULT_CACHE_FILE),
        cache_ttl_seconds=cache_ttl_seconds,
    )


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)


def _ensure_path(value: Any, key_name: str, default: Path) -> Path:
    if value is None:
        return default.expanduser()
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key_name} must be a non-empty path string")
    return Path(value.strip()).expanduser()


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"(did you mean `{matches[0]}`?)"
    return ""
