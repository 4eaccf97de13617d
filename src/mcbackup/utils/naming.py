"""Filesystem-safe naming helpers for backup output paths."""

from __future__ import annotations

from datetime import datetime

from mcbackup.constants.backup import (
    COLLAPSE_DASH_PATTERN,
    NON_ALNUM_PATTERN,
    SESSION_TIMESTAMP_FORMAT,
    WORLD_NAME_FALLBACK,
)


def sanitize_world_name(raw_name: str) -> str:
    """Replace every non-alphanumeric character with a dash, collapsing runs."""
    normalized = NON_ALNUM_PATTERN.sub("-", raw_name)
    normalized = COLLAPSE_DASH_PATTERN.sub("-", normalized)
    normalized = normalized.strip("-")
    return normalized or WORLD_NAME_FALLBACK


def session_timestamp(moment: datetime | None = None) -> str:
    """Format the per-backup session timestamp, e.g. ``2024-01-15__02-30-45-PM``."""
    return (moment or datetime.now()).strftime(SESSION_TIMESTAMP_FORMAT)
