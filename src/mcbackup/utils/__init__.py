"""Utility helpers."""

from .naming import sanitize_world_name, session_timestamp

__all__ = ["sanitize_world_name", "session_timestamp"]
