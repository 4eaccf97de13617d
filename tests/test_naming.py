"""Tests for backup naming helpers."""

from __future__ import annotations

from datetime import datetime

import pytest

from mcbackup.utils import sanitize_world_name, session_timestamp


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("My Survival World", "My-Survival-World"),
        ("  §6Gold -- Rush!!  ", "6Gold-Rush"),
        ("already-safe", "already-safe"),
        ("日本語", "unnamed-world"),
        ("", "unnamed-world"),
    ],
)
def test_sanitize_world_name(raw: str, expected: str) -> None:
    assert sanitize_world_name(raw) == expected


def test_session_timestamp_uses_twelve_hour_clock() -> None:
    assert session_timestamp(datetime(2024, 1, 15, 14, 30, 45)) == "2024-01-15__02-30-45-PM"
    assert session_timestamp(datetime(2024, 1, 15, 0, 5, 9)) == "2024-01-15__12-05-09-AM"
