"""CLI exit codes."""

from __future__ import annotations

EXIT_OK: int = 0
EXIT_FAILURE: int = 1
EXIT_USAGE: int = 2
EXIT_NO_WORLDS: int = 3
