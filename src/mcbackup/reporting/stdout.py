"""Human-readable stdout rendering for catalogs and backup runs."""

from __future__ import annotations

from datetime import datetime

from mcbackup.constants.branding import ASCII_LOGO_LINES
from mcbackup.constants.reporting import (
    ANSI_BOLD,
    ANSI_DIM,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    ANSI_YELLOW,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from mcbackup.model import BackupReport, CacheClearResult, Catalog


def _colorize(text: str, color: str, enabled: bool) -> str:
    return f"{color}{text}{ANSI_RESET}" if enabled else text


def format_age(seconds: float) -> str:
    """Render an age the way people say it: seconds, minutes, hours, or days."""
    age = max(int(seconds), 0)
    if age < SECONDS_PER_MINUTE:
        return f"{age} second(s)"
    if age < SECONDS_PER_HOUR:
        return f"{age // SECONDS_PER_MINUTE} minute(s)"
    if age < SECONDS_PER_DAY:
        return f"{age // SECONDS_PER_HOUR} hour(s)"
    return f"{age // SECONDS_PER_DAY} day(s)"


def render_catalog(catalog: Catalog, *, color: bool = False) -> str:
    """Numbered world listing, most recently played first."""
    lines = [_colorize(ASCII_LOGO_LINES[0], ANSI_BOLD, color), ""]
    if not catalog.entries:
        lines.append("No worlds found.")
        return "\n".join(lines)

    source = "cache" if catalog.source == "cache" else (catalog.root or "device")
    lines.append(f"{len(catalog.entries)} world(s) from {_colorize(source, ANSI_DIM, color)}")
    width = len(str(len(catalog.entries)))
    for index, entry in enumerate(catalog.entries, start=1):
        name = _colorize(entry.display_name, ANSI_BOLD, color)
        world_id = _colorize(f"({entry.world_id})", ANSI_DIM, color)
        lines.append(f"  {index:>{width}}. {name} {world_id}")
    return "\n".join(lines)


def render_backup_report(report: BackupReport, *, color: bool = False) -> str:
    if report.attempted == 0:
        return "Nothing to back up."

    lines: list[str] = []
    for outcome in report.succeeded:
        mark = _colorize("OK", ANSI_GREEN, color)
        lines.append(f"{mark}   {outcome.entry.display_name} -> {outcome.destination}")
    for failure in report.failed:
        mark = _colorize("FAIL", ANSI_RED, color)
        lines.append(f"{mark} {failure.entry.display_name}: {failure.message}")

    summary = f"{len(report.succeeded)} of {report.attempted} world(s) backed up"
    if report.failed:
        summary = _colorize(f"{summary}, {len(report.failed)} failed", ANSI_YELLOW, color)
    lines.extend(("", summary))
    return "\n".join(lines)


def render_cache_clear(result: CacheClearResult, *, freshness_seconds: float, color: bool = False) -> str:
    if not result.existed:
        return f"Cache file does not exist: {result.path}"

    lines = [f"Cache file: {result.path}"]
    if result.age_seconds is None or result.modified_at is None:
        lines.append(_colorize("Could not determine cache file age", ANSI_YELLOW, color))
    else:
        modified = datetime.fromtimestamp(result.modified_at)
        lines.append(f"Last modified: {modified:%Y-%m-%d %H:%M:%S}")
        lines.append(f"Age: {format_age(result.age_seconds)}")
        if result.age_seconds > freshness_seconds:
            lines.append(_colorize("Cache was already expired", ANSI_YELLOW, color))
    lines.append(_colorize("Cleared world list cache", ANSI_GREEN, color))
    return "\n".join(lines)
