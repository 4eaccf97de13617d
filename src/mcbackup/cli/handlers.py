"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import sys

from mcbackup.backup import backup_all, backup_worlds, load_catalog, select_entries
from mcbackup.bridge import DeviceBridge
from mcbackup.catalog import CatalogCache
from mcbackup.config import BackupConfig
from mcbackup.constants.cli import EXIT_FAILURE, EXIT_OK, EXIT_USAGE
from mcbackup.constants.reporting import OUTPUT_FORMAT_JSON
from mcbackup.exceptions import CacheWriteError
from mcbackup.model import BackupReport
from mcbackup.reporting import render_backup_report, render_cache_clear, render_catalog, render_catalog_json


def handle_list(
    args: argparse.Namespace,
    *,
    config: BackupConfig,
    bridge: DeviceBridge,
    cache: CatalogCache,
    color: bool,
) -> int:
    """Show discovered worlds, served from cache while it is fresh."""
    bridge.ensure_device()
    catalog = load_catalog(bridge=bridge, cache=cache, roots=config.world_roots, refresh=args.refresh)
    if args.format == OUTPUT_FORMAT_JSON:
        print(render_catalog_json(catalog))
    else:
        print(render_catalog(catalog, color=color))
    return EXIT_OK


def handle_backup(
    args: argparse.Namespace,
    *,
    config: BackupConfig,
    bridge: DeviceBridge,
    cache: CatalogCache,
    color: bool,
) -> int:
    """Back up the worlds named by ``--world`` selectors."""
    bridge.ensure_device()
    catalog = load_catalog(bridge=bridge, cache=cache, roots=config.world_roots)
    entries = select_entries(catalog, args.world)
    report = backup_worlds(
        bridge=bridge,
        catalog=catalog,
        entries=entries,
        roots=config.world_roots,
        backup_root=config.backup_dir,
        mode=args.mode,
    )
    return _finish(report, color=color)


def handle_backup_all(
    args: argparse.Namespace,
    *,
    config: BackupConfig,
    bridge: DeviceBridge,
    cache: CatalogCache,
    color: bool,
) -> int:
    """Rediscover every world and back them all up."""
    bridge.ensure_device()
    report = backup_all(
        bridge=bridge,
        cache=cache,
        roots=config.world_roots,
        backup_root=config.backup_dir,
        mode=args.mode,
    )
    return _finish(report, color=color)


def handle_clear_cache(*, config: BackupConfig, cache: CatalogCache, color: bool) -> int:
    try:
        result = cache.clear()
    except CacheWriteError as exc:
        print(f"Cache error: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    print(render_cache_clear(result, freshness_seconds=config.cache_ttl_seconds, color=color))
    return EXIT_OK


def handle_where(*, config: BackupConfig) -> int:
    """Print the backup folder, creating it when missing."""
    try:
        config.backup_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        print(f"Configuration error: cannot create backup folder {config.backup_dir} ({exc})", file=sys.stderr)
        return EXIT_USAGE
    print(f"Backup folder: {config.backup_dir}")
    return EXIT_OK


def _finish(report: BackupReport, *, color: bool) -> int:
    print(render_backup_report(report, color=color))
    return EXIT_OK if report.ok else EXIT_FAILURE
