"""CLI entrypoint for mcbackup."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from mcbackup import __version__
from mcbackup.bridge import AdbBridge
from mcbackup.catalog import CatalogCache
from mcbackup.cli.handlers import (
    handle_backup,
    handle_backup_all,
    handle_clear_cache,
    handle_list,
    handle_where,
)
from mcbackup.config import BackupConfig, load_config
from mcbackup.constants.backup import BACKUP_MODE_FOLDER, VALID_BACKUP_MODES
from mcbackup.constants.branding import CLI_DESCRIPTION
from mcbackup.constants.cli import EXIT_FAILURE, EXIT_NO_WORLDS, EXIT_USAGE
from mcbackup.constants.reporting import OUTPUT_FORMAT_TEXT, VALID_OUTPUT_FORMATS
from mcbackup.exceptions import (
    BridgeError,
    ConfigError,
    McBackupError,
    NoWorldsFoundError,
    SelectionError,
)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="mcbackup",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    listing = subparsers.add_parser("list", help="List worlds on the device, most recently played first")
    _add_common_arguments(listing)
    listing.add_argument("--refresh", action="store_true", help="Ignore the cached world list")
    listing.add_argument(
        "--format",
        choices=sorted(VALID_OUTPUT_FORMATS),
        default=OUTPUT_FORMAT_TEXT,
        help="Output format: text (default) or json",
    )

    backup = subparsers.add_parser("backup", help="Back up selected worlds")
    _add_common_arguments(backup)
    backup.add_argument(
        "-w",
        "--world",
        action="append",
        required=True,
        help="World id or name to back up (repeat flag for multiple worlds)",
    )
    _add_mode_argument(backup)

    backup_all = subparsers.add_parser("backup-all", help="Rediscover and back up every world")
    _add_common_arguments(backup_all)
    _add_mode_argument(backup_all)

    clear_cache = subparsers.add_parser("clear-cache", help="Delete the cached world list")
    _add_common_arguments(clear_cache)

    where = subparsers.add_parser("where", help="Show the backup folder")
    _add_common_arguments(where)

    return parser


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    parser.add_argument("--adb", default=None, help="Path to the adb binary")
    parser.add_argument("-b", "--backup-dir", type=Path, default=None, help="Backup folder root")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")


def _add_mode_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-m",
        "--mode",
        choices=sorted(VALID_BACKUP_MODES),
        default=BACKUP_MODE_FOLDER,
        help="folder (full world directory, default) or mcworld (zipped .mcworld file)",
    )


def resolve_config(args: argparse.Namespace) -> BackupConfig:
    """Load config from file and apply command-line overrides."""
    config = load_config(Path.cwd(), args.config)
    if args.adb:
        config = replace(config, adb_bin=args.adb)
    if args.backup_dir is not None:
        config = replace(config, backup_dir=args.backup_dir.expanduser())
    return config


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING if args.quiet else logging.INFO, format="%(levelname)s %(message)s")

    try:
        config = resolve_config(args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    color = not args.no_color and sys.stdout.isatty()
    cache = CatalogCache(config.cache_file, freshness_seconds=config.cache_ttl_seconds)

    if args.command == "clear-cache":
        return handle_clear_cache(config=config, cache=cache, color=color)
    if args.command == "where":
        return handle_where(config=config)

    handlers = {
        "list": handle_list,
        "backup": handle_backup,
        "backup-all": handle_backup_all,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.error(f"Unsupported command: {args.command}")

    bridge = AdbBridge(config.adb_bin)
    try:
        return handler(args, config=config, bridge=bridge, cache=cache, color=color)
    except NoWorldsFoundError as exc:
        print(f"Warning: {exc}", file=sys.stderr)
        print("Make sure Minecraft is installed and has worlds.", file=sys.stderr)
        return EXIT_NO_WORLDS
    except SelectionError as exc:
        print(f"Selection error: {exc}", file=sys.stderr)
        return EXIT_USAGE
    except BridgeError as exc:
        print(f"Device error: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    except McBackupError as exc:
        print(f"Backup error: {exc}", file=sys.stderr)
        return EXIT_FAILURE


if __name__ == "__main__":
    raise SystemExit(main())
