from __future__ import annotations

import argparse
import sys

from loguru import logger

from trashcan.app.console import ConsoleConfirmer, ConsoleObserver, print_listing, report
from trashcan.core.errors import TrashError
from trashcan.core.services.interfaces import OperationResult
from trashcan.infrastructure.logging import find_latest_log_file, init_logging
from trashcan.infrastructure.settings import load_config, load_settings
from trashcan.infrastructure.trash_service import TrashService


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trashcan", description="Recoverable two-stage file deletion."
    )
    parser.add_argument("--settings", help="Path to settings.json")
    parser.add_argument("--log-dir", help="Directory for log files")
    parser.add_argument("-y", "--yes", action="store_true", help="Answer yes to confirmations")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log to stderr as well")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("delete", help="Trash paths; purge paths already in the trash")
    p.add_argument("paths", nargs="+")
    p = sub.add_parser("trash", help="Move paths into the trash")
    p.add_argument("paths", nargs="+")
    p = sub.add_parser("purge", help="Permanently delete paths")
    p.add_argument("paths", nargs="+")
    p = sub.add_parser("restore", help="Move trashed entries back")
    p.add_argument("paths", nargs="+")
    p.add_argument("--overwrite", action="store_true", help="Replace existing destinations")
    p = sub.add_parser("move", help="Move paths into a directory")
    p.add_argument("paths", nargs="+")
    p.add_argument("destination")
    p = sub.add_parser("list", help="List a trash directory")
    p.add_argument("path", nargs="?", help="Any path on the volume (default: home root)")
    p = sub.add_parser("empty", help="Permanently delete everything in a trash directory")
    p.add_argument("path", nargs="?", help="Any path on the volume (default: home root)")
    sub.add_parser("log", help="Print the path of the latest log file")
    return parser


def _run(service: TrashService, args: argparse.Namespace) -> OperationResult | None:
    if args.command == "delete":
        return service.delete(args.paths)
    if args.command == "trash":
        return service.trash(args.paths)
    if args.command == "purge":
        return service.purge(args.paths)
    if args.command == "restore":
        return service.restore(args.paths, overwrite=args.overwrite)
    if args.command == "move":
        return service.move(args.paths, args.destination)
    if args.command == "empty":
        return service.empty_trash(args.path)
    if args.command == "list":
        print_listing(service.list_trash(args.path))
    return None


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    init_logging(args.log_dir, verbose=args.verbose)

    if args.command == "log":
        latest = find_latest_log_file(args.log_dir)
        if latest is None:
            print("no log file yet", file=sys.stderr)
            return 1
        print(latest)
        return 0

    try:
        config = load_config(load_settings(args.settings))
    except (OSError, ValueError) as ex:
        logger.error("Invalid settings: {}", ex)
        print(f"trashcan: invalid settings: {ex}", file=sys.stderr)
        return 2

    service = TrashService(
        config,
        observer=ConsoleObserver(),
        confirmer=ConsoleConfirmer(assume_yes=args.yes),
    )
    try:
        result = _run(service, args)
    except TrashError as ex:
        print(f"trashcan: {ex}", file=sys.stderr)
        return 2
    if result is None:
        return 0
    report(result)
    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
