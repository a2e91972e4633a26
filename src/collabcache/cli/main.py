"""CLI entrypoint for collabcache."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from collabcache import __version__
from collabcache.cli.handlers import (
    handle_delete,
    handle_list,
    handle_open_version,
    handle_reveal,
    handle_validate_config,
)
from collabcache.config import load_config, validate_config_file
from collabcache.constants.branding import CLI_DESCRIPTION
from collabcache.constants.reporting import SORT_DISCOVERY, VALID_SORT_KEYS
from collabcache.exceptions import CollabCacheError, ConfigError, ProjectNotFoundError
from collabcache.exceptions.validation import format_errors
from collabcache.lifecycle import ProjectService

_HANDLERS = {
    "list": handle_list,
    "reveal": handle_reveal,
    "open-version": handle_open_version,
    "delete": handle_delete,
}


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-c", "--config", type=Path, help="Explicit config file")
    common.add_argument(
        "-b",
        "--base-dir",
        type=Path,
        default=None,
        help="Base storage directory holding the per-version folders (overrides config and environment)",
    )
    common.add_argument("-v", "--verbose", action="store_true", help="Show diagnostics and skipped entry counts")

    parser = argparse.ArgumentParser(
        prog="collabcache",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_cmd = subparsers.add_parser("list", parents=[common], help="Scan the cache root and list projects")
    list_cmd.add_argument("--json", action="store_true", help="Print the listing as JSON instead of a table")
    list_cmd.add_argument("-o", "--output", type=Path, default=None, help="Also write the JSON listing to this file")
    list_cmd.add_argument(
        "-s",
        "--sort",
        choices=VALID_SORT_KEYS,
        default=SORT_DISCOVERY,
        help="Row order: discovery (default), size, age, or name",
    )
    list_cmd.add_argument("--no-color", action="store_true", help="Disable colored output")

    reveal = subparsers.add_parser("reveal", parents=[common], help="Show a project folder in the file explorer")
    reveal.add_argument("identifier", help="Project ID as printed by `collabcache list`")

    open_version = subparsers.add_parser(
        "open-version",
        parents=[common],
        help="Show a version's collaboration cache folder in the file explorer",
    )
    open_version.add_argument("version_number", type=int, metavar="VERSION", help="Product version, e.g. 2024")

    delete = subparsers.add_parser("delete", parents=[common], help="Permanently delete cached projects")
    delete.add_argument("identifiers", nargs="+", metavar="ID", help="Project ID(s) as printed by `collabcache list`")
    delete.add_argument("-y", "--yes", action="store_true", help="Do not ask for confirmation")

    subparsers.add_parser("validate-config", parents=[common], help="Validate configuration without scanning")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    if args.command == "validate-config":
        return handle_validate_config(args)

    handler = _HANDLERS.get(args.command)
    if handler is None:
        parser.error(f"Unsupported command: {args.command}")

    validation_errors = validate_config_file(args.config)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 2

    try:
        config = load_config(args.config, base_dir=args.base_dir)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    service = ProjectService(config)
    try:
        return handler(args, service)
    except ProjectNotFoundError as exc:
        print(f"Not found: {exc}", file=sys.stderr)
        return 1
    except CollabCacheError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
