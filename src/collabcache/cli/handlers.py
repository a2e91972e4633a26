"""CLI subcommand handlers.

The CLI is a short-lived process, so every project-targeting command runs a
fresh scan first. Identifiers are then accepted only if that scan put them in
the project cache.
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Callable

from collabcache.config import validate_config_file
from collabcache.exceptions import CollabCacheError
from collabcache.exceptions.validation import format_errors
from collabcache.lifecycle import ProjectService
from collabcache.model import ProjectSummary
from collabcache.reporting import StdoutReporter, build_listing_payload, write_listing_atomic
from collabcache.utils import format_age, format_size


def handle_list(args: argparse.Namespace, service: ProjectService) -> int:
    """Scan and print the project listing."""
    result = service.list_projects()
    base_dir = service.config.base_dir

    if args.json or args.output is not None:
        payload = build_listing_payload(result, base_dir, sort_key=args.sort)
        if args.output is not None:
            write_listing_atomic(path=args.output, payload=payload)
        if args.json:
            print(json.dumps(payload, indent=2, sort_keys=True))
            return 0

    use_color = not args.no_color and sys.stdout.isatty()
    reporter = StdoutReporter(result, base_dir, color=use_color, verbose=args.verbose, sort_key=args.sort)
    print(reporter.render())
    return 0


def handle_reveal(args: argparse.Namespace, service: ProjectService) -> int:
    service.list_projects()
    path = service.reveal_project(args.identifier)
    print(f"Opened {path}")
    return 0


def handle_open_version(args: argparse.Namespace, service: ProjectService) -> int:
    path = service.open_version_root(args.version_number)
    print(f"Opened {path}")
    return 0


def handle_delete(
    args: argparse.Namespace,
    service: ProjectService,
    *,
    read: Callable[[str], str] = input,
) -> int:
    """Delete each requested project, continuing past individual failures.

    Returns 1 if any identifier was not found or could not be deleted.
    """
    result = service.list_projects()
    by_identifier = {project.identifier: project for project in result.projects}

    if not args.yes:
        targets = [by_identifier[identifier] for identifier in args.identifiers if identifier in by_identifier]
        if targets:
            print(_describe_targets(targets))
            if not prompt_yes_no("Permanently delete these projects?", default=False, read=read, write=print):
                print("Nothing deleted.")
                return 0

    exit_code = 0
    for identifier in args.identifiers:
        try:
            path = service.delete_project(identifier)
        except CollabCacheError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            exit_code = 1
            continue
        print(f"Deleted {path}")
    return exit_code


def handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = validate_config_file(args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


def prompt_yes_no(
    question: str,
    *,
    default: bool,
    read: Callable[[str], str],
    write: Callable[[str], None],
) -> bool:
    """Ask a yes/no question until a recognizable answer is given."""
    suffix = "[Y/n]" if default else "[y/N]"
    while True:
        try:
            answer = read(f"{question} {suffix} ").strip().lower()
        except EOFError:
            return False
        if not answer:
            return default
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False
        write("Please answer 'y' or 'n'.")


def _describe_targets(targets: list[ProjectSummary]) -> str:
    total = sum(project.total_size_bytes for project in targets)
    lines = [
        f"  {project.version}  {project.display_name}  "
        f"{format_size(project.total_size_bytes)}  age {format_age(project.age_days)}"
        for project in targets
    ]
    lines.append(f"  Total: {len(targets)} project(s), {format_size(total)}")
    return "\n".join(lines)
