"""Stdout reporter for project listings."""

from __future__ import annotations

from pathlib import Path

from collabcache.constants.branding import ASCII_LOGO_LINES, LISTING_TITLE
from collabcache.constants.reporting import (
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    ANSI_YELLOW,
    RECENT_AGE_DAYS,
    SORT_DISCOVERY,
    STALE_AGE_DAYS,
)
from collabcache.model import ScanResult
from collabcache.reporting.listing import sort_projects
from collabcache.utils import format_age, format_size


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def _color_age(age_days: int, text: str) -> str:
    if age_days >= STALE_AGE_DAYS:
        return _colorize(text, ANSI_RED)
    if age_days >= RECENT_AGE_DAYS:
        return _colorize(text, ANSI_YELLOW)
    return _colorize(text, ANSI_GREEN)


def _truncate(text: str, width: int) -> str:
    return text if len(text) <= width else text[: width - 1] + "…"


class StdoutReporter:
    """Formats a scan result as a human-readable table."""

    def __init__(
        self,
        result: ScanResult,
        base_dir: Path,
        *,
        color: bool = True,
        verbose: bool = False,
        sort_key: str = SORT_DISCOVERY,
    ) -> None:
        self._result = result
        self._base_dir = base_dir
        self._color = color
        self._verbose = verbose
        self._sort_key = sort_key

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections = [self._render_header(), self._render_table()]
        return "\n".join(section for section in sections if section)

    def _render_header(self) -> str:
        r = self._result
        sep = "  " + "─" * 38
        versions = ", ".join(str(version) for version in r.versions_scanned) or "none found"

        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {ASCII_LOGO_LINES[1]}",
            f"  {LISTING_TITLE}",
            sep,
            "",
            f"  Root        {self._base_dir}",
            f"  Versions    {versions}",
            f"  Projects    {r.total_projects}",
            f"  Total size  {format_size(r.total_size_bytes)}",
        ]
        if self._verbose:
            lines.append(f"  Skipped     {r.skipped_entries} unreadable entries")
            lines.append(f"  Duration    {r.duration_seconds:.3f}s")
        lines.append("")
        return "\n".join(lines)

    def _render_table(self) -> str:
        projects = sort_projects(self._result.projects, self._sort_key)
        if not projects:
            return ""

        w_ver = 7
        w_name = 30
        w_size = 10
        w_age = 10

        def _hline(left: str, mid: str, right: str) -> str:
            return (
                f"  {left}{'─' * (w_ver + 2)}{mid}{'─' * (w_name + 2)}"
                f"{mid}{'─' * (w_size + 2)}{mid}{'─' * (w_age + 2)}{right}"
            )

        hdr = (
            f"  │ {'Version':<{w_ver}} │ {'Project':<{w_name}}"
            f" │ {'Size':>{w_size}} │ {'Age':>{w_age}} │  ID"
        )
        lines = [_hline("┌", "┬", "┐"), hdr, _hline("├", "┼", "┤")]
        for project in projects:
            age_text = f"{format_age(project.age_days):>{w_age}}"
            if self._color:
                age_text = _color_age(project.age_days, age_text)
            lines.append(
                f"  │ {project.version:<{w_ver}} │ {_truncate(project.display_name, w_name):<{w_name}}"
                f" │ {format_size(project.total_size_bytes):>{w_size}} │ {age_text} │  {project.identifier}"
            )
        lines.append(_hline("└", "┴", "┘"))
        return "\n".join(lines)
