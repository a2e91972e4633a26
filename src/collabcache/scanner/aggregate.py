"""Recursive size and recency aggregation for a single project folder."""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path

from collabcache.constants.discovery import SECONDS_PER_DAY

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectMetrics:
    """Totals gathered from walking one project subtree."""

    total_size_bytes: int
    newest_mtime: float | None
    skipped_entries: int = 0


def measure_project(project_dir: Path) -> ProjectMetrics:
    """Sum regular-file sizes and find the newest modification time under *project_dir*.

    Symlinks are not followed and, like directories and special files,
    contribute nothing. Entries whose metadata cannot be read are skipped
    without aborting the walk. The first file seen keeps the maximum on a tie.
    """
    total_size = 0
    newest_mtime: float | None = None
    skipped = 0

    def _on_walk_error(exc: OSError) -> None:
        nonlocal skipped
        skipped += 1
        logger.debug("Skipping unreadable directory %s: %s", exc.filename, exc)

    for dirpath, _dirnames, filenames in os.walk(project_dir, onerror=_on_walk_error, followlinks=False):
        for filename in filenames:
            file_path = os.path.join(dirpath, filename)
            try:
                info = os.lstat(file_path)
            except OSError as exc:
                skipped += 1
                logger.debug("Skipping unreadable entry %s: %s", file_path, exc)
                continue
            if not stat.S_ISREG(info.st_mode):
                continue

            total_size += info.st_size
            mtime = info.st_mtime
            if newest_mtime is None or mtime > newest_mtime:
                newest_mtime = mtime

    return ProjectMetrics(total_size_bytes=total_size, newest_mtime=newest_mtime, skipped_entries=skipped)


def age_in_days(newest_mtime: float | None, now: float) -> int:
    """Whole days between *newest_mtime* and *now*, truncated.

    Returns 0 when there is no timestamp or it lies in the future.
    """
    if newest_mtime is None or newest_mtime > now:
        return 0
    return int((now - newest_mtime) // SECONDS_PER_DAY)
