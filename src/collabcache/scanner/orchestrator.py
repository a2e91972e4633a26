"""End-to-end scan of the versioned cache root.

``scan_projects`` is the primary entry point. It accumulates everything
locally and never touches the project cache; publishing the entries is the
caller's job.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

from collabcache.model import ProjectSummary, ScanResult
from collabcache.scanner.aggregate import age_in_days, measure_project
from collabcache.scanner.discovery import derive_identifier, list_subdirectories, version_root
from collabcache.types import CacheEntry

logger = logging.getLogger(__name__)


def scan_projects(
    root: Path,
    versions: range,
    *,
    product_prefix: str,
    cache_subdir_name: str,
    now: float | None = None,
) -> ScanResult:
    """Scan every version-scoped directory in *versions* and summarize its projects.

    Missing version directories are skipped silently. Unreadable user folders,
    project folders, and walked entries are skipped one at a time so a single
    bad branch cannot hide the rest of the results.
    """
    started_at = time.perf_counter()
    projects: list[ProjectSummary] = []
    entries: list[CacheEntry] = []
    versions_scanned: list[int] = []
    skipped = 0

    for version in versions:
        vers_dir = version_root(
            root,
            version,
            product_prefix=product_prefix,
            cache_subdir_name=cache_subdir_name,
        )
        try:
            if not vers_dir.is_dir():
                continue
        except OSError as exc:
            logger.debug("Skipping unreadable version folder %s: %s", vers_dir, exc)
            skipped += 1
            continue
        versions_scanned.append(version)

        user_folders, user_skipped = list_subdirectories(vers_dir)
        skipped += user_skipped

        for user_folder in user_folders:
            project_folders, project_skipped = list_subdirectories(user_folder)
            skipped += project_skipped

            for project_dir in project_folders:
                metrics = measure_project(project_dir)
                skipped += metrics.skipped_entries
                # Age is relative to the clock at conversion time, not scan start.
                reference_time = now if now is not None else time.time()

                identifier = derive_identifier(project_dir)
                projects.append(
                    ProjectSummary(
                        identifier=identifier,
                        display_name=project_dir.name,
                        version=version,
                        total_size_bytes=metrics.total_size_bytes,
                        age_days=age_in_days(metrics.newest_mtime, reference_time),
                    )
                )
                entries.append((identifier, project_dir.absolute()))

    duration = time.perf_counter() - started_at
    logger.debug(
        "Scanned %d version folder(s): %d project(s), %d skipped entries in %.3fs",
        len(versions_scanned),
        len(projects),
        skipped,
        duration,
    )
    return ScanResult(
        projects=tuple(projects),
        entries=tuple(entries),
        versions_scanned=tuple(versions_scanned),
        skipped_entries=skipped,
        duration_seconds=duration,
    )


def discover_projects(
    root: Path,
    versions: range,
    *,
    product_prefix: str,
    cache_subdir_name: str,
    now: float | None = None,
) -> tuple[list[ProjectSummary], list[CacheEntry]]:
    """Return project summaries and the parallel ``(identifier, path)`` pairs."""
    result = scan_projects(
        root,
        versions,
        product_prefix=product_prefix,
        cache_subdir_name=cache_subdir_name,
        now=now,
    )
    return list(result.projects), list(result.entries)
