"""Version, user, and project folder discovery under the cache root."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def version_root(base_dir: Path, version: int, *, product_prefix: str, cache_subdir_name: str) -> Path:
    """Return ``<base_dir>/<product_prefix> <version>/<cache_subdir_name>``."""
    return base_dir / f"{product_prefix} {version}" / cache_subdir_name


def derive_identifier(project_dir: Path) -> str:
    """Return the opaque identifier for a project folder.

    The absolute path string is collision-free for distinct folders on one
    machine. It is only ever used as a cache key, never opened directly.
    """
    return str(project_dir.absolute())


def list_subdirectories(parent: Path) -> tuple[list[Path], int]:
    """List immediate child directories of *parent* in name order.

    Returns the directories and the number of entries skipped because they
    could not be read. A listing failure skips the whole parent. Plain files
    are ignored without counting as skipped.
    """
    try:
        with os.scandir(parent) as iterator:
            entries = list(iterator)
    except OSError as exc:
        logger.debug("Skipping unreadable directory %s: %s", parent, exc)
        return [], 1

    directories: list[Path] = []
    skipped = 0
    for entry in sorted(entries, key=lambda item: item.name):
        try:
            is_dir = entry.is_dir()
        except OSError as exc:
            logger.debug("Skipping unreadable entry %s: %s", entry.path, exc)
            skipped += 1
            continue
        if is_dir:
            directories.append(Path(entry.path))
    return directories, skipped
