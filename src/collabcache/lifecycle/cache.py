"""In-memory identifier to path mapping shared by lifecycle operations."""

from __future__ import annotations

import threading
from collections.abc import Iterable
from pathlib import Path

from collabcache.exceptions import ProjectNotFoundError
from collabcache.types import CacheEntry


class ProjectCache:
    """Lock-guarded mapping from project identifier to project directory.

    Holds only the entries of the most recent scan. Every public method runs
    as one critical section, so readers never see a half-replaced table and
    two ``take`` calls for the same identifier cannot both succeed.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._paths: dict[str, Path] = {}

    def replace_all(self, entries: Iterable[CacheEntry]) -> None:
        """Discard every existing entry and install *entries*.

        Duplicate identifiers keep the last path given.
        """
        fresh = dict(entries)
        with self._lock:
            self._paths = fresh

    def resolve(self, identifier: str) -> Path:
        with self._lock:
            path = self._paths.get(identifier)
        if path is None:
            raise ProjectNotFoundError(identifier)
        return path

    def take(self, identifier: str) -> Path:
        """Remove and return the path for *identifier*."""
        with self._lock:
            path = self._paths.pop(identifier, None)
        if path is None:
            raise ProjectNotFoundError(identifier)
        return path

    def identifiers(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._paths)

    def __contains__(self, identifier: object) -> bool:
        with self._lock:
            return identifier in self._paths

    def __len__(self) -> int:
        with self._lock:
            return len(self._paths)
