"""Scan output entities."""

from __future__ import annotations

from dataclasses import dataclass

from collabcache.types import CacheEntry, JsonObject


@dataclass(frozen=True)
class ProjectSummary:
    """Aggregated size and recency metrics for one project folder."""

    identifier: str
    display_name: str
    version: int
    total_size_bytes: int
    age_days: int

    def to_dict(self) -> JsonObject:
        """Return the JSON representation handed to callers."""
        return {
            "id": self.identifier,
            "name": self.display_name,
            "version": self.version,
            "size_bytes": self.total_size_bytes,
            "age_days": self.age_days,
        }


@dataclass(frozen=True)
class ScanResult:
    """Projects and cache entries produced by one full scan.

    ``projects`` and ``entries`` are parallel: the i-th entry maps the i-th
    project's identifier to the directory it was measured from.
    """

    projects: tuple[ProjectSummary, ...]
    entries: tuple[CacheEntry, ...]
    versions_scanned: tuple[int, ...] = ()
    skipped_entries: int = 0
    duration_seconds: float = 0.0

    @property
    def total_projects(self) -> int:
        return len(self.projects)

    @property
    def total_size_bytes(self) -> int:
        return sum(project.total_size_bytes for project in self.projects)
