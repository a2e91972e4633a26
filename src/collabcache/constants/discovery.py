"""Constants for cache-root traversal and project aggregation."""

from __future__ import annotations

SECONDS_PER_DAY: int = 60 * 60 * 24
