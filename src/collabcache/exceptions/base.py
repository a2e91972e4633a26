"""Root exception type."""

from __future__ import annotations


class CollabCacheError(Exception):
    """Base class for every error raised by collabcache."""
