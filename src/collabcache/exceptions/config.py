"""Configuration-related exceptions."""

from __future__ import annotations

from collabcache.exceptions.base import CollabCacheError


class ConfigError(CollabCacheError, ValueError):
    """Raised when configuration is invalid or the base directory cannot be resolved."""
