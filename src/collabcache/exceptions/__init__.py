"""Shared exception hierarchy for collabcache."""

from __future__ import annotations

from .base import CollabCacheError
from .config import ConfigError
from .lifecycle import DeletionError, OpenerError, ProjectNotFoundError

__all__ = [
    "CollabCacheError",
    "ConfigError",
    "DeletionError",
    "OpenerError",
    "ProjectNotFoundError",
]
