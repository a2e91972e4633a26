"""Configuration loading, validation, and base directory resolution.

This package facade re-exports all public names so callers can use
``from collabcache.config import ...``.
"""

from __future__ import annotations

from collabcache.config.loader import load_config
from collabcache.config.model import CollabCacheConfig
from collabcache.config.paths import default_base_dir
from collabcache.config.validator import validate_config_file

__all__ = [
    "CollabCacheConfig",
    "default_base_dir",
    "load_config",
    "validate_config_file",
]
