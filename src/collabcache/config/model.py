"""Config data model for collabcache."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from collabcache.constants.config import (
    DEFAULT_CACHE_SUBDIR_NAME,
    DEFAULT_MAX_VERSION,
    DEFAULT_MIN_VERSION,
    DEFAULT_PRODUCT_PREFIX,
)


@dataclass(frozen=True)
class CollabCacheConfig:
    """Resolved configuration.

    ``base_dir`` holds one ``"<product_prefix> <version>"`` folder per
    installed release, each containing a ``cache_subdir_name`` folder.
    """

    base_dir: Path
    min_version: int = DEFAULT_MIN_VERSION
    max_version: int = DEFAULT_MAX_VERSION
    product_prefix: str = DEFAULT_PRODUCT_PREFIX
    cache_subdir_name: str = DEFAULT_CACHE_SUBDIR_NAME

    @property
    def versions(self) -> range:
        """Inclusive version range probed on every scan."""
        return range(self.min_version, self.max_version + 1)
