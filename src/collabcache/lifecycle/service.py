"""List, reveal, open-version-root, and delete operations.

Every operation that targets a single project goes through the injected
``ProjectCache``. Callers identify projects only by the identifiers returned
from ``list_projects``; raw paths are never accepted.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from collabcache.config import CollabCacheConfig
from collabcache.exceptions import DeletionError
from collabcache.lifecycle.cache import ProjectCache
from collabcache.lifecycle.opener import Opener, SystemOpener
from collabcache.model import ScanResult
from collabcache.scanner.discovery import version_root
from collabcache.scanner.orchestrator import scan_projects

logger = logging.getLogger(__name__)


class ProjectService:
    """Lifecycle operations bound to one configuration and one project cache."""

    def __init__(
        self,
        config: CollabCacheConfig,
        *,
        cache: ProjectCache | None = None,
        opener: Opener | None = None,
    ) -> None:
        self._config = config
        self._cache = cache if cache is not None else ProjectCache()
        self._opener = opener if opener is not None else SystemOpener()

    @property
    def config(self) -> CollabCacheConfig:
        return self._config

    @property
    def cache(self) -> ProjectCache:
        return self._cache

    def list_projects(self) -> ScanResult:
        """Run a full scan and replace the cache with its entries."""
        result = scan_projects(
            self._config.base_dir,
            self._config.versions,
            product_prefix=self._config.product_prefix,
            cache_subdir_name=self._config.cache_subdir_name,
        )
        self._cache.replace_all(result.entries)
        logger.debug("Cache now holds %d project(s)", len(result.entries))
        return result

    def reveal_project(self, identifier: str) -> Path:
        """Show the cached project directory in the file explorer."""
        path = self._cache.resolve(identifier)
        self._opener.open_path(path)
        return path

    def version_root(self, version: int) -> Path:
        return version_root(
            self._config.base_dir,
            version,
            product_prefix=self._config.product_prefix,
            cache_subdir_name=self._config.cache_subdir_name,
        )

    def open_version_root(self, version: int) -> Path:
        """Show the version-scoped cache directory in the file explorer.

        The path is rebuilt from the configured root and *version*, so this
        does not need the cache.
        """
        path = self.version_root(version)
        self._opener.open_path(path)
        return path

    def delete_project(self, identifier: str) -> Path:
        """Evict *identifier* from the cache and delete its directory tree.

        A symlinked project folder is removed as a link; its target is left
        alone. The entry stays evicted even if deletion fails part way.
        """
        path = self._cache.take(identifier)
        try:
            if path.is_symlink():
                path.unlink()
            else:
                shutil.rmtree(path)
        except OSError as exc:
            error = DeletionError(path, exc)
            logger.error("%s", error)
            raise error from exc
        logger.info("Successfully deleted directory: %s", path)
        return path
