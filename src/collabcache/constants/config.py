"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "collabcache.yaml"
BASE_DIR_ENV_VAR: str = "COLLABCACHE_BASE_DIR"

# Inclusive bounds of the product release range probed on every scan.
DEFAULT_MIN_VERSION: int = 2018
DEFAULT_MAX_VERSION: int = 2038

DEFAULT_PRODUCT_PREFIX: str = "Autodesk Revit"
DEFAULT_CACHE_SUBDIR_NAME: str = "CollaborationCache"

# Joined onto the platform local data directory to form the default base dir.
DEFAULT_VENDOR_SUBPATH: tuple[str, ...] = ("Autodesk", "Revit")
