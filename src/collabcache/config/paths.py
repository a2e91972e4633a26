"""Platform-specific default for the base storage directory."""

from __future__ import annotations

from pathlib import Path

from platformdirs import PlatformDirs

from collabcache.constants.config import DEFAULT_VENDOR_SUBPATH
from collabcache.exceptions import ConfigError


def default_base_dir() -> Path:
    """Return ``<local data dir>/Autodesk/Revit`` for the current platform.

    Raises ``ConfigError`` when the local data directory cannot be determined,
    which is fatal at startup.
    """
    try:
        local_data = PlatformDirs(roaming=False).user_data_path
    except (KeyError, RuntimeError, OSError) as exc:
        raise ConfigError(f"Failed to resolve the local data directory: {exc}") from exc
    return local_data.joinpath(*DEFAULT_VENDOR_SUBPATH)
