"""Cache-root scanning package."""

from __future__ import annotations

from typing import Any

__all__ = ["discover_projects", "scan_projects", "version_root"]


def __getattr__(name: str) -> Any:
    """Lazily expose scanner APIs to avoid import cycles at package import time."""
    if name in ("discover_projects", "scan_projects"):
        from . import orchestrator

        return getattr(orchestrator, name)
    if name == "version_root":
        from .discovery import version_root

        return version_root
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
