"""Errors raised by single-project lifecycle operations."""

from __future__ import annotations

from pathlib import Path

from collabcache.exceptions.base import CollabCacheError


class ProjectNotFoundError(CollabCacheError, LookupError):
    """Raised when an identifier is not present in the project cache.

    This is a legitimate outcome rather than a fault: the caller may hold an
    identifier from a stale listing, or the project was already deleted.
    """

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Project with ID '{identifier}' not found in cache")
        self.identifier = identifier


class OpenerError(CollabCacheError):
    """Raised when the platform file explorer cannot show a path."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        super().__init__(f"Failed to open {path}: {cause}")
        self.path = path
        self.cause = cause


class DeletionError(CollabCacheError):
    """Raised when a project directory cannot be removed completely."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        super().__init__(f"Failed to delete directory {path}: {cause}")
        self.path = path
        self.cause = cause
