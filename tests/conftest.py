"""Shared pytest fixtures for building throwaway collaboration cache trees."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

import pytest

from collabcache.config import CollabCacheConfig
from collabcache.exceptions import OpenerError

ProjectFactory: TypeAlias = Callable[..., Path]


class RecordingOpener:
    """Opener double that records paths instead of launching a file explorer."""

    def __init__(self) -> None:
        self.opened: list[Path] = []
        self.fail_with: BaseException | None = None

    def open_path(self, path: Path) -> None:
        if self.fail_with is not None:
            raise OpenerError(path, self.fail_with)
        self.opened.append(path)


@pytest.fixture()
def base_dir(tmp_path: Path) -> Path:
    """Return an empty base storage directory."""
    root = tmp_path / "Autodesk" / "Revit"
    root.mkdir(parents=True)
    return root


@pytest.fixture()
def make_project(base_dir: Path) -> ProjectFactory:
    """Return a factory creating ``<base>/Autodesk Revit <v>/CollaborationCache/<user>/<project>``.

    ``files`` maps relative file paths to byte sizes. ``mtimes`` optionally
    maps the same relative paths to modification timestamps.
    """

    def _make(
        version: int,
        user: str,
        project: str,
        files: dict[str, int] | None = None,
        *,
        mtimes: dict[str, float] | None = None,
    ) -> Path:
        project_dir = base_dir / f"Autodesk Revit {version}" / "CollaborationCache" / user / project
        project_dir.mkdir(parents=True, exist_ok=True)
        for relative, size in (files or {}).items():
            file_path = project_dir / relative
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_bytes(b"x" * size)
            if mtimes and relative in mtimes:
                os.utime(file_path, (mtimes[relative], mtimes[relative]))
        return project_dir

    return _make


@pytest.fixture()
def config(base_dir: Path) -> CollabCacheConfig:
    """Return a config rooted at the temporary base directory."""
    return CollabCacheConfig(base_dir=base_dir)


@pytest.fixture()
def opener() -> RecordingOpener:
    return RecordingOpener()
