"""Tests for the end-to-end cache-root scan."""

from __future__ import annotations

import os
import time
from pathlib import Path

import pytest

from collabcache.constants.discovery import SECONDS_PER_DAY
from collabcache.scanner import discover_projects, scan_projects

VERSIONS = range(2018, 2039)
NAMING = {"product_prefix": "Autodesk Revit", "cache_subdir_name": "CollaborationCache"}


def _scan(base_dir: Path, now: float | None = None):
    return scan_projects(base_dir, VERSIONS, now=now, **NAMING)


def test_single_project_scenario(base_dir: Path, make_project) -> None:
    now = time.time()
    project_dir = make_project(
        2024,
        "jdoe",
        "Tower_Central",
        {"model.rvt": 100, "backup/model.0001.rvt": 250},
        mtimes={"model.rvt": now - SECONDS_PER_DAY - 60, "backup/model.0001.rvt": now - 60},
    )

    result = _scan(base_dir, now=now)

    assert result.total_projects == 1
    summary = result.projects[0]
    assert summary.total_size_bytes == 350
    assert summary.age_days == 0
    assert summary.version == 2024
    assert summary.display_name == "Tower_Central"
    assert summary.identifier == str(project_dir.absolute())
    assert result.entries == ((summary.identifier, project_dir.absolute()),)
    assert result.versions_scanned == (2024,)


def test_empty_root_yields_no_projects(base_dir: Path) -> None:
    result = _scan(base_dir)

    assert result.projects == ()
    assert result.entries == ()
    assert result.versions_scanned == ()


def test_missing_root_yields_no_projects(tmp_path: Path) -> None:
    result = _scan(tmp_path / "does-not-exist")

    assert result.projects == ()


def test_discovery_order_is_version_ascending(base_dir: Path, make_project) -> None:
    make_project(2025, "bob", "B", {"f": 1})
    make_project(2019, "amy", "A2", {"f": 1})
    make_project(2019, "amy", "A1", {"f": 1})
    make_project(2022, "zed", "Z", {"f": 1})

    result = _scan(base_dir)

    assert [(p.version, p.display_name) for p in result.projects] == [
        (2019, "A1"),
        (2019, "A2"),
        (2022, "Z"),
        (2025, "B"),
    ]
    assert [entry[0] for entry in result.entries] == [p.identifier for p in result.projects]


def test_versions_outside_range_are_ignored(base_dir: Path, make_project) -> None:
    make_project(2017, "old", "Legacy", {"f": 1})
    make_project(2039, "new", "Future", {"f": 1})
    make_project(2030, "now", "Current", {"f": 1})

    result = _scan(base_dir)

    assert [p.display_name for p in result.projects] == ["Current"]


def test_non_directory_entries_are_not_projects(base_dir: Path, make_project) -> None:
    project_dir = make_project(2024, "jdoe", "Real", {"f": 3})
    vers_dir = project_dir.parent.parent
    (vers_dir / "stray.txt").write_text("x", encoding="utf-8")
    (project_dir.parent / "loose-file.rvt").write_text("x", encoding="utf-8")

    result = _scan(base_dir)

    assert [p.display_name for p in result.projects] == ["Real"]


def test_same_project_name_under_two_users_gets_distinct_identifiers(base_dir: Path, make_project) -> None:
    make_project(2024, "alice", "Tower", {"f": 1})
    make_project(2024, "bob", "Tower", {"f": 2})

    result = _scan(base_dir)

    assert [p.display_name for p in result.projects] == ["Tower", "Tower"]
    assert len({p.identifier for p in result.projects}) == 2


def test_project_without_files_has_zero_size_and_age(base_dir: Path, make_project) -> None:
    project_dir = make_project(2024, "jdoe", "Empty")
    (project_dir / "nested" / "deeper").mkdir(parents=True)

    result = _scan(base_dir)

    assert result.projects[0].total_size_bytes == 0
    assert result.projects[0].age_days == 0


def test_age_uses_newest_file(base_dir: Path, make_project) -> None:
    now = 1_800_000_000.0
    make_project(
        2021,
        "jdoe",
        "Stale",
        {"a.rvt": 1, "b/c.rvt": 1},
        mtimes={"a.rvt": now - SECONDS_PER_DAY * 40, "b/c.rvt": now - SECONDS_PER_DAY * 12.5},
    )

    result = _scan(base_dir, now=now)

    assert result.projects[0].age_days == 12


def test_unreadable_user_folder_does_not_hide_others(
    base_dir: Path,
    make_project,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    broken = make_project(2024, "broken-user", "Hidden", {"f": 1}).parent
    make_project(2024, "ok-user", "Visible", {"f": 9})
    real_scandir = os.scandir

    def _scandir(path: object = ".") -> object:
        if os.fspath(path) == str(broken):
            raise PermissionError(13, "Permission denied", str(broken))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", _scandir)

    result = _scan(base_dir)

    assert [p.display_name for p in result.projects] == ["Visible"]
    assert result.skipped_entries == 1


def test_repeated_scans_are_identical_without_changes(base_dir: Path, make_project) -> None:
    make_project(2024, "jdoe", "One", {"a": 10, "b/c": 20})
    make_project(2020, "jdoe", "Two", {"x": 5})
    now = time.time()

    first = _scan(base_dir, now=now)
    second = _scan(base_dir, now=now)
    later = _scan(base_dir, now=now + SECONDS_PER_DAY * 2)

    assert first.projects == second.projects
    for before, after in zip(first.projects, later.projects, strict=True):
        assert before.identifier == after.identifier
        assert before.total_size_bytes == after.total_size_bytes
        assert after.age_days >= before.age_days


def test_discover_projects_returns_parallel_lists(base_dir: Path, make_project) -> None:
    make_project(2024, "jdoe", "One", {"a": 1})
    make_project(2024, "jdoe", "Two", {"a": 1})

    summaries, pairs = discover_projects(base_dir, VERSIONS, **NAMING)

    assert isinstance(summaries, list)
    assert isinstance(pairs, list)
    assert [identifier for identifier, _ in pairs] == [s.identifier for s in summaries]
    assert all(path.name == s.display_name for (_, path), s in zip(pairs, summaries, strict=True))
