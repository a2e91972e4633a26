"""JSON listing payloads and atomic persistence."""

from __future__ import annotations

import json
import os
import tempfile
from collections.abc import Sequence
from contextlib import suppress
from pathlib import Path

from collabcache.constants.reporting import (
    LISTING_TEMP_PREFIX,
    LISTING_TEMP_SUFFIX,
    SCHEMA_VERSION,
    SORT_AGE,
    SORT_DISCOVERY,
    SORT_NAME,
    SORT_SIZE,
)
from collabcache.model import ProjectSummary, ScanResult
from collabcache.types import JsonObject


def sort_projects(projects: Sequence[ProjectSummary], sort_key: str = SORT_DISCOVERY) -> list[ProjectSummary]:
    """Order projects for display; ``discovery`` keeps scan order."""
    if sort_key == SORT_SIZE:
        return sorted(projects, key=lambda project: project.total_size_bytes, reverse=True)
    if sort_key == SORT_AGE:
        return sorted(projects, key=lambda project: project.age_days, reverse=True)
    if sort_key == SORT_NAME:
        return sorted(projects, key=lambda project: (project.display_name.lower(), project.version))
    return list(projects)


def build_listing_payload(
    result: ScanResult,
    base_dir: Path,
    *,
    sort_key: str = SORT_DISCOVERY,
) -> JsonObject:
    """Build the JSON document describing one scan."""
    return {
        "schema_version": SCHEMA_VERSION,
        "base_dir": str(base_dir),
        "versions_scanned": list(result.versions_scanned),
        "total_size_bytes": result.total_size_bytes,
        "projects": [project.to_dict() for project in sort_projects(result.projects, sort_key)],
    }


def write_listing_atomic(
    *,
    path: Path,
    payload: JsonObject,
    temp_prefix: str = LISTING_TEMP_PREFIX,
    temp_suffix: str = LISTING_TEMP_SUFFIX,
) -> None:
    """Persist *payload* by writing to a temp file in the target directory then renaming over *path*.

    Same write-then-replace pattern as the scan-cache JSON writer.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_name = handle.name
            json.dump(payload, handle, indent=2, sort_keys=True)
            handle.write("\n")
    except Exception:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise

    assert temp_name is not None
    os.replace(temp_name, path)
