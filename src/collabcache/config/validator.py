"""Config file validation for collabcache."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from collabcache.constants.config import CONFIG_FILENAME, DEFAULT_MAX_VERSION, DEFAULT_MIN_VERSION
from collabcache.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    INT_CONFIG_KEYS,
    STRING_CONFIG_KEYS,
    UNKNOWN_KEY_SUGGESTION_CUTOFF,
)
from collabcache.exceptions.validation import ValidationError, sort_errors


def validate_config_file(
    config_path: Path | None = None,
    *,
    search_dir: Path | None = None,
) -> list[ValidationError]:
    """Validate a collabcache.yaml file and return all validation errors.

    Unlike ``load_config`` this never raises; every problem is collected so
    ``collabcache validate-config`` can report them in one pass.
    """
    errors: list[ValidationError] = []
    search_dir = (search_dir or Path.cwd()).resolve()
    path = config_path.resolve() if config_path else (search_dir / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_path is not None:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid YAML: {exc}",
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(str(k) for k in raw):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(key, ALLOWED_CONFIG_KEYS),
                )
            )

    for key in sorted(raw.keys() & INT_CONFIG_KEYS):
        val = raw[key]
        if isinstance(val, bool) or not isinstance(val, int) or val < 0:
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=key,
                    message=f"invalid type for `{key}`",
                    hint="expected a non-negative integer",
                )
            )

    for key in sorted(raw.keys() & STRING_CONFIG_KEYS):
        val = raw[key]
        if not isinstance(val, str):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=key,
                    message=f"invalid type for `{key}`",
                    hint="expected a string",
                )
            )
        elif not val.strip():
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    field=key,
                    message=f"`{key}` must not be empty",
                )
            )

    _validate_version_range(raw, path_str, errors)

    return sort_errors(errors)


def _validate_version_range(
    raw: dict[str, Any],
    path_str: str,
    errors: list[ValidationError],
) -> None:
    """Check ``min_version <= max_version`` once both bounds are well-typed."""
    low = raw.get("min_version", DEFAULT_MIN_VERSION)
    high = raw.get("max_version", DEFAULT_MAX_VERSION)
    for bound in (low, high):
        if isinstance(bound, bool) or not isinstance(bound, int):
            return
    if low > high:
        errors.append(
            ValidationError(
                code=CFG007,
                path=path_str,
                field="min_version",
                message=f"`min_version` ({low}) is greater than `max_version` ({high})",
                hint="the version range is inclusive and must not be empty",
            )
        )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=UNKNOWN_KEY_SUGGESTION_CUTOFF)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
