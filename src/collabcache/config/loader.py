"""Config loading and normalization."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from collabcache.config.model import CollabCacheConfig
from collabcache.config.paths import default_base_dir
from collabcache.constants.config import (
    BASE_DIR_ENV_VAR,
    CONFIG_FILENAME,
    DEFAULT_CACHE_SUBDIR_NAME,
    DEFAULT_MAX_VERSION,
    DEFAULT_MIN_VERSION,
    DEFAULT_PRODUCT_PREFIX,
)
from collabcache.exceptions import ConfigError


def load_config(
    config_path: Path | None = None,
    *,
    search_dir: Path | None = None,
    base_dir: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> CollabCacheConfig:
    """Load config from ``collabcache.yaml`` or an explicit path.

    ``base_dir`` precedence: the ``base_dir`` argument, then the
    ``COLLABCACHE_BASE_DIR`` environment variable, then the file, then the
    platform default.
    """
    env = os.environ if environ is None else environ
    search_dir = (search_dir or Path.cwd()).resolve()
    path = config_path.resolve() if config_path else (search_dir / CONFIG_FILENAME)
    raw = _read_config_mapping(path, explicit=config_path is not None)

    min_version = _ensure_int(raw.get("min_version", DEFAULT_MIN_VERSION), "min_version")
    max_version = _ensure_int(raw.get("max_version", DEFAULT_MAX_VERSION), "max_version")
    if min_version > max_version:
        raise ConfigError(f"min_version ({min_version}) must not be greater than max_version ({max_version})")

    return CollabCacheConfig(
        base_dir=_resolve_base_dir(raw, path, override=base_dir, env=env),
        min_version=min_version,
        max_version=max_version,
        product_prefix=_ensure_non_empty_string(
            raw.get("product_prefix", DEFAULT_PRODUCT_PREFIX),
            "product_prefix",
        ),
        cache_subdir_name=_ensure_non_empty_string(
            raw.get("cache_subdir_name", DEFAULT_CACHE_SUBDIR_NAME),
            "cache_subdir_name",
        ),
    )


def _read_config_mapping(path: Path, *, explicit: bool) -> dict[str, Any]:
    if not path.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {path}")
        return {}

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read config file at {path}: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")
    return raw


def _resolve_base_dir(
    raw: dict[str, Any],
    config_file: Path,
    *,
    override: Path | None,
    env: Mapping[str, str],
) -> Path:
    if override is not None:
        return override.expanduser().resolve()

    from_env = env.get(BASE_DIR_ENV_VAR, "").strip()
    if from_env:
        return Path(from_env).expanduser().resolve()

    if "base_dir" in raw:
        configured = Path(_ensure_non_empty_string(raw["base_dir"], "base_dir")).expanduser()
        if not configured.is_absolute():
            configured = config_file.parent / configured
        return configured.resolve()

    return default_base_dir()


def _ensure_int(value: Any, key_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{key_name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ConfigError(f"{key_name} must be non-negative, got {value}")
    return value


def _ensure_non_empty_string(value: Any, key_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{key_name} must be a string, got {type(value).__name__}")
    if not value.strip():
        raise ConfigError(f"{key_name} must not be empty")
    return value.strip()
