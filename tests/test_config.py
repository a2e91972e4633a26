"""Tests for configuration loading and base directory resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from collabcache.config import CollabCacheConfig, default_base_dir, load_config
from collabcache.constants.config import (
    BASE_DIR_ENV_VAR,
    DEFAULT_CACHE_SUBDIR_NAME,
    DEFAULT_MAX_VERSION,
    DEFAULT_MIN_VERSION,
    DEFAULT_PRODUCT_PREFIX,
)
from collabcache.exceptions import ConfigError


def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    loaded = load_config(search_dir=tmp_path, base_dir=tmp_path, environ={})

    assert loaded.base_dir == tmp_path.resolve()
    assert loaded.min_version == DEFAULT_MIN_VERSION
    assert loaded.max_version == DEFAULT_MAX_VERSION
    assert loaded.product_prefix == DEFAULT_PRODUCT_PREFIX
    assert loaded.cache_subdir_name == DEFAULT_CACHE_SUBDIR_NAME


def test_versions_range_is_inclusive(tmp_path: Path) -> None:
    config = CollabCacheConfig(base_dir=tmp_path, min_version=2020, max_version=2022)

    assert list(config.versions) == [2020, 2021, 2022]


def test_load_config_reads_yaml_file(tmp_path: Path) -> None:
    (tmp_path / "collabcache.yaml").write_text(
        "base_dir: cache-root\nmin_version: 2020\nmax_version: 2025\nproduct_prefix: Revit\n",
        encoding="utf-8",
    )

    loaded = load_config(search_dir=tmp_path, environ={})

    assert loaded.base_dir == (tmp_path / "cache-root").resolve()
    assert (loaded.min_version, loaded.max_version) == (2020, 2025)
    assert loaded.product_prefix == "Revit"


def test_environment_overrides_file(tmp_path: Path) -> None:
    (tmp_path / "collabcache.yaml").write_text("base_dir: from-file\n", encoding="utf-8")

    loaded = load_config(search_dir=tmp_path, environ={BASE_DIR_ENV_VAR: str(tmp_path / "from-env")})

    assert loaded.base_dir == (tmp_path / "from-env").resolve()


def test_explicit_base_dir_overrides_environment(tmp_path: Path) -> None:
    loaded = load_config(
        search_dir=tmp_path,
        base_dir=tmp_path / "from-cli",
        environ={BASE_DIR_ENV_VAR: str(tmp_path / "from-env")},
    )

    assert loaded.base_dir == (tmp_path / "from-cli").resolve()


def test_missing_base_dir_falls_back_to_platform_default(tmp_path: Path) -> None:
    loaded = load_config(search_dir=tmp_path, environ={})

    assert loaded.base_dir == default_base_dir()
    assert loaded.base_dir.parts[-2:] == ("Autodesk", "Revit")


def test_explicit_config_path_must_exist(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.yaml", environ={})


@pytest.mark.parametrize(
    ("yaml_content", "expected_match"),
    [
        ("min_version: true\n", "min_version"),
        ("max_version: '2024'\n", "max_version"),
        ("min_version: -1\n", "min_version"),
        ("product_prefix: ''\n", "product_prefix"),
        ("cache_subdir_name: 12\n", "cache_subdir_name"),
        ("min_version: 2030\nmax_version: 2020\n", "min_version"),
        ("- just\n- a list\n", "mapping"),
        ("min_version: [unclosed\n", "Invalid YAML"),
    ],
    ids=[
        "bool_version",
        "string_version",
        "negative_version",
        "empty_prefix",
        "non_string_subdir",
        "inverted_range",
        "not_a_mapping",
        "broken_yaml",
    ],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, yaml_content: str, expected_match: str) -> None:
    config_path = tmp_path / "collabcache.yaml"
    config_path.write_text(yaml_content, encoding="utf-8")

    with pytest.raises(ConfigError, match=expected_match):
        load_config(config_path, base_dir=tmp_path, environ={})


def test_empty_config_file_uses_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "collabcache.yaml"
    config_path.write_text("", encoding="utf-8")

    loaded = load_config(config_path, base_dir=tmp_path, environ={})

    assert loaded.min_version == DEFAULT_MIN_VERSION
