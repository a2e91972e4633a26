"""Stable validation error codes and allowed-key sets for config validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown top-level key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # empty string value
CFG007: str = "CFG007"  # version range out of order

ALL_CFG_CODES: tuple[str, ...] = (
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
)

INT_CONFIG_KEYS: frozenset[str] = frozenset({"min_version", "max_version"})
STRING_CONFIG_KEYS: frozenset[str] = frozenset({"base_dir", "product_prefix", "cache_subdir_name"})
ALLOWED_CONFIG_KEYS: frozenset[str] = INT_CONFIG_KEYS | STRING_CONFIG_KEYS

UNKNOWN_KEY_SUGGESTION_CUTOFF: float = 0.6
