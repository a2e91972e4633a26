"""Constants for listing output, atomic writing, and stdout formatting."""

from __future__ import annotations

SCHEMA_VERSION: str = "1.0.0"
LISTING_TEMP_PREFIX: str = ".tmp-"
LISTING_TEMP_SUFFIX: str = ".json"

SORT_DISCOVERY: str = "discovery"
SORT_SIZE: str = "size"
SORT_AGE: str = "age"
SORT_NAME: str = "name"
VALID_SORT_KEYS: tuple[str, ...] = (SORT_DISCOVERY, SORT_SIZE, SORT_AGE, SORT_NAME)

SIZE_UNITS: tuple[str, ...] = ("B", "KB", "MB", "GB", "TB")
SIZE_UNIT_STEP: int = 1024

# Projects untouched for this many days are highlighted as cleanup candidates.
STALE_AGE_DAYS: int = 90
RECENT_AGE_DAYS: int = 14

ANSI_RED: str = "\033[31m"
ANSI_YELLOW: str = "\033[33m"
ANSI_GREEN: str = "\033[32m"
ANSI_RESET: str = "\033[0m"
