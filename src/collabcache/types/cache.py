"""Typed project cache structures."""

from __future__ import annotations

from pathlib import Path
from typing import TypeAlias

# (identifier, absolute project directory) as observed by the most recent scan.
CacheEntry: TypeAlias = tuple[str, Path]
