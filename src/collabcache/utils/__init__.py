"""Generic utility helpers."""

from .formatting import format_age, format_size

__all__ = ["format_age", "format_size"]
