"""Human-readable rendering of byte counts and ages."""

from __future__ import annotations

from collabcache.constants.reporting import SIZE_UNIT_STEP, SIZE_UNITS


def format_size(size_bytes: int) -> str:
    """Render a byte count with a binary unit suffix, e.g. ``1.5 MB``."""
    value = float(size_bytes)
    for unit in SIZE_UNITS[:-1]:
        if value < SIZE_UNIT_STEP:
            return f"{size_bytes} {unit}" if unit == SIZE_UNITS[0] else f"{value:.1f} {unit}"
        value /= SIZE_UNIT_STEP
    return f"{value:.1f} {SIZE_UNITS[-1]}"


def format_age(age_days: int) -> str:
    if age_days == 0:
        return "today"
    if age_days == 1:
        return "1 day"
    return f"{age_days} days"
