"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "COLLABCACHE"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ COLLABCACHE",
    "     // collaboration cache cleanup",
)
LISTING_TITLE: str = "Cached projects"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} project cache manager"))
