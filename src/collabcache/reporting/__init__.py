"""Listing output: terminal table and JSON payloads."""

from .listing import build_listing_payload, sort_projects, write_listing_atomic
from .stdout import StdoutReporter

__all__ = [
    "StdoutReporter",
    "build_listing_payload",
    "sort_projects",
    "write_listing_atomic",
]
