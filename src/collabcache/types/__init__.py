"""Shared type aliases for collabcache."""

from .cache import CacheEntry
from .common import JsonObject, JsonScalar, JsonValue

__all__ = [
    "CacheEntry",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
]
