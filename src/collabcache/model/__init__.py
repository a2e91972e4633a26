"""Core data models for collabcache."""

from .entities import ProjectSummary, ScanResult

__all__ = [
    "ProjectSummary",
    "ScanResult",
]
