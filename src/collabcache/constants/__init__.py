"""Shared constants for collabcache."""
