"""Command-line interface for collabcache."""
