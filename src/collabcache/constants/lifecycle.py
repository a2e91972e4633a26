"""Platform file explorer commands."""

from __future__ import annotations

# Keyed by ``platform.system()``; anything else falls back to the freedesktop opener.
OPENER_COMMANDS: dict[str, str] = {
    "Darwin": "open",
    "Windows": "explorer",
}
DEFAULT_OPENER_COMMAND: str = "xdg-open"
