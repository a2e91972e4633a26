"""Show a directory in the platform's native file explorer."""

from __future__ import annotations

import logging
import platform
import subprocess
import threading
from pathlib import Path
from typing import Protocol

from collabcache.constants.lifecycle import DEFAULT_OPENER_COMMAND, OPENER_COMMANDS
from collabcache.exceptions import OpenerError

logger = logging.getLogger(__name__)


class Opener(Protocol):
    """Anything that can reveal a path to the user."""

    def open_path(self, path: Path) -> None: ...


class SystemOpener:
    """Launch ``open``, ``explorer`` or ``xdg-open`` depending on the platform."""

    def __init__(self, system: str | None = None) -> None:
        self._command = OPENER_COMMANDS.get(system or platform.system(), DEFAULT_OPENER_COMMAND)

    @property
    def command(self) -> str:
        return self._command

    def open_path(self, path: Path) -> None:
        if not path.exists():
            raise OpenerError(path, FileNotFoundError(f"No such file or directory: '{path}'"))
        try:
            process = subprocess.Popen([self._command, str(path)])
        except OSError as exc:
            raise OpenerError(path, exc) from exc
        # Launchers exit quickly; wait on them off-thread so none is left as a zombie.
        threading.Thread(target=process.wait, name="opener-reaper", daemon=True).start()
        logger.debug("Opened %s with %s", path, self._command)

