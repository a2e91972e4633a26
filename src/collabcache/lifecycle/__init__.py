"""Project cache and the single-project operations that consult it."""

from .cache import ProjectCache
from .opener import Opener, SystemOpener
from .service import ProjectService

__all__ = [
    "Opener",
    "ProjectCache",
    "ProjectService",
    "SystemOpener",
]
