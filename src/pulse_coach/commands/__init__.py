"""CLI commands for pulse-coach."""

from .adapt import adapt
from .init import init
from .profile import profile
from .serve import serve
from .workout import workout

__all__ = [
    "adapt",
    "init",
    "profile",
    "serve",
    "workout",
]
