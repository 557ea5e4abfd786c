"""
Adventure Core Package

Shared plumbing for the adventure interpreter:

- identifiers: case-insensitive identifier normalisation
- config: settings read from the environment
- logging_config: logging setup and the marked debug channel
"""

from .identifiers import normalize, normalize_all, same
from .config import Settings
from .logging_config import (
    DEBUG_MARKER,
    DebugChannelFormatter,
    configure_logging,
)

__all__ = [
    "normalize",
    "normalize_all",
    "same",
    "Settings",
    "DEBUG_MARKER",
    "DebugChannelFormatter",
    "configure_logging",
]
