"""
Settings

Runtime configuration read from environment variables.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Configuration for a game run."""

    debug: bool = False
    log_level: str = "WARNING"
    world_path: Optional[str] = None  # YAML world file; None means generate a chain
    chain_length: int = 50
    prompt: str = "> "

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables."""
        env = os.environ if environ is None else environ

        chain_length = int(env.get("ADVENTURE_CHAIN_LENGTH", "50"))
        if chain_length < 1:
            raise ValueError(f"ADVENTURE_CHAIN_LENGTH must be positive, got {chain_length}")

        return cls(
            debug=env.get("ADVENTURE_DEBUG", "").strip().lower() in _TRUTHY,
            log_level=env.get("ADVENTURE_LOG_LEVEL", "WARNING").upper(),
            world_path=env.get("ADVENTURE_WORLD_PATH") or None,
            chain_length=chain_length,
            prompt=env.get("ADVENTURE_PROMPT", "> "),
        )
