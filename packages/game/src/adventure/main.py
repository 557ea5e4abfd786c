"""
Main Entry Point

Builds a world and runs the interactive loop on stdin/stdout.

Configuration comes from the environment (see adventure_core.config).
"""

import logging
import sys
from typing import Optional, TextIO

from adventure_core import Settings, configure_logging

from .errors import AdventureError
from .session import GameSession
from .world import build_world

logger = logging.getLogger(__name__)


def build_session(settings: Settings, output: Optional[TextIO] = None) -> GameSession:
    """
    Build a ready-to-play session.

    Raises:
        AdventureError: If the world or the commands are malformed
    """
    world, start = build_world(settings)
    session = GameSession(world, output=output, prompt=settings.prompt)
    session.start(start)
    return session


def run(settings: Settings, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> int:
    """
    Run a game (blocking).

    Returns:
        Process exit status
    """
    try:
        session = build_session(settings, output=stdout)
    except AdventureError as e:
        logger.error(f"Could not set up the game: {e}")
        for problem in getattr(e, "errors", []):
            logger.error(f"  {problem}")
        return 1

    try:
        session.run(stdin)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    return 0


def main():
    """Entry point for the adventure console script."""
    settings = Settings.from_env()
    configure_logging(settings.log_level, debug=settings.debug)
    sys.exit(run(settings))


if __name__ == "__main__":
    main()
