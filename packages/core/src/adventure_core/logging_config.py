"""
Logging Configuration

Normal narration is written straight to the player's output stream and never
passes through logging. Diagnostics go through the standard logging module.

With the debug channel on, every diagnostic goes to one stderr handler that
prefixes each line it emits with a fixed marker.
"""

import logging
import sys
from typing import Optional, TextIO

DEBUG_MARKER = ";; debug: "
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class DebugChannelFormatter(logging.Formatter):
    """Formatter that marks every line of a record, including tracebacks."""

    def __init__(self, marker: str = DEBUG_MARKER):
        super().__init__("%(name)s: %(message)s")
        self.marker = marker

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        return "\n".join(self.marker + line for line in text.splitlines())


def configure_logging(
    level: str = "WARNING",
    debug: bool = False,
    stream: Optional[TextIO] = None,
) -> Optional[logging.Handler]:
    """
    Configure process logging.

    Args:
        level: Level for ordinary log records
        debug: Route everything, down to DEBUG, through the marked channel
        stream: Stream for the debug channel (defaults to stderr)

    Returns:
        The debug channel handler, or None when the channel is off
    """
    if not debug:
        logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING), format=LOG_FORMAT)
        return None

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(DebugChannelFormatter())

    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)
    return handler
