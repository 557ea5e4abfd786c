"""
Command Parser

Splits a raw input line into a verb and a flat list of arguments.
There is no grammar: tokens are separated by runs of whitespace and
compared case-insensitively.
"""

from dataclasses import dataclass, field
from typing import List

from adventure_core import normalize


@dataclass
class ParsedCommand:
    """Represents a parsed player command."""

    raw: str  # Original input
    command: str  # The verb, normalized
    args: List[str] = field(default_factory=list)  # Normalized arguments

    @property
    def is_empty(self) -> bool:
        return not self.command


class CommandParser:
    """
    Tokenizes player input.

    Examples:
        'look' -> command='look', args=[]
        '  Captchalogue   OOF ' -> command='captchalogue', args=['oof']
        'go door-1' -> command='go', args=['door-1']
    """

    def parse(self, raw_input: str) -> ParsedCommand:
        """Parse raw input into a structured command."""
        tokens = self.tokenize(raw_input)
        if not tokens:
            return ParsedCommand(raw=raw_input, command="")
        return ParsedCommand(raw=raw_input, command=tokens[0], args=tokens[1:])

    def tokenize(self, text: str) -> List[str]:
        """Split on whitespace runs and normalize every token."""
        return [normalize(token) for token in text.split()]
