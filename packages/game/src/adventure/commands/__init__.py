"""
Command System

Parses player input and dispatches it to aliased, multi-variant commands.
"""

from .parser import CommandParser, ParsedCommand
from .registry import (
    DEFAULT_VARIANT,
    Command,
    CommandBehavior,
    CommandCategory,
    CommandDefinition,
    CommandTable,
    build_command_table,
    command,
    get_command_definitions,
)

__all__ = [
    "CommandParser",
    "ParsedCommand",
    "DEFAULT_VARIANT",
    "Command",
    "CommandBehavior",
    "CommandCategory",
    "CommandDefinition",
    "CommandTable",
    "build_command_table",
    "command",
    "get_command_definitions",
]
