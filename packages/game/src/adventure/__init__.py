"""
Adventure Package

A text-adventure interpreter: areas joined by links, items to captchalogue,
and aliased commands whose variant is chosen by context.
"""

from .components import Area, Inventory, Item, Link, StorageStrategy, World, message_use
from .commands import (
    Command,
    CommandParser,
    CommandTable,
    ParsedCommand,
    build_command_table,
    command,
)
from .errors import (
    AdventureError,
    CommandDefinitionError,
    DuplicateAreaError,
    WorldGraphError,
    WorldLoadError,
)
from .phrase import cardinal, join_phrases, render
from .session import GameSession, SessionState
from .world import build_world, generate_room_chain, load_world

__all__ = [
    # World model
    "Area",
    "Inventory",
    "Item",
    "Link",
    "StorageStrategy",
    "World",
    "message_use",
    # Commands
    "Command",
    "CommandParser",
    "CommandTable",
    "ParsedCommand",
    "build_command_table",
    "command",
    # Errors
    "AdventureError",
    "CommandDefinitionError",
    "DuplicateAreaError",
    "WorldGraphError",
    "WorldLoadError",
    # Phrases
    "cardinal",
    "join_phrases",
    "render",
    # Session
    "GameSession",
    "SessionState",
    # World construction
    "build_world",
    "generate_room_chain",
    "load_world",
]
