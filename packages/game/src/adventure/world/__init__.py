"""
World Construction

Worlds come from one of two sources:
- generator: a procedurally seeded chain of rooms
- loader: a hand-written YAML world file
"""

from typing import Tuple

from adventure_core import Settings

from ..components.world import World
from .generator import START_AREA, generate_room_chain
from .loader import WorldLoader, load_world


def build_world(settings: Settings) -> Tuple[World, str]:
    """Build the world named by settings: a YAML file if set, else a room chain."""
    if settings.world_path:
        return load_world(settings.world_path)
    return generate_room_chain(settings.chain_length)


__all__ = [
    "START_AREA",
    "generate_room_chain",
    "WorldLoader",
    "load_world",
    "build_world",
]
