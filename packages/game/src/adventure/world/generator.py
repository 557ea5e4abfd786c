"""
Room Chain Generator

Seeds a world made of a long chain of near-identical rooms. Room k is named
"room-k"; the door leading into it is aliased "door-k" from both neighbours,
so "go door-1" from the first room and "go door-0" from the second form a
round trip.
"""

import logging
from typing import Tuple

from ..components.area import Area
from ..components.item import Item, message_use
from ..components.link import Link
from ..components.world import World

logger = logging.getLogger(__name__)

START_AREA = "room-0"

# Verbs every generated room understands as "go"
MOVEMENT_SYNONYMS = ("enter", "walk")


def area_id_for(index: int) -> str:
    return f"room-{index}"


def door_to(index: int, *synonyms: str) -> Link:
    """The link leading into room index."""
    alias = f"door-{index}"
    return Link(
        aliases=[alias, *synonyms],
        destination_id=area_id_for(index),
        description=f"A plain wooden door marked {index}.",
        departure=f"You walk through {alias}.",
    )


def describe_room(index: int, length: int) -> str:
    if index == 0:
        return "You are in the first room. A long row of doors stretches ahead."
    if index == length - 1:
        return f"You are in room {index}, the last of them. The chain ends here."
    return f"You are in room {index}. It looks much like the others."


def make_oof() -> Item:
    return Item(
        name="oof",
        quantity=2,
        description="A small, squishy oof. It makes a noise when squeezed.",
        uses={"default": message_use("Oof."), "squeeze": message_use("OOF!")},
    )


def make_tablet() -> Item:
    return Item(
        name="tablet",
        definite=True,
        description="A stone tablet. Someone has scratched 'the end' into it.",
        uses={"read": message_use("It says: the end.")},
    )


def generate_room_chain(length: int = 50) -> Tuple[World, str]:
    """
    Build a chain of rooms.

    Args:
        length: Number of rooms, at least one

    Returns:
        The world and the identifier of the starting room
    """
    if length < 1:
        raise ValueError(f"A room chain needs at least one room, got {length}")

    world = World()
    for index in range(length):
        area = Area(area_id_for(index), describe_room(index, length))

        if index > 0:
            area.set_link(door_to(index - 1, "back"))
        if index < length - 1:
            area.set_link(door_to(index + 1, "forward"))

        for verb in MOVEMENT_SYNONYMS:
            area.set_command_mapping(verb, "go")

        if index == 0:
            area.set_item(make_oof())
        if index == length - 1 and length > 1:
            area.set_item(make_tablet())

        world.add(area)

    logger.info(f"Generated a chain of {length} rooms")
    return world, START_AREA
