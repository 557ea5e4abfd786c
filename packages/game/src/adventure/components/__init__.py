"""
World Model Components

- Item: quantifiable entity with keyed use behaviours
- Link: directed, aliased edge between areas
- Area: node owning items, links and command remaps
- Inventory: the player's sylladex
- World: storage for every area that is not current
"""

from .item import Item, UseBehavior, DEFAULT_USE, message_use
from .link import Link
from .container import ItemStore
from .area import Area
from .inventory import Inventory, StorageStrategy
from .world import World

__all__ = [
    "Item",
    "UseBehavior",
    "DEFAULT_USE",
    "message_use",
    "Link",
    "ItemStore",
    "Area",
    "Inventory",
    "StorageStrategy",
    "World",
]
