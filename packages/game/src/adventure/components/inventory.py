"""
Inventory Components

The player's sylladex: an item collection with the same storage contract as
an area but no links or command remaps.
"""

from enum import Enum

from .container import ItemStore


class StorageStrategy(str, Enum):
    """How the sylladex stores and retrieves items."""

    MAP = "map"  # Keyed by item identifier


class Inventory(ItemStore):
    """Player-owned item collection."""

    def __init__(self, strategy: StorageStrategy = StorageStrategy.MAP):
        super().__init__()
        # Raises ValueError for strategies that do not exist.
        self.strategy = StorageStrategy(strategy)

    @property
    def is_empty(self) -> bool:
        return len(self) == 0
