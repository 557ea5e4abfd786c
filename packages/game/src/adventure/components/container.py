"""
Item storage shared by areas and the sylladex.
"""

from typing import Dict, List, Optional

from adventure_core import normalize

from .item import Item


class ItemStore:
    """Keyed item collection with transfer-of-ownership removal."""

    def __init__(self):
        self._items: Dict[str, Item] = {}

    def set_item(self, item: Item) -> None:
        """Insert an item, overwriting any item with the same identifier."""
        self._items[item.item_id] = item

    def get_item(self, item_id: str) -> Optional[Item]:
        """Get an item without removing it."""
        return self._items.get(normalize(item_id))

    def take_item(self, item_id: str) -> Optional[Item]:
        """Remove and return an item. The caller becomes its owner."""
        return self._items.pop(normalize(item_id), None)

    def get_items(self) -> List[Item]:
        """Items in registration order."""
        return list(self._items.values())

    def __contains__(self, item_id: str) -> bool:
        return normalize(item_id) in self._items

    def __len__(self) -> int:
        return len(self._items)
