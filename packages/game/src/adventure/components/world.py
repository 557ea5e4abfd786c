"""
World Components

The world holds every area that is not currently checked out by the session.
Exactly one area is current at a time; it is removed from the world while
current and stored back when the player leaves it.
"""

import logging
from typing import Dict, Iterable, List, Optional

from adventure_core import normalize

from ..errors import DuplicateAreaError, WorldGraphError
from .area import Area

logger = logging.getLogger(__name__)


class World:
    """Mapping from area identifier to stored area."""

    def __init__(self, areas: Optional[Iterable[Area]] = None):
        self._areas: Dict[str, Area] = {}
        for area in areas or []:
            self.add(area)

    def add(self, area: Area) -> None:
        """Add a new area during world construction."""
        if area.area_id in self._areas:
            raise DuplicateAreaError(area.area_id)
        self._areas[area.area_id] = area

    def store(self, area: Area) -> None:
        """Commit a checked-out area back into the world."""
        self._areas[area.area_id] = area
        logger.debug(f"Stored area {area.area_id}")

    def checkout(self, area_id: str) -> Area:
        """Remove and return an area so it can become current."""
        key = normalize(area_id)
        area = self._areas.pop(key, None)
        if area is None:
            raise WorldGraphError(f"No such area in world: {key}")
        logger.debug(f"Checked out area {key}")
        return area

    def get(self, area_id: str) -> Optional[Area]:
        """Peek at a stored area without checking it out."""
        return self._areas.get(normalize(area_id))

    def area_ids(self) -> List[str]:
        return list(self._areas)

    def validate(self, current: Optional[Area] = None) -> None:
        """
        Check that every link leads somewhere.

        Args:
            current: The checked-out area, which counts as part of the world

        Raises:
            DuplicateAreaError: If the current area is also stored
            WorldGraphError: If a link names an area that does not exist
        """
        areas = dict(self._areas)
        if current is not None:
            if current.area_id in areas:
                raise DuplicateAreaError(current.area_id)
            areas[current.area_id] = current

        missing = []
        for area in areas.values():
            for link in area.get_links():
                if link.destination_id not in areas:
                    missing.append(f"{area.area_id} --{link.name}--> {link.destination_id}")

        if missing:
            raise WorldGraphError("Links to unknown areas: " + "; ".join(missing))

    def __contains__(self, area_id: str) -> bool:
        return normalize(area_id) in self._areas

    def __len__(self) -> int:
        return len(self._areas)
