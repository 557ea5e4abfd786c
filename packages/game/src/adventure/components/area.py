"""
Area Components

An area is a node of the world graph. It owns its items, its links (reachable
under every alias) and a table of local command remaps.
"""

import logging
from typing import Dict, List, Optional, Tuple

from adventure_core import normalize

from ..phrase import join_phrases, render
from .container import ItemStore
from .link import Link

logger = logging.getLogger(__name__)


class Area(ItemStore):
    """A navigable location holding items, links and command remaps."""

    def __init__(self, area_id: str, description: str = ""):
        super().__init__()
        self.area_id = normalize(area_id)
        self.description = description

        self._links: Dict[str, Link] = {}  # alias -> link
        self._paths: List[Tuple[str, ...]] = []  # one alias group per link
        self._command_map: Dict[str, str] = {}  # raw verb -> effective verb

    def __repr__(self) -> str:
        return f"Area({self.area_id!r}, items={len(self)}, paths={len(self._paths)})"

    # ------------------------------------------------------------------
    # Links
    # ------------------------------------------------------------------

    def set_link(self, link: Link) -> None:
        """
        Register a link under every one of its aliases.

        Any existing path group sharing an alias with the new link is replaced,
        so listing paths never shows the same exit twice.
        """
        new_aliases = set(link.aliases)
        kept_paths = []
        for group in self._paths:
            if new_aliases.isdisjoint(group):
                kept_paths.append(group)
                continue
            old_link = self._links.get(group[0])
            for alias in group:
                if self._links.get(alias) is old_link:
                    del self._links[alias]
            logger.debug(f"Area {self.area_id}: link {group[0]} replaced by {link.name}")

        for alias in link.aliases:
            self._links[alias] = link
        kept_paths.append(tuple(link.aliases))
        self._paths = kept_paths

    def get_link(self, alias: str) -> Optional[Link]:
        """Get a link by any of its aliases."""
        return self._links.get(normalize(alias))

    def get_links(self) -> List[Link]:
        """One link per path group, in registration order."""
        return [self._links[group[0]] for group in self._paths]

    # ------------------------------------------------------------------
    # Command remapping
    # ------------------------------------------------------------------

    def set_command_mapping(self, raw_name: str, effective_name: str) -> None:
        """Make raw_name behave as effective_name while in this area."""
        self._command_map[normalize(raw_name)] = normalize(effective_name)

    def map_command(self, raw_name: str) -> str:
        """Remapped command name, or raw_name unchanged."""
        return self._command_map.get(normalize(raw_name), raw_name)

    # ------------------------------------------------------------------
    # Description
    # ------------------------------------------------------------------

    def describe(self) -> str:
        """Describe the area, its contents and its obvious paths."""
        lines = []
        if self.description:
            lines.append(self.description)

        # Most recent first, so the first registered entry takes the "and" slot.
        items = [render(item) for item in reversed(self.get_items())]
        if items:
            lines.append(f"This area contains {join_phrases(items)}.")

        paths = [link.name for link in reversed(self.get_links())]
        if len(paths) == 1:
            lines.append(f"The only obvious path is {paths[0]}.")
        elif paths:
            lines.append(f"Obvious paths are {join_phrases(paths)}.")

        return "\n".join(lines)
