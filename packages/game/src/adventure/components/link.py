"""
Link Components

A link is a directed, aliased edge from one area to another. The destination
is stored by identifier and resolved when the link is traversed, so links may
point at areas that are created later.
"""

from dataclasses import dataclass
from typing import List

from adventure_core import normalize, normalize_all


@dataclass
class Link:
    """Data for a path out of an area."""

    aliases: List[str]
    destination_id: str
    description: str = "You see nothing special."
    departure: str = ""  # Narrated when the link is traversed

    def __post_init__(self):
        self.aliases = normalize_all(self.aliases)
        if not self.aliases:
            raise ValueError("A link needs at least one alias")
        self.destination_id = normalize(self.destination_id)

    @property
    def name(self) -> str:
        """The canonical alias, used when listing paths."""
        return self.aliases[0]
