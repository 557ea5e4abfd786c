"""
Setup Errors

Raised while building commands or the world. These indicate a content
authoring bug and are never produced by player input; player mistakes are
narrated through the normal output channel instead.
"""

from typing import List, Optional


class AdventureError(Exception):
    """Base class for setup invariant violations."""


class CommandDefinitionError(AdventureError):
    """A command was declared without a default variant."""


class DuplicateAreaError(AdventureError):
    """An area identifier was added to the world twice."""

    def __init__(self, area_id: str):
        super().__init__(f"Area already exists in world: {area_id}")
        self.area_id = area_id


class WorldGraphError(AdventureError):
    """A link points at an area that does not exist."""


class WorldLoadError(AdventureError):
    """A world file could not be loaded."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or []
