"""
World Loader

Loads a hand-written world from a YAML file.

Expected layout:

    start: hall
    areas:
      - id: hall
        description: A draughty hall.
        commands:            # raw verb -> effective verb
          enter: go
        items:
          - name: oof
            quantity: 2
            description: A small oof.
            uses:
              default: Oof.
        links:
          - aliases: [door, north]
            to: cellar
            description: A heavy door.
            departure: You heave the door open.

Every problem found is collected; loading fails once, at the end, with all of
them.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from adventure_core import normalize

from ..components.area import Area
from ..components.item import Item, message_use
from ..components.link import Link
from ..components.world import World
from ..errors import AdventureError, WorldLoadError

logger = logging.getLogger(__name__)


class ItemSchema(BaseModel):
    """Schema for an item placed in an area."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    id: Optional[str] = None
    description: str = "You see nothing special."
    quantity: int = Field(default=1, ge=0)
    plural: Optional[str] = None
    definite: bool = False
    proper: bool = False
    quantifiable: bool = True
    starts_with_vowel: Optional[bool] = None
    all_caps: bool = False
    uses: Dict[str, str] = Field(default_factory=dict, description="use key -> narration")

    def to_item(self) -> Item:
        return Item(
            name=self.name,
            item_id=self.id or "",
            description=self.description,
            quantity=self.quantity,
            plural=self.plural,
            definite=self.definite,
            proper=self.proper,
            quantifiable=self.quantifiable,
            starts_with_vowel=self.starts_with_vowel,
            all_caps=self.all_caps,
            uses={key: message_use(text) for key, text in self.uses.items()},
        )


class LinkSchema(BaseModel):
    """Schema for a path out of an area."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    aliases: List[str] = Field(..., min_length=1)
    destination: str = Field(..., alias="to", min_length=1)
    description: str = "You see nothing special."
    departure: str = ""

    def to_link(self) -> Link:
        return Link(
            aliases=self.aliases,
            destination_id=self.destination,
            description=self.description,
            departure=self.departure,
        )


class AreaSchema(BaseModel):
    """Schema for an area."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    description: str = ""
    items: List[ItemSchema] = Field(default_factory=list)
    links: List[LinkSchema] = Field(default_factory=list)
    commands: Dict[str, str] = Field(default_factory=dict)

    def to_area(self) -> Area:
        area = Area(self.id, self.description)
        for item in self.items:
            area.set_item(item.to_item())
        for link in self.links:
            area.set_link(link.to_link())
        for raw, effective in self.commands.items():
            area.set_command_mapping(raw, effective)
        return area


class WorldSchema(BaseModel):
    """Schema for a whole world file."""

    model_config = ConfigDict(extra="forbid")

    start: str = Field(..., min_length=1)
    areas: List[dict] = Field(..., min_length=1)


class WorldLoader:
    """Loads world data from a YAML file."""

    def __init__(self, world_path: str):
        self.world_path = Path(world_path)
        self._errors: List[str] = []

    @property
    def errors(self) -> List[str]:
        return self._errors.copy()

    def load(self) -> Tuple[World, str]:
        """
        Load the world.

        Returns:
            The world and the identifier of the starting area

        Raises:
            WorldLoadError: If the file is missing, malformed or inconsistent
        """
        logger.info(f"Loading world from: {self.world_path}")

        data = self._load_yaml_file(self.world_path)
        if data is None:
            raise WorldLoadError(f"Could not load world file {self.world_path}", self.errors)

        try:
            document = WorldSchema.model_validate(data)
        except ValidationError as e:
            self._error(f"Invalid world file {self.world_path}: {e}")
            raise WorldLoadError(f"Invalid world file {self.world_path}", self.errors) from e

        world = World()
        for index, area_data in enumerate(document.areas):
            area = self._parse_area(area_data, index)
            if area is None:
                continue
            if area.area_id in world:
                self._error(f"Duplicate area id: {area.area_id}")
                continue
            world.add(area)

        if document.start not in world:
            self._error(f"Start area does not exist: {document.start}")

        if not self._errors:
            try:
                world.validate()
            except AdventureError as e:
                self._error(str(e))

        if self._errors:
            raise WorldLoadError(
                f"World file {self.world_path} has {len(self._errors)} error(s)", self.errors
            )

        logger.info(f"World loaded: {len(world)} areas, starting in {document.start}")
        return world, normalize(document.start)

    def _load_yaml_file(self, path: Path) -> Optional[Dict]:
        """Load and parse a YAML file."""
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            self._error(f"Error loading {path}: {e}")
            return None

        if data is None:
            self._error(f"World file is empty: {path}")
        return data

    def _parse_area(self, data: dict, index: int) -> Optional[Area]:
        try:
            return AreaSchema.model_validate(data).to_area()
        except (ValidationError, ValueError) as e:
            self._error(f"Error parsing area #{index}: {e}")
            return None

    def _error(self, message: str) -> None:
        self._errors.append(message)
        logger.error(message)


def load_world(world_path: str) -> Tuple[World, str]:
    """Load a world from a YAML file."""
    return WorldLoader(world_path).load()
