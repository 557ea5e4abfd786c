"""
Item Components

An item is a named, countable thing owned by exactly one container (an area
or the player's sylladex). Items carry keyed "use" behaviours that the use
command looks up by symbolic key.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Dict, List, Optional

from adventure_core import normalize

if TYPE_CHECKING:
    from ..session import GameSession

DEFAULT_USE = "default"

# (session, item, args) -> narration
UseBehavior = Callable[["GameSession", "Item", List[str]], Optional[str]]


@dataclass
class Item:
    """A quantifiable entity with a description and use behaviours."""

    name: str
    description: str = "You see nothing special."
    quantity: int = 1
    plural: Optional[str] = None

    # Phrase flags
    definite: bool = False
    proper: bool = False
    quantifiable: bool = True
    starts_with_vowel: Optional[bool] = None  # None: derived from the name
    all_caps: bool = False

    uses: Dict[str, UseBehavior] = field(default_factory=dict)
    item_id: str = ""

    def __post_init__(self):
        if self.quantity < 0:
            raise ValueError(f"Item quantity cannot be negative: {self.name}={self.quantity}")
        self.item_id = normalize(self.item_id or self.name)
        if self.starts_with_vowel is None:
            self.starts_with_vowel = self.name[:1].lower() in "aeiou"
        self.uses = {normalize(key): behavior for key, behavior in self.uses.items()}

    def get_use(self, key: str = DEFAULT_USE) -> Optional[UseBehavior]:
        """Get the use behaviour stored under key."""
        return self.uses.get(normalize(key))

    def set_use(self, key: str, behavior: UseBehavior) -> None:
        """Register a use behaviour."""
        self.uses[normalize(key)] = behavior


def message_use(text: str) -> UseBehavior:
    """Build a use behaviour that only narrates text."""

    def behavior(session: "GameSession", item: Item, args: List[str]) -> str:
        return text

    return behavior
