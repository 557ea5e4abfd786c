"""
Item Commands

Moving items into the sylladex and using them.
"""

from typing import TYPE_CHECKING, List

from .registry import command, CommandCategory
from ..components.item import DEFAULT_USE
from ..phrase import render

if TYPE_CHECKING:
    from ..session import GameSession

CANNOT_DO = "You cannot do that."
NOT_HERE = "This area does not contain that."
CANNOT_USE = "You cannot use that that way."


@command(
    name="captchalogue",
    aliases=["captcha"],
    category=CommandCategory.OBJECT,
    help_text="Move an item from this area into your sylladex.",
    usage="captchalogue <item>",
)
def cmd_captchalogue(session: "GameSession", verb: str, args: List[str]) -> str:
    """Transfer an item from the current area to the sylladex."""
    if not args:
        return CANNOT_DO

    item = session.current_area.take_item(args[0])
    if item is None:
        return NOT_HERE

    phrase = render(item)
    held = session.inventory.get_item(item.item_id)
    if held is not None:
        item.quantity += held.quantity
    session.inventory.set_item(item)

    return f"You captchalogue {phrase}."


@command(
    name="take",
    category=CommandCategory.OBJECT,
    help_text="Captchalogue an item, or take a path.",
    usage="take <item|path>",
)
def cmd_take(session: "GameSession", verb: str, args: List[str]) -> str:
    return cmd_captchalogue(session, verb, args)


@command(
    name="use",
    category=CommandCategory.OBJECT,
    help_text="Use an item, optionally in a particular way.",
    usage="use <item> [how]",
)
def cmd_use(session: "GameSession", verb: str, args: List[str]) -> str:
    """Run one of an item's use behaviours."""
    if not args:
        return CANNOT_DO

    item = session.inventory.get_item(args[0]) or session.current_area.get_item(args[0])
    if item is None:
        return CANNOT_DO

    how = args[1] if len(args) > 1 else DEFAULT_USE
    behavior = item.get_use(how)
    if behavior is None:
        return CANNOT_USE

    return behavior(session, item, args[2:]) or ""
