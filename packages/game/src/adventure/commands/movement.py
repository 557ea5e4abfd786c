"""
Movement Commands

Traversing links between areas. "take" on a path is treated as "go".
"""

from typing import TYPE_CHECKING, List

from .registry import command, CommandCategory

if TYPE_CHECKING:
    from ..session import GameSession

CANNOT_GO = "You cannot go that way."


@command(
    name="go",
    aliases=["cd"],
    category=CommandCategory.MOVEMENT,
    help_text="Follow a path out of this area.",
    usage="go <path>",
)
def cmd_go(session: "GameSession", verb: str, args: List[str]) -> str:
    """Move along a link of the current area."""
    if not args:
        return CANNOT_GO

    link = session.current_area.get_link(args[0])
    if link is None:
        return CANNOT_GO

    return session.travel(link)


@command(name="take", variant="path")
def cmd_take_path(session: "GameSession", verb: str, args: List[str]) -> str:
    """Taking a path means going down it."""
    return cmd_go(session, verb, args)
