"""
Information Commands

Commands for looking at the world and at yourself.
"""

from typing import TYPE_CHECKING, List

from .registry import command, CommandCategory
from ..phrase import join_phrases, render

if TYPE_CHECKING:
    from ..session import GameSession

NOT_HERE = "This area does not contain that."


@command(
    name="look",
    aliases=["examine", "inspect", "view", "ls"],
    category=CommandCategory.INFORMATION,
    help_text="Look around, or at an item or path.",
    usage="look [target]",
)
def cmd_look(session: "GameSession", verb: str, args: List[str]) -> str:
    """Look at a specific item or path."""
    if not args:
        return session.current_area.describe()

    target = args[0]
    item = session.current_area.get_item(target) or session.inventory.get_item(target)
    if item is not None:
        return item.description

    link = session.current_area.get_link(target)
    if link is not None:
        return link.description

    return NOT_HERE


@command(name="look", variant="area")
def cmd_look_area(session: "GameSession", verb: str, args: List[str]) -> str:
    """Describe the whole current area."""
    return session.current_area.describe()


@command(
    name="sylladex",
    aliases=["inventory", "inv", "i"],
    category=CommandCategory.INFORMATION,
    help_text="List the items you have captchalogued.",
    usage="sylladex",
)
def cmd_sylladex(session: "GameSession", verb: str, args: List[str]) -> str:
    if session.inventory.is_empty:
        return "Your sylladex is empty."
    items = [render(item) for item in reversed(session.inventory.get_items())]
    return f"Your sylladex contains {join_phrases(items)}."


@command(
    name="help",
    category=CommandCategory.INFORMATION,
    help_text="Show this list of commands.",
    usage="help",
)
def cmd_help(session: "GameSession", verb: str, args: List[str]) -> str:
    """Display usage for every command."""
    lines = ["Available commands:", "-" * 40]
    for category in CommandCategory:
        for cmd in session.commands.commands():
            if cmd.category is not category:
                continue
            line = f"  {cmd.usage:<28} {cmd.help_text}"
            synonyms = cmd.aliases[1:]
            if synonyms:
                line += f" (also: {', '.join(synonyms)})"
            lines.append(line)
    return "\n".join(lines)


@command(
    name="quit",
    category=CommandCategory.INFORMATION,
    help_text="Leave the game.",
    usage="quit",
)
def cmd_quit(session: "GameSession", verb: str, args: List[str]) -> str:
    """Quit the game."""
    return session.terminate()
