"""
Command Registry

Commands are declared with the @command decorator. Each declaration adds one
behaviour variant to a named command; build_command_table() turns the
declarations into a CommandTable for a game session.

A command is reachable under every one of its aliases. The aliases that
resolve to the same command form its family, which the dispatch policy uses
to treat e.g. "examine" like "look".
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, FrozenSet, Iterable, List, Optional

from adventure_core import normalize, normalize_all

from ..errors import CommandDefinitionError

if TYPE_CHECKING:
    from ..session import GameSession

logger = logging.getLogger(__name__)

DEFAULT_VARIANT = "default"

# (session, verb, args) -> narration
CommandBehavior = Callable[["GameSession", str, List[str]], Optional[str]]


class CommandCategory(str, Enum):
    """Categories of commands for help organization."""

    MOVEMENT = "movement"
    OBJECT = "object"
    INFORMATION = "information"


@dataclass
class Command:
    """A command reachable under several aliases, with keyed variants."""

    aliases: List[str]
    variants: Dict[str, CommandBehavior]
    category: CommandCategory = CommandCategory.INFORMATION
    help_text: str = ""
    usage: str = ""

    def __post_init__(self):
        self.aliases = normalize_all(self.aliases)
        if not self.aliases:
            raise CommandDefinitionError("A command needs at least one alias")
        self.variants = {normalize(key): behavior for key, behavior in self.variants.items()}
        if DEFAULT_VARIANT not in self.variants:
            raise CommandDefinitionError(
                f"Command {self.aliases[0]} has no {DEFAULT_VARIANT} variant"
            )

    @property
    def name(self) -> str:
        return self.aliases[0]


class CommandTable:
    """
    Alias lookup and variant dispatch for one game session.

    Several aliases may point at the same Command instance.
    """

    def __init__(self, commands: Optional[Iterable[Command]] = None):
        self._commands: Dict[str, Command] = {}  # alias -> command
        for cmd in commands or []:
            self.set_command(cmd)

    def set_command(self, command: Command) -> None:
        """Bind a command under all its aliases, replacing earlier bindings."""
        for alias in command.aliases:
            previous = self._commands.get(alias)
            if previous is not None and previous is not command:
                logger.debug(f"Alias {alias} moved from {previous.name} to {command.name}")
            self._commands[alias] = command
        logger.debug(f"Registered command: {command.name}")

    def get_command(self, alias: str) -> Optional[Command]:
        """Get a command by alias."""
        return self._commands.get(normalize(alias))

    def get_family(self, alias: str) -> FrozenSet[str]:
        """All aliases that resolve to the same command as alias."""
        cmd = self.get_command(alias)
        if cmd is None:
            return frozenset()
        return frozenset(a for a in cmd.aliases if self._commands.get(a) is cmd)

    def is_family_member(self, tested_alias: str, base_alias: str) -> bool:
        """Check whether base_alias belongs to tested_alias's family."""
        return normalize(base_alias) in self.get_family(tested_alias)

    def commands(self) -> List[Command]:
        """Distinct bound commands in registration order."""
        seen = []
        for cmd in self._commands.values():
            if not any(cmd is other for other in seen):
                seen.append(cmd)
        return seen

    def call(
        self,
        session: "GameSession",
        alias: str,
        args: Optional[List[str]] = None,
        variant: str = DEFAULT_VARIANT,
    ) -> bool:
        """
        Invoke a command variant and write its narration to the session.

        Returns False when alias is not a known command. That is a player
        mistake and is narrated, not raised.
        """
        verb = normalize(alias)
        cmd = self._commands.get(verb)
        if cmd is None:
            session.write(f"You cannot {verb}.")
            return False

        behavior = cmd.variants[normalize(variant)]
        result = behavior(session, verb, list(args or []))
        if result:
            session.write(result)
        return True


# ============================================================================
# Declarations
# ============================================================================


@dataclass
class CommandDefinition:
    """Declared shape of a command before it is bound into a table."""

    name: str
    aliases: List[str] = field(default_factory=list)
    category: CommandCategory = CommandCategory.INFORMATION
    help_text: str = ""
    usage: str = ""
    variants: Dict[str, CommandBehavior] = field(default_factory=dict)

    def build(self) -> Command:
        return Command(
            aliases=[self.name] + self.aliases,
            variants=dict(self.variants),
            category=self.category,
            help_text=self.help_text,
            usage=self.usage or self.name,
        )


_definitions: Dict[str, CommandDefinition] = {}


def get_command_definitions() -> Dict[str, CommandDefinition]:
    """Get all declared commands."""
    return _definitions.copy()


def command(
    name: str,
    aliases: Optional[List[str]] = None,
    variant: str = DEFAULT_VARIANT,
    category: Optional[CommandCategory] = None,
    help_text: str = "",
    usage: str = "",
):
    """
    Decorator to declare a command variant.

    Declaring the same name again adds another variant; aliases, category and
    help are merged in.

    Usage:
        @command("look", aliases=["examine"], category=CommandCategory.INFORMATION)
        def cmd_look(session: GameSession, verb: str, args: List[str]) -> str:
            return "You look around..."

        @command("look", variant="area")
        def cmd_look_area(session: GameSession, verb: str, args: List[str]) -> str:
            return session.current_area.describe()
    """

    def decorator(func: CommandBehavior):
        key = normalize(name)
        definition = _definitions.get(key)
        if definition is None:
            definition = CommandDefinition(name=key)
            _definitions[key] = definition

        for alias in aliases or []:
            if normalize(alias) not in definition.aliases:
                definition.aliases.append(normalize(alias))
        if category is not None:
            definition.category = category
        if help_text:
            definition.help_text = help_text
        if usage:
            definition.usage = usage

        definition.variants[normalize(variant)] = func
        return func

    return decorator


def build_command_table(
    definitions: Optional[Iterable[CommandDefinition]] = None,
) -> CommandTable:
    """
    Build a command table from declarations.

    Without arguments the built-in vocabulary is loaded.

    Raises:
        CommandDefinitionError: If a declared command has no default variant
    """
    if definitions is None:
        # Importing the command modules runs their @command declarations.
        from . import info  # noqa: F401
        from . import items  # noqa: F401
        from . import movement  # noqa: F401

        definitions = _definitions.values()

    table = CommandTable()
    for definition in definitions:
        table.set_command(definition.build())
    return table
