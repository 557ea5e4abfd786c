"""
Game Session

Holds everything one game needs (world, command table, sylladex and the
current area) and runs the read, resolve, dispatch loop.

The current area is checked out of the world: it is absent from the world's
mapping while the player stands in it and is stored back only when the
player leaves.
"""

import logging
import sys
from enum import Enum
from typing import Iterable, List, Optional, TextIO

from adventure_core import normalize, same

from .commands.parser import CommandParser
from .commands.registry import DEFAULT_VARIANT, CommandTable, build_command_table
from .components.area import Area
from .components.inventory import Inventory
from .components.link import Link
from .components.world import World
from .errors import CommandDefinitionError

logger = logging.getLogger(__name__)

QUIT_COMMAND = "quit"
LOOK_COMMAND = "look"
TAKE_COMMAND = "take"

AREA_VARIANT = "area"
PATH_VARIANT = "path"

# Arguments that make "look" describe the whole area
ROOM_REFERENCES = frozenset({"room", "area"})

FAREWELL = "Goodbye."


class SessionState(str, Enum):
    """Where the loop is within a turn."""

    AWAITING_INPUT = "awaiting_input"
    RESOLVED = "resolved"
    TERMINATED = "terminated"


class GameSession:
    """Game state and turn dispatch for one player."""

    def __init__(
        self,
        world: World,
        commands: Optional[CommandTable] = None,
        inventory: Optional[Inventory] = None,
        output: Optional[TextIO] = None,
        prompt: str = "> ",
    ):
        self.world = world
        self.commands = commands if commands is not None else build_command_table()
        self.inventory = inventory if inventory is not None else Inventory()
        self.output = output if output is not None else sys.stdout
        self.prompt = prompt

        self.current_area: Optional[Area] = None
        self.state = SessionState.AWAITING_INPUT
        self._parser = CommandParser()

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def write(self, text: str) -> None:
        """Write a line of narration and flush it immediately."""
        self.output.write(text + "\n")
        self.output.flush()

    def _write_prompt(self) -> None:
        self.output.write(self.prompt)
        self.output.flush()

    # ------------------------------------------------------------------
    # World state
    # ------------------------------------------------------------------

    def start(self, area_id: str) -> None:
        """
        Validate the world and place the player in the starting area.

        Raises:
            CommandDefinitionError: If look or take lacks a variant the dispatch
                policy selects
            WorldGraphError: If a link leads nowhere or the area is unknown
        """
        self.check_commands()
        self.world.validate(self.current_area)
        self.enter(area_id)
        logger.info(f"Session started in {self.current_area.area_id}")
        self.write(self.current_area.describe())

    def enter(self, area_id: str) -> None:
        """
        Commit the current area (if any) and check out area_id.

        Nothing changes if area_id cannot be checked out.
        """
        if self.current_area is not None and same(self.current_area.area_id, area_id):
            return
        area = self.world.checkout(area_id)
        if self.current_area is not None:
            self.world.store(self.current_area)
        self.current_area = area

    def travel(self, link: Link) -> str:
        """Traverse a link and narrate the departure and the arrival."""
        lines = [link.departure] if link.departure else []
        self.enter(link.destination_id)
        lines.append(self.current_area.describe())
        return "\n".join(lines)

    def terminate(self) -> str:
        self.state = SessionState.TERMINATED
        return FAREWELL

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def check_commands(self) -> None:
        """
        Check that every variant select_variant can pick exists.

        Raises:
            CommandDefinitionError: If look has no area variant or take has no
                path variant
        """
        for alias, variant in ((LOOK_COMMAND, AREA_VARIANT), (TAKE_COMMAND, PATH_VARIANT)):
            cmd = self.commands.get_command(alias)
            if cmd is not None and variant not in cmd.variants:
                raise CommandDefinitionError(
                    f"Command {cmd.name} is reached by {alias} but has no {variant} variant"
                )

    def select_variant(self, verb: str, args: List[str]) -> str:
        """
        Choose which variant of verb to run.

        "look" with no target, or with a word meaning the room, describes the
        area. "take" with a path name goes down that path. The look rule is
        checked first.
        """
        if self.commands.is_family_member(verb, LOOK_COMMAND) and (
            not args or (len(args) == 1 and normalize(args[0]) in ROOM_REFERENCES)
        ):
            return AREA_VARIANT

        if (
            self.commands.is_family_member(verb, TAKE_COMMAND)
            and args
            and self.current_area.get_link(args[0]) is not None
        ):
            return PATH_VARIANT

        return DEFAULT_VARIANT

    def handle_line(self, raw: str) -> SessionState:
        """Resolve and dispatch one line of input."""
        parsed = self._parser.parse(raw)
        if parsed.is_empty:
            return self.state

        verb = normalize(self.current_area.map_command(parsed.command))
        if same(verb, QUIT_COMMAND):
            self.write(self.terminate())
            return self.state

        variant = self.select_variant(verb, parsed.args)
        logger.debug(f"{parsed.command} -> {verb} [{variant}] args={parsed.args}")

        self.commands.call(self, verb, parsed.args, variant)
        if self.state is not SessionState.TERMINATED:
            self.state = SessionState.RESOLVED
        return self.state

    def run(self, lines: Iterable[str]) -> None:
        """
        Play until the player quits or input runs out.

        Args:
            lines: Source of input lines, e.g. sys.stdin
        """
        iterator = iter(lines)
        while self.state is not SessionState.TERMINATED:
            self.state = SessionState.AWAITING_INPUT
            self._write_prompt()
            try:
                raw = next(iterator)
            except StopIteration:
                self.output.write("\n")
                self.output.flush()
                break
            self.handle_line(raw)
