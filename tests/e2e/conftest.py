"""
Pytest fixtures for e2e tests.

Drives whole game sessions through handle_line with output captured in memory.
"""

import io
from dataclasses import dataclass, field

import pytest

from adventure import GameSession, SessionState
from adventure.world import generate_room_chain


@dataclass
class GameHarness:
    """A running session plus its captured output."""

    session: GameSession
    output: io.StringIO
    intro: str = ""
    _offset: int = field(default=0, repr=False)

    def read_new(self) -> str:
        """Output written since the last read."""
        text = self.output.getvalue()
        new = text[self._offset:]
        self._offset = len(text)
        return new

    def send(self, line: str) -> str:
        """Play one line and return what the game printed."""
        self.session.handle_line(line)
        return self.read_new()

    @property
    def area(self):
        return self.session.current_area

    @property
    def state(self) -> SessionState:
        return self.session.state


def start_game(world, start: str) -> GameHarness:
    output = io.StringIO()
    session = GameSession(world, output=output)
    session.start(start)
    harness = GameHarness(session=session, output=output)
    harness.intro = harness.read_new()
    return harness


@pytest.fixture
def game() -> GameHarness:
    """A fresh three-room chain, standing in the first room."""
    world, start = generate_room_chain(3)
    return start_game(world, start)


def pytest_configure(config):
    config.addinivalue_line("markers", "e2e: mark test as an end-to-end test")


def pytest_collection_modifyitems(config, items):
    """Auto-mark all tests in tests/e2e as e2e tests."""
    for item in items:
        if "e2e" in str(item.path):
            item.add_marker(pytest.mark.e2e)


@pytest.fixture
def new_game():
    """Factory for sessions over a custom world."""
    return start_game
