"""
YAML world loader tests.
"""

from pathlib import Path

import pytest

from adventure import WorldLoadError
from adventure.world import WorldLoader, load_world

EXAMPLE_WORLD = Path(__file__).resolve().parents[2] / "worlds" / "apartment.yaml"


def write_world(tmp_path: Path, text: str) -> str:
    path = tmp_path / "world.yaml"
    path.write_text(text)
    return str(path)


class TestExampleWorld:
    """The bundled example world."""

    def test_loads(self):
        world, start = load_world(str(EXAMPLE_WORLD))
        assert start == "bedroom"
        assert len(world) == 3
        world.validate()

    def test_items_and_links(self):
        world, _ = load_world(str(EXAMPLE_WORLD))
        bedroom = world.get("bedroom")
        assert bedroom.get_item("arrow").quantity == 3
        assert bedroom.get_link("door") is bedroom.get_link("hallway")
        assert bedroom.map_command("leave") == "go"

    def test_item_uses(self):
        world, _ = load_world(str(EXAMPLE_WORLD))
        use = world.get("bedroom").get_item("computer").get_use()
        assert use(None, None, []) == "The installer bar inches forward."


class TestLoadErrors:
    """Problems are collected and raised together."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(WorldLoadError) as exc_info:
            load_world(str(tmp_path / "missing.yaml"))
        assert exc_info.value.errors

    def test_empty_file(self, tmp_path):
        with pytest.raises(WorldLoadError) as exc_info:
            load_world(write_world(tmp_path, ""))
        assert "empty" in exc_info.value.errors[0]

    def test_malformed_yaml(self, tmp_path):
        with pytest.raises(WorldLoadError):
            load_world(write_world(tmp_path, "start: [unclosed"))

    def test_missing_start(self, tmp_path):
        with pytest.raises(WorldLoadError):
            load_world(write_world(tmp_path, "areas:\n  - id: a\n"))

    def test_dangling_link(self, tmp_path):
        text = (
            "start: a\n"
            "areas:\n"
            "  - id: a\n"
            "    links:\n"
            "      - aliases: [door]\n"
            "        to: nowhere\n"
        )
        with pytest.raises(WorldLoadError) as exc_info:
            load_world(write_world(tmp_path, text))
        assert "nowhere" in exc_info.value.errors[0]

    def test_all_area_errors_collected(self, tmp_path):
        text = (
            "start: a\n"
            "areas:\n"
            "  - id: a\n"
            "  - id: a\n"
            "  - id: b\n"
            "    colour: blue\n"
            "  - id: c\n"
            "    items:\n"
            "      - name: oof\n"
            "        quantity: -2\n"
        )
        loader = WorldLoader(write_world(tmp_path, text))
        with pytest.raises(WorldLoadError):
            loader.load()
        assert len(loader.errors) == 3
        assert any("Duplicate area id: a" in error for error in loader.errors)

    def test_unknown_start_area(self, tmp_path):
        with pytest.raises(WorldLoadError) as exc_info:
            load_world(write_world(tmp_path, "start: z\nareas:\n  - id: a\n"))
        assert "Start area does not exist: z" in exc_info.value.errors
