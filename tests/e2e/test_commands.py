"""
Command execution tests.

Plays whole turns through the dispatch loop.
"""

import io

import pytest

from adventure import (
    Area,
    Command,
    CommandDefinitionError,
    CommandTable,
    GameSession,
    Item,
    Link,
    SessionState,
    World,
    WorldGraphError,
    build_command_table,
)


class TestLook:
    """Looking at the area, items and paths."""

    def test_intro_describes_first_room(self, game):
        assert "This area contains two oofs." in game.intro
        assert "The only obvious path is door-1." in game.intro

    def test_look_describes_area(self, game):
        text = game.send("look")
        assert text == game.intro
        assert text.splitlines() == [
            "You are in the first room. A long row of doors stretches ahead.",
            "This area contains two oofs.",
            "The only obvious path is door-1.",
        ]

    @pytest.mark.parametrize("line", ["look room", "look area", "examine", "LS", "view ROOM"])
    def test_area_view_synonyms(self, game, line):
        assert game.send(line) == game.intro

    def test_look_at_item(self, game):
        assert game.send("inspect oof") == "A small, squishy oof. It makes a noise when squeezed.\n"

    def test_look_at_path(self, game):
        assert game.send("look door-1") == "A plain wooden door marked 1.\n"

    def test_look_at_nothing(self, game):
        assert game.send("look unicorn") == "This area does not contain that.\n"

    def test_room_reference_with_extra_args_is_a_target(self, game):
        assert game.send("look room now") == "This area does not contain that.\n"


class TestCaptchalogue:
    """Moving items into the sylladex."""

    def test_captchalogue_moves_item(self, game):
        assert game.send("captchalogue oof") == "You captchalogue two oofs.\n"
        assert game.area.get_item("oof") is None
        assert game.session.inventory.get_item("oof").quantity == 2

    def test_look_after_captchalogue_shows_no_items(self, game):
        game.send("captcha oof")
        text = game.send("look")
        assert "This area contains" not in text
        assert "The only obvious path is door-1." in text

    def test_take_item(self, game):
        assert game.send("take oof") == "You captchalogue two oofs.\n"

    def test_missing_item(self, game):
        assert game.send("captchalogue ghost") == "This area does not contain that.\n"

    def test_no_argument(self, game):
        assert game.send("captcha") == "You cannot do that.\n"

    def test_quantities_merge(self, new_game):
        first = Area("first", "First.")
        first.set_item(Item("oof", quantity=2))
        first.set_link(Link(["door"], "second"))
        second = Area("second", "Second.")
        second.set_item(Item("oof"))
        second.set_link(Link(["door"], "first"))
        game = new_game(World([first, second]), "first")

        game.send("captchalogue oof")
        game.send("go door")
        assert game.send("captchalogue oof") == "You captchalogue an oof.\n"
        assert game.send("sylladex") == "Your sylladex contains three oofs.\n"


class TestMovement:
    """Going through links."""

    def test_go(self, game):
        text = game.send("go door-1")
        assert text.splitlines() == [
            "You walk through door-1.",
            "You are in room 1. It looks much like the others.",
            "Obvious paths are door-2 and door-0.",
        ]
        assert game.area.area_id == "room-1"

    def test_cd_alias(self, game):
        game.send("cd door-1")
        assert game.area.area_id == "room-1"

    def test_cannot_go(self, game):
        assert game.send("go door-7") == "You cannot go that way.\n"
        assert game.send("go") == "You cannot go that way.\n"
        assert game.area.area_id == "room-0"

    def test_round_trip_restores_area(self, game):
        game.send("go door-1")
        game.send("go back")

        assert game.area.area_id == "room-0"
        assert game.area.get_item("oof").quantity == 2
        assert "room-0" not in game.session.world
        assert "room-1" in game.session.world

    def test_items_taken_stay_taken(self, game):
        game.send("captchalogue oof")
        game.send("go door-1")
        game.send("go door-0")
        assert game.area.get_item("oof") is None

    def test_only_current_area_is_checked_out(self, game):
        world = game.session.world
        for line in ["go door-1", "go door-2", "go door-1"]:
            game.send(line)
            assert game.area.area_id not in world
            assert len(world) == 2

    def test_area_remap(self, game):
        game.send("enter door-1")
        assert game.area.area_id == "room-1"

    def test_failed_move_leaves_area_checked_out(self):
        hall = Area("hall", "A hall.")
        hall.set_link(Link(["door"], "cellar"))
        session = GameSession(World(), output=io.StringIO())
        session.current_area = hall

        with pytest.raises(WorldGraphError):
            session.handle_line("go door")
        assert session.current_area is hall
        assert "hall" not in session.world


class TestDispatchPolicy:
    """Context-sensitive variant selection."""

    def test_take_path_goes(self, game):
        text = game.send("take door-1")
        assert text.startswith("You walk through door-1.")
        assert game.area.area_id == "room-1"
        assert game.session.inventory.is_empty

    def test_path_wins_over_item_of_same_name(self, new_game):
        hall = Area("hall", "A hall.")
        hall.set_item(Item("hatch"))
        hall.set_link(Link(["hatch"], "attic", departure="You climb through the hatch."))
        attic = Area("attic", "An attic.")
        game = new_game(World([hall, attic]), "hall")

        assert game.send("take hatch").startswith("You climb through the hatch.")
        assert game.area.area_id == "attic"

    def test_look_rule_is_checked_before_take_rule(self):
        chosen = []

        def record(variant):
            def behavior(session, verb, args):
                chosen.append(variant)
            return behavior

        both = Command(
            ["look", "take"],
            {"default": record("default"), "area": record("area"), "path": record("path")},
        )
        hall = Area("hall")
        hall.set_link(Link(["door"], "hall"))
        session = GameSession(World(), commands=CommandTable([both]), output=io.StringIO())
        session.current_area = hall

        session.handle_line("take")
        session.handle_line("take door")
        session.handle_line("take lamp")
        assert chosen == ["area", "path", "default"]

    @pytest.mark.parametrize("alias, variant", [("look", "area"), ("take", "path")])
    def test_start_rejects_command_missing_selected_variant(self, alias, variant):
        table = build_command_table()
        table.set_command(Command([alias, "peek"], {"default": lambda session, verb, args: "..."}))
        session = GameSession(World([Area("hall")]), commands=table, output=io.StringIO())

        with pytest.raises(CommandDefinitionError, match=variant):
            session.start("hall")
        assert session.current_area is None

    def test_unknown_command(self, game):
        assert game.send("dance wildly") == "You cannot dance.\n"
        assert game.state is SessionState.RESOLVED

    def test_case_insensitive(self, game):
        game.send("Go DOOR-1")
        assert game.area.area_id == "room-1"


class TestUse:
    """Keyed item behaviours."""

    def test_use_default(self, game):
        game.send("captchalogue oof")
        assert game.send("use oof") == "Oof.\n"

    def test_use_named_way(self, game):
        assert game.send("use oof squeeze") == "OOF!\n"

    def test_use_unknown_way(self, game):
        assert game.send("use oof eat") == "You cannot use that that way.\n"

    def test_use_unknown_item(self, game):
        assert game.send("use ghost") == "You cannot do that.\n"
        assert game.send("use") == "You cannot do that.\n"


class TestSessionLoop:
    """Input handling, help and quitting."""

    def test_empty_input_changes_nothing(self, game):
        assert game.send("   ") == ""
        assert game.state is SessionState.AWAITING_INPUT

    def test_sylladex_empty(self, game):
        assert game.send("i") == "Your sylladex is empty.\n"

    def test_help_lists_commands(self, game):
        text = game.send("help")
        assert text.startswith("Available commands:")
        assert "captchalogue <item>" in text
        assert "(also: captcha)" in text
        assert "(also: examine, inspect, view, ls)" in text

    def test_quit(self, game):
        assert game.send("quit") == "Goodbye.\n"
        assert game.state is SessionState.TERMINATED

    def test_run_stops_at_quit(self, game):
        game.session.run(["look\n", "quit\n", "go door-1\n"])
        text = game.read_new()
        assert text.startswith("> ")
        assert text.endswith("> Goodbye.\n")
        assert game.area.area_id == "room-0"

    def test_run_stops_at_end_of_input(self, game):
        game.session.run(["go door-1\n"])
        assert game.area.area_id == "room-1"
        assert game.read_new().endswith("> \n")
        assert game.state is SessionState.AWAITING_INPUT
