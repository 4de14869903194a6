"""Tests for the headless command surface.

Critical Invariants:
- Ticks only run while started
- Editing (select, drag) is ignored while running
- At most one active control bot; commands route to it until it is gone
- Loading replaces the arena and rebinds the control bot
"""

import pytest

from robotarena import (
    ArenaController,
    ArenaIOError,
    BlackHole,
    BumpSensorRobot,
    ControlBot,
    Direction,
    EntityKind,
    Obstacle,
    TeleportPad,
)


@pytest.fixture
def controller(arena):
    return ArenaController(arena)


# Run state


def test_frame_only_ticks_while_running(controller):
    assert controller.frame() is False
    assert controller.arena.tick_count == 0

    controller.start()
    assert controller.running
    assert controller.frame() is True
    assert controller.arena.tick_count == 1

    controller.stop()
    assert controller.frame() is False
    assert controller.arena.tick_count == 1


# Control bot


def test_single_control_bot(controller):
    first = controller.add_random(EntityKind.CONTROL_BOT)
    second = controller.add_random(EntityKind.CONTROL_BOT)

    assert first == second
    assert controller.arena.count_by_kind(EntityKind.CONTROL_BOT) == 1
    assert controller.info().control_bot == (250.0, 250.0)


def test_move_routes_to_control_bot(controller):
    assert controller.move(Direction.UP) is False

    controller.add_random(EntityKind.CONTROL_BOT)
    assert controller.move(Direction.UP) is True
    assert controller.info().control_bot == (250.0, 248.0)


def test_held_keys_apply_once_per_frame(controller):
    controller.add_random(EntityKind.CONTROL_BOT)
    controller.press(Direction.LEFT)
    controller.press(Direction.DOWN)

    controller.frame()  # stopped: nothing happens
    assert controller.info().control_bot == (250.0, 250.0)

    controller.start()
    controller.frame()
    controller.frame()
    assert controller.info().control_bot == (246.0, 254.0)

    controller.release(Direction.LEFT)
    controller.frame()
    assert controller.info().control_bot == (246.0, 256.0)
    assert controller.held == frozenset({Direction.DOWN})


def test_opposite_keys_cancel(controller):
    controller.add_random(EntityKind.CONTROL_BOT)
    controller.press(Direction.LEFT)
    controller.press(Direction.RIGHT)
    controller.start()
    controller.frame()
    assert controller.info().control_bot == (250.0, 250.0)


def test_absorbed_control_bot_releases_commands(controller):
    controller.arena.add_entity(BlackHole(250.0, 250.0, 20.0))
    controller.add_random(EntityKind.CONTROL_BOT)
    controller.start()

    controller.frame()

    assert controller.control_bot is None
    assert controller.move(Direction.UP) is False
    assert controller.info().control_bot is None

    new_id = controller.add_random(EntityKind.CONTROL_BOT)
    assert controller.arena.get(new_id) is controller.control_bot


# Editing


def test_select_uses_bounding_box(controller):
    rock = Obstacle(100.0, 100.0, 20.0)
    controller.arena.add_entity(rock)

    # Corner of the box is outside the circle but still selects
    assert controller.select_at(119.0, 119.0) is rock
    assert controller.selected is rock

    assert controller.select_at(121.0, 100.0) is None
    assert controller.selected is None


def test_select_first_match(controller):
    first = Obstacle(100.0, 100.0, 20.0)
    second = TeleportPad(105.0, 100.0, 15.0)
    controller.arena.add_entity(first)
    controller.arena.add_entity(second)

    assert controller.select_at(105.0, 100.0) is first


def test_editing_ignored_while_running(controller):
    rock = Obstacle(100.0, 100.0, 20.0)
    controller.arena.add_entity(rock)
    controller.select_at(100.0, 100.0)
    controller.start()

    assert controller.select_at(100.0, 100.0) is None
    assert controller.drag_selected(300.0, 300.0) is False
    assert (rock.x, rock.y) == (100.0, 100.0)

    controller.stop()
    assert controller.selected is None
    assert controller.drag_selected(300.0, 300.0) is False

    controller.select_at(100.0, 100.0)
    assert controller.drag_selected(300.0, 300.0) is True
    assert (rock.x, rock.y) == (300.0, 300.0)


def test_start_clears_selection(controller, surface):
    """CRITICAL: A selection made before start() must not survive the run."""
    rock = Obstacle(100.0, 100.0, 20.0)
    controller.arena.add_entity(rock)
    controller.select_at(100.0, 100.0)

    controller.start()

    assert controller.selected is None
    assert controller.remove_selected() is False
    assert rock in controller.arena

    controller.render(surface)
    assert surface.of("stroke_circle") == []


def test_remove_selected(controller):
    rock = Obstacle(100.0, 100.0, 20.0)
    controller.arena.add_entity(rock)
    assert controller.remove_selected() is False

    controller.select_at(100.0, 100.0)
    assert controller.remove_selected() is True
    assert rock not in controller.arena
    assert controller.selected is None
    assert controller.remove_selected() is False


def test_removing_control_bot_unbinds_it(controller):
    controller.add_random(EntityKind.CONTROL_BOT)
    controller.select_at(250.0, 250.0)
    controller.remove_selected()
    assert controller.control_bot is None


def test_clear(controller):
    controller.add_random(EntityKind.CONTROL_BOT)
    controller.add_random(EntityKind.OBSTACLE)
    controller.press(Direction.UP)
    controller.select_at(250.0, 250.0)

    controller.clear()

    assert len(controller.arena) == 0
    assert controller.control_bot is None
    assert controller.selected is None
    assert controller.held == frozenset()


# Presentation


def test_info(controller):
    arena = controller.arena
    arena.add_entity(BumpSensorRobot(50.0, 50.0, 15.0, speed=3.0))
    arena.add_entity(Obstacle(100.0, 100.0, 20.0))
    arena.add_entity(TeleportPad(200.0, 200.0, 15.0))
    arena.add_entity(BlackHole(400.0, 400.0, 20.0))
    controller.add_random(EntityKind.CONTROL_BOT)

    info = controller.info()
    assert info.robots == 2
    assert info.obstacles == 1
    assert info.control_bot == (250.0, 250.0)
    assert info.selected is None
    assert info.selected_position is None

    controller.select_at(100.0, 100.0)
    assert controller.info().selected == "Obstacle#1.0"
    assert controller.info().selected_position == (100.0, 100.0)


def test_render_highlights_selection_first(controller, surface):
    controller.arena.add_entity(Obstacle(100.0, 100.0, 20.0))
    controller.select_at(100.0, 100.0)

    controller.render(surface)

    assert surface.calls[0] == ("stroke_circle", 100.0, 100.0, 22.0, "red", 2.0)
    assert surface.calls[1] == ("fill_circle", 100.0, 100.0, 20.0, "gray")


# Persistence


def test_save_and_load_rebinds_control_bot(controller, arena, tmp_path):
    path = tmp_path / "arena.txt"
    controller.add_random(EntityKind.OBSTACLE)
    controller.add_random(EntityKind.CONTROL_BOT)
    controller.add_random(EntityKind.WHISKER_ROBOT)
    assert controller.save(path) == 3

    other = ArenaController(type(arena)())
    report = other.load(path)

    assert report.ok
    assert report.loaded == 3
    assert other.arena.records() == arena.records()
    bot = other.control_bot
    assert isinstance(bot, ControlBot)
    assert (bot.speed, bot.heading) == (2.0, 0.0)


def test_load_clears_selection(controller, tmp_path):
    path = tmp_path / "arena.txt"
    path.write_text("Obstacle,10.0,10.0,5.0\n")
    controller.arena.add_entity(Obstacle(100.0, 100.0, 20.0))
    controller.select_at(100.0, 100.0)

    controller.load(path)

    assert controller.selected is None
    assert len(controller.arena) == 1


def test_failed_load_leaves_arena_untouched(controller, tmp_path):
    rock = Obstacle(100.0, 100.0, 20.0)
    controller.arena.add_entity(rock)

    with pytest.raises(ArenaIOError):
        controller.load(tmp_path / "missing.txt")

    assert controller.arena.list_entities() == [rock]


def test_controller_binds_existing_control_bot(arena):
    bot = ControlBot(10.0, 10.0, 15.0, speed=2.0)
    arena.add_entity(bot)
    assert ArenaController(arena).control_bot is bot
