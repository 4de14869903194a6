"""Basic robotarena usage example.

Demonstrates:
- Arena creation from settings and explicit entity placement
- A custom phase appended to the default tick
- Driving the control bot through the controller
- Tick history and saving the final arena

Run with: python -m examples.simple_arena
"""

import logging

from robotarena import (
    Arena,
    ArenaController,
    ArenaSettings,
    BlackHole,
    Direction,
    EntityKind,
    Obstacle,
    TeleportPad,
    WhiskerRobot,
    default_scheduler,
    phase,
)

from .surfaces import AsciiSurface


@phase()
def crowding(ctx) -> None:
    """Flag ticks where more than five robots are alive."""
    robots = ctx.view.of_capability("mobile")
    if len(robots) > 5:
        ctx.emit("crowded", robots=len(robots))


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    scheduler = default_scheduler()
    scheduler.register_phase(crowding)
    arena = Arena(settings=ArenaSettings(seed=7, history_size=100), scheduler=scheduler)

    arena.add_entity(WhiskerRobot(100.0, 100.0, 15.0, speed=4.0, heading=0.0))
    arena.add_entity(Obstacle(160.0, 100.0, 20.0))
    arena.add_entity(TeleportPad(400.0, 100.0, 15.0))
    arena.add_entity(BlackHole(400.0, 400.0, 20.0))
    for kind in (EntityKind.BUMP_SENSOR_ROBOT, EntityKind.BEAM_SENSOR_ROBOT) * 3:
        arena.spawn(kind)

    controller = ArenaController(arena)
    controller.add_random(EntityKind.CONTROL_BOT)
    controller.press(Direction.UP)
    controller.start()
    for _ in range(200):
        controller.frame()
    controller.stop()

    info = controller.info()
    print(f"After {arena.tick_count} ticks: {info.robots} robots, control bot at {info.control_bot}")

    history = arena.history
    if history is not None:
        events = history.get_events(1, arena.tick_count)
        for event_type in ("absorbed", "teleported", "collided", "crowded"):
            print(f"  {event_type}: {sum(1 for e in events if e['type'] == event_type)}")

    surface = AsciiSurface(arena.settings.bounds)
    controller.render(surface)
    print(surface.text())

    controller.save("simple_arena.txt")


if __name__ == "__main__":
    main()
