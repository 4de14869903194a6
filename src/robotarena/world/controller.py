"""Headless command surface for driving an arena from a UI or a script.

The controller holds the state a presentation shell would otherwise keep:
whether ticks are running, the selected entity, the active control bot and
the movement keys currently held down.

Usage:
    controller = ArenaController(Arena.with_defaults())
    controller.add_random(EntityKind.CONTROL_BOT)
    controller.start()

    # Once per frame
    controller.press(Direction.LEFT)
    controller.frame()
    controller.render(surface)

    # Editing only happens while stopped
    controller.stop()
    controller.select_at(120.0, 80.0)
    controller.drag_selected(200.0, 200.0)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import cast

from robotarena.config import PersistenceSettings
from robotarena.core.entity import ControlBot, Direction, Entity, EntityKind, Surface
from robotarena.core.identity import EntityId
from robotarena.persistence import LoadReport, load_arena, save_arena
from robotarena.persistence.io import PathArg
from robotarena.world.arena import Arena

logger = logging.getLogger(__name__)

SELECTION_COLOR = "red"
SELECTION_PADDING = 2.0


@dataclass(frozen=True, slots=True)
class ArenaInfo:
    """Status panel contents.

    Attributes:
        robots: Number of mobile entities.
        obstacles: Number of plain obstacles (pads and holes not counted).
        control_bot: Position of the active control bot, None if there is none.
        selected: Label of the selected entity, None if nothing is selected.
        selected_position: Position of the selected entity, None if nothing is selected.
    """

    robots: int
    obstacles: int
    control_bot: tuple[float, float] | None
    selected: str | None
    selected_position: tuple[float, float] | None = None


class ArenaController:
    """Routes user commands to an arena between (and during) ticks.

    Args:
        arena: Arena to drive.
        settings: Persistence settings for save() and load().
    """

    def __init__(self, arena: Arena, settings: PersistenceSettings | None = None) -> None:
        self._arena = arena
        self._settings = settings or PersistenceSettings()
        self._running = False
        self._selected: EntityId | None = None
        self._control_bot: EntityId | None = None
        self._held: set[Direction] = set()
        self._bind_control_bot()

    @property
    def arena(self) -> Arena:
        return self._arena

    @property
    def running(self) -> bool:
        return self._running

    @property
    def selected(self) -> Entity | None:
        """Selected entity, None if nothing is selected or it has gone."""
        if self._selected is None:
            return None
        return self._arena.get(self._selected)

    @property
    def control_bot(self) -> ControlBot | None:
        """Active control bot, None if there is none or it was absorbed."""
        if self._control_bot is None:
            return None
        return cast(ControlBot | None, self._arena.get(self._control_bot))

    @property
    def held(self) -> frozenset[Direction]:
        return frozenset(self._held)

    # Run state

    def start(self) -> None:
        if not self._running:
            self._running = True
            self._selected = None
            logger.info("Simulation started")

    def stop(self) -> None:
        if self._running:
            self._running = False
            logger.info("Simulation stopped")

    def frame(self) -> bool:
        """Advance one tick and apply held movement keys, if running.

        Returns:
            True if a tick ran.
        """
        if not self._running:
            return False
        self._arena.advance()
        bot = self.control_bot
        if bot is not None:
            for direction in Direction:
                if direction in self._held:
                    bot.move(direction)
        return True

    # Editing

    def add_random(self, kind: EntityKind) -> EntityId:
        """Add a randomly placed entity of `kind`.

        Only one control bot is active at a time; asking for another returns
        the handle of the existing one.
        """
        if kind is EntityKind.CONTROL_BOT and self._control_bot is not None:
            if self.control_bot is not None:
                logger.info(f"Control bot already active as {self._control_bot}")
                return self._control_bot
        entity_id = self._arena.spawn(kind)
        if kind is EntityKind.CONTROL_BOT:
            self._control_bot = entity_id
        logger.info(f"Added {kind.tag} as {entity_id}")
        return entity_id

    def select_at(self, x: float, y: float) -> Entity | None:
        """Select the first entity whose bounding box contains (x, y).

        Ignored while running. Clicking empty space clears the selection.
        """
        if self._running:
            return None
        self._selected = None
        for entity_id, entity in self._items():
            r = entity.radius
            if entity.x - r <= x <= entity.x + r and entity.y - r <= y <= entity.y + r:
                self._selected = entity_id
                logger.info(f"Selected {self._arena.view().label(entity)}")
                return entity
        return None

    def drag_selected(self, x: float, y: float) -> bool:
        """Move the selected entity to (x, y). Ignored while running."""
        entity = self.selected
        if self._running or entity is None:
            return False
        entity.x, entity.y = float(x), float(y)
        return True

    def remove_selected(self) -> bool:
        """Remove the selected entity and clear the selection."""
        if self._selected is None:
            return False
        entity_id, self._selected = self._selected, None
        removed = self._arena.remove(entity_id)
        if removed:
            logger.info(f"Removed {entity_id}")
        return removed

    def clear(self) -> None:
        """Remove every entity and forget selection, control bot and held keys."""
        self._arena.remove_all()
        self._selected = None
        self._control_bot = None
        self._held.clear()
        logger.info("Arena cleared")

    # Manual driving

    def move(self, direction: Direction) -> bool:
        """Step the control bot once. Returns False if there is none."""
        bot = self.control_bot
        if bot is None:
            return False
        bot.move(direction)
        return True

    def press(self, direction: Direction) -> None:
        """Hold a movement key; frame() moves the control bot while it is held."""
        self._held.add(direction)

    def release(self, direction: Direction) -> None:
        self._held.discard(direction)

    # Persistence

    def save(self, path: PathArg) -> int:
        """Save the arena. Raises ArenaIOError if the file cannot be written."""
        return save_arena(self._arena.list_entities(), path, self._settings)

    def load(self, path: PathArg) -> LoadReport:
        """Replace the arena contents with a saved file.

        The arena is untouched if the file cannot be read. The first loaded
        control bot becomes the active one.

        Raises:
            ArenaIOError: If the file cannot be read.
        """
        entities, report = load_arena(path, self._settings)
        self._arena.replace_all(entities)
        self._selected = None
        self._bind_control_bot()
        return report

    # Presentation

    def info(self) -> ArenaInfo:
        bot = self.control_bot
        selected = self.selected
        return ArenaInfo(
            robots=self._arena.count_mobile(),
            obstacles=self._arena.count_by_kind(EntityKind.OBSTACLE),
            control_bot=(bot.x, bot.y) if bot is not None else None,
            selected=self._arena.view().label(selected) if selected is not None else None,
            selected_position=(selected.x, selected.y) if selected is not None else None,
        )

    def render(self, surface: Surface) -> None:
        """Draw the selection highlight, then every entity."""
        selected = self.selected
        if selected is not None:
            surface.stroke_circle(
                selected.x,
                selected.y,
                selected.radius + SELECTION_PADDING,
                SELECTION_COLOR,
                2.0,
            )
        self._arena.render(surface)

    def _items(self) -> list[tuple[EntityId, Entity]]:
        view = self._arena.view()
        items = []
        for entity in view:
            entity_id = view.id_of(entity)
            if entity_id is not None:
                items.append((entity_id, entity))
        return items

    def _bind_control_bot(self) -> None:
        self._control_bot = None
        for entity_id, entity in self._items():
            if entity.kind is EntityKind.CONTROL_BOT:
                self._control_bot = entity_id
                break
