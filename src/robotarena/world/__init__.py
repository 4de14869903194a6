"""World functionality: the arena, its live view, phase results and the controller."""

from robotarena.world.arena import Arena
from robotarena.world.controller import ArenaController, ArenaInfo
from robotarena.world.result import TickResult
from robotarena.world.view import LiveArenaView

__all__ = [
    "Arena",
    "ArenaController",
    "ArenaInfo",
    "LiveArenaView",
    "TickResult",
]
