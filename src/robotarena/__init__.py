"""robotarena: toy 2D arena of robots, obstacles, teleport pads and black holes.

Usage:
    from robotarena import Arena, ArenaSettings, EntityKind, Obstacle, WhiskerRobot

    arena = Arena(settings=ArenaSettings(seed=7))
    arena.add_entity(WhiskerRobot(100.0, 100.0, 15.0, speed=4.0))
    arena.add_entity(Obstacle(115.0, 100.0, 20.0))
    arena.spawn(EntityKind.BLACK_HOLE)

    for _ in range(100):
        arena.advance()

    save_arena(arena.list_entities(), "arena.txt")
"""

__version__ = "0.1.0"

# Configuration
from robotarena.config import ArenaSettings, PersistenceSettings

# Core primitives
from robotarena.core import (
    ArenaView,
    BeamSensorRobot,
    BlackHole,
    Bounds,
    BumpSensorRobot,
    Capabilities,
    ControlBot,
    Direction,
    Entity,
    EntityFactory,
    EntityId,
    EntityKind,
    MobileAgent,
    Obstacle,
    Surface,
    TeleportPad,
    WhiskerRobot,
    entity_kind,
    from_record,
    phase,
)

# Persistence
from robotarena.persistence import (
    ArenaIOError,
    LoadReport,
    MalformedRecordError,
    PersistenceError,
    UnknownKindError,
    load_arena,
    save_arena,
)

# Scheduling
from robotarena.scheduling import (
    PhaseScheduler,
    SchedulerConfig,
    TeleportResolution,
    default_scheduler,
)

# Storage
from robotarena.storage import EntityStore, LocalEntityStore

# Tracing (optional)
from robotarena.tracing import HistoryStore, InMemoryHistoryStore, TickRecord

# World and control
from robotarena.world import Arena, ArenaController, ArenaInfo, LiveArenaView, TickResult

__all__ = [
    # Version
    "__version__",
    # Config
    "ArenaSettings",
    "PersistenceSettings",
    # Core
    "ArenaView",
    "Bounds",
    "Capabilities",
    "Direction",
    "Entity",
    "EntityFactory",
    "EntityId",
    "EntityKind",
    "MobileAgent",
    "Surface",
    "entity_kind",
    "from_record",
    "phase",
    # Entities
    "BumpSensorRobot",
    "WhiskerRobot",
    "BeamSensorRobot",
    "ControlBot",
    "Obstacle",
    "TeleportPad",
    "BlackHole",
    # Persistence
    "ArenaIOError",
    "LoadReport",
    "MalformedRecordError",
    "PersistenceError",
    "UnknownKindError",
    "load_arena",
    "save_arena",
    # Scheduling
    "PhaseScheduler",
    "SchedulerConfig",
    "TeleportResolution",
    "default_scheduler",
    # Storage
    "EntityStore",
    "LocalEntityStore",
    # Tracing
    "HistoryStore",
    "InMemoryHistoryStore",
    "TickRecord",
    # World
    "Arena",
    "ArenaController",
    "ArenaInfo",
    "LiveArenaView",
    "TickResult",
]
