"""Core functionalities: stateless primitives and the entity model.

Architecture Note:
    core/ contains geometry, identity, the entity hierarchy and phase
    descriptors. Nothing here owns a collection of entities or a tick
    counter. For stateful services, see world/, storage/ and scheduling/.
"""

from robotarena.core.entity import (
    ArenaView,
    BeamSensorRobot,
    BlackHole,
    BumpSensorRobot,
    Capabilities,
    ControlBot,
    Direction,
    Entity,
    EntityFactory,
    EntityKind,
    EntityRegistry,
    MobileAgent,
    Obstacle,
    SteeringAgent,
    Surface,
    TeleportPad,
    WhiskerRobot,
    entity_kind,
    from_record,
    get_registry,
)
from robotarena.core.geometry import Bounds
from robotarena.core.identity import EntityId
from robotarena.core.phase import PhaseDescriptor, phase
from robotarena.core.types import Copy

__all__ = [
    # Types
    "Copy",
    # Identity
    "EntityId",
    # Geometry
    "Bounds",
    # Entity
    "ArenaView",
    "Capabilities",
    "Direction",
    "EntityKind",
    "Surface",
    "Entity",
    "MobileAgent",
    "SteeringAgent",
    "BumpSensorRobot",
    "WhiskerRobot",
    "BeamSensorRobot",
    "ControlBot",
    "Obstacle",
    "TeleportPad",
    "BlackHole",
    "EntityFactory",
    "EntityRegistry",
    "entity_kind",
    "from_record",
    "get_registry",
    # Phase
    "PhaseDescriptor",
    "phase",
]
