"""Entity functionality: kinds, capabilities, class hierarchy, registry and factory."""

from robotarena.core.entity.agents import (
    BeamSensorRobot,
    BumpSensorRobot,
    ControlBot,
    SteeringAgent,
    WhiskerRobot,
)
from robotarena.core.entity.base import Entity, MobileAgent
from robotarena.core.entity.core import EntityRegistry, KindMeta, entity_kind, get_registry
from robotarena.core.entity.factory import TEMPLATES, EntityFactory, KindTemplate, from_record
from robotarena.core.entity.models import (
    ArenaView,
    Capabilities,
    Direction,
    EntityKind,
    Surface,
)
from robotarena.core.entity.specials import BlackHole, Obstacle, TeleportPad

__all__ = [
    # Models
    "ArenaView",
    "Capabilities",
    "Direction",
    "EntityKind",
    "Surface",
    # Base
    "Entity",
    "MobileAgent",
    # Agents
    "BumpSensorRobot",
    "SteeringAgent",
    "WhiskerRobot",
    "BeamSensorRobot",
    "ControlBot",
    # Specials
    "Obstacle",
    "TeleportPad",
    "BlackHole",
    # Registry
    "entity_kind",
    "get_registry",
    "EntityRegistry",
    "KindMeta",
    # Factory
    "EntityFactory",
    "KindTemplate",
    "TEMPLATES",
    "from_record",
]
