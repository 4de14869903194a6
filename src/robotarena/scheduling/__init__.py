"""Tick scheduling: ordered phases, configuration and the built-in passes.

Usage:
    from robotarena.scheduling import SchedulerConfig, TeleportResolution, default_scheduler

    scheduler = default_scheduler(
        SchedulerConfig(teleport_resolution=TeleportResolution.LEGACY_DOUBLE)
    )
"""

from robotarena.scheduling.models import (
    PhaseContext,
    SchedulerConfig,
    TeleportResolution,
    TickSummary,
)
from robotarena.scheduling.phases import DEFAULT_PHASES, absorb, collide, integrate, teleport
from robotarena.scheduling.scheduler import PhaseScheduler, default_scheduler

__all__ = [
    # Scheduler
    "PhaseScheduler",
    "default_scheduler",
    # Config
    "SchedulerConfig",
    "TeleportResolution",
    # Models
    "PhaseContext",
    "TickSummary",
    # Phases
    "DEFAULT_PHASES",
    "integrate",
    "absorb",
    "teleport",
    "collide",
]
