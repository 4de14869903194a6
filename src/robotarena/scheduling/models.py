"""Scheduling models and configuration.

Types for phase execution: the per-phase context, scheduler configuration
and the summary returned for each tick.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from robotarena.core.geometry import Bounds
    from robotarena.world.result import TickResult
    from robotarena.world.view import LiveArenaView


class TeleportResolution(Enum):
    """Where pad contact relocates an agent during a tick.

    LEGACY_DOUBLE additionally relocates a pad-touching agent from the
    collision pass, so it can move twice in one tick.
    """

    DEDICATED_PASS = auto()
    """Only the teleport phase relocates agents. Default."""

    LEGACY_DOUBLE = auto()
    """Teleport phase and collision phase both relocate agents touching a pad."""


@dataclass
class SchedulerConfig:
    """Configuration for scheduler behavior.

    Passed to the scheduler at construction.
    """

    teleport_resolution: TeleportResolution = TeleportResolution.DEDICATED_PASS
    """Which phases relocate agents touching a teleport pad."""

    record_timings: bool = True
    """Measure each phase with a monotonic clock."""


@dataclass(frozen=True, slots=True)
class PhaseContext:
    """Everything a phase may touch while it runs.

    Attributes:
        view: Live read-only arena view.
        result: Buffer for removals and events; applied after the phase.
        rng: Arena random generator (teleport destinations).
        config: Scheduler configuration.
        teleport_margin: Wall clearance for teleport destinations.
        phase_name: Name of the running phase, stamped on events.
    """

    view: LiveArenaView
    result: TickResult
    rng: random.Random
    config: SchedulerConfig
    teleport_margin: float = 10.0
    phase_name: str = ""

    @property
    def bounds(self) -> Bounds:
        return self.view.bounds

    def emit(self, event_type: str, **payload: object) -> None:
        """Record an event tagged with the running phase."""
        self.result.record(event_type, phase=self.phase_name, **payload)


@dataclass
class TickSummary:
    """What one scheduler tick did.

    Attributes:
        result: Merged result of every phase (removals already applied).
        phase_timings: Phase name -> milliseconds, empty if timing is off.
    """

    result: TickResult
    phase_timings: dict[str, float] = field(default_factory=dict)
