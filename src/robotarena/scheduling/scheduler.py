"""Phase scheduler: runs registered phases in order, applying results between them.

Usage:
    # Default scheduler (integrate, absorb, teleport, collide)
    scheduler = default_scheduler()
    arena = Arena(scheduler=scheduler)

    # Custom phase list
    scheduler = PhaseScheduler()
    scheduler.register_phases(integrate, collide)

    # Bug-compatible double teleport
    config = SchedulerConfig(teleport_resolution=TeleportResolution.LEGACY_DOUBLE)
    scheduler = default_scheduler(config)
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from robotarena.core.phase import PhaseDescriptor
from robotarena.scheduling.models import PhaseContext, SchedulerConfig, TickSummary
from robotarena.scheduling.phases import DEFAULT_PHASES
from robotarena.world.result import TickResult

if TYPE_CHECKING:
    from robotarena.world.arena import Arena


class PhaseScheduler:
    """Sequential scheduler: one phase at a time, in registration order.

    Each phase writes into a fresh TickResult. The arena applies that result
    (removals) before the next phase starts, so every phase sees the
    membership left by the previous one.

    Args:
        config: Scheduler configuration (teleport resolution, timing).
    """

    def __init__(self, config: SchedulerConfig | None = None) -> None:
        self._config = config or SchedulerConfig()
        self._phases: list[PhaseDescriptor] = []

    @property
    def config(self) -> SchedulerConfig:
        return self._config

    def register_phase(self, descriptor: PhaseDescriptor) -> None:
        """Append a phase to the tick.

        Raises:
            ValueError: If a phase with the same name is already registered.
        """
        if any(p.name == descriptor.name for p in self._phases):
            raise ValueError(f"Phase {descriptor.name!r} is already registered")
        self._phases.append(descriptor)

    def register_phases(self, *descriptors: PhaseDescriptor) -> None:
        """Register multiple phases."""
        for d in descriptors:
            self.register_phase(d)

    def phases(self) -> list[str]:
        """Registered phase names in execution order (for debugging)."""
        return [p.name for p in self._phases]

    def tick(self, arena: Arena) -> TickSummary:
        """Run every phase once against `arena`."""
        merged = TickResult()
        timings: dict[str, float] = {}
        view = arena.view()

        for descriptor in self._phases:
            ctx = PhaseContext(
                view=view,
                result=TickResult(),
                rng=arena.rng,
                config=self._config,
                teleport_margin=arena.settings.teleport_margin,
                phase_name=descriptor.name,
            )
            started = time.perf_counter()
            descriptor(ctx)
            if self._config.record_timings:
                timings[descriptor.name] = (time.perf_counter() - started) * 1000.0

            arena.apply_result(ctx.result)
            merged.merge(ctx.result)

        return TickSummary(result=merged, phase_timings=timings)


def default_scheduler(config: SchedulerConfig | None = None) -> PhaseScheduler:
    """Create a scheduler with the built-in integrate/absorb/teleport/collide phases."""
    scheduler = PhaseScheduler(config=config)
    scheduler.register_phases(*DEFAULT_PHASES)
    return scheduler
