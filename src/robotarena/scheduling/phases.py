"""Built-in tick phases, in the order the default scheduler runs them.

1. integrate: every entity updates (steering agents sense first).
2. absorb: mobile entities overlapping a black hole are removed.
3. teleport: mobile entities overlapping a pad are relocated.
4. collide: mobile entities touching a solid entity reverse heading.

All pair tests are brute force over the live list.
"""

from __future__ import annotations

import logging
from typing import cast

from robotarena.core.entity import BlackHole, MobileAgent, TeleportPad
from robotarena.core.phase import PhaseDescriptor, phase
from robotarena.scheduling.models import PhaseContext, TeleportResolution

logger = logging.getLogger(__name__)


@phase()
def integrate(ctx: PhaseContext) -> None:
    """Call update() on every entity with the live view."""
    for entity in ctx.view:
        entity.update(ctx.view)


@phase()
def absorb(ctx: PhaseContext) -> None:
    """Mark every mobile entity overlapping any black hole for removal.

    The scan runs over the pre-removal list; the arena removes marked
    entities after the phase.
    """
    holes = [cast(BlackHole, e) for e in ctx.view.of_capability("absorber")]
    if not holes:
        return
    for agent in ctx.view.of_capability("mobile"):
        for hole in holes:
            if hole.absorbs(cast(MobileAgent, agent)):
                ctx.result.destroy(agent)
                ctx.emit(
                    "absorbed",
                    entity=ctx.view.label(agent),
                    by=ctx.view.label(hole),
                )
                logger.debug(f"{ctx.view.label(agent)} absorbed by {ctx.view.label(hole)}")
                break


def _relocate(ctx: PhaseContext, agent: MobileAgent, pad: TeleportPad) -> None:
    x, y = pad.teleport(agent, ctx.rng, ctx.bounds, ctx.teleport_margin)
    ctx.emit(
        "teleported",
        entity=ctx.view.label(agent),
        by=ctx.view.label(pad),
        x=x,
        y=y,
    )
    logger.debug(f"{ctx.view.label(agent)} teleported to ({x:.1f}, {y:.1f})")


@phase()
def teleport(ctx: PhaseContext) -> None:
    """Relocate every mobile entity overlapping a teleport pad.

    Relocation is immediate, so one agent can be moved by several pads in
    the same tick if it lands on another pad checked later.
    """
    pads = [cast(TeleportPad, e) for e in ctx.view.of_capability("teleporter")]
    if not pads:
        return
    for agent in ctx.view.of_capability("mobile"):
        for pad in pads:
            if agent.check_collision(pad):
                _relocate(ctx, cast(MobileAgent, agent), pad)


@phase()
def collide(ctx: PhaseContext) -> None:
    """Reverse mobile entities touching a solid entity, once per contact.

    Every ordered pair (agent, other) is tested, so two overlapping robots
    both turn around, and an agent touching two obstacles turns twice.
    """
    legacy_teleport = ctx.config.teleport_resolution is TeleportResolution.LEGACY_DOUBLE
    entities = list(ctx.view)
    for agent in entities:
        if not agent.capabilities.mobile:
            continue
        mover = cast(MobileAgent, agent)
        for other in entities:
            if other is agent:
                continue
            if other.capabilities.collides_physically:
                if mover.handle_collision(other):
                    ctx.emit(
                        "collided",
                        entity=ctx.view.label(agent),
                        other=ctx.view.label(other),
                    )
            elif other.capabilities.teleporter and legacy_teleport:
                if mover.check_collision(other):
                    _relocate(ctx, mover, cast(TeleportPad, other))


DEFAULT_PHASES: tuple[PhaseDescriptor, ...] = (integrate, absorb, teleport, collide)
"""Phases in tick order."""
