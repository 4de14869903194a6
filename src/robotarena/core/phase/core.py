"""Phase decorator.

Usage:
    @phase()
    def integrate(ctx: PhaseContext) -> None:
        for entity in ctx.view:
            entity.update(ctx.view)

    @phase(name="absorb")
    def absorb_agents(ctx: PhaseContext) -> None:
        ...
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

from robotarena.core.phase.models import PhaseDescriptor


def phase(name: str | None = None) -> Callable[[Callable[..., Any]], PhaseDescriptor]:
    """Turn a function into a phase descriptor.

    Args:
        name: Phase name. Defaults to the function name.

    Returns:
        Decorator that wraps the function in a PhaseDescriptor.

    Raises:
        TypeError: If the decorated function is a coroutine function. Ticks
            run to completion without suspension points.
    """

    def decorator(fn: Callable[..., Any]) -> PhaseDescriptor:
        if inspect.iscoroutinefunction(fn):
            raise TypeError(f"Phase {fn.__name__} must be synchronous")
        doc = inspect.getdoc(fn) or ""
        return PhaseDescriptor(
            name=name or fn.__name__,
            run=fn,
            description=doc.splitlines()[0] if doc else "",
        )

    return decorator
