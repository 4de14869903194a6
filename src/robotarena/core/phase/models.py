"""Phase models: descriptors for the ordered passes of a tick."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PhaseDescriptor:
    """Metadata about a registered tick phase.

    Attributes:
        name: Phase name, used in timings and tick events.
        run: Callable taking a PhaseContext. Its return value is ignored.
        description: One-line summary, taken from the docstring by default.
    """

    name: str
    run: Callable[..., Any]
    description: str = ""

    def __call__(self, ctx: Any) -> None:
        self.run(ctx)
