"""Phase functionality: descriptor and decorator for tick passes."""

from robotarena.core.phase.core import phase
from robotarena.core.phase.models import PhaseDescriptor

__all__ = [
    "PhaseDescriptor",
    "phase",
]
