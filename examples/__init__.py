"""Example surfaces and scripts for robotarena.

This package demonstrates library usage but is not part of the core API.
"""

from .surfaces import AsciiSurface

__all__ = [
    "AsciiSurface",
]
