"""Configuration module using Pydantic Settings.

Usage:
    from robotarena.config import ArenaSettings, PersistenceSettings

    settings = ArenaSettings(seed=42)
    persistence = PersistenceSettings(default_speed=3.0)
"""

from robotarena.config.settings import ArenaSettings, PersistenceSettings

__all__ = [
    "ArenaSettings",
    "PersistenceSettings",
]
