"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from robotarena.config import ArenaSettings, PersistenceSettings

    # Load from environment variables (ARENA_*, ARENA_PERSIST_*)
    arena_settings = ArenaSettings()
    persist_settings = PersistenceSettings()

    # Or override with explicit values
    arena_settings = ArenaSettings(seed=7, history_size=200)
"""

from __future__ import annotations

import codecs
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from robotarena.core.geometry import Bounds


class ArenaSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for an arena and its tick loop.

    Attributes:
        width: Arena width; walls sit at x=0 and x=width.
        height: Arena height; walls sit at y=0 and y=height.
        spawn_margin: Minimum wall clearance for randomly spawned entities.
        teleport_margin: Minimum wall clearance for teleport destinations.
        seed: Seed for the arena's random generator (None = nondeterministic).
        history_size: Ticks kept by the default in-memory history (0 = off).
        log_level: Level applied by the command-line driver.

    Environment Variables:
        ARENA_WIDTH
        ARENA_HEIGHT
        ARENA_SPAWN_MARGIN
        ARENA_TELEPORT_MARGIN
        ARENA_SEED
        ARENA_HISTORY_SIZE
        ARENA_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="ARENA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    width: float = Field(default=500.0, gt=0)
    height: float = Field(default=500.0, gt=0)
    spawn_margin: float = Field(default=10.0, ge=0)
    teleport_margin: float = Field(default=10.0, ge=0)
    seed: int | None = None
    history_size: int = Field(default=0, ge=0)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @property
    def bounds(self) -> Bounds:
        """Arena bounds built from width and height."""
        return Bounds(width=self.width, height=self.height)


class PersistenceSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for saving and loading arena files.

    Attributes:
        default_speed: Speed given to mobile entities on load (not persisted).
        default_heading: Heading given to mobile entities on load (not persisted).
        encoding: Text encoding of arena files.

    Environment Variables:
        ARENA_PERSIST_DEFAULT_SPEED
        ARENA_PERSIST_DEFAULT_HEADING
        ARENA_PERSIST_ENCODING
    """

    model_config = SettingsConfigDict(
        env_prefix="ARENA_PERSIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_speed: float = Field(default=2.0, ge=0)
    default_heading: float = 0.0
    encoding: str = "utf-8"

    @field_validator("encoding")
    @classmethod
    def _known_codec(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {value!r}") from e
        return value
