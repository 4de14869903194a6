"""Persistence models: the flat record, the load report and the error taxonomy."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from robotarena.core.entity import Entity, EntityKind, from_record

if TYPE_CHECKING:
    from robotarena.config import PersistenceSettings


class PersistenceError(Exception):
    """Base class for arena file errors."""


class MalformedRecordError(PersistenceError):
    """Line has the wrong field count, an unparseable number or an invalid value."""


class UnknownKindError(PersistenceError):
    """Line is well formed but its kind tag names no known entity kind."""


class ArenaIOError(PersistenceError):
    """Arena file could not be read or written. Aborts the whole operation."""


class ArenaRecord(BaseModel):
    """One persisted entity: `Kind,X,Y,Radius`.

    Speed and heading are not persisted; mobile entities get the configured
    defaults when the record is turned back into an entity.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    kind: EntityKind
    x: float
    y: float
    radius: float = Field(gt=0)

    @classmethod
    def from_entity(cls, entity: Entity) -> ArenaRecord:
        return cls(kind=entity.kind, x=entity.x, y=entity.y, radius=entity.radius)

    def to_entity(self, settings: PersistenceSettings) -> Entity:
        """Build the entity this record describes, with default speed and heading."""
        return from_record(
            self.kind,
            self.x,
            self.y,
            self.radius,
            speed=settings.default_speed,
            heading=settings.default_heading,
        )


@dataclass(slots=True)
class RecordIssue:
    """A line skipped during load.

    Attributes:
        line_number: 1-based line number in the file.
        line: Raw line text without the newline.
        error: Why the line was skipped.
    """

    line_number: int
    line: str
    error: PersistenceError


@dataclass
class LoadReport:
    """Outcome of a load: how many entities came back and which lines were skipped."""

    loaded: int = 0
    issues: list[RecordIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True if every non-blank line was loaded."""
        return not self.issues

    def summary(self) -> str:
        if self.ok:
            return f"{self.loaded} entities loaded"
        return f"{self.loaded} entities loaded, {len(self.issues)} lines skipped"
