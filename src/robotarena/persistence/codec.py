"""Line codec for the flat arena format.

One entity per line, `Kind,X,Y,Radius`, numbers written with repr() so they
are locale-independent and round-trip exactly.

Usage:
    line = encode_record(ArenaRecord.from_entity(robot))  # "WhiskerRobot,100.0,42.5,15.0"
    record = decode_line(line)
"""

from __future__ import annotations

from pydantic import ValidationError

from robotarena.core.entity import EntityKind
from robotarena.persistence.models import ArenaRecord, MalformedRecordError, UnknownKindError

FIELD_SEPARATOR = ","
FIELD_COUNT = 4


def encode_record(record: ArenaRecord) -> str:
    """Format a record as one line (no trailing newline)."""
    return FIELD_SEPARATOR.join(
        (record.kind.tag, repr(record.x), repr(record.y), repr(record.radius))
    )


def decode_line(line: str) -> ArenaRecord:
    """Parse one line into a record.

    Args:
        line: Line text, with or without trailing newline.

    Returns:
        Validated ArenaRecord.

    Raises:
        MalformedRecordError: Wrong field count, unparseable or invalid number.
        UnknownKindError: Kind tag is not a known EntityKind.
    """
    parts = [part.strip() for part in line.strip().split(FIELD_SEPARATOR)]
    if len(parts) != FIELD_COUNT:
        raise MalformedRecordError(f"expected {FIELD_COUNT} fields, got {len(parts)}")

    tag, x, y, radius = parts
    try:
        kind = EntityKind(tag)
    except ValueError:
        raise UnknownKindError(f"unknown kind {tag!r}") from None

    try:
        return ArenaRecord.model_validate({"kind": kind, "x": x, "y": y, "radius": radius})
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise MalformedRecordError(problems) from e
