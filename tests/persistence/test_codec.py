"""Tests for the Kind,X,Y,Radius line codec.

Critical Invariants:
- Numbers are written locale-free and read back exactly
- Wrong field counts, bad numbers and non-positive radii are malformed
- Unknown kind tags are reported separately from malformed lines
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from robotarena import EntityKind, MalformedRecordError, UnknownKindError
from robotarena.persistence import ArenaRecord, decode_line, encode_record


def test_encode_record():
    record = ArenaRecord(kind=EntityKind.OBSTACLE, x=100.0, y=42.5, radius=20.0)
    assert encode_record(record) == "Obstacle,100.0,42.5,20.0"


@given(
    kind=st.sampled_from(list(EntityKind)),
    x=st.floats(allow_nan=False, allow_infinity=False),
    y=st.floats(allow_nan=False, allow_infinity=False),
    radius=st.floats(min_value=1e-6, max_value=1e6),
)
def test_decode_reads_back_exact_values(kind, x, y, radius):
    """PROPERTY: decode(encode(r)) == r, bit for bit."""
    record = ArenaRecord(kind=kind, x=x, y=y, radius=radius)
    assert decode_line(encode_record(record)) == record


def test_decode_accepts_integers_whitespace_and_newline():
    record = decode_line(" WhiskerRobot , 10 , 20.5 , 15 \n")
    assert record == ArenaRecord(kind=EntityKind.WHISKER_ROBOT, x=10.0, y=20.5, radius=15.0)


def test_control_bot_is_a_known_tag():
    assert decode_line("ControlBot,250.0,250.0,15.0").kind is EntityKind.CONTROL_BOT


@pytest.mark.parametrize(
    "line",
    [
        "Obstacle,1.0,2.0",
        "Obstacle,1.0,2.0,3.0,4.0",
        "",
        "Obstacle,one,2.0,3.0",
        "Obstacle,1.0,2.0,0.0",
        "Obstacle,1.0,2.0,-3.0",
        "Obstacle,nan,2.0,3.0",
        "Obstacle,1.0,inf,3.0",
        "Obstacle,1,0,2,0,3,0",
    ],
    ids=[
        "too-few",
        "too-many",
        "empty",
        "not-a-number",
        "zero-radius",
        "negative-radius",
        "nan",
        "inf",
        "decimal-comma",
    ],
)
def test_malformed_lines(line):
    with pytest.raises(MalformedRecordError):
        decode_line(line)


@pytest.mark.parametrize("tag", ["Robot", "obstacle", "Wall"])
def test_unknown_kind(tag):
    with pytest.raises(UnknownKindError, match=tag):
        decode_line(f"{tag},1.0,2.0,3.0")


def test_field_count_checked_before_kind():
    with pytest.raises(MalformedRecordError):
        decode_line("Robot,1.0")


def test_record_is_frozen_and_validated():
    record = ArenaRecord(kind=EntityKind.OBSTACLE, x=1.0, y=2.0, radius=3.0)
    with pytest.raises(ValidationError):
        record.x = 5.0  # type: ignore[misc]
    assert ArenaRecord.model_validate({"kind": "Obstacle", "x": 1, "y": 2, "radius": 3}) == record
