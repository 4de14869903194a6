"""Flat text persistence for arenas: one `Kind,X,Y,Radius` line per entity."""

from robotarena.persistence.codec import decode_line, encode_record
from robotarena.persistence.io import load_arena, save_arena
from robotarena.persistence.models import (
    ArenaIOError,
    ArenaRecord,
    LoadReport,
    MalformedRecordError,
    PersistenceError,
    RecordIssue,
    UnknownKindError,
)

__all__ = [
    # Models
    "ArenaRecord",
    "LoadReport",
    "RecordIssue",
    # Errors
    "PersistenceError",
    "MalformedRecordError",
    "UnknownKindError",
    "ArenaIOError",
    # Codec
    "encode_record",
    "decode_line",
    # IO
    "save_arena",
    "load_arena",
]
