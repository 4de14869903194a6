"""Saving and loading arenas as flat text files.

Saving writes every entity in insertion order. Loading is lenient per line:
malformed lines and unknown kinds are skipped and reported, while failing to
open or read the file aborts before the caller touches its arena.

Usage:
    save_arena(arena.list_entities(), "arena.txt")

    entities, report = load_arena("arena.txt")
    arena.replace_all(entities)
    for issue in report.issues:
        print(issue.line_number, issue.error)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from os import PathLike
from pathlib import Path

from typing_extensions import TypeAliasType

from robotarena.config import PersistenceSettings
from robotarena.core.entity import Entity
from robotarena.persistence.codec import decode_line, encode_record
from robotarena.persistence.models import (
    ArenaIOError,
    ArenaRecord,
    LoadReport,
    MalformedRecordError,
    RecordIssue,
    UnknownKindError,
)

logger = logging.getLogger(__name__)

PathArg = TypeAliasType("PathArg", str | PathLike[str])


def save_arena(
    entities: Iterable[Entity],
    path: PathArg,
    settings: PersistenceSettings | None = None,
) -> int:
    """Write one `Kind,X,Y,Radius` line per entity.

    Lines are written as they are produced; a failure midway leaves a
    partial file behind.

    Args:
        entities: Entities to save, in the order they should be reloaded.
        path: Destination file, overwritten if it exists.
        settings: Persistence settings (encoding).

    Returns:
        Number of records written.

    Raises:
        ArenaIOError: If the file cannot be opened or written.
    """
    settings = settings or PersistenceSettings()
    target = Path(path)
    written = 0
    try:
        with target.open("w", encoding=settings.encoding, newline="\n") as f:
            for entity in entities:
                f.write(encode_record(ArenaRecord.from_entity(entity)) + "\n")
                written += 1
    except OSError as e:
        logger.error(f"Failed to save arena to {target} after {written} records: {e}")
        raise ArenaIOError(f"cannot write {target}: {e}") from e

    logger.info(f"Saved {written} entities to {target}")
    return written


def load_arena(
    path: PathArg,
    settings: PersistenceSettings | None = None,
) -> tuple[list[Entity], LoadReport]:
    """Read an arena file into fresh entities.

    Blank lines are ignored. Mobile entities get the configured default
    speed and heading since neither is persisted.

    Args:
        path: Source file.
        settings: Persistence settings (encoding, default speed and heading).

    Returns:
        Tuple of (entities in file order, report of skipped lines).

    Raises:
        ArenaIOError: If the file cannot be opened, read or decoded.
    """
    settings = settings or PersistenceSettings()
    source = Path(path)
    try:
        text = source.read_text(encoding=settings.encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to load arena from {source}: {e}")
        raise ArenaIOError(f"cannot read {source}: {e}") from e

    entities: list[Entity] = []
    report = LoadReport()
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            record = decode_line(line)
        except (MalformedRecordError, UnknownKindError) as e:
            logger.warning(f"{source}:{line_number}: skipped {line!r}: {e}")
            report.issues.append(RecordIssue(line_number=line_number, line=line, error=e))
            continue
        entities.append(record.to_entity(settings))

    report.loaded = len(entities)
    logger.info(f"Loaded {report.summary()} from {source}")
    return entities, report
