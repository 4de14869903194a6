"""Headless command-line driver: build an arena, run ticks, save the result.

Usage:
    robotarena --defaults --add WhiskerRobot --add BlackHole --ticks 500
    robotarena --load arena.txt --ticks 100 --save arena.txt --seed 3
    python -m robotarena --ticks 50 --report-every 10 --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from robotarena.config import ArenaSettings, PersistenceSettings
from robotarena.core.entity import EntityKind
from robotarena.persistence import ArenaIOError
from robotarena.world import Arena, ArenaController

logger = logging.getLogger("robotarena")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="robotarena",
        description="Run a robot arena headless for a number of ticks.",
    )
    parser.add_argument("--ticks", type=int, default=100, help="ticks to run (default: 100)")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--load", metavar="PATH", help="arena file to start from")
    parser.add_argument("--save", metavar="PATH", help="arena file to write after the run")
    parser.add_argument(
        "--add",
        metavar="KIND",
        action="append",
        default=[],
        choices=[kind.tag for kind in EntityKind],
        help="add a randomly placed entity of this kind (repeatable)",
    )
    parser.add_argument(
        "--defaults",
        action="store_true",
        help="start with two bump robots and two obstacles",
    )
    parser.add_argument(
        "--report-every",
        type=int,
        default=0,
        metavar="N",
        help="print a status line every N ticks (0: only at the end)",
    )
    parser.add_argument("--log-level", choices=LOG_LEVELS, default=None)
    return parser


def format_status(controller: ArenaController) -> str:
    info = controller.info()
    line = f"tick={controller.arena.tick_count} robots={info.robots} obstacles={info.obstacles}"
    if info.control_bot is not None:
        line += f" control_bot=({info.control_bot[0]:.1f}, {info.control_bot[1]:.1f})"
    return line


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.ticks < 0:
        print("--ticks must be non-negative", file=sys.stderr)
        return 2

    overrides = {"seed": args.seed} if args.seed is not None else {}
    try:
        settings = ArenaSettings(**overrides)
        persist_settings = PersistenceSettings()
    except ValidationError as e:
        print(f"error: invalid configuration\n{e}", file=sys.stderr)
        return 2
    logging.basicConfig(
        level=args.log_level or settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    arena = Arena.with_defaults(settings) if args.defaults else Arena(settings)
    controller = ArenaController(arena, persist_settings)

    try:
        if args.load:
            report = controller.load(args.load)
            if not report.ok:
                logger.warning(f"{len(report.issues)} lines skipped while loading {args.load}")
        for tag in args.add:
            controller.add_random(EntityKind(tag))

        controller.start()
        for _ in range(args.ticks):
            controller.frame()
            if args.report_every and arena.tick_count % args.report_every == 0:
                print(format_status(controller))
        controller.stop()

        if not args.report_every or args.ticks % args.report_every:
            print(format_status(controller))
        if args.save:
            controller.save(args.save)
    except ArenaIOError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
