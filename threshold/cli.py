"""
Command-line interface for threshold.

Reads observer clocks from a CSV clock file and prints their threshold
union for one or more thresholds.
"""

from __future__ import annotations

import argparse
import io
import sys
from pathlib import Path
from typing import List

import threshold
from threshold.core.tclock import TClock
from threshold.utils.clock_reader import ClockReader
from threshold.utils.logger import LogLevel, ThresholdLogger


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the threshold CLI."""
    parser = argparse.ArgumentParser(
        prog="threshold",
        description=(
            "threshold: compute the threshold union of vector clocks "
            "reported by a set of observers"
        ),
    )

    required = parser.add_argument_group("required arguments")
    required.add_argument(
        "-c",
        "--clocks",
        type=Path,
        required=True,
        help="Path to clock file (.csv) with one vector clock per observer",
    )

    parser.add_argument(
        "-t",
        "--threshold",
        type=int,
        action="append",
        default=None,
        help=(
            "Threshold to compute (repeatable; default: the file's "
            "threshold directive, else the number of clocks)"
        ),
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Compute every threshold from 1 to the number of clocks",
    )
    parser.add_argument(
        "--union",
        action="store_true",
        help="Also print the plain union of all clocks",
    )
    parser.add_argument(
        "-o",
        "--output",
        choices=["silent", "normal", "verbose"],
        default="normal",
        help="Output level (default: normal)",
    )
    parser.add_argument(
        "-d",
        "--debug",
        type=int,
        choices=[0, 1, 2, 3],
        default=0,
        help="Debug level 0-3 (default: 0)",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print statistics after the computation",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"threshold {threshold.__version__}",
    )

    return parser


def _resolve_log_level(output: str, debug: int) -> LogLevel:
    """Determine the effective log level from output and debug settings."""
    if debug >= 3:
        return LogLevel.DEBUG
    if output == "verbose" or debug >= 1:
        return LogLevel.VERBOSE
    if output == "silent":
        return LogLevel.SILENT
    return LogLevel.NORMAL


def _resolve_thresholds(args: argparse.Namespace, default: int, clock_count: int) -> List[int]:
    """Pick the thresholds to compute, in output order."""
    if args.all:
        return list(range(1, max(clock_count, 1) + 1))
    if args.threshold:
        return list(args.threshold)
    return [default]


def main() -> None:
    """Entry point for the ``threshold`` CLI command."""
    parser = _build_parser()
    args = parser.parse_args()

    try:
        _run(args)
    except SystemExit:
        raise
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)


def _run(args: argparse.Namespace) -> None:
    """Read the clocks and print the requested threshold unions."""
    if not args.clocks.exists():
        print(f"Error: Clock file not found: {args.clocks}", file=sys.stderr)
        sys.exit(2)

    log_level = _resolve_log_level(args.output, args.debug)
    stream = sys.stdout if args.output != "silent" else io.StringIO()
    logger = ThresholdLogger(level=log_level, stream=stream)

    data = ClockReader(args.clocks).read_all()
    logger.info(
        "Loaded clock file",
        path=args.clocks,
        clocks=data.metadata.clock_count,
    )

    tclock = TClock(logger=logger)
    tclock.add_all(data.clocks)

    if data.metadata.threshold is not None:
        default = data.metadata.threshold
    else:
        default = max(tclock.clock_count, 1)
    thresholds = _resolve_thresholds(args, default, tclock.clock_count)

    for t in thresholds:
        logger.result(t, tclock.threshold_union(t))

    if args.union:
        logger.union(tclock.union())

    if args.stats and log_level.value < LogLevel.VERBOSE.value:
        print()
        print("=== Statistics ===")
        for key, value in _statistics(tclock).items():
            label = key.replace("_", " ").title()
            print(f"  {label}: {value}")
    else:
        logger.statistics(_statistics(tclock))


def _statistics(tclock: TClock) -> dict:
    return {
        "clocks": tclock.clock_count,
        "actors": len(tclock),
        "all_equal": tclock.all_equal(),
    }
