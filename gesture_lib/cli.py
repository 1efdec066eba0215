#!/usr/bin/env python3
"""Command-line interface for gesture recognition.

Registers templates from JSON gesture files and recognizes a candidate
gesture file against them.

Usage:
    gesture-recognize -t arrow=arrow.json -t circle=circle.json drawn.json
    gesture-recognize -t arrow=arrow.json drawn.json --json
    gesture-recognize -t line=line.json drawn.json --degenerate substitute

Or run via the module:
    python -m gesture_lib.cli -t arrow=arrow.json drawn.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from .config import DEGENERATE_POLICIES, DEGENERATE_RAISE, NUM_POINTS, SQUARE_SIZE, RecognizerConfig
from .errors import GestureError
from .recognizer import Recognizer
from .utils.gesture_io import load_gesture

logger = logging.getLogger(__name__)


def configure_logging(level: str = 'WARNING') -> None:
    """Send log records to stderr at ``level`` (DEBUG, INFO, WARNING, ERROR).

    Results go to stdout, so the handler is kept on stderr and the format is
    short enough to read next to them.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(levelname)s: %(name)s: %(message)s'))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers[:] = [handler]

    logger.debug("Logging configured at %s", logging.getLevelName(log_level))


def _template_spec(value: str) -> tuple[str, str]:
    """Parse a NAME=PATH template argument."""
    name, sep, path = value.partition('=')
    if not sep or not name or not path:
        raise argparse.ArgumentTypeError(f"expected NAME=PATH, got {value!r}")
    return name, path


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='gesture-recognize',
        description='Recognize a single-stroke gesture with the $1 algorithm'
    )
    parser.add_argument('candidate', type=str,
                        help='JSON gesture file to recognize')
    parser.add_argument('--template', '-t', type=_template_spec, action='append',
                        required=True, metavar='NAME=PATH',
                        help='Template gesture file (repeatable, order breaks ties)')
    parser.add_argument('--points', '-n', type=int, default=NUM_POINTS,
                        help=f'Resample point count (default: {NUM_POINTS})')
    parser.add_argument('--size', '-s', type=float, default=SQUARE_SIZE,
                        help=f'Normalization square size (default: {SQUARE_SIZE:g})')
    parser.add_argument('--degenerate', choices=DEGENERATE_POLICIES, default=DEGENERATE_RAISE,
                        help='What to do with flat gestures (default: raise)')
    parser.add_argument('--json', action='store_true',
                        help='Print the match as JSON')
    parser.add_argument('--log-level', type=str.upper, default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default: WARNING)')
    return parser


def run(args: argparse.Namespace) -> int:
    """Execute a parsed command line. Returns the process exit status."""
    try:
        config = RecognizerConfig(num_points=args.points, size=args.size,
                                  degenerate_policy=args.degenerate)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    recognizer = Recognizer(config)
    try:
        for name, path in args.template:
            recognizer.add_template(name, load_gesture(path))
        match = recognizer.recognize(load_gesture(args.candidate))
    except (GestureError, OSError) as e:
        logger.error("Recognition failed: %s", e)
        return 1

    if args.json:
        print(json.dumps(match.to_dict()))
    else:
        print(match)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point."""
    parser = _create_argument_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    return run(args)


if __name__ == '__main__':
    sys.exit(main())
