"""Fourtiles Game Generator.

Finds Fourtiles games and streams the output as JSON, for use in the Fourtiles web game.
Games are found with a randomized heuristic, so there is no guarantee that every possible
game will be found.  Finding each next game becomes more expensive as more attempts are
needed, so games are streamed as they are found and the user is expected to abort the
run once satisfied.
"""

import argparse
import sys
from pathlib import Path

from .finder import finder
from .finder.config import config as finder_config

__version__ = "1.0.0"

DESCRIPTION = "Finds Fourtiles games and streams the output as JSON."

EPILOG = """\
Games are streamed in JSON format to stdout or a file.  It is the intention that the
user aborts this script (Ctrl-C) when the time to find the next game becomes
unreasonable.  The JSON array is closed on abort, but the trailing comma after the last
game must be removed by hand.

When writing games to a file, stdout is used to show a progress indicator, which is
normalized to the theoretical maximum number of possible games.
"""


def get_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="fourtiles",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-d",
        "--dictionary",
        type=Path,
        required=True,
        help="The text file containing dictionary words.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="The JSON file to write game data to (default: stdout).",
    )
    parser.add_argument(
        "-w",
        "--workers",
        type=int,
        default=None,
        help="Number of worker processes (default: CPU count minus one).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random search.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the Fourtiles game generator."""
    args = get_parser().parse_args(argv)

    overrides = {}
    if args.workers is not None:
        overrides["max_workers"] = args.workers
    if args.seed is not None:
        overrides["seed"] = args.seed
    config = finder_config.model_copy(update=overrides)

    try:
        finder.run(args.dictionary, output=args.output, config=config)
    except OSError as e:
        print(f"fourtiles: error: {e}", file=sys.stderr)
        sys.exit(1)
