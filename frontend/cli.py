# frontend/cli.py

import argparse
import logging
import sys

from backend.board import PLACEMENT_STRATEGIES, NoSafeRevealError
from backend.config import ConfigError, load_config
from backend.game import GridSession
from backend.utils import format_board_debug


def positive_int(value):
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def percentage(value):
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")
    if not 0 <= number <= 100:
        raise argparse.ArgumentTypeError(f"must be between 0 and 100, got {number}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(
        prog="minegrid",
        description="Generate a minesweeper grid, open one safe zone and print it.",
    )
    parser.add_argument("width", type=positive_int, help="Number of columns")
    parser.add_argument("height", type=positive_int, help="Number of rows")
    parser.add_argument("difficulty", type=percentage, help="Percentage of tiles that become mines (0-100)")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for a reproducible grid")
    parser.add_argument("--config", type=str, default=None, help="Path to a YAML config file")
    parser.add_argument("--placement", choices=PLACEMENT_STRATEGIES, default=None,
                        help="Mine placement strategy (overrides config)")
    parser.add_argument("--show-mines", action="store_true", help="Also print the full layout to stderr")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    if args.placement:
        config["placement"] = args.placement

    session = GridSession(args.width, args.height, args.difficulty, seed=args.seed, config=config)
    try:
        session.generate()
    except NoSafeRevealError:
        print("error: no safe reveal available", file=sys.stderr)
        if args.show_mines:
            print(format_board_debug(session.board.board), file=sys.stderr)
        return 1

    print(session.render())
    if args.show_mines:
        print(format_board_debug(session.board.board, session.board.revealed), file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
