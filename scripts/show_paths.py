"""Print a fresh board and the possible paths of the piece on one of its cells.

Usage::

    python scripts/show_paths.py --cell a1
    python scripts/show_paths.py --game blocking --rows 6 --cols 5 --cell c3 --move c3 d4
    python scripts/show_paths.py --cell b3 --plot paths.png
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import matplotlib.pyplot as plt

from slidegrid.board import make_labels
from slidegrid.exceptions import CoordinateError, IllegalMoveError
from slidegrid.games import GAME_REGISTRY

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--game",
        type=str,
        default="classic",
        choices=sorted(GAME_REGISTRY),
        help="Rule variant to play (default: classic)",
    )
    parser.add_argument("--rows", type=int, default=8, help="Number of board rows")
    parser.add_argument("--cols", type=int, default=4, help="Number of board columns")
    parser.add_argument(
        "--move",
        nargs=2,
        action="append",
        default=[],
        metavar=("FROM", "TO"),
        help="Play a move before showing paths, e.g. --move c3 d4 (repeatable)",
    )
    parser.add_argument("--cell", type=str, required=True, help="Square to inspect, e.g. a1")
    parser.add_argument("--plot", type=Path, default=None, help="Save a plot of the board here")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug-level logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    logger.info("Running with config: %s", args)

    rows, cols = make_labels(args.rows, args.cols)
    game = GAME_REGISTRY[args.game](rows=rows, cols=cols)

    try:
        for source, destination in args.move:
            game.play_move(game.board.parse_square(source), game.board.parse_square(destination))
        coordinate = game.board.parse_square(args.cell)
    except (CoordinateError, IllegalMoveError) as e:
        logger.error("%s", e)
        return 1

    game.print_board()
    paths = game.possible_paths(*coordinate)
    if not paths:
        logger.info("No possible paths from %s.", args.cell)
    for relation in paths:
        print(relation)

    if args.plot is not None:
        ax = game.plot_board(highlight=coordinate)
        ax.figure.savefig(args.plot, bbox_inches="tight")
        plt.close(ax.figure)
        logger.info("Saved figure: %s", args.plot)

    return 0


if __name__ == "__main__":
    sys.exit(main())
