"""Entry points for presentation layers.

The board is a single-owner structure changed in place: ``apply_move`` returns
the same object it was given. Unless told otherwise, paths follow the reference
slide rule of the ``classic`` variant.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .board import Board, Cell, Piece, Relation
from .constants import COLS, ROWS
from .exceptions import IllegalMoveError
from .rules.base import PathRule, UpdateRule
from .rules.initialization import CornerRankInitialization
from .rules.paths import StraightSlidePathRule, reachable_cells
from .rules.update import RelocateUpdateRule

logger = logging.getLogger(__name__)


def generate_board(rows: Sequence[str] = ROWS, cols: Sequence[str] = COLS) -> Board:
    """Build the board graph and place both home blocks."""
    board = Board(rows, cols)
    CornerRankInitialization.init_board(board)
    return board


def possible_paths(cell: Cell) -> list[Relation]:
    """Relations describing every legal slide of the piece on ``cell``."""
    return StraightSlidePathRule.possible_paths(cell)


def apply_move(
    piece: Piece,
    destination: tuple[str, str],
    board: Board,
    path_rule: type[PathRule] = StraightSlidePathRule,
    update_rule: type[UpdateRule] = RelocateUpdateRule,
) -> Board:
    """Move ``piece`` to ``destination`` after checking the move is legal.

    Raises:
        CoordinateError: if ``destination`` is not on the board.
        IllegalMoveError: if ``piece`` is not on its recorded cell, or the
            destination is occupied or not reachable from there.
    """
    target = board.cell(*destination)
    source = board.cell(piece.row, piece.col)

    if source.piece is not piece:
        logger.debug("Rejected move of %r: not found at %s", piece, source.coordinate)
        raise IllegalMoveError(f"No such piece at {source.coordinate} (found {source.piece!r}).")
    # Slides may report occupied cells, but a piece never lands on one.
    if not target.is_empty:
        logger.debug("Rejected move %s -> %s: occupied", source.coordinate, target.coordinate)
        raise IllegalMoveError(
            f"Move {source.coordinate} -> {target.coordinate} lands on an occupied cell."
        )
    reachable = reachable_cells(path_rule.possible_paths(source))
    if target not in reachable:
        logger.debug("Rejected move %s -> %s: not reachable", source.coordinate, target.coordinate)
        raise IllegalMoveError(
            f"Move {source.coordinate} -> {target.coordinate} is illegal in current board state "
            f"(reachable {[cell.coordinate for cell in reachable]})."
        )

    update_rule.update(board, piece, target)
    return board
