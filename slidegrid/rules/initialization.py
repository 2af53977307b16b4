import logging

from ..board import Board, Piece
from ..constants import DOWNSIDE, HOME_BLOCK, UPSIDE
from .base import InitializeBoard
from .ranks import allowed_axes_for_rank, corner_distance, max_slide_for_rank, rank_from_distance

logger = logging.getLogger(__name__)


def make_piece(row: str, col: str, rank: int, side: int, diameter: int) -> Piece:
    """Build a piece whose axes and slide length follow from its rank."""
    return Piece(
        row=row,
        col=col,
        rank=rank,
        allowed_axes=allowed_axes_for_rank(rank),
        max_slide=max_slide_for_rank(rank, diameter),
        side=side,
    )


def home_pieces(board: Board, side: int) -> list[Piece]:
    """Pieces of the home block next to the corner of ``side``.

    UPSIDE starts in the first row and column and DOWNSIDE in the last ones.
    Coordinates falling off small boards are dropped.
    """
    n_rows, n_cols = board.shape
    if side == UPSIDE:
        corner_i, corner_j, step = 0, 0, 1
    elif side == DOWNSIDE:
        corner_i, corner_j, step = n_rows - 1, n_cols - 1, -1
    else:
        raise ValueError(f"Unknown side {side}, expected {UPSIDE} or {DOWNSIDE}.")

    pieces = []
    for di in range(HOME_BLOCK):
        for dj in range(HOME_BLOCK):
            i, j = corner_i + step * di, corner_j + step * dj
            if not board.is_in_board(i, j):
                continue
            rank = rank_from_distance(corner_distance(di, dj))
            pieces.append(make_piece(board.rows[i], board.cols[j], rank, side, board.diameter))

    return pieces


class CornerRankInitialization(InitializeBoard):
    """Two 3x3 home blocks in opposite corners, ranked by distance to their corner.

    The corner piece and its orthogonal neighbours are rank 3, pieces two steps
    away rank 2 and the rest rank 1. Where the blocks overlap on small boards
    the upside piece keeps the cell.
    """

    @staticmethod
    def init_board(board: Board) -> None:
        """Clear the board and place both home blocks."""
        board.clear()
        for side in (UPSIDE, DOWNSIDE):
            for piece in home_pieces(board, side):
                cell = board.cell(piece.row, piece.col)
                if cell.piece is not None:
                    logger.debug(
                        "Skipping duplicate placement at %s for side %d", piece.coordinate, side
                    )
                    continue
                cell.piece = piece


class EmptyInitialization(InitializeBoard):
    """Leaves the board without pieces, for setting up positions by hand."""

    @staticmethod
    def init_board(board: Board) -> None:
        """Remove every piece from the board."""
        board.clear()
