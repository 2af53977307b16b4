import logging

from ..board import Board, Cell, Piece
from .base import UpdateRule

logger = logging.getLogger(__name__)


class RelocateUpdateRule(UpdateRule):
    """Moves the piece to its destination and clears the cell it came from.

    The board is changed in place. The piece's recorded coordinate follows it.
    """

    @staticmethod
    def update(board: Board, piece: Piece, destination: Cell) -> None:
        """Transfer ``piece`` from its recorded cell to ``destination``."""
        source = board.cell(piece.row, piece.col)
        source.piece = None
        destination.piece = piece
        piece.row, piece.col = destination.row, destination.col
        logger.debug(
            "Moved rank %d piece %s -> %s", piece.rank, source.coordinate, destination.coordinate
        )
