import logging
from collections.abc import Sequence

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes

from .board import Board, Cell, Piece, Relation
from .constants import COLS, DOWNSIDE, ROWS, UPSIDE
from .engine import apply_move
from .exceptions import IllegalMoveError
from .rules.base import InitializeBoard, PathRule, UpdateRule
from .rules.paths import reachable_cells

logger = logging.getLogger(__name__)


class SlideGame:
    """Board plus the rules used to set it up, find paths and apply moves."""

    alias: str = "base"

    def __init__(
        self,
        initialization_rule: type[InitializeBoard],
        path_rule: type[PathRule],
        update_rule: type[UpdateRule],
        rows: Sequence[str] = ROWS,
        cols: Sequence[str] = COLS,
    ) -> None:
        """Build the board graph and place the starting pieces."""
        self.board = Board(rows, cols)
        # In-memory record of (source, destination) coordinates, not persisted.
        self.history: list[tuple[tuple[str, str], tuple[str, str]]] = []
        self.board_history: list[np.ndarray] = []

        # rules
        self.initialization_rule = initialization_rule
        self.path_rule = path_rule
        self.update_rule = update_rule

        self._initialize_board()

    def _initialize_board(self) -> None:
        self.initialization_rule.init_board(self.board)

    def reset(self) -> None:
        """Restore the starting position and forget played moves."""
        self.history = []
        self.board_history = []
        self._initialize_board()

    def possible_paths(self, row: str, col: str) -> list[Relation]:
        """Relations describing every legal slide of the piece at (row, col)."""
        return self.path_rule.possible_paths(self.board.cell(row, col))

    def reachable_cells(self, row: str, col: str) -> list[Cell]:
        """Cells the piece at (row, col) may move to."""
        return reachable_cells(self.possible_paths(row, col))

    def is_legal_move(self, source: tuple[str, str], destination: tuple[str, str]) -> bool:
        """Check if the piece on ``source`` may move to ``destination``."""
        target = self.board.cell(*destination)
        if not target.is_empty:
            return False
        return target in self.reachable_cells(*source)

    def get_all_moves(self) -> list[tuple[tuple[str, str], tuple[str, str]]]:
        """Every legal (source, destination) pair on the current board."""
        moves = []
        for cell in self.board:
            if cell.piece is None:
                continue
            for target in self.reachable_cells(*cell.coordinate):
                if target.is_empty:
                    moves.append((cell.coordinate, target.coordinate))
        return moves

    def apply_move(self, piece: Piece, destination: tuple[str, str]) -> Board:
        """Move ``piece`` from its recorded coordinate to ``destination``, in place."""
        source = piece.coordinate
        apply_move(
            piece,
            destination,
            self.board,
            path_rule=self.path_rule,
            update_rule=self.update_rule,
        )
        self.history.append((source, piece.coordinate))
        self.board_history.append(self.board.to_array())
        logger.debug(
            "Game %s move %d: %s -> %s", self.alias, len(self.history), source, piece.coordinate
        )
        return self.board

    def play_move(self, source: tuple[str, str], destination: tuple[str, str]) -> Board:
        """Move whatever piece stands on ``source`` to ``destination``."""
        piece = self.board.cell(*source).piece
        if piece is None:
            raise IllegalMoveError(f"No piece at {source} to move (game {self.alias}).")
        return self.apply_move(piece, destination)

    def get_history(self) -> list[tuple[tuple[str, str], tuple[str, str]]]:
        """Returns the moves played so far."""
        return self.history.copy()

    def get_board_history(self) -> list[np.ndarray]:
        """Returns the occupancy snapshots taken after each move."""
        return self.board_history.copy()

    def print_board(self) -> None:
        """Prints the board with signed ranks, upside positive and downside negative."""
        print("   " + " ".join(f"{col:>2}" for col in self.board.cols))
        for row in self.board.rows:
            cells = self.board[row].values()
            print(
                f"{row:>2} "
                + " ".join(
                    " ." if cell.piece is None else f"{cell.piece.side * cell.piece.rank:>2}"
                    for cell in cells
                )
            )

    def plot_board(
        self,
        ax: Axes | None = None,
        highlight: tuple[str, str] | None = None,
        cmap: str = "Reds",
    ) -> Axes:
        """Plot the board.

        Pieces are drawn as circles labelled with their rank. When ``highlight``
        names a cell, the cells its piece can reach are shaded.
        """
        if ax is None:
            _fig, ax = plt.subplots()

        n_rows, n_cols = self.board.shape
        ax.set_aspect("equal")
        ax.set_xlim(0, n_cols)
        ax.set_ylim(0, n_rows)

        if highlight is not None:
            colormap = plt.get_cmap(cmap)
            for cell in self.reachable_cells(*highlight):
                rect = plt.Rectangle(
                    (cell.col_idx, cell.row_idx), 1, 1, fill=True, color=colormap(0.6), alpha=0.7
                )
                ax.add_artist(rect)
            source = self.board.cell(*highlight)
            source_rect = plt.Rectangle(
                (source.col_idx, source.row_idx), 1, 1, fill=True, color="cornflowerblue", alpha=0.7
            )
            ax.add_artist(source_rect)

        for cell in self.board:
            if cell.piece is None:
                continue
            face = "white" if cell.piece.side == UPSIDE else "black"
            text = "black" if cell.piece.side == UPSIDE else "white"
            circle = plt.Circle(
                (cell.col_idx + 0.5, cell.row_idx + 0.5), 0.3, color=face, ec="black", lw=1
            )
            ax.add_artist(circle)
            ax.text(
                cell.col_idx + 0.5,
                cell.row_idx + 0.5,
                str(cell.piece.rank),
                ha="center",
                va="center",
                color=text,
                fontsize=10,
            )

        ax.invert_yaxis()
        ax.axis("off")
        outline = plt.Rectangle((0, 0), n_cols, n_rows, edgecolor="black", facecolor="none")
        ax.add_artist(outline)

        for i in range(1, n_rows):
            ax.axhline(i, color="black", lw=0.5)
        for j in range(1, n_cols):
            ax.axvline(j, color="black", lw=0.5)
        # Divider between the two halves of the board
        if n_rows % 2 == 0:
            ax.axhline(n_rows // 2, color="black", lw=2)

        for j, col in enumerate(self.board.cols):
            ax.text(j + 0.5, -0.5, col, ha="center", va="center", fontsize=12)
        for i, row in enumerate(self.board.rows):
            ax.text(-0.5, i + 0.5, row, ha="center", va="center", fontsize=12)

        return ax

    def count_pieces(self, side: int) -> int:
        """Number of pieces of ``side`` on the board."""
        if side not in (UPSIDE, DOWNSIDE):
            raise ValueError(f"Unknown side {side}, expected {UPSIDE} or {DOWNSIDE}.")
        return int(np.sum(np.sign(self.board.to_array()) == side))
