"""Board graph: cells, directed relations between neighbours and the pieces on them."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from string import ascii_lowercase

import numpy as np

from .constants import COLS, DIAGONAL, DIRECTIONS, EMPTY, HORIZONTAL, ROWS, VERTICAL
from .exceptions import CoordinateError


class Piece:
    """A piece with its recorded coordinate and the movement rules derived from its rank."""

    def __init__(
        self,
        row: str,
        col: str,
        rank: int,
        allowed_axes: tuple[str, ...],
        max_slide: int,
        side: int,
    ) -> None:
        self.row = row
        self.col = col
        self.rank = rank
        self.allowed_axes = allowed_axes
        self.max_slide = max_slide
        self.side = side

    @property
    def coordinate(self) -> tuple[str, str]:
        return self.row, self.col

    def __repr__(self) -> str:
        return (
            f"Piece(row={self.row!r}, col={self.col!r}, rank={self.rank}, "
            f"allowed_axes={self.allowed_axes}, max_slide={self.max_slide}, side={self.side})"
        )


class Relation:
    """Directed, axis-tagged edge from a cell to one of its neighbours."""

    def __init__(self, source: Cell, target: Cell, axis: str) -> None:
        self.source = source
        self.target = target
        self.axis = axis

    @property
    def delta(self) -> tuple[int, int]:
        """Row and column displacement from source to target."""
        return (
            self.target.row_idx - self.source.row_idx,
            self.target.col_idx - self.source.col_idx,
        )

    def __str__(self) -> str:
        return (
            f"{self.source.row}, {self.source.col} - "
            f"{self.target.row}, {self.target.col} -> {self.axis}"
        )

    def __repr__(self) -> str:
        return f"Relation({self.source.coordinate} -> {self.target.coordinate}, {self.axis!r})"


class Cell:
    """A board position holding its outgoing relations and an optional piece."""

    def __init__(self, row: str, col: str, row_idx: int, col_idx: int) -> None:
        self.row = row
        self.col = col
        self.row_idx = row_idx
        self.col_idx = col_idx
        self.relations: list[Relation] = []
        self.piece: Piece | None = None

    @property
    def coordinate(self) -> tuple[str, str]:
        return self.row, self.col

    @property
    def is_empty(self) -> bool:
        return self.piece is None

    def __repr__(self) -> str:
        return f"Cell({self.row!r}, {self.col!r}, piece={self.piece!r})"


def build_grid(rows: Sequence[str], cols: Sequence[str]) -> dict[str, dict[str, Cell]]:
    """Create one empty cell per (row, col) pair, keyed by row then column label."""
    for name, labels in (("rows", rows), ("cols", cols)):
        if len(labels) == 0:
            raise ValueError(f"Board needs at least one label in {name}.")
        if len(set(labels)) != len(labels):
            raise ValueError(f"Board labels in {name} must be unique, got {list(labels)}.")

    return {
        row: {col: Cell(row, col, i, j) for j, col in enumerate(cols)}
        for i, row in enumerate(rows)
    }


def classify_axis(row_delta: int, col_delta: int) -> str:
    """Movement axis of a step with the given row and column deltas."""
    if row_delta == 0 and col_delta == 0:
        raise ValueError("A cell has no axis relative to itself.")
    if row_delta == 0:
        return HORIZONTAL
    if col_delta == 0:
        return VERTICAL
    return DIAGONAL


def relations_for(cell: Cell, board: Board) -> list[Relation]:
    """Relations from ``cell`` to each of its on-board Chebyshev neighbours."""
    relations = []
    for di, dj in DIRECTIONS:
        i, j = cell.row_idx + di, cell.col_idx + dj
        if not board.is_in_board(i, j):
            continue
        relations.append(Relation(cell, board.cell_at(i, j), classify_axis(di, dj)))

    return relations


def add_relations(board: Board) -> Board:
    """Attach classified relations to every cell of an already built grid."""
    for cell in board:
        cell.relations = relations_for(cell, board)

    return board


class Board:
    """R x C board graph.

    Cells are created once and never removed. Only piece occupancy changes
    afterwards, in place.
    """

    def __init__(self, rows: Sequence[str] = ROWS, cols: Sequence[str] = COLS) -> None:
        self.rows = tuple(rows)
        self.cols = tuple(cols)
        self._cells = build_grid(self.rows, self.cols)
        add_relations(self)

    @property
    def shape(self) -> tuple[int, int]:
        return len(self.rows), len(self.cols)

    @property
    def diameter(self) -> int:
        """Number of cells along the longest side."""
        return max(self.shape)

    def is_in_board(self, i: int, j: int) -> bool:
        """Check if indices are within the board boundaries."""
        return 0 <= i < len(self.rows) and 0 <= j < len(self.cols)

    def cell(self, row: str, col: str) -> Cell:
        """Look up a cell by its labels."""
        if row not in self._cells or col not in self._cells[row]:
            raise CoordinateError(row, col)
        return self._cells[row][col]

    def cell_at(self, i: int, j: int) -> Cell:
        """Look up a cell by its row and column indices."""
        if not self.is_in_board(i, j):
            raise CoordinateError(str(i), str(j))
        return self._cells[self.rows[i]][self.cols[j]]

    def parse_square(self, square: str) -> tuple[str, str]:
        """Split a square such as "a1" (column then row) into a (row, col) coordinate."""
        row, col = square[1:], square[:1]
        self.cell(row, col)
        return row, col

    def __getitem__(self, key: str | tuple[str, str]) -> Cell | dict[str, Cell]:
        # board["1", "a"] is a cell, board["1"] the row of cells keyed by column.
        if isinstance(key, tuple):
            return self.cell(*key)
        if key not in self._cells:
            raise CoordinateError(key)
        return dict(self._cells[key])

    def __iter__(self) -> Iterator[Cell]:
        for row in self.rows:
            yield from self._cells[row].values()

    def __len__(self) -> int:
        return len(self.rows) * len(self.cols)

    def pieces(self) -> list[Piece]:
        """All pieces currently on the board, in row-major order."""
        return [cell.piece for cell in self if cell.piece is not None]

    def clear(self) -> None:
        """Remove every piece from the board."""
        for cell in self:
            cell.piece = None

    def place(self, piece: Piece) -> None:
        """Put a piece on the cell at its recorded coordinate."""
        self.cell(piece.row, piece.col).piece = piece

    def to_array(self) -> np.ndarray:
        """Occupancy matrix holding ``side * rank`` per cell and EMPTY elsewhere."""
        array = np.full(self.shape, EMPTY, dtype=np.int8)
        for cell in self:
            if cell.piece is not None:
                array[cell.row_idx, cell.col_idx] = cell.piece.side * cell.piece.rank
        return array

    def __repr__(self) -> str:
        return f"Board(rows={self.rows}, cols={self.cols}, pieces={len(self.pieces())})"


def make_labels(n_rows: int, n_cols: int) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Row labels "1".."n_rows" and column labels "a", "b", ... for an n_rows x n_cols board."""
    if not 0 < n_cols <= len(ascii_lowercase):
        raise ValueError(f"n_cols must be between 1 and {len(ascii_lowercase)}, got {n_cols}.")
    if n_rows <= 0:
        raise ValueError(f"n_rows must be positive, got {n_rows}.")
    return tuple(str(i + 1) for i in range(n_rows)), tuple(ascii_lowercase[:n_cols])
