"""Tests for grid building, edge classification and board lookups."""

import numpy as np
import pytest

from slidegrid.board import (
    Board,
    Cell,
    Relation,
    add_relations,
    build_grid,
    classify_axis,
    make_labels,
    relations_for,
)
from slidegrid.constants import DIAGONAL, DOWNSIDE, EMPTY, HORIZONTAL, UPSIDE, VERTICAL
from slidegrid.exceptions import CoordinateError
from slidegrid.rules.initialization import make_piece


def on_board_neighbours(board: Board, cell: Cell) -> int:
    return sum(
        board.is_in_board(cell.row_idx + di, cell.col_idx + dj)
        for di in (-1, 0, 1)
        for dj in (-1, 0, 1)
        if (di, dj) != (0, 0)
    )


class TestBuildGrid:
    """Test the grid builder."""

    def test_one_cell_per_coordinate(self) -> None:
        """8x4 labels give 32 cells keyed by row then column."""
        grid = build_grid(("1", "2", "3", "4", "5", "6", "7", "8"), ("a", "b", "c", "d"))
        assert len(grid) == 8
        assert all(len(row) == 4 for row in grid.values())
        assert grid["3"]["b"].coordinate == ("3", "b")
        assert (grid["3"]["b"].row_idx, grid["3"]["b"].col_idx) == (2, 1)

    def test_cells_start_empty(self) -> None:
        """No relations and no piece after building."""
        grid = build_grid(("1", "2"), ("a", "b"))
        for row in grid.values():
            for cell in row.values():
                assert cell.relations == []
                assert cell.piece is None
                assert cell.is_empty

    def test_empty_labels_rejected(self) -> None:
        """An empty label sequence raises ValueError."""
        with pytest.raises(ValueError, match="at least one label"):
            build_grid((), ("a",))

    def test_duplicate_labels_rejected(self) -> None:
        """Repeated labels raise ValueError."""
        with pytest.raises(ValueError, match="unique"):
            build_grid(("1", "1"), ("a",))


class TestClassifyAxis:
    """Test axis classification from index deltas."""

    def test_zero_row_delta_is_horizontal(self) -> None:
        """(0, ±1) is horizontal."""
        assert classify_axis(0, 1) == HORIZONTAL
        assert classify_axis(0, -1) == HORIZONTAL

    def test_zero_col_delta_is_vertical(self) -> None:
        """(±1, 0) is vertical."""
        assert classify_axis(1, 0) == VERTICAL
        assert classify_axis(-1, 0) == VERTICAL

    def test_other_deltas_are_diagonal(self) -> None:
        """All four diagonal sub-directions are diagonal."""
        for delta in [(1, 1), (1, -1), (-1, 1), (-1, -1)]:
            assert classify_axis(*delta) == DIAGONAL

    def test_self_has_no_axis(self) -> None:
        """(0, 0) raises ValueError."""
        with pytest.raises(ValueError):
            classify_axis(0, 0)


class TestRelations:
    """Test the relations attached to every cell."""

    def test_neighbour_counts(self, empty_board: Board) -> None:
        """Corners have 3 relations, edges 5 and interior cells 8."""
        for cell in empty_board:
            assert len(cell.relations) == on_board_neighbours(empty_board, cell)
        assert len(empty_board.cell("1", "a").relations) == 3
        assert len(empty_board.cell("8", "d").relations) == 3
        assert len(empty_board.cell("1", "b").relations) == 5
        assert len(empty_board.cell("4", "a").relations) == 5
        assert len(empty_board.cell("4", "b").relations) == 8

    @pytest.mark.parametrize("shape", [(1, 1), (1, 5), (3, 1), (2, 2), (5, 7)])
    def test_neighbour_counts_other_shapes(self, shape: tuple[int, int]) -> None:
        """Relation counts match on-board neighbours for any R x C."""
        board = Board(*make_labels(*shape))
        for cell in board:
            assert len(cell.relations) == on_board_neighbours(board, cell)

    def test_no_self_relation(self, empty_board: Board) -> None:
        """A cell never relates to itself."""
        for cell in empty_board:
            for relation in cell.relations:
                assert relation.source is cell
                assert relation.target is not cell

    def test_relations_are_directed_duplicates(self, empty_board: Board) -> None:
        """Each neighbouring pair has one relation per direction, not a shared edge."""
        a1 = empty_board.cell("1", "a")
        a2 = empty_board.cell("2", "a")
        forward = [r for r in a1.relations if r.target is a2]
        backward = [r for r in a2.relations if r.target is a1]
        assert len(forward) == 1
        assert len(backward) == 1
        assert forward[0] is not backward[0]

    def test_axis_symmetric_under_reversal(self, empty_board: Board) -> None:
        """The counterpart relation B -> A has the same axis as A -> B."""
        for cell in empty_board:
            for relation in cell.relations:
                (counterpart,) = [r for r in relation.target.relations if r.target is cell]
                assert counterpart.axis == relation.axis
                assert counterpart.delta == tuple(-d for d in relation.delta)

    def test_axis_matches_delta(self, empty_board: Board) -> None:
        """Every relation's axis agrees with classify_axis on its delta."""
        for cell in empty_board:
            for relation in cell.relations:
                assert relation.axis == classify_axis(*relation.delta)
                assert max(abs(d) for d in relation.delta) == 1

    def test_corner_relations(self, empty_board: Board) -> None:
        """(1, a) relates to (1, b), (2, a), (2, b) in that order."""
        relations = empty_board.cell("1", "a").relations
        assert [(r.target.coordinate, r.axis) for r in relations] == [
            (("1", "b"), HORIZONTAL),
            (("2", "a"), VERTICAL),
            (("2", "b"), DIAGONAL),
        ]

    def test_relations_for_matches_board(self, empty_board: Board) -> None:
        """Recomputing relations gives the same targets and axes."""
        cell = empty_board.cell("5", "c")
        recomputed = relations_for(cell, empty_board)
        assert [(r.target, r.axis) for r in recomputed] == [
            (r.target, r.axis) for r in cell.relations
        ]

    def test_add_relations_is_repeatable(self, empty_board: Board) -> None:
        """Running the classifier again keeps the counts."""
        add_relations(empty_board)
        assert len(empty_board.cell("4", "b").relations) == 8

    def test_relation_description(self, empty_board: Board) -> None:
        """str(relation) names source, target and axis."""
        relation = empty_board.cell("1", "a").relations[1]
        assert isinstance(relation, Relation)
        assert str(relation) == "1, a - 2, a -> vertical"


class TestBoardLookup:
    """Test cell lookup and out of range handling."""

    def test_cell_by_labels(self, empty_board: Board) -> None:
        """cell(), board[row, col] and board[row][col] agree."""
        cell = empty_board.cell("2", "c")
        assert empty_board["2", "c"] is cell
        assert empty_board["2"]["c"] is cell

    def test_row_access(self, empty_board: Board) -> None:
        """board[row] maps every column label to its cell."""
        assert list(empty_board["7"]) == ["a", "b", "c", "d"]

    def test_unknown_row_raises(self, empty_board: Board) -> None:
        """Unknown row labels raise CoordinateError."""
        with pytest.raises(CoordinateError, match="out of range"):
            empty_board.cell("9", "a")
        with pytest.raises(CoordinateError, match="out of range"):
            empty_board["9"]

    def test_unknown_col_raises(self, empty_board: Board) -> None:
        """Unknown column labels raise CoordinateError."""
        with pytest.raises(CoordinateError, match="out of range"):
            empty_board["1", "e"]

    def test_coordinate_error_is_value_error(self, empty_board: Board) -> None:
        """Callers may catch CoordinateError as ValueError."""
        with pytest.raises(ValueError):
            empty_board.cell("0", "a")

    def test_cell_at_indices(self, empty_board: Board) -> None:
        """cell_at(i, j) uses zero-based indices and checks bounds."""
        assert empty_board.cell_at(7, 3).coordinate == ("8", "d")
        with pytest.raises(CoordinateError):
            empty_board.cell_at(8, 0)
        with pytest.raises(CoordinateError):
            empty_board.cell_at(0, -1)

    def test_is_in_board(self, empty_board: Board) -> None:
        """is_in_board covers exactly the 8x4 index range."""
        assert empty_board.is_in_board(0, 0)
        assert empty_board.is_in_board(7, 3)
        assert not empty_board.is_in_board(-1, 0)
        assert not empty_board.is_in_board(8, 0)
        assert not empty_board.is_in_board(0, 4)

    def test_parse_square(self, empty_board: Board) -> None:
        """'b3' is row '3', column 'b'."""
        assert empty_board.parse_square("b3") == ("3", "b")
        with pytest.raises(CoordinateError):
            empty_board.parse_square("e1")

    def test_iteration_and_size(self, empty_board: Board) -> None:
        """Iteration is row-major over all 32 cells."""
        cells = list(empty_board)
        assert len(cells) == len(empty_board) == 32
        assert cells[0].coordinate == ("1", "a")
        assert cells[4].coordinate == ("2", "a")
        assert empty_board.shape == (8, 4)
        assert empty_board.diameter == 8


class TestOccupancy:
    """Test piece placement and the numpy occupancy view."""

    def test_place_and_clear(self, empty_board: Board) -> None:
        """place() uses the piece's coordinate; clear() empties the board."""
        piece = make_piece("4", "c", 2, UPSIDE, empty_board.diameter)
        empty_board.place(piece)
        assert empty_board.cell("4", "c").piece is piece
        assert empty_board.pieces() == [piece]
        empty_board.clear()
        assert empty_board.pieces() == []

    def test_to_array(self, empty_board: Board) -> None:
        """Array holds side * rank and EMPTY elsewhere."""
        empty_board.place(make_piece("1", "a", 3, UPSIDE, empty_board.diameter))
        empty_board.place(make_piece("8", "b", 2, DOWNSIDE, empty_board.diameter))
        array = empty_board.to_array()
        assert array.shape == (8, 4)
        assert array[0, 0] == 3
        assert array[7, 1] == -2
        assert np.sum(array != EMPTY) == 2


class TestMakeLabels:
    """Test label generation for other board sizes."""

    def test_labels(self) -> None:
        """Rows are numbers from 1, columns letters from a."""
        assert make_labels(3, 2) == (("1", "2", "3"), ("a", "b"))

    def test_invalid_sizes(self) -> None:
        """Non-positive sizes and more than 26 columns raise ValueError."""
        with pytest.raises(ValueError):
            make_labels(0, 4)
        with pytest.raises(ValueError):
            make_labels(4, 0)
        with pytest.raises(ValueError):
            make_labels(4, 27)
