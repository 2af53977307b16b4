"""Pytest configuration and fixtures for slidegrid tests."""

import matplotlib
import pytest

from slidegrid.board import Board
from slidegrid.constants import UPSIDE
from slidegrid.engine import generate_board
from slidegrid.games import BlockingSlide, ClassicSlide
from slidegrid.rules.initialization import make_piece

matplotlib.use("Agg")


@pytest.fixture
def fresh_board() -> Board:
    """Default 8x4 board with both home blocks placed."""
    return generate_board()


@pytest.fixture
def empty_board() -> Board:
    """Default 8x4 board without pieces."""
    return Board()


@pytest.fixture
def lone_corner_board(empty_board: Board) -> Board:
    """Empty board with a single rank 3 piece at (1, a)."""
    empty_board.place(make_piece("1", "a", 3, UPSIDE, empty_board.diameter))
    return empty_board


@pytest.fixture
def classic_game() -> ClassicSlide:
    """Fresh ClassicSlide instance."""
    return ClassicSlide()


@pytest.fixture
def blocking_game() -> BlockingSlide:
    """Fresh BlockingSlide instance."""
    return BlockingSlide()
