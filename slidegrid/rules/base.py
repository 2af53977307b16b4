"""Abstract base classes for slidegrid game rules."""

from abc import ABC, abstractmethod

from ..board import Board, Cell, Piece, Relation


class InitializeBoard(ABC):
    """Abstract base class for board initialization rules."""

    @staticmethod
    @abstractmethod
    def init_board(board: Board) -> None:
        """Place the starting pieces on the board."""
        pass


class PathRule(ABC):
    """Abstract base class for rules computing where a piece may go."""

    @staticmethod
    @abstractmethod
    def possible_paths(cell: Cell) -> list[Relation]:
        """Return every relation describing a legal slide of the piece on ``cell``."""
        pass


class UpdateRule(ABC):
    """Abstract base class for board update rules."""

    @staticmethod
    @abstractmethod
    def update(board: Board, piece: Piece, destination: Cell) -> None:
        """Update the board after ``piece`` moves to ``destination``."""
        pass
