"""Errors raised by the slidegrid rules engine."""


class CoordinateError(ValueError):
    """Raised when a row or column label is not part of the board."""

    def __init__(self, row: str, col: str | None = None) -> None:
        """Build an out of range message for the given labels."""
        self.row = row
        self.col = col
        where = f"row {row!r}" if col is None else f"cell ({row!r}, {col!r})"
        super().__init__(f"Coordinate out of range: {where} is not on the board.")


class IllegalMoveError(ValueError):
    """Raised when a move is not allowed in the current board state."""
