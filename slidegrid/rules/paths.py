from ..board import Cell, Piece, Relation
from .base import PathRule


def first_steps(cell: Cell, piece: Piece) -> list[Relation]:
    """Single steps along an allowed axis onto an empty neighbour."""
    return [
        relation
        for relation in cell.relations
        if relation.axis in piece.allowed_axes and relation.target.is_empty
    ]


def extend_slide(first: Relation, steps: int, stop_at_occupied: bool) -> list[Relation]:
    """Continue a slide in a straight line for at most ``steps`` more steps.

    Each step must keep both the axis and the exact displacement of ``first``.
    """
    extension = []
    current = first
    for _ in range(steps):
        following = next(
            (
                relation
                for relation in current.target.relations
                if relation.axis == current.axis and relation.delta == current.delta
            ),
            None,
        )
        if following is None:
            break
        if stop_at_occupied and not following.target.is_empty:
            break
        extension.append(following)
        current = following

    return extension


def slide_paths(cell: Cell, stop_at_occupied: bool) -> list[Relation]:
    """First steps in every direction followed by each direction's extension."""
    piece = cell.piece
    if piece is None:
        return []

    paths = first_steps(cell, piece)
    extensions = [
        relation
        for first in paths
        for relation in extend_slide(first, piece.max_slide - 1, stop_at_occupied)
    ]
    return [*paths, *extensions]


class StraightSlidePathRule(PathRule):
    """Slides whose occupancy is only checked on the first step.

    Once the first cell is free the slide continues over occupied cells, and may
    end on one, until the piece's slide length or the board edge is reached.
    """

    @staticmethod
    def possible_paths(cell: Cell) -> list[Relation]:
        """Return first-step relations plus their unchecked straight extensions."""
        return slide_paths(cell, stop_at_occupied=False)


class BlockedSlidePathRule(PathRule):
    """Slides that stop in front of the first occupied cell in each direction."""

    @staticmethod
    def possible_paths(cell: Cell) -> list[Relation]:
        """Return relations of slides that only cross and land on empty cells."""
        return slide_paths(cell, stop_at_occupied=True)


def reachable_cells(paths: list[Relation]) -> list[Cell]:
    """Distinct targets of ``paths`` in the order they are first reached."""
    seen = {}
    for relation in paths:
        seen.setdefault(relation.target.coordinate, relation.target)
    return list(seen.values())
