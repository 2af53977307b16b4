"""Lookup tables turning a starting position into a piece's movement rules."""

from ..constants import AXES, DIAGONAL, HORIZONTAL, VERTICAL

ALLOWED_AXES: dict[int, tuple[str, ...]] = {
    3: AXES,
    2: (HORIZONTAL, VERTICAL),
    1: (DIAGONAL,),
}

# Rank 3 is unbounded and slides as far as the board allows.
MAX_SLIDE: dict[int, int] = {
    2: 2,
    1: 1,
}


def corner_distance(row_offset: int, col_offset: int) -> int:
    """Distance from a home corner, counted in row steps plus column steps."""
    return abs(row_offset) + abs(col_offset)


def rank_from_distance(distance: int) -> int:
    """Rank of a piece starting ``distance`` steps away from its home corner."""
    if distance < 0:
        raise ValueError(f"Distance must be non-negative, got {distance}.")
    if distance <= 1:
        return 3
    if distance == 2:
        return 2
    return 1


def allowed_axes_for_rank(rank: int) -> tuple[str, ...]:
    """Axes a piece of the given rank may slide along."""
    if rank not in ALLOWED_AXES:
        raise ValueError(f"Unknown rank {rank}, expected one of {sorted(ALLOWED_AXES)}.")
    return ALLOWED_AXES[rank]


def max_slide_for_rank(rank: int, diameter: int) -> int:
    """Maximum number of steps per move for the given rank on a board of ``diameter`` cells."""
    if rank not in ALLOWED_AXES:
        raise ValueError(f"Unknown rank {rank}, expected one of {sorted(ALLOWED_AXES)}.")
    return MAX_SLIDE.get(rank, diameter - 1)
