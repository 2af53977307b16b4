from __future__ import annotations

from collections.abc import Sequence

from .constants import COLS, ROWS
from .game import SlideGame
from .rules.initialization import CornerRankInitialization
from .rules.paths import BlockedSlidePathRule, StraightSlidePathRule
from .rules.update import RelocateUpdateRule


class ClassicSlide(SlideGame):
    """Reference rules: only the first step of a slide must land on an empty cell."""

    alias = "classic"

    def __init__(self, rows: Sequence[str] = ROWS, cols: Sequence[str] = COLS) -> None:
        """Initialize a Classic game with both home blocks placed."""
        super().__init__(
            initialization_rule=CornerRankInitialization,
            path_rule=StraightSlidePathRule,
            update_rule=RelocateUpdateRule,
            rows=rows,
            cols=cols,
        )


class BlockingSlide(SlideGame):
    """Variant where every cell crossed by a slide must be empty."""

    alias = "blocking"

    def __init__(self, rows: Sequence[str] = ROWS, cols: Sequence[str] = COLS) -> None:
        """Initialize a Blocking game with both home blocks placed."""
        super().__init__(
            initialization_rule=CornerRankInitialization,
            path_rule=BlockedSlidePathRule,
            update_rule=RelocateUpdateRule,
            rows=rows,
            cols=cols,
        )


GAME_REGISTRY: dict[str, type[SlideGame]] = {
    cls.alias: cls for cls in [ClassicSlide, BlockingSlide]
}
