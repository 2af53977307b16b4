"""Constants for the slidegrid board and its pieces."""

### Board
ROWS = ("1", "2", "3", "4", "5", "6", "7", "8")
COLS = ("a", "b", "c", "d")

### Axes
HORIZONTAL = "horizontal"
VERTICAL = "vertical"
DIAGONAL = "diagonal"
AXES = (HORIZONTAL, VERTICAL, DIAGONAL)

DIRECTIONS = [[i, j] for i in [-1, 0, 1] for j in [-1, 0, 1] if not (i == 0 and j == 0)]

### Pieces
UPSIDE = 1
DOWNSIDE = -1
EMPTY = 0

# Rows and columns of the block of starting pieces next to each home corner.
HOME_BLOCK = 3
