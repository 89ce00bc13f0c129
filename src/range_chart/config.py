"""Defaults for the range chart."""

# Seat used when --pos is not given
DEFAULT_POSITION = "sb"

# Count equal scores as wins
DEFAULT_INCLUDE_TIES = False

# Two-card combinations left once both hole cards are removed: C(50, 2)
OPPONENT_COMBOS = 1225

# Text grid
CELL_WIDTH = 6
TITLE_WIDTH = 95
