"""
Game constants for Snake Arena.
"""

# Match defaults (overridable through the environment, see metadata.py)
DEFAULT_BOARD_WIDTH = 40
DEFAULT_BOARD_HEIGHT = 40
DEFAULT_GROWTH_FREQUENCY = 5
DEFAULT_FRUIT_FREQUENCY = 10
DEFAULT_THINKING_TIME = 0.5  # seconds
DEFAULT_FRUIT_GOAL = 10

# Starting placement
EDGE_OFFSET = 2
STARTING_SAFETY_RADIUS = 2

# Per-snake decision outcomes reported by the decision gatherer
ACCEPTED = "accepted"
TIMED_OUT = "timed_out"
FAULTED = "faulted"
INVALID = "invalid"
REVERSED = "reversed"

# Death reasons
DEATH_WALL = "wall"
DEATH_COLLISION = "collision"

# Game results
WON = "won"
LOST = "lost"
TIED = "tied"
