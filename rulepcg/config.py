"""
Configuration constants.

Centralizes the default parameters of a generation run.
Organized by functional area for easy maintenance.
"""

from rulepcg.types import RandomSeed

# =============================================================================
# GENERAL
# =============================================================================

# RANDOM_SEED = "burrow1"
RANDOM_SEED: RandomSeed = None

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# =============================================================================
# MAP
# =============================================================================

MAP_WIDTH = 20  # Columns
MAP_HEIGHT = 10  # Rows

# Fraction of cells occupied by the initial noise fill
NOISE_DENSITY = 0.5

# Number of automaton + walker rounds in the default pipeline
ITERATIONS = 5

# =============================================================================
# CELLULAR AUTOMATON
# =============================================================================

AUTOMATON_RADIUS = 1  # 1 -> 3x3 window, 2 -> 5x5 window
AUTOMATON_THRESHOLD = 0.5  # Cell is occupied when window density exceeds this

# =============================================================================
# DRUNK WALKER
# =============================================================================

WALKER_WALK_COUNT = 5  # Walks per pipeline iteration
WALKER_STEPS_PER_WALK = 10
WALKER_ROOM_SIZE_X = 5  # Rows spanned by a carved room
WALKER_ROOM_SIZE_Y = 3  # Columns spanned by a carved room

# Base chance and per-miss increase for room carving and turning.
# Chances grow without an upper bound until a success resets them.
WALKER_PROB_GENERATE_ROOM = 0.1
WALKER_PROB_INCREASE_ROOM = 0.05
WALKER_PROB_CHANGE_DIRECTION = 0.2
WALKER_PROB_INCREASE_CHANGE = 0.03

# =============================================================================
# RENDERING
# =============================================================================

OCCUPIED_CHAR = "#"
EMPTY_CHAR = "."
