# IN THIS FILE: ALL CONSTANTS

from robot_simulator.utils.enums import Direction

# -----------------------------------------------------------------------------
# 1. STARTING STATE
# -----------------------------------------------------------------------------
# Used by create() when direction/position are omitted.
DEFAULT_DIRECTION = Direction.NORTH
DEFAULT_POSITION = (0, 0)

# -----------------------------------------------------------------------------
# 2. MOVEMENT
# -----------------------------------------------------------------------------
# Unit step for a single ADVANCE instruction (cells)
STRAIGHT_STEP = 1

# -----------------------------------------------------------------------------
# 3. CLI OUTPUT
# -----------------------------------------------------------------------------
LOG_TAG = "[Simulator]"
EXIT_OK = 0
EXIT_SIMULATION_ERROR = 1
