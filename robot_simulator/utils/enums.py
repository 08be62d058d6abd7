# IN THIS FILE: DIRECTIONS, INSTRUCTIONS, and ERROR KINDS
from enum import Enum


class Direction(int, Enum):
    """
    Robot facing direction.
    Values follow the clockwise cycle so turning is index arithmetic mod 4.
    """
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def __int__(self):
        return self.value

    def turn_right(self) -> 'Direction':
        """
        One step clockwise.

        Examples:
            NORTH (0) → EAST (1)
            WEST (3)  → NORTH (0)
        """
        return Direction((self.value + 1) % 4)

    def turn_left(self) -> 'Direction':
        """
        One step counter-clockwise (same as three steps clockwise).

        Examples:
            NORTH (0) → WEST (3)
            EAST (1)  → NORTH (0)
        """
        return Direction((self.value + 3) % 4)


class Instruction(Enum):
    """
    Robot instruction characters.
    Value is the character accepted in an instruction string.
    """
    LEFT = "L"
    RIGHT = "R"
    ADVANCE = "A"


class ErrorKind(Enum):
    """
    Reasons a create/simulate call can fail.
    Value is the human-readable reason carried by the error.
    """
    INVALID_DIRECTION = "invalid direction"
    INVALID_POSITION = "invalid position"
    INVALID_INSTRUCTION = "invalid instruction"
