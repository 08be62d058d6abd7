# IN THIS FILE: BUILDING A VALIDATED ROBOT STATE & READING IT BACK

from typing import Any, Union

from robot_simulator.utils.consts import DEFAULT_DIRECTION, DEFAULT_POSITION
from robot_simulator.utils.enums import Direction, ErrorKind
from robot_simulator.utils.types import Position, Result, RobotState, SimulationError


def create(direction: Any = DEFAULT_DIRECTION, position: Any = DEFAULT_POSITION) -> Result:
    """
    Create a robot given an initial direction and position.

    Direction is validated before position, so when both are wrong the
    direction error is the one reported.

    Args:
        direction: Direction.NORTH / EAST / SOUTH / WEST
        position: (x, y) pair of ints

    Returns:
        RobotState on success, SimulationError otherwise

    Examples:
        create()                          → RobotState(d=NORTH, x=0, y=0)
        create("test", (0, 0))            → SimulationError(INVALID_DIRECTION: invalid direction)
        create(Direction.EAST, (3, 2))    → RobotState(d=EAST, x=3, y=2)
    """
    checked_direction = _validate_direction(direction)
    if isinstance(checked_direction, SimulationError):
        return checked_direction

    checked_position = _validate_position(position)
    if isinstance(checked_position, SimulationError):
        return checked_position

    return RobotState(checked_direction, checked_position)


def _validate_direction(direction: Any) -> Union[Direction, SimulationError]:
    # Plain ints (0..3) are not directions even though Direction is an int enum
    if isinstance(direction, Direction):
        return direction
    return SimulationError.of(ErrorKind.INVALID_DIRECTION)


def _validate_position(position: Any) -> Union[Position, SimulationError]:
    if isinstance(position, tuple) and len(position) == 2:
        x, y = position
        if _is_integer(x) and _is_integer(y):
            return Position(x, y)
    return SimulationError.of(ErrorKind.INVALID_POSITION)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, (bool, Direction))


def direction(robot: RobotState) -> Direction:
    """Return the robot's facing direction. The robot must not be an error."""
    return robot.direction


def position(robot: RobotState) -> Position:
    """Return the robot's (x, y) position. The robot must not be an error."""
    return robot.position
