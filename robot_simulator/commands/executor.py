# robot_simulator/commands/executor.py
from typing import Any, Iterable

from robot_simulator.utils.consts import STRAIGHT_STEP
from robot_simulator.utils.enums import Direction, ErrorKind, Instruction
from robot_simulator.utils.types import Position, Result, RobotState, SimulationError


def step(robot: Result, instruction: Any) -> Result:
    """
    Apply a single instruction character to a robot state.
    An error state is returned unchanged.
    """
    if isinstance(robot, SimulationError):
        return robot

    if instruction == Instruction.ADVANCE.value:
        return RobotState(robot.direction, _advance(robot.direction, robot.position))
    elif instruction == Instruction.RIGHT.value:
        return RobotState(robot.direction.turn_right(), robot.position)
    elif instruction == Instruction.LEFT.value:
        return RobotState(robot.direction.turn_left(), robot.position)

    return SimulationError.of(ErrorKind.INVALID_INSTRUCTION)


def _advance(d: Direction, pos: Position) -> Position:
    dx, dy = 0, 0
    if d == Direction.NORTH: dy = STRAIGHT_STEP
    elif d == Direction.SOUTH: dy = -STRAIGHT_STEP
    elif d == Direction.EAST: dx = STRAIGHT_STEP
    elif d == Direction.WEST: dx = -STRAIGHT_STEP
    return Position(pos.x + dx, pos.y + dy)


def simulate(robot: Result, instructions: Iterable[str]) -> Result:
    """
    Simulate the robot's movement given a string of instructions.

    Valid instructions are "R" (turn right), "L" (turn left) and "A" (advance).
    Instructions are applied left to right; the first invalid one stops the
    run and its error is returned.

    Examples:
        simulate(create(Direction.EAST, (3, 2)), "LAAARRRALLLL")  → RobotState(d=WEST, x=2, y=5)
        simulate(create(), "AX")                                  → SimulationError(INVALID_INSTRUCTION: ...)
    """
    current = robot
    for instruction in instructions:
        current = step(current, instruction)
        # Error is absorbing, nothing after it can change the result
        if isinstance(current, SimulationError):
            break
    return current
