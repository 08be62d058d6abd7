# IN THIS FILE: POSITION, ROBOTSTATE, SIMULATIONERROR

from typing import NamedTuple, Union

from robot_simulator.utils.enums import Direction, ErrorKind


class Position(NamedTuple):
    """
    Integer grid coordinate on an unbounded plane.
    Compares equal to the plain tuple (x, y).
    """
    x: int
    y: int

    def __repr__(self) -> str:
        return f"Position(x={self.x}, y={self.y})"


class RobotState(NamedTuple):
    """
    Robot's full observable state: facing direction plus position.
    Immutable; every transition builds a new RobotState.
    """
    direction: Direction
    position: Position

    def __repr__(self) -> str:
        return f"RobotState(d={self.direction.name}, x={self.position.x}, y={self.position.y})"


class SimulationError(NamedTuple):
    """Failure value returned in place of a RobotState."""
    kind: ErrorKind
    reason: str

    @classmethod
    def of(cls, kind: ErrorKind) -> 'SimulationError':
        return cls(kind, kind.value)

    def __repr__(self) -> str:
        return f"SimulationError({self.kind.name}: {self.reason})"


Result = Union[RobotState, SimulationError]


def is_error(result: Result) -> bool:
    """True if the result is a SimulationError rather than a RobotState"""
    return isinstance(result, SimulationError)
