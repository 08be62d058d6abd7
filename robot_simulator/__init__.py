from robot_simulator.commands.executor import simulate, step
from robot_simulator.entities.robot import create, direction, position
from robot_simulator.utils.enums import Direction, ErrorKind, Instruction
from robot_simulator.utils.types import Position, RobotState, SimulationError, is_error

__all__ = [
    "create",
    "simulate",
    "step",
    "direction",
    "position",
    "is_error",
    "Direction",
    "Instruction",
    "ErrorKind",
    "Position",
    "RobotState",
    "SimulationError",
]
