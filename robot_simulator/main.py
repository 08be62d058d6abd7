# main.py
import argparse
import sys
from typing import List, Optional

from pydantic import BaseModel

from robot_simulator.commands.executor import simulate
from robot_simulator.entities.robot import create, direction, position
from robot_simulator.utils.consts import (
    DEFAULT_DIRECTION,
    DEFAULT_POSITION,
    EXIT_OK,
    EXIT_SIMULATION_ERROR,
    LOG_TAG,
)
from robot_simulator.utils.enums import Direction
from robot_simulator.utils.types import Result, SimulationError

# =============================================================================
# PYDANTIC MODELS
# =============================================================================

class StateOutput(BaseModel):
    direction: str
    x: int
    y: int


class ErrorOutput(BaseModel):
    error: str
    reason: str


# =============================================================================
# ARGUMENT HANDLING
# =============================================================================

def parse_direction(name: str):
    """
    Map a case-insensitive direction name onto Direction.
    Unknown names are returned untouched so create() can reject them.
    """
    try:
        return Direction[name.strip().upper()]
    except KeyError:
        return name


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="robot-simulator",
        description="Run a robot through a string of L/R/A instructions and print where it ends up.",
    )
    parser.add_argument("instructions", help="Instruction string, e.g. 'LAAARRRALLLL'. L=turn left, R=turn right, A=advance.")
    parser.add_argument("--direction", default=DEFAULT_DIRECTION.name, help="Starting direction: north, east, south or west (default: north).")
    parser.add_argument("--x", type=int, default=DEFAULT_POSITION[0], help="Starting x coordinate (default: 0).")
    parser.add_argument("--y", type=int, default=DEFAULT_POSITION[1], help="Starting y coordinate (default: 0).")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON.")
    return parser


# =============================================================================
# CORE
# =============================================================================

def run_simulation(direction_name: str, x: int, y: int, instructions: str) -> Result:
    robot = create(parse_direction(direction_name), (x, y))
    return simulate(robot, instructions)


def report(result: Result, as_json: bool) -> int:
    if isinstance(result, SimulationError):
        if as_json:
            print(ErrorOutput(error=result.kind.name, reason=result.reason).model_dump_json())
        else:
            print(f"{LOG_TAG} Error: {result.reason}", file=sys.stderr)
        return EXIT_SIMULATION_ERROR

    final_dir = direction(result)
    final_x, final_y = position(result)
    if as_json:
        print(StateOutput(direction=final_dir.name, x=final_x, y=final_y).model_dump_json())
    else:
        print(f"{final_dir.name} {final_x} {final_y}")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    result = run_simulation(args.direction, args.x, args.y, args.instructions)
    return report(result, args.json)


if __name__ == "__main__":
    sys.exit(main())
