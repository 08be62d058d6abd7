import json

import pytest

from robot_simulator.main import main, parse_direction, run_simulation
from robot_simulator.utils.enums import Direction, ErrorKind


def test_parse_direction_is_case_insensitive():
    assert parse_direction("east") == Direction.EAST
    assert parse_direction(" West ") == Direction.WEST
    assert parse_direction("up") == "up"


def test_run_simulation():
    assert run_simulation("east", 3, 2, "LAAARRRALLLL") == (Direction.WEST, (2, 5))
    assert run_simulation("up", 0, 0, "A").kind == ErrorKind.INVALID_DIRECTION


def test_main_prints_final_state(capsys):
    code = main(["LAAARRRALLLL", "--direction", "east", "--x", "3", "--y", "2"])
    out = capsys.readouterr().out
    assert code == 0
    assert out.strip() == "WEST 2 5"


def test_main_defaults(capsys):
    assert main(["A"]) == 0
    assert capsys.readouterr().out.strip() == "NORTH 0 1"


def test_main_negative_coordinates(capsys):
    assert main(["A", "--direction", "south", "--x=-4", "--y=-4"]) == 0
    assert capsys.readouterr().out.strip() == "SOUTH -4 -5"


def test_main_json_output(capsys):
    assert main(["RA", "--json"]) == 0
    assert json.loads(capsys.readouterr().out) == {"direction": "EAST", "x": 1, "y": 0}


def test_main_reports_invalid_instruction(capsys):
    code = main(["AX"])
    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert "[Simulator] Error: invalid instruction" in captured.err


def test_main_reports_invalid_direction_as_json(capsys):
    code = main(["A", "--direction", "up", "--json"])
    assert code == 1
    assert json.loads(capsys.readouterr().out) == {
        "error": "INVALID_DIRECTION",
        "reason": "invalid direction",
    }


def test_main_rejects_non_integer_coordinate():
    with pytest.raises(SystemExit) as exc:
        main(["A", "--x", "1.5"])
    assert exc.value.code == 2
