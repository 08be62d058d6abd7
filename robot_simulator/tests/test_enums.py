import pytest

from robot_simulator.utils.enums import Direction, Instruction

CLOCKWISE = [Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST]


def test_direction_order_is_clockwise():
    assert list(Direction) == CLOCKWISE
    assert [int(d) for d in Direction] == [0, 1, 2, 3]


@pytest.mark.parametrize("index", range(4))
def test_turn_right_and_left_are_inverse(index):
    d = CLOCKWISE[index]
    assert d.turn_right() == CLOCKWISE[(index + 1) % 4]
    assert d.turn_left() == CLOCKWISE[(index - 1) % 4]
    assert d.turn_right().turn_left() == d


def test_instruction_characters():
    assert {i.value for i in Instruction} == {"L", "R", "A"}
