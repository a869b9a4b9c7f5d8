import pytest

from sandfall.components import Position
from sandfall.rules import can_move, fall, fall_candidates, next_position
from tests.test_utils import cells


def test_fall_candidates_priority_order() -> None:
    assert fall_candidates(Position(5, 5)) == (
        Position(5, 6),
        Position(4, 6),
        Position(6, 6),
    )


@pytest.mark.parametrize(
    "occupied, expected",
    [
        ((), (500, 1)),
        (((500, 1),), (499, 1)),
        (((500, 1), (499, 1)), (501, 1)),
        (((499, 1), (501, 1)), (500, 1)),
        (((500, 1), (501, 1)), (499, 1)),
    ],
)
def test_next_position_tie_breaks(
    occupied: tuple[tuple[int, int], ...], expected: tuple[int, int]
) -> None:
    assert next_position(cells(*occupied), Position(500, 0)) == Position(*expected)


def test_next_position_at_rest() -> None:
    obstacles = cells((499, 1), (500, 1), (501, 1))
    assert next_position(obstacles, Position(500, 0)) is None
    assert not can_move(obstacles, Position(500, 0))


def test_can_move_with_one_free_candidate() -> None:
    assert can_move(cells((499, 1), (500, 1)), Position(500, 0))


def test_fall_records_path_until_bound() -> None:
    path: list[Position] = []
    final = fall(cells(), Position(0, 0), 3, path)
    assert final == Position(0, 3)
    assert path == [Position(0, 1), Position(0, 2), Position(0, 3)]


def test_fall_rests_above_obstacle() -> None:
    obstacles = cells((9, 5), (10, 5), (11, 5))
    assert fall(obstacles, Position(10, 0), 100) == Position(10, 4)


def test_fall_slides_right_then_rests() -> None:
    obstacles = cells((10, 1), (9, 1), (10, 2), (11, 2), (12, 2))
    assert fall(obstacles, Position(10, 0), 100) == Position(11, 1)


def test_fall_does_not_move_when_start_at_bound() -> None:
    assert fall(cells(), Position(3, 7), 7) == Position(3, 7)


def test_fall_is_deterministic() -> None:
    obstacles = cells((500, 3), (499, 3), (501, 3), (498, 4))
    first = fall(obstacles, Position(500, 0), 50)
    second = fall(obstacles, Position(500, 0), 50)
    assert first == second
