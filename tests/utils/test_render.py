import numpy as np
import pytest

from sandfall.components import Position
from sandfall.errors import EmptyObstacleSetError
from sandfall.renderer.image import DEFAULT_PALETTE, render_image, state_to_array
from sandfall.simulate import simulate
from sandfall.types import Policy
from sandfall.utils.render import render_obstacles, render_state
from tests.test_utils import cells, make_state, reference_obstacles


def test_render_reference_map() -> None:
    lines = render_obstacles(reference_obstacles()).splitlines()
    assert len(lines) == 12  # rows 0..11, floor at 9 + 2
    assert lines[0] == "  0: .......*...."
    assert lines[4] == "  4: .....#...##."
    assert lines[6] == "  6: ...###...#.."
    assert lines[9] == "  9: .#########.."
    assert lines[11] == " 11: ------------"


def test_render_explicit_floor() -> None:
    lines = render_obstacles(cells((1, 1)), source=Position(1, 0), floor=3).splitlines()
    assert lines == ["  0: .*.", "  1: .#.", "  2: ...", "  3: ---"]


def test_render_empty_raises() -> None:
    with pytest.raises(EmptyObstacleSetError):
        render_obstacles(cells())


def test_render_filled_source_shows_occupied() -> None:
    state, _ = make_state(reference_obstacles(), Policy.FLOOR)
    final = simulate(state)
    lines = render_state(final).splitlines()
    assert lines[0].startswith("  0: ")
    assert "*" not in lines[0]
    assert "#" in lines[0]
    assert lines[-1].strip().endswith("-")


def test_state_to_array_colors() -> None:
    state, _ = make_state(reference_obstacles(), Policy.ABYSS)
    arr = state_to_array(state)
    assert arr.shape == (12, 12, 3)
    assert arr.dtype == np.uint8
    assert tuple(arr[4, 5]) == DEFAULT_PALETTE.rock
    assert tuple(arr[0, 7]) == DEFAULT_PALETTE.source
    assert tuple(arr[11, 0]) == DEFAULT_PALETTE.floor
    assert tuple(arr[1, 1]) == DEFAULT_PALETTE.background


def test_state_to_array_marks_sand() -> None:
    state, _ = make_state(reference_obstacles(), Policy.ABYSS)
    final = simulate(state)
    arr = state_to_array(final)
    # First grain of the reference scan settles on the lower ledge at (500, 8).
    assert tuple(arr[8, 7]) == DEFAULT_PALETTE.sand


def test_render_image_scales() -> None:
    state, _ = make_state(reference_obstacles(), Policy.ABYSS)
    img = render_image(state, scale=3)
    assert img.size == (36, 36)
    assert img.mode == "RGB"


def test_render_image_rejects_bad_scale() -> None:
    state, _ = make_state(reference_obstacles(), Policy.ABYSS)
    with pytest.raises(ValueError):
        render_image(state, scale=0)
