from typing import Iterable, Optional, Tuple

from pyrsistent import pset
from pyrsistent.typing import PSet

from sandfall.components import Position
from sandfall.config import SimulationConfig
from sandfall.levels.parse import parse_polylines
from sandfall.levels.rock import build_obstacles
from sandfall.simulate import initial_state
from sandfall.state import State
from sandfall.types import Policy

REFERENCE_SCAN = """\
498,4 -> 498,6 -> 496,6
503,4 -> 502,4 -> 502,9 -> 494,9
"""

REFERENCE_ABYSS_COUNT = 24
REFERENCE_FLOOR_COUNT = 93


def reference_polylines() -> list[Tuple[Position, ...]]:
    """Standard two-formation example scan."""
    return parse_polylines(REFERENCE_SCAN)


def reference_obstacles() -> PSet[Position]:
    return build_obstacles(reference_polylines())


def cells(*coords: Tuple[int, int]) -> PSet[Position]:
    """Build an obstacle set from bare ``(x, y)`` tuples."""
    return pset(Position(x, y) for x, y in coords)


def make_state(
    obstacles: Iterable[Position],
    policy: Policy,
    source: Tuple[int, int] = (500, 0),
    reuse_fall_path: bool = True,
    max_grains: Optional[int] = 10_000,
) -> Tuple[State, SimulationConfig]:
    """Initial state plus the config it was built with."""
    config = SimulationConfig(
        source=Position(*source),
        reuse_fall_path=reuse_fall_path,
        max_grains=max_grains,
    )
    return initial_state(pset(obstacles), policy, config), config
