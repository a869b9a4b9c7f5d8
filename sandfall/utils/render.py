"""Text rendering of the obstacle map.

Diagnostic only: produces a fixed-width grid, one row per ``y`` from 0 down to
the floor row, prefixed with the row number. Cells:

* ``#`` occupied (rock or settled sand)
* ``*`` the source, when it is free
* ``-`` the floor row
* ``.`` empty

Columns span one cell beyond the leftmost and rightmost obstacle.
"""

from typing import AbstractSet, List, Optional

from sandfall.components import Position
from sandfall.config import DEFAULT_FLOOR_OFFSET, DEFAULT_SOURCE
from sandfall.levels.rock import lowest_point
from sandfall.state import State

OCCUPIED = "#"
SOURCE = "*"
FLOOR = "-"
EMPTY = "."


def render_obstacles(
    obstacles: AbstractSet[Position],
    source: Position = DEFAULT_SOURCE,
    floor: Optional[int] = None,
) -> str:
    """Render ``obstacles`` as text.

    Args:
        obstacles: Occupied cells; must not be empty.
        source: Cell marked with ``*`` when free.
        floor: Floor row; defaults to the lowest obstacle plus the default
            floor offset.

    Raises:
        EmptyObstacleSetError: If ``obstacles`` is empty.
    """
    if floor is None:
        floor = lowest_point(obstacles) + DEFAULT_FLOOR_OFFSET
    left = min(pos.x for pos in obstacles) - 1
    right = max(pos.x for pos in obstacles) + 1

    lines: List[str] = []
    for y in range(floor + 1):
        row = []
        for x in range(left, right + 1):
            pos = Position(x, y)
            if y == floor:
                row.append(FLOOR)
            elif pos in obstacles:
                row.append(OCCUPIED)
            elif pos == source:
                row.append(SOURCE)
            else:
                row.append(EMPTY)
        lines.append(f"{y:3}: " + "".join(row))
    return "\n".join(lines)


def render_state(state: State) -> str:
    """Render a state's map using its source and (if any) its floor."""
    floor = state.floor
    if floor is None:
        floor = state.lowest_rock + DEFAULT_FLOOR_OFFSET
    return render_obstacles(state.obstacles, state.source, floor)
