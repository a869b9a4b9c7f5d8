"""Grain rest rule.

A falling grain at ``p`` tries, in strict priority order, the cell straight
below, then below-left, then below-right, and moves to the first one that is
not occupied. When all three are occupied the grain is at rest.

Contract:

* Pure functions of ``(obstacles, position)``; nothing here mutates state.
* Tie-breaks are fixed: straight down beats either diagonal and the left
  diagonal beats the right one.
* :func:`fall` stops at a caller-supplied row. Below the lowest rock the map is
  empty, so without that bound a grain would never find a rest cell.
"""

from typing import AbstractSet, List, Optional, Tuple

from sandfall.components import Position


def fall_candidates(pos: Position) -> Tuple[Position, Position, Position]:
    """Return the three candidate moves of ``pos`` in priority order."""
    return (pos.below(), pos.below_left(), pos.below_right())


def can_move(obstacles: AbstractSet[Position], pos: Position) -> bool:
    """Return True if at least one candidate move is free."""
    return any(candidate not in obstacles for candidate in fall_candidates(pos))


def next_position(
    obstacles: AbstractSet[Position], pos: Position
) -> Optional[Position]:
    """Return the first free candidate, or ``None`` if the grain is at rest."""
    for candidate in fall_candidates(pos):
        if candidate not in obstacles:
            return candidate
    return None


def fall(
    obstacles: AbstractSet[Position],
    start: Position,
    stop_y: int,
    path: Optional[List[Position]] = None,
) -> Position:
    """Let a grain fall from ``start`` until it rests or reaches ``stop_y``.

    Args:
        obstacles: Occupied cells.
        start: Initial grain position.
        stop_y: Row bound (exclusive). The grain stops moving as soon as its
            ``y`` is no longer below this row.
        path: If given, every position the grain moves into is appended.

    Returns:
        Position: Final grain position. Callers compare its ``y`` with
            ``stop_y`` to tell a rest from reaching the bound.
    """
    pos = start
    while pos.y < stop_y:
        nxt = next_position(obstacles, pos)
        if nxt is None:
            break
        pos = nxt
        if path is not None:
            path.append(pos)
    return pos
