"""Obstacle map construction.

Turns authoring-time rock polylines into the sparse obstacle set the simulator
consumes. Every consecutive vertex pair of a polyline is expanded into the
inclusive run of unit cells between them; junction vertices shared by two
segments collapse through set semantics.
"""

from typing import Iterable, List, Set
from pyrsistent import pset
from pyrsistent.typing import PSet

from sandfall.components import Polyline, Position, RockSegment
from sandfall.errors import EmptyObstacleSetError, MalformedSegmentError


def segment_cells(start: Position, end: Position) -> List[Position]:
    """Return every cell on the segment ``start``-``end``, endpoints included.

    Raises:
        MalformedSegmentError: If the segment is neither horizontal nor vertical.
    """
    segment = RockSegment(start, end)
    if not segment.is_axis_aligned:
        raise MalformedSegmentError(start, end)

    if segment.is_vertical:
        low, high = sorted((start.y, end.y))
        return [Position(start.x, y) for y in range(low, high + 1)]

    low, high = sorted((start.x, end.x))
    return [Position(x, start.y) for x in range(low, high + 1)]


def polyline_segments(polyline: Polyline) -> List[RockSegment]:
    """Split a polyline into its consecutive segments."""
    return [RockSegment(a, b) for a, b in zip(polyline, polyline[1:])]


def build_obstacles(polylines: Iterable[Polyline]) -> PSet[Position]:
    """Expand rock polylines into a single obstacle set.

    A polyline with a single vertex contributes just that cell.

    Args:
        polylines: Sequences of vertices, one per rock formation.

    Returns:
        PSet[Position]: Every rock cell, without duplicates.

    Raises:
        MalformedSegmentError: If any segment is not axis-aligned.
    """
    cells: Set[Position] = set()
    for polyline in polylines:
        if len(polyline) == 1:
            cells.add(polyline[0])
        for segment in polyline_segments(polyline):
            cells.update(segment_cells(segment.start, segment.end))
    return pset(cells)


def lowest_point(obstacles: Iterable[Position]) -> int:
    """Return the largest ``y`` in ``obstacles``.

    Raises:
        EmptyObstacleSetError: If ``obstacles`` is empty.
    """
    lowest = max((pos.y for pos in obstacles), default=None)
    if lowest is None:
        raise EmptyObstacleSetError()
    return lowest
