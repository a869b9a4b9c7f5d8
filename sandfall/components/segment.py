"""Rock segment component.

A ``RockSegment`` is a straight horizontal or vertical run of rock between two
inclusive endpoints. Authoring-time rock descriptions are ``Polyline`` values:
each consecutive pair of vertices is one segment.
"""

from dataclasses import dataclass
from typing import Sequence

from sandfall.components.position import Position

Polyline = Sequence[Position]


@dataclass(frozen=True)
class RockSegment:
    """Straight rock line between two endpoints (both inclusive).

    Attributes:
        start: First endpoint.
        end: Second endpoint; must share ``x`` or ``y`` with ``start``.
    """

    start: Position
    end: Position

    @property
    def is_horizontal(self) -> bool:
        return self.start.y == self.end.y

    @property
    def is_vertical(self) -> bool:
        return self.start.x == self.end.x

    @property
    def is_axis_aligned(self) -> bool:
        return self.is_horizontal or self.is_vertical
