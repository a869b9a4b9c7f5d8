"""sandfall.components
=====================

Aggregate import surface for the value objects the simulation is built from.

Every component is a frozen ``@dataclass``: it carries coordinates, never
behavior that mutates shared state. Systems combine them into new
:class:`sandfall.state.State` snapshots. Import from here, e.g.::

    from sandfall.components import Position, RockSegment
"""

from .position import Position
from .segment import Polyline, RockSegment

__all__ = [
    "Polyline",
    "Position",
    "RockSegment",
]
