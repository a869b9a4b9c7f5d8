"""Core immutable simulation ``State`` dataclass.

This module defines the frozen :class:`State` object that represents one
snapshot of a sand run: the obstacle map, the cached fall path and the grain
counters. Systems are pure functions that take a previous ``State`` and return
a *new* ``State``; nothing is mutated in place. Dropping a grain therefore
produces a state whose obstacle set is the previous one plus (at most) the
settled grain, which makes the map's monotonic growth structural.

Design notes:

* ``obstacles`` is a persistent set (``pyrsistent.PSet``) of every occupied
    cell, rock and settled sand alike. ``rock`` keeps the original rock cells
    so renderers can tell sand apart from rock.
* ``path`` is the fall path stack used by the floor policy. Its last element
    is the top: the deepest cell of the previous grain's descent that is still
    free.
* ``done`` is the terminal marker. :func:`sandfall.step.step` short-circuits
    on terminal states.
"""

from dataclasses import dataclass
from typing import Any, Optional
from pyrsistent import pmap, pset, pvector
from pyrsistent.typing import PMap, PSet, PVector

from sandfall.components import Position
from sandfall.types import GrainOutcome, Policy


@dataclass(frozen=True)
class State:
    """Immutable snapshot of a simulation run.

    Attributes:
        source (Position): Entry point of every grain.
        policy (Policy): Termination policy driving this run.
        lowest_rock (int): Largest ``y`` among the rock cells.
        rock (PSet[Position]): Rock cells the run started with.
        obstacles (PSet[Position]): Every occupied cell (rock plus settled sand).
        floor (int | None): Row of the virtual solid floor (floor policy only).
        path (PVector[Position]): Fall path stack; last element is the top.
        grains (int): Grains dropped so far, including escaped ones.
        settled (int): Grains that came to rest, including a floor-policy grain
            blocked on an already occupied source.
        escape_streak (int): Consecutive escaped grains (abyss policy).
        last_grain (Position | None): Final position of the most recent grain.
        last_outcome (GrainOutcome | None): Fate of the most recent grain.
        done (bool): True once the termination condition has been met.
    """

    source: Position
    policy: Policy
    lowest_rock: int
    rock: PSet[Position] = pset()
    obstacles: PSet[Position] = pset()
    floor: Optional[int] = None
    path: PVector[Position] = pvector()

    # Counters
    grains: int = 0
    settled: int = 0
    escape_streak: int = 0

    # Status
    last_grain: Optional[Position] = None
    last_outcome: Optional[GrainOutcome] = None
    done: bool = False

    @property
    def sand(self) -> PSet[Position]:
        """Cells occupied by settled sand (obstacles minus rock)."""
        return self.obstacles - self.rock

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of non-empty fields.

        Collections are summarised by their size; ``None`` and empty values are
        skipped. Useful for log lines without dumping the whole map.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if isinstance(value, (type(pset()), type(pvector()))):
                if len(value) == 0:
                    continue
                value = len(value)
            elif value is None:
                continue
            description = description.set(field, value)
        return description
