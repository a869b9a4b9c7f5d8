"""Floor policy system.

A virtual floor lies ``floor_offset`` rows under the lowest rock. It is
infinitely wide and solid but never stored in the obstacle set: a grain that
reaches the row just above it rests there unconditionally.

Fall path stack:
    Instead of starting every grain at the source, a grain starts at the top
    of ``state.path`` (the deepest still-free cell of the previous grain's
    descent). Every cell it moves into is pushed; once it rests, exactly one
    entry (its rest cell) is popped. The stack therefore always holds the path
    from the source down to where the next grain begins. An empty stack turns
    the cache off and every grain starts at the source; results are the same.
"""

from dataclasses import replace
from typing import List

from sandfall.components import Position
from sandfall.rules import fall
from sandfall.state import State
from sandfall.types import GrainOutcome


def floor_system(state: State) -> State:
    """Drop and resolve a single grain under the floor policy.

    Args:
        state (State): Current state; ``state.floor`` must be set and the
            source must be free.

    Returns:
        State: State with the grain settled. If it rested on the source the
            stack is left as is, since the run is over.
    """
    if state.floor is None:
        raise ValueError("Floor policy requires state.floor")

    start = state.path[-1] if state.path else state.source
    visited: List[Position] = []
    grain = fall(state.obstacles, start, state.floor - 1, visited)

    path = state.path
    if path:
        path = path.extend(visited)
        if grain != state.source:
            path = path[:-1]

    return replace(
        state,
        obstacles=state.obstacles.add(grain),
        path=path,
        grains=state.grains + 1,
        settled=state.settled + 1,
        last_grain=grain,
        last_outcome=GrainOutcome.SETTLED,
    )
