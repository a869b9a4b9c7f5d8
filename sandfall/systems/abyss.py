"""Abyss policy system.

Drops one grain at the source and lets it fall while it can move and has not
yet reached the lowest rock row. A grain whose final ``y`` is at or beyond
that row has fallen past all rock into open space: it *escaped* and is not
recorded in the obstacle set. Any other grain *settled* and joins it.

The escape streak feeds :func:`sandfall.systems.terminal.terminal_system`.
"""

from dataclasses import replace

from sandfall.rules import fall
from sandfall.state import State
from sandfall.types import GrainOutcome


def abyss_system(state: State) -> State:
    """Drop and resolve a single grain under the abyss policy.

    Args:
        state (State): Current state; its source must be free.

    Returns:
        State: State with the grain counted and, if it settled, inserted.
    """
    grain = fall(state.obstacles, state.source, state.lowest_rock)

    if grain.y >= state.lowest_rock:
        return replace(
            state,
            grains=state.grains + 1,
            escape_streak=state.escape_streak + 1,
            last_grain=grain,
            last_outcome=GrainOutcome.ESCAPED,
        )

    return replace(
        state,
        obstacles=state.obstacles.add(grain),
        grains=state.grains + 1,
        settled=state.settled + 1,
        escape_streak=0,
        last_grain=grain,
        last_outcome=GrainOutcome.SETTLED,
    )
