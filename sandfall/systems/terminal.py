"""Terminal condition system.

Sets ``state.done`` exactly once per policy:

* Abyss: two consecutive escaped grains. A single escape does not by itself
    prove that no later grain could settle elsewhere, so the run waits for a
    second one. This is a heuristic carried over for compatibility; it is not a
    proven bound for arbitrary rock shapes.
* Floor: a grain came to rest on the source, so nothing more can enter.
"""

from dataclasses import replace

from sandfall.state import State
from sandfall.types import GrainOutcome, Policy

ABYSS_ESCAPE_STREAK = 2


def is_abyss_terminal(state: State) -> bool:
    return state.escape_streak >= ABYSS_ESCAPE_STREAK


def is_floor_terminal(state: State) -> bool:
    return (
        state.last_outcome == GrainOutcome.SETTLED
        and state.last_grain == state.source
    )


def terminal_system(state: State) -> State:
    """Set ``done`` if the policy's termination condition holds (idempotent)."""
    if state.done:
        return state

    if state.policy == Policy.ABYSS:
        done = is_abyss_terminal(state)
    else:
        done = is_floor_terminal(state)

    if done:
        return replace(state, done=True)
    return state
