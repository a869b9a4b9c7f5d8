"""State reducer and step orchestration.

This module wires the systems together to implement a single *grain*
transition. The exported :func:`step` is the only public progression entry
point and is pure: it returns a *new* :class:`sandfall.state.State`.

Ordering:

1. ``source_system`` ends the run if the source is occupied (under the floor
   policy the blocked grain still counts).
2. The policy system drops one grain and resolves it (settle or escape).
3. ``terminal_system`` evaluates the policy's termination condition.

Each grain's fall depends on every grain before it, so steps are strictly
sequential.
"""

from sandfall.state import State
from sandfall.systems.abyss import abyss_system
from sandfall.systems.floor import floor_system
from sandfall.systems.source import source_system
from sandfall.systems.terminal import terminal_system
from sandfall.types import Policy


def step(state: State) -> State:
    """Drop one grain.

    Args:
        state (State): Previous immutable simulation state.

    Returns:
        State: Next state snapshot. A terminal input state is returned
            unchanged.

    Raises:
        ValueError: If the state's policy is not recognized.
    """
    if state.done:
        return state

    state = source_system(state)
    if state.done:
        return state

    if state.policy == Policy.ABYSS:
        state = abyss_system(state)
    elif state.policy == Policy.FLOOR:
        state = floor_system(state)
    else:
        raise ValueError(f"Policy is not valid: {state.policy!r}")

    return terminal_system(state)
