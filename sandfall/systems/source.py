"""Source entry system.

Handles a source cell that is already occupied when a grain is due:

* Floor policy: the grain dropped there is blocked on the spot. It counts as
    the run's last grain and the run ends with it.
* Abyss policy: nothing enters and the run ends without counting a grain.
    This happens when a grain settled on the source itself before any escape.
"""

from dataclasses import replace

from sandfall.state import State
from sandfall.types import GrainOutcome, Policy


def source_system(state: State) -> State:
    """Mark the run terminal if the source is occupied."""
    if state.source not in state.obstacles:
        return state

    if state.policy == Policy.FLOOR:
        return replace(
            state,
            grains=state.grains + 1,
            settled=state.settled + 1,
            last_grain=state.source,
            last_outcome=GrainOutcome.BLOCKED,
            done=True,
        )
    return replace(
        state, last_grain=None, last_outcome=GrainOutcome.BLOCKED, done=True
    )
