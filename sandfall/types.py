"""Common enumerations.

``Policy`` selects how a run terminates; ``GrainOutcome`` records what happened
to the most recently dropped grain and is what the terminal systems inspect.
"""

from enum import StrEnum, auto


class Policy(StrEnum):
    """Termination policy for a simulation run."""

    ABYSS = auto()  # stop once grains fall past the lowest rock
    FLOOR = auto()  # stop once the source is blocked above a solid floor


class GrainOutcome(StrEnum):
    """Fate of a single dropped grain."""

    SETTLED = auto()
    ESCAPED = auto()
    BLOCKED = auto()  # source already occupied, nothing entered
