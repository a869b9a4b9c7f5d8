"""Exception hierarchy.

Every failure in the simulation core is a precondition violation: there is no
recovery path inside a run. Callers that want a single handler catch
:class:`SandfallError`.
"""

from typing import Optional


class SandfallError(Exception):
    """Base class for all simulation errors."""


class MalformedSegmentError(SandfallError, ValueError):
    """Rock segment is neither horizontal nor vertical."""

    def __init__(self, start: object, end: object) -> None:
        super().__init__(f"Rock segment {start} -> {end} is not axis-aligned")
        self.start = start
        self.end = end


class EmptyObstacleSetError(SandfallError, ValueError):
    """Lowest point requested for a map without any rock."""

    def __init__(self) -> None:
        super().__init__("Obstacle set is empty; no lowest rock row exists")


class SimulationDidNotConvergeError(SandfallError, RuntimeError):
    """Termination condition not reached within the grain ceiling."""

    def __init__(self, grains: int, max_grains: int) -> None:
        super().__init__(
            f"Simulation did not converge after {grains} grains "
            f"(ceiling {max_grains})"
        )
        self.grains = grains
        self.max_grains = max_grains


class RockParseError(SandfallError, ValueError):
    """Rock notation line could not be parsed."""

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
