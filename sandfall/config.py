"""Simulation configuration.

A single frozen dataclass collects every tunable of a run. The sand source is a
configuration value rather than a module constant so tests and callers can
drop grains from anywhere.
"""

from dataclasses import dataclass
from typing import Optional

from sandfall.components import Position

DEFAULT_SOURCE = Position(500, 0)
DEFAULT_FLOOR_OFFSET = 2
DEFAULT_MAX_GRAINS = 1_000_000
DEFAULT_PROGRESS_INTERVAL = 1000


@dataclass(frozen=True)
class SimulationConfig:
    """Run parameters shared by both termination policies.

    Attributes:
        source: Entry point of every grain.
        floor_offset: Rows between the lowest rock and the virtual floor
            (floor policy only).
        max_grains: Grain ceiling; exceeding it raises
            :class:`sandfall.errors.SimulationDidNotConvergeError`. ``None``
            disables the ceiling.
        progress_interval: Log a progress line every N grains (0 disables).
        reuse_fall_path: Start each floor-policy grain from the cached fall
            path instead of the source. Does not change results.
    """

    source: Position = DEFAULT_SOURCE
    floor_offset: int = DEFAULT_FLOOR_OFFSET
    max_grains: Optional[int] = DEFAULT_MAX_GRAINS
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL
    reuse_fall_path: bool = True


DEFAULT_CONFIG = SimulationConfig()
