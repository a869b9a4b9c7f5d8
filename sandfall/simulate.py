"""Simulation runner.

Builds the initial :class:`sandfall.state.State` for a policy and repeatedly
calls :func:`sandfall.step.step` until the run is terminal. Both policies rely
on reaching their termination condition; the configured grain ceiling turns a
pathological map into a :class:`SimulationDidNotConvergeError` instead of a
silent hang.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from pyrsistent import pvector
from pyrsistent.typing import PSet

from sandfall.components import Polyline, Position
from sandfall.config import DEFAULT_CONFIG, SimulationConfig
from sandfall.errors import SimulationDidNotConvergeError
from sandfall.levels.rock import build_obstacles, lowest_point
from sandfall.state import State
from sandfall.step import step
from sandfall.types import Policy

logger = logging.getLogger(__name__)


def initial_state(
    obstacles: PSet[Position],
    policy: Policy,
    config: SimulationConfig = DEFAULT_CONFIG,
    rock: Optional[PSet[Position]] = None,
) -> State:
    """Create the starting state of a run.

    Args:
        obstacles: Occupied cells the run starts with.
        policy: Termination policy.
        config: Run parameters (source, floor offset, path cache).
        rock: Cells to treat as rock for rendering; defaults to ``obstacles``.

    Returns:
        State: Fresh state with zeroed counters.

    Raises:
        EmptyObstacleSetError: If ``obstacles`` is empty.
    """
    lowest = lowest_point(obstacles)
    floor = lowest + config.floor_offset if policy == Policy.FLOOR else None
    path = (
        pvector([config.source])
        if policy == Policy.FLOOR and config.reuse_fall_path
        else pvector()
    )
    return State(
        source=config.source,
        policy=policy,
        lowest_rock=lowest,
        rock=obstacles if rock is None else rock,
        obstacles=obstacles,
        floor=floor,
        path=path,
    )


def simulate(state: State, config: SimulationConfig = DEFAULT_CONFIG) -> State:
    """Run ``state`` to completion.

    Args:
        state: Starting (or partially advanced) state.
        config: Supplies the grain ceiling and progress interval.

    Returns:
        State: Terminal state; ``state.settled`` is the run's result.

    Raises:
        SimulationDidNotConvergeError: If more than ``config.max_grains``
            grains are dropped without reaching the termination condition.
    """
    logger.info(
        "Starting %s run: lowest rock %d, %d obstacles",
        state.policy,
        state.lowest_rock,
        len(state.obstacles),
    )
    while not state.done:
        if config.max_grains is not None and state.grains >= config.max_grains:
            raise SimulationDidNotConvergeError(state.grains, config.max_grains)
        state = step(state)
        if (
            config.progress_interval
            and state.grains
            and state.grains % config.progress_interval == 0
        ):
            logger.debug("%s run progress: %s", state.policy, dict(state.description))

    logger.info(
        "Finished %s run: %d settled of %d grains (%s)",
        state.policy,
        state.settled,
        state.grains,
        state.last_outcome,
    )
    return state


def count_settled_until_abyss(
    polylines: Iterable[Polyline], config: SimulationConfig = DEFAULT_CONFIG
) -> int:
    """Grains that settle before sand starts falling past the lowest rock."""
    state = initial_state(build_obstacles(polylines), Policy.ABYSS, config)
    return simulate(state, config).settled


def count_settled_until_blocked(
    polylines: Iterable[Polyline], config: SimulationConfig = DEFAULT_CONFIG
) -> int:
    """Grains that settle on the virtual floor until the source is blocked."""
    state = initial_state(build_obstacles(polylines), Policy.FLOOR, config)
    return simulate(state, config).settled


@dataclass(frozen=True)
class SimulationReport:
    """Results of running both policies over the same rock.

    Attributes:
        abyss: Settled grains under the abyss policy.
        floor: Settled grains under the floor policy.
        abyss_state: Terminal abyss state.
        floor_state: Terminal floor state.
    """

    abyss: int
    floor: int
    abyss_state: State
    floor_state: State


def run_both(
    polylines: Iterable[Polyline], config: SimulationConfig = DEFAULT_CONFIG
) -> SimulationReport:
    """Run both policies from the same obstacle map.

    Each run starts from its own state; the persistent obstacle set is shared
    structurally but never mutated.
    """
    obstacles = build_obstacles(polylines)
    abyss_state = simulate(initial_state(obstacles, Policy.ABYSS, config), config)
    floor_state = simulate(initial_state(obstacles, Policy.FLOOR, config), config)
    return SimulationReport(
        abyss=abyss_state.settled,
        floor=floor_state.settled,
        abyss_state=abyss_state,
        floor_state=floor_state,
    )
