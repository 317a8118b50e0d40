# coding: utf-8
# Created on 14/10/2026 14:08

# ====================================================
# imports
from __future__ import annotations

import time
import numpy as np
from attrs import frozen
from warnings import warn

from typing import Generic
from typing import Optional

import anneal.typing as ant
from anneal.errors import DegenerateScheduleWarning
from anneal.state import State
from anneal.storage.schedule import Schedule


# ====================================================
# code
@frozen(kw_only=True)
class RunParameters(Generic[ant.S]):
    """
    Object for storing the parameters and initial values used for running the annealing algorithm.
    """

    initial_state: ant.S
    initial_energy: float
    schedule: Schedule
    T_0: float
    k: np.float64
    rng: np.random.Generator
    seed: Optional[int]


def check_state(state: object) -> None:
    """
    Check that the input state exposes the capabilities needed for annealing.

    Args:
        state: the input state.
    """
    if not isinstance(state, State):
        raise TypeError(
            f"Invalid object '{state}' of type '{type(state)}' for the initial state, expected an object with "
            f"'energy()' and 'neighbor()' methods."
        )


def get_rng(
    seed: ant.SEED_TYPE, rng: ant.RNG_TYPE
) -> tuple[np.random.Generator, Optional[int]]:
    """
    Get the random generator to use for the acceptance test.

    Args:
        seed: an optional seed for building a new random generator.
        rng: an optional random generator.

    Returns:
        The random generator and the seed that was used to build it (None when <rng> was given).
    """
    if rng is not None:
        if seed is not None:
            raise ValueError("Only one of 'seed' and 'rng' can be given.")

        return rng, None

    if seed is None:
        seed = int(time.time())

    return np.random.default_rng(seed), seed


def initialize_annealing(
    initial_state: ant.S,
    schedule: Schedule | None,
    seed: ant.SEED_TYPE,
    rng: ant.RNG_TYPE,
) -> RunParameters[ant.S]:
    """
    Check validity of parameters and compute initial values before running the annealing algorithm.

    Args:
        initial_state: the state to start from.
        schedule: an optional Schedule, the default Schedule is used when None.
        seed: an optional seed for the random generator.
        rng: an optional random generator.

    Returns:
        Valid parameters and initial values.
    """
    check_state(initial_state)

    if schedule is None:
        schedule = Schedule.default()

    elif not isinstance(schedule, Schedule):
        raise TypeError(
            f"Invalid object '{schedule}' of type '{type(schedule)}' for 'schedule', expected a 'Schedule'."
        )

    if schedule.is_degenerate:
        warn(
            f"Temperature ratios should satisfy initial > final > 0, got initial={schedule.initial_temperature_ratio} "
            f"and final={schedule.final_temperature_ratio}. Temperatures will not decay properly.",
            DegenerateScheduleWarning,
        )

    generator, seed = get_rng(seed, rng)

    initial_energy = float(initial_state.energy())

    return RunParameters(
        initial_state=initial_state,
        initial_energy=initial_energy,
        schedule=schedule,
        T_0=schedule.initial_temperature(initial_energy),
        k=schedule.decay_constant,
        rng=generator,
        seed=seed,
    )
