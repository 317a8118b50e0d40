# coding: utf-8
# Created on 14/10/2026 15:12

# ====================================================
# imports
from __future__ import annotations

from tqdm.autonotebook import tqdm
from tqdm.autonotebook import trange

from typing import Optional

import anneal.typing as ant
from anneal.algorithms.initialize import initialize_annealing
from anneal.algorithms.run import run_simulated_annealing
from anneal.storage.result import Result
from anneal.storage.schedule import Schedule
from anneal.storage.trace import Trace


# ====================================================
# code
def simulated_annealing(
    initial_state: ant.S,
    schedule: Optional[Schedule] = None,
    *,
    seed: ant.SEED_TYPE = None,
    rng: ant.RNG_TYPE = None,
    verbose: bool = False,
    keep_trace: bool = False,
) -> Result[ant.S]:
    """
    Simulated Annealing algorithm.

    Args:
        initial_state: the state to start from, an object with 'energy()' and 'neighbor()' methods.
        schedule: an optional Schedule controlling the number of iterations and the temperature decay. The default
            Schedule (1e6 iterations, temperature ratios from 1 to 1e-5) is used when None.
        seed: a seed for the random generator.
        rng: a random generator, to use instead of <seed>.
        verbose: print progress bar ?
        keep_trace: store the history of the run in a Trace ?

    Returns:
        A Result object.
    """
    params = initialize_annealing(initial_state, schedule, seed, rng)

    progress_bar: range | tqdm[int]
    if verbose:
        progress_bar = trange(params.schedule.iterations, unit="iteration")
    else:
        progress_bar = range(params.schedule.iterations)

    trace = (
        Trace(params.schedule.iterations, params.initial_energy) if keep_trace else None
    )

    return run_simulated_annealing(params, progress_bar, trace)


def anneal(
    initial_state: ant.S,
    schedule: Optional[Schedule] = None,
    *,
    seed: ant.SEED_TYPE = None,
    rng: ant.RNG_TYPE = None,
    verbose: bool = False,
) -> ant.S:
    """
    Run simulated annealing on the input state and return the best state encountered during the search.

    Args:
        initial_state: the state to start from, an object with 'energy()' and 'neighbor()' methods.
        schedule: an optional Schedule, the default Schedule is used when None.
        seed: a seed for the random generator.
        rng: a random generator, to use instead of <seed>.
        verbose: print progress bar ?

    Returns:
        The state with the lowest energy, which may differ from the final working state.
    """
    return simulated_annealing(
        initial_state, schedule, seed=seed, rng=rng, verbose=verbose
    ).best
