# coding: utf-8
# Created on 14/10/2026 14:35

"""
Core simulated annealing loop.
"""

# ====================================================
# imports
from __future__ import annotations

import logging
import numpy as np
from tqdm.autonotebook import tqdm

from typing import Optional

import anneal.typing as ant
from anneal.algorithms.initialize import RunParameters
from anneal.compute import T
from anneal.compute import acceptance_probability
from anneal.storage.result import Result
from anneal.storage.trace import Outcome
from anneal.storage.trace import Trace

logger = logging.getLogger(__name__)


# ====================================================
# code
def run_simulated_annealing(
    params: RunParameters[ant.S],
    progress_bar: range | tqdm[int],
    trace: Optional[Trace] = None,
) -> Result[ant.S]:
    """
    Run the annealing loop for the requested number of iterations.

    Once per iteration, a neighbor of the working state is drawn and its energy computed. The neighbor is adopted
    with probability 1 if its energy E' is lower than the working energy E, and with probability exp(-(E'-E)/T)
    otherwise, where T = T_0 * exp(-i/k) is the temperature at iteration i.

    Args:
        params: parameters and initial values of the run.
        progress_bar: the iterable of iteration numbers, optionally wrapped in a tqdm progress bar. A tqdm progress
            bar is closed when the loop ends, even on failure.
        trace: an optional Trace object for storing the history of the run.

    Returns:
        A Result object.
    """
    state, energy = params.initial_state, params.initial_energy
    best_state, best_energy = state, energy

    nb_improved = nb_accepted = nb_rejected = 0
    verbose = isinstance(progress_bar, tqdm)
    refresh_every = max(1, params.schedule.iterations // 100)

    logger.debug(
        "Annealing with %r : initial energy %g, T_0 %g, k %g, seed %s.",
        params.schedule,
        params.initial_energy,
        params.T_0,
        params.k,
        params.seed,
    )

    # degenerate schedules yield inf / nan temperatures and probabilities
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        try:
            for iteration in progress_bar:
                if verbose and iteration % refresh_every == 0:
                    tested = nb_accepted + nb_rejected
                    progress_bar.set_description(
                        f"T: {T(iteration, params.T_0, params.k):.4g}"
                        f"  A: {nb_accepted / tested if tested else 1.0:.2%}"
                        f"  Best: {best_energy:.4g}"
                        f"  Current: {energy:.4g}"
                    )

                new_state = state.neighbor()
                new_energy = new_state.energy()

                if new_energy < energy:
                    if new_energy < best_energy:
                        best_state, best_energy = new_state, new_energy

                    temperature = np.nan
                    outcome = Outcome.IMPROVED
                    nb_improved += 1

                else:
                    temperature = T(iteration, params.T_0, params.k)

                    if params.rng.random() > acceptance_probability(energy, new_energy, temperature):
                        nb_rejected += 1

                        if trace is not None:
                            trace.store(iteration, temperature, new_energy, energy, best_energy, Outcome.REJECTED)

                        continue

                    outcome = Outcome.ACCEPTED
                    nb_accepted += 1

                state, energy = new_state, new_energy

                if trace is not None:
                    trace.store(iteration, temperature, new_energy, energy, best_energy, outcome)

        finally:
            if verbose:
                progress_bar.close()

    logger.info(
        "Annealing done : best energy %g (initial %g), %d improved, %d accepted, %d rejected.",
        best_energy,
        params.initial_energy,
        nb_improved,
        nb_accepted,
        nb_rejected,
    )

    return Result(
        best=best_state,
        best_energy=best_energy,
        initial_energy=params.initial_energy,
        final=state,
        final_energy=energy,
        nb_improved=nb_improved,
        nb_accepted=nb_accepted,
        nb_rejected=nb_rejected,
        message="Requested number of iterations reached.",
        schedule=params.schedule,
        seed=params.seed,
        trace=trace,
    )
