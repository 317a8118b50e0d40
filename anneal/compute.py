# coding: utf-8
# Created on 14/10/2026 10:20

# ====================================================
# imports
from __future__ import annotations

import numpy as np


# ====================================================
# code
# schedule computation ----------------------------------------------------------------------------
def decay_constant(
    iterations: int, initial_temperature_ratio: float, final_temperature_ratio: float
) -> np.float64:
    """
    Compute the number of iterations required for the temperature to drop by a factor of e.

    Args:
        iterations: the total number of iterations.
        initial_temperature_ratio: initial temperature, as a multiple of the initial energy.
        final_temperature_ratio: final temperature, as a multiple of the initial energy.

    Returns:
        The decay constant k = iterations / ln(initial / final). Degenerate ratios give an infinite, negative or NaN
        value without raising.
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return np.float64(iterations) / np.log(
            np.float64(initial_temperature_ratio) / np.float64(final_temperature_ratio)
        )


def T(iteration: int, T_0: float, k: float) -> np.float64:
    """
    Compute the temperature at a given iteration.

    Args:
        iteration: the iteration number.
        T_0: initial (absolute) temperature value.
        k: the decay constant.

    Returns:
        The temperature T_0 * exp(-iteration / k). Call within numpy.errstate to silence warnings on degenerate
        decay constants.
    """
    return np.float64(T_0) * np.exp(-np.float64(iteration) / k)


def acceptance_probability(
    current_energy: float, new_energy: float, temperature: float
) -> np.float64:
    """
    Compute the probability of accepting a new proposed energy, given the current energy and a temperature.

    Args:
        current_energy: the current energy.
        new_energy: the new proposed energy.
        temperature: the current temperature.

    Returns:
        exp(-(new_energy - current_energy) / temperature). Equal energies always give a probability of 1 for a
        positive temperature. Call within numpy.errstate to silence warnings on non-finite temperatures.
    """
    return np.exp(-(np.float64(new_energy) - np.float64(current_energy)) / temperature)
