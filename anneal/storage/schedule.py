# coding: utf-8
# Created on 14/10/2026 10:31

# ====================================================
# imports
from __future__ import annotations

import numbers
import numpy as np
from attrs import field
from attrs import frozen

from anneal.compute import decay_constant


# ====================================================
# code
def _check_iterations(instance: Schedule, attribute: object, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValueError(
            f"Invalid value '{value}' for 'iterations', should be an integer."
        )

    if value < 0:
        raise ValueError("'iterations' parameter must be positive.")


@frozen(kw_only=True)
class Schedule:
    """
    Object for storing the parameters controlling the annealing process.

    Args:
        iterations: number of iterations.
        initial_temperature_ratio: initial temperature, as a multiple of the input state's energy.
        final_temperature_ratio: final temperature, as a multiple of the input state's energy.
    """

    iterations: int = field(default=1_000_000, validator=_check_iterations)
    initial_temperature_ratio: float = field(default=1.0, converter=float)
    final_temperature_ratio: float = field(default=1e-5, converter=float)

    # region magic methods
    def __repr__(self) -> str:
        return (
            f"Schedule(iterations={self.iterations}, "
            f"Ti={self.initial_temperature_ratio:g}, "
            f"Tf={self.final_temperature_ratio:g})"
        )

    # endregion

    # region attributes
    @property
    def decay_constant(self) -> np.float64:
        """Number of iterations for the temperature to drop by a factor of e."""
        return decay_constant(
            self.iterations, self.initial_temperature_ratio, self.final_temperature_ratio
        )

    @property
    def is_degenerate(self) -> bool:
        """Do the temperature ratios violate initial > final > 0 ?"""
        return not (
            self.initial_temperature_ratio > self.final_temperature_ratio > 0
        )

    # endregion

    # region methods
    @classmethod
    def default(cls) -> Schedule:
        """
        Get a Schedule populated with default values : 1e6 iterations, initial ratio of 1 and final ratio of 1e-5.
        """
        return cls()

    def initial_temperature(self, initial_energy: float) -> float:
        """
        Get the absolute temperature at iteration 0.

        Args:
            initial_energy: energy of the input state.
        """
        return initial_energy * self.initial_temperature_ratio

    # endregion
