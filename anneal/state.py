# coding: utf-8
# Created on 14/10/2026 10:05

"""
Capabilities a search space must expose to be annealed.

The quality of the result depends on the following conditions:

    - energy() must be defined such that smaller energies are better than larger energies.
    - neighbor() must randomly select a state from all states that differ from the current one by a minimal
      alteration (i.e. adjacent to it in the search space). The diameter of the search space must be small:
      neighbor() must enable transition between any two states in a small number of steps.
    - the Schedule must be chosen such that the initial temperature is large compared to the difference between the
      energies of typical states, the final temperature is small compared to the difference between adjacent states,
      and the temperature decreases slowly enough for the system to stay close to thermodynamic equilibrium.
"""

# ====================================================
# imports
from __future__ import annotations

from typing import Protocol
from typing import runtime_checkable


# ====================================================
# code
@runtime_checkable
class State(Protocol):
    """
    A point of the search space that can undergo simulated annealing optimization.
    """

    def energy(self) -> float:
        """
        Energy of this state. This is the quantity to be minimized: states with small energy are better than states
        with large energy.
        """
        ...

    def neighbor(self) -> State:
        """
        A state chosen randomly among those adjacent to this one.
        Distinct states must not share memory: do not reuse a mutable container from one state in its neighbor.
        """
        ...
