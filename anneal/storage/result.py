# coding: utf-8
# Created on 14/10/2026 11:40

# ====================================================
# imports
from __future__ import annotations

from attrs import frozen

from typing import Any
from typing import Generic
from typing import Optional

from anneal.storage.schedule import Schedule
from anneal.storage.trace import Trace
from anneal.typing import S


# ====================================================
# code
@frozen(repr=False, kw_only=True)
class Result(Generic[S]):
    """
    Object for storing the results of a run.

    Args:
        best: the state with the lowest energy encountered during the run.
        best_energy: energy of the best state.
        initial_energy: energy of the input state.
        final: the working state at the end of the run.
        final_energy: energy of the final working state.
        nb_improved: number of candidates with lower energy than the working state.
        nb_accepted: number of non-improving candidates that were accepted.
        nb_rejected: number of non-improving candidates that were rejected.
        message: the exit message.
        schedule: the schedule used to run the algorithm.
        seed: the seed of the random generator, None when a generator was given.
        trace: an optional Trace object with the history of the run.
    """

    best: S  #: the state with the lowest energy encountered during the run.
    best_energy: float  #: energy of the best state.
    initial_energy: float  #: energy of the input state.
    final: S  #: the working state at the end of the run.
    final_energy: float  #: energy of the final working state.
    nb_improved: int
    nb_accepted: int
    nb_rejected: int
    message: str  #: the exit message.
    schedule: Schedule  #: the schedule used to run the algorithm.
    seed: Optional[int]
    trace: Optional[Trace] = None

    # region magic methods
    def __repr__(self) -> str:
        return (
            f"Result(\n"
            f"\tmessage: {self.message}\n"
            f"\tschedule: {self.schedule}\n"
            f"\tmoves: {self.nb_improved} improved, {self.nb_accepted} accepted, {self.nb_rejected} rejected\n"
            f"\ttrace: {self.trace}\n"
            f"\tbest: {self.best!r} (energy {self.best_energy:g})"
            f")"
        )

    # endregion

    # region attributes
    @property
    def nb_iterations(self) -> int:
        """Number of iterations that were run."""
        return self.nb_improved + self.nb_accepted + self.nb_rejected

    @property
    def acceptance_fraction(self) -> float:
        """Proportion of non-improving candidates that were accepted."""
        tested = self.nb_accepted + self.nb_rejected

        if tested == 0:
            return float("nan")

        return self.nb_accepted / tested

    # endregion

    # region methods
    def as_dict(self) -> dict[str, Any]:
        """Summary of the run, without the states."""
        return {
            "best_energy": self.best_energy,
            "initial_energy": self.initial_energy,
            "final_energy": self.final_energy,
            "nb_improved": self.nb_improved,
            "nb_accepted": self.nb_accepted,
            "nb_rejected": self.nb_rejected,
            "message": self.message,
            "seed": self.seed,
        }

    # endregion
