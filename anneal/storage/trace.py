# coding: utf-8
# Created on 14/10/2026 11:02

# ====================================================
# imports
from __future__ import annotations

import logging
import numpy as np
from enum import IntEnum
from pathlib import Path

import numpy.typing as npt

logger = logging.getLogger(__name__)

PLOTTING_ENABLED = False

try:
    import plotly.graph_objects as go
    from plotly.subplots import make_subplots

except ImportError:
    logger.info(
        "Plotly is not installed, consider installing it or running 'pip install anneal[plot]'."
    )

else:
    PLOTTING_ENABLED = True


# ====================================================
# code
class Outcome(IntEnum):
    """Outcome of one iteration."""

    IMPROVED = 0
    ACCEPTED = 1
    REJECTED = 2


class Trace:
    """
    Object for storing the trace history of an annealing run.
    """

    # region magic methods
    def __init__(self, nb_iterations: int, initial_energy: float):
        """
        Args:
            nb_iterations: number of expected iterations.
            initial_energy: energy of the initial state.
        """
        self.initial_energy = float(initial_energy)

        self.temperature_trace = np.full(nb_iterations, np.nan, dtype=np.float64)
        self.candidate_energy_trace = np.zeros(nb_iterations, dtype=np.float64)
        self.energy_trace = np.zeros(nb_iterations, dtype=np.float64)
        self.best_energy_trace = np.zeros(nb_iterations, dtype=np.float64)
        self.outcome_trace = np.zeros(nb_iterations, dtype=np.int8)

    def __repr__(self) -> str:
        return f"Trace of {self.nb_iterations} iteration(s)."

    # endregion

    # region attributes
    @property
    def nb_iterations(self) -> int:
        return self.energy_trace.shape[0]

    @property
    def improved(self) -> npt.NDArray[np.bool_]:
        return self.outcome_trace == Outcome.IMPROVED

    @property
    def accepted(self) -> npt.NDArray[np.bool_]:
        return self.outcome_trace == Outcome.ACCEPTED

    @property
    def rejected(self) -> npt.NDArray[np.bool_]:
        return self.outcome_trace == Outcome.REJECTED

    # endregion

    # region methods
    def store(
        self,
        iteration: int,
        temperature: float,
        candidate_energy: float,
        energy: float,
        best_energy: float,
        outcome: Outcome,
    ) -> None:
        """
        Save the outcome of one iteration.

        Args:
            iteration: iteration index for storing the data.
            temperature: the temperature used for the acceptance test (NaN when the candidate improved).
            candidate_energy: energy of the proposed neighbor.
            energy: the working energy after the iteration.
            best_energy: the best energy after the iteration.
            outcome: what happened to the candidate.
        """
        self.temperature_trace[iteration] = temperature
        self.candidate_energy_trace[iteration] = candidate_energy
        self.energy_trace[iteration] = energy
        self.best_energy_trace[iteration] = best_energy
        self.outcome_trace[iteration] = outcome

    def acceptance_fraction(self, window_size: int | None = None) -> float:
        """
        Get the proportion of non-improving candidates that were accepted.

        Args:
            window_size: only look at the last <window_size> iterations.

        Returns:
            The acceptance fraction, NaN when no candidate was tested.
        """
        outcomes = self.outcome_trace if window_size is None else self.outcome_trace[-window_size:]
        tested = np.sum(outcomes != Outcome.IMPROVED)

        if tested == 0:
            return np.nan

        return float(np.sum(outcomes == Outcome.ACCEPTED) / tested)

    def plot(self, save: Path | str | None = None, show: bool = True) -> None:
        """
        Plot temperature, working energy and best energy along iterations.

        Args:
            save: optional path to save the plot as a html file.
            show: render the plot ?
        """
        if not PLOTTING_ENABLED:
            raise ImportError("Plotly is not installed.")

        titles = ["Temperature", "Energy", "Best energy"]

        fig = make_subplots(
            rows=3,
            cols=1,
            shared_xaxes=True,
            subplot_titles=titles,
            vertical_spacing=0.1,
        )

        iterations = list(range(self.nb_iterations))

        fig.add_trace(
            go.Scatter(
                x=iterations,
                y=self.temperature_trace,
                name="T",
                mode="markers",
                marker=dict(size=2),
                showlegend=False,
            ),
            row=1,
            col=1,
        )

        fig.add_trace(
            go.Scatter(
                x=iterations,
                y=self.energy_trace,
                name="Energy",
                marker=dict(color="rgba(0, 0, 200, 0.3)"),
                showlegend=False,
            ),
            row=2,
            col=1,
        )

        rejected = np.where(self.rejected)[0]
        fig.add_trace(
            go.Scatter(
                x=rejected,
                y=self.candidate_energy_trace[rejected],
                mode="markers",
                marker=dict(color="rgba(200, 0, 0, 0.3)", size=3),
                name="Rejected candidates",
                showlegend=False,
            ),
            row=2,
            col=1,
        )

        fig.add_trace(
            go.Scatter(
                x=iterations,
                y=self.best_energy_trace,
                name="Best energy",
                marker=dict(color="rgba(252, 196, 25, 1.)"),
                showlegend=False,
            ),
            row=3,
            col=1,
        )

        fig.update_layout(
            height=600,
            width=600,
            margin=dict(t=40, b=10, l=10, r=10),
            paper_bgcolor="#FFF",
            plot_bgcolor="#FFF",
            font_color="#000000",
        )

        if show:
            fig.show()

        if save is not None:
            fig.write_html(str(save))

    # endregion
