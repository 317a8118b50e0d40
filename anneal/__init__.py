"""
Simulated annealing of arbitrary discrete search spaces.
This package provides a generic simulated annealing optimizer for any state exposing 'energy()' and 'neighbor()'.
"""

from importlib import metadata

from anneal.algorithms.sa import anneal, simulated_annealing
from anneal.errors import DegenerateScheduleWarning
from anneal.state import State
from anneal.storage.result import Result
from anneal.storage.schedule import Schedule
from anneal.storage.trace import Outcome, Trace

__all__ = [
    "anneal",
    "simulated_annealing",
    "State",
    "Schedule",
    "Result",
    "Trace",
    "Outcome",
    "DegenerateScheduleWarning",
]

__version__ = metadata.version("anneal")
