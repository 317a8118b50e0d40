from anneal.storage.result import Result
from anneal.storage.schedule import Schedule
from anneal.storage.trace import Outcome, Trace

__all__ = ["Result", "Schedule", "Outcome", "Trace"]
