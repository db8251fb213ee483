"""
Simulation module - background move search.

Provides the infrastructure for running the search engine off the caller's
thread and discarding results that arrive after the game has moved on.
"""

from othello_ai.simulation.jobs import SearchJob, SearchResult, PendingSearch
from othello_ai.simulation.runner import SearchRunner, DEFAULT_WORKER_COUNT

__all__ = [
    "SearchJob",
    "SearchResult",
    "PendingSearch",
    "SearchRunner",
    "DEFAULT_WORKER_COUNT",
]
