"""
Worker process logic for background search.

Workers are stateless: each SearchJob carries its own GameState, and the
search itself keeps no state between calls.
"""

from __future__ import annotations

import logging
import signal
import time

from othello_ai.selection.minimax import best_move
from othello_ai.simulation.jobs import SearchJob, SearchResult

logger = logging.getLogger(__name__)


def worker_init() -> None:
    """Workers ignore SIGINT; only the main process handles Ctrl+C."""
    signal.signal(signal.SIGINT, signal.SIG_IGN)


def run_search(job: SearchJob) -> SearchResult:
    """Execute a single search."""
    start = time.perf_counter()
    move = best_move(job.state, job.depth)
    elapsed = time.perf_counter() - start

    logger.debug("Searched depth %d in %.3fs -> %s", job.depth, elapsed, move)
    return SearchResult(move=move, depth=job.depth, elapsed=elapsed)
