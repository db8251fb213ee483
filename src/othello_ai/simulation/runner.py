"""
Background search runner.

The search is synchronous and CPU bound; a front end that wants to stay
responsive (e.g. show a "thinking" pause) submits it here and collects the
result later. Results are tied to the GameState they were started from and
are discarded if the game has moved on in the meantime.
"""

from __future__ import annotations

import atexit
import logging
import multiprocessing as mp
from multiprocessing.pool import Pool
from typing import List, Optional

from othello_ai.games.game_state import GameState
from othello_ai.simulation.jobs import PendingSearch, SearchJob, SearchResult
from othello_ai.simulation.worker import run_search, worker_init

logger = logging.getLogger(__name__)

DEFAULT_WORKER_COUNT = 1

# ---------------------------------------------------------------------------
# Process cleanup
# ---------------------------------------------------------------------------

_active_runners: List["SearchRunner"] = []


def _shutdown_all():
    for runner in _active_runners[:]:
        runner.shutdown(force=True)


if mp.current_process().name == 'MainProcess':
    atexit.register(_shutdown_all)


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------

class SearchRunner:
    """
    Runs move searches in a worker pool.

    With ``num_workers=0`` searches run inline in the calling process, which
    keeps the same ticket semantics without spawning anything.
    """

    def __init__(self, num_workers: int = DEFAULT_WORKER_COUNT):
        if num_workers < 0:
            raise ValueError(f"Worker count cannot be negative, got {num_workers}")
        self.num_workers = num_workers
        self._pool: Optional[Pool] = None

        _active_runners.append(self)

    def __enter__(self):
        self._ensure_pool()
        return self

    def __exit__(self, exc_type, *_):
        self.shutdown(force=exc_type is not None)

    def _ensure_pool(self) -> Optional[Pool]:
        if self.num_workers == 0:
            return None
        if self._pool is None:
            self._pool = Pool(processes=self.num_workers, initializer=worker_init)
        return self._pool

    def shutdown(self, force: bool = False) -> None:
        if self in _active_runners:
            _active_runners.remove(self)

        if self._pool is None:
            return

        pool, self._pool = self._pool, None
        pool.terminate() if force else pool.close()
        pool.join()

    def submit(self, state: GameState, depth: int) -> PendingSearch:
        """Start searching ``state``; returns immediately with a ticket."""
        job = SearchJob(state=state, depth=depth)
        pool = self._ensure_pool()
        if pool is None:
            return PendingSearch(job, result=run_search(job))
        return PendingSearch(job, handle=pool.apply_async(run_search, (job,)))

    def collect(
        self,
        pending: PendingSearch,
        current_state: GameState,
        timeout: Optional[float] = None,
    ) -> Optional[SearchResult]:
        """
        Result of ``pending`` if it still belongs to ``current_state``.

        Returns None for a stale ticket (the game moved on since submission);
        its result is never applied. Otherwise blocks up to ``timeout``.
        """
        if pending.state is not current_state:
            logger.debug("Discarding stale search result (depth %d)", pending.job.depth)
            return None
        return pending.get(timeout)

    def search(self, state: GameState, depth: int) -> Optional[int]:
        """Submit and wait: the chosen move for ``state``."""
        pending = self.submit(state, depth)
        return self.collect(pending, state).move
