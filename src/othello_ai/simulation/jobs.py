"""
Job data structures for background search.

Defines the input (SearchJob) and output (SearchResult) types used
by worker processes, and the PendingSearch ticket handed to callers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from multiprocessing.pool import AsyncResult
from typing import Optional

from othello_ai.games.game_state import GameState


@dataclass(frozen=True)
class SearchJob:
    """
    Self-contained job for a worker process.

    Contains everything needed to run one search without shared state.
    """
    state: GameState
    depth: int


@dataclass(frozen=True)
class SearchResult:
    """Move chosen by a search (None when the side to act must pass)."""
    move: Optional[int]
    depth: int
    elapsed: float  # Seconds spent searching


@dataclass
class PendingSearch:
    """
    Ticket for a search started from ``job.state``.

    The ticket belongs to that exact state object: once the game has moved
    on, its result is stale and must not be applied.
    """
    job: SearchJob
    handle: Optional[AsyncResult] = None
    result: Optional[SearchResult] = field(default=None)

    @property
    def state(self) -> GameState:
        return self.job.state

    def ready(self) -> bool:
        return self.result is not None or (self.handle is not None and self.handle.ready())

    def get(self, timeout: Optional[float] = None) -> SearchResult:
        """Block until the search finishes (re-raises worker errors)."""
        if self.result is None:
            if self.handle is None:
                raise RuntimeError("Search was never submitted")
            self.result = self.handle.get(timeout)
        return self.result
