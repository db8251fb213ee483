"""
Core types, constants, and data structures.

This module contains the fundamental types used throughout the engine:
- Player / Cell: int8-compatible enums for board encoding
- Score: piece counts per player
- Outcome: Playing / Draw / Win result of a position
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple, Union


# ─── Board geometry ───────────────────────────────────────────────────────────

BOARD_SIZE = 8
TOTAL_CELLS = BOARD_SIZE * BOARD_SIZE

# Corner indices (a1, h1, a8, h8)
CORNERS = (0, 7, 56, 63)

# Initial centre pieces: index -> owner value (d4, e4, d5, e5)
INITIAL_PIECES = {27: 2, 28: 1, 35: 1, 36: 2}


# ─── Players and cells ────────────────────────────────────────────────────────

class Player(IntEnum):
    """The two sides. FIRST moves first (traditionally black)."""

    FIRST = 1
    SECOND = 2

    @property
    def opponent(self) -> "Player":
        return Player(3 - self)  # Toggle 1↔2


class Cell(IntEnum):
    """
    Board cell encoding (stored as int8):
        0 = empty
        1 = occupied by Player.FIRST
        2 = occupied by Player.SECOND
    """

    EMPTY = 0
    FIRST = 1
    SECOND = 2

    @classmethod
    def of(cls, player: Player) -> "Cell":
        """Occupied cell for ``player``."""
        return cls(int(player))

    @property
    def owner(self) -> Player | None:
        return None if self is Cell.EMPTY else Player(int(self))


# ─── Derived values ───────────────────────────────────────────────────────────

class Score(NamedTuple):
    """Piece counts on a board. Empty cells are not counted."""

    first: int = 0
    second: int = 0

    @property
    def total(self) -> int:
        return self.first + self.second

    def of(self, player: Player) -> int:
        return self.first if player == Player.FIRST else self.second


@dataclass(frozen=True)
class Playing:
    """Game still in progress."""


@dataclass(frozen=True)
class Draw:
    """Finished with equal piece counts."""


@dataclass(frozen=True)
class Win:
    """
    Finished with a winner.

    ``perfect`` is True when the loser has no pieces left on the board.
    """

    winner: Player
    perfect: bool = False


Outcome = Union[Playing, Draw, Win]
