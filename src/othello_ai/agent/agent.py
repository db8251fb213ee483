"""
Players seated at a game: who controls each side, and the result states
reported to them.
"""

from dataclasses import dataclass
from enum import Enum, auto

from othello_ai.core.types import Player


class State(Enum):
    WIN = auto()
    TIE = auto()
    LOSS = auto()
    NEUTRAL = auto()


@dataclass
class Agent:
    """One side of the board, controlled by a human or by the search engine."""

    player_id: Player = Player.FIRST
    is_human: bool = True
    depth: int = 2  # Search depth in plies (CPU agents only)

    @property
    def label(self) -> str:
        """Short description for status lines, e.g. 'CPU (depth 2)'."""
        return "Human" if self.is_human else f"CPU (depth {self.depth})"
