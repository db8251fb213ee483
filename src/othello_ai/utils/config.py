"""
Configuration and game registry.
"""

from enum import Enum

from othello_ai.core.types import Player
from othello_ai.games import Othello
from othello_ai.selection import DEFAULT_DEPTH


# ---------------------------------------------------------------------------
# Game Registry
# ---------------------------------------------------------------------------

GAMES = {
    "othello": Othello,
}

# Accepted colour names for the human side
COLORS = {
    "black": Player.FIRST,
    "white": Player.SECOND,
}


class GameMode(str, Enum):
    PVP = "pvp"  # Two humans at one terminal
    PVC = "pvc"  # Human against the computer
    CVC = "cvc"  # Computer against itself


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_CPU_DELAY = 0.5  # Seconds before a CPU move is shown


class Config:
    """Play configuration with sensible defaults."""

    def __init__(
        self,
        mode: GameMode = GameMode.PVC,
        user_color: Player = Player.FIRST,
        depth: int = DEFAULT_DEPTH,
        cpu_delay: float = DEFAULT_CPU_DELAY,
        hints: bool = True,
        num_workers: int = 1,
    ):
        self.mode = GameMode(mode)
        if isinstance(user_color, str):
            if user_color not in COLORS:
                raise ValueError(f"Unknown colour: {user_color}. Available: {', '.join(COLORS)}")
            user_color = COLORS[user_color]
        self.user_color = Player(user_color)

        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")
        if cpu_delay < 0:
            raise ValueError(f"CPU delay cannot be negative, got {cpu_delay}")
        if num_workers < 0:
            raise ValueError(f"Worker count cannot be negative, got {num_workers}")

        self.depth = depth
        self.cpu_delay = cpu_delay
        self.hints = hints
        self.num_workers = num_workers

    @property
    def human_players(self) -> list[Player]:
        """Sides controlled from the keyboard."""
        if self.mode is GameMode.PVP:
            return [Player.FIRST, Player.SECOND]
        if self.mode is GameMode.PVC:
            return [self.user_color]
        return []

    def __repr__(self) -> str:
        return (
            f"Config(mode={self.mode.value}, user_color={self.user_color.name}, "
            f"depth={self.depth}, cpu_delay={self.cpu_delay}, hints={self.hints}, "
            f"num_workers={self.num_workers})"
        )


# Default configuration
DEFAULT_CONFIG = Config()
