"""
GameBase - abstract base class for turn-based board game sessions.
"""

from abc import ABC, abstractmethod
from typing import List

from othello_ai.agent.agent import State
from othello_ai.games.game_state import GameState


class GameBase(ABC):
    """
    Abstract base class for a game session.

    IMPORTANT ARCHITECTURE NOTE:
    -----------------------------
    - The session is the only mutable object: it holds the current
      immutable GameState and replaces it on every move.
    - Rules live in pure functions; sessions only delegate to them.
    """

    @abstractmethod
    def game_id(self) -> str:
        """Return a stable identifier (e.g. 'othello')."""
        pass

    @abstractmethod
    def num_players(self) -> int:
        """Return number of players in the game."""
        pass

    @abstractmethod
    def clone(self) -> "GameBase":
        """Independent session sharing the (immutable) current state."""
        pass

    @abstractmethod
    def get_state(self) -> GameState:
        """Return the current game state."""
        pass

    @abstractmethod
    def set_state(self, game_state: GameState) -> None:
        """Replace the current game state."""
        pass

    @abstractmethod
    def current_player(self) -> int:
        """Return ID of player to act."""
        pass

    @abstractmethod
    def valid_moves(self) -> List[int]:
        """Return all legal moves from the current state."""
        pass

    @abstractmethod
    def apply_move(self, move: int) -> None:
        """
        Apply a move for the player to act.

        Raises:
            ValueError: if the move is not legal in the current state.
        """
        pass

    @abstractmethod
    def is_over(self) -> bool:
        """Return True if the game has ended."""
        pass

    @abstractmethod
    def get_result(self, agent_id: int) -> State:
        """
        Return payoff for the agent:
            WIN / TIE / NEUTRAL / LOSS
        """
        pass

    @abstractmethod
    def state_string(self) -> str:
        """Pretty string representation of the state."""
        pass
