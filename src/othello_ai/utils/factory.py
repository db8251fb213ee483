"""
Factory functions for creating games and player seats.
"""

from typing import Dict

from othello_ai.agent.agent import Agent
from othello_ai.core.types import Player
from othello_ai.games.game_base import GameBase
from othello_ai.utils.config import GAMES, Config


def create_agents(config: Config) -> Dict[Player, Agent]:
    """
    Create one agent per side.

    Args:
        config: Play configuration (mode, human colour, search depth)

    Returns:
        Dict mapping each player to its Agent
    """
    humans = set(config.human_players)
    return {
        pid: Agent(player_id=pid, is_human=pid in humans, depth=config.depth)
        for pid in Player
    }


def create_game(game_name: str = "othello") -> GameBase:
    """
    Create a game session at its initial state.

    Args:
        game_name: Key from GAMES registry (e.g., "othello")

    Returns:
        Fresh game session
    """
    if game_name not in GAMES:
        available = ", ".join(GAMES.keys())
        raise ValueError(f"Unknown game: {game_name}. Available: {available}")

    return GAMES[game_name]()
