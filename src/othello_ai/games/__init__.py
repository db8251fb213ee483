"""
Games module - Othello board model, rules, outcome and session.
"""

from othello_ai.games.game_state import GameState
from othello_ai.games.board import (
    create_initial_board,
    score,
    opponent,
    index_to_notation,
    notation_to_index,
)
from othello_ai.games.game_rules import (
    DIRECTIONS,
    in_bounds,
    step,
    can_flip,
    flips,
    legal_moves,
    apply_move,
    board_full,
    is_game_over,
)
from othello_ai.games.outcome import outcome
from othello_ai.games.game_base import GameBase
from othello_ai.games.othello import Othello

__all__ = [
    "GameState",
    "GameBase",
    "Othello",
    "DIRECTIONS",
    "create_initial_board",
    "score",
    "opponent",
    "index_to_notation",
    "notation_to_index",
    "in_bounds",
    "step",
    "can_flip",
    "flips",
    "legal_moves",
    "apply_move",
    "board_full",
    "is_game_over",
    "outcome",
]
