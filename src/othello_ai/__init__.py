"""
Othello AI - Othello (Reversi) rules with a minimax opponent.

This package provides a pure-function rules engine over immutable game
states, and a depth-bounded alpha-beta search that picks the computer's move.

Quick Start:
    from othello_ai import GameState, Player, create_initial_board
    from othello_ai import legal_moves, apply_move, is_game_over, best_move

    state = GameState(create_initial_board(), Player.FIRST)
    while not is_game_over(state):
        state = apply_move(state, best_move(state, depth=2))

Modules:
    core       - Fundamental types (Player, Cell, Score, Outcome) and constants
    games      - Board model, rules engine, outcome evaluator, game session
    selection  - Positional heuristic and minimax search
    simulation - Background search with stale-result discarding
    debug      - Terminal rendering
"""

from othello_ai.core import Cell, Draw, Outcome, Player, Playing, Score, Win
from othello_ai.games import (
    GameState,
    Othello,
    apply_move,
    create_initial_board,
    is_game_over,
    legal_moves,
    outcome,
    score,
)
from othello_ai.selection import best_move
from othello_ai.api import start_game
from othello_ai.utils.config import Config

__version__ = "1.0.0"

__all__ = [
    # Core interface
    "create_initial_board",
    "legal_moves",
    "apply_move",
    "is_game_over",
    "score",
    "outcome",
    "best_move",
    # Types
    "Player",
    "Cell",
    "GameState",
    "Score",
    "Outcome",
    "Playing",
    "Draw",
    "Win",
    # Play
    "Othello",
    "Config",
    "start_game",
]
