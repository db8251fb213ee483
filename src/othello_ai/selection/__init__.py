"""
Selection module - computer move selection.

Provides the main entry points:
- best_move(): depth-bounded alpha-beta search on a GameState
- select_move(): same, driven from a game session (optionally with debug output)
"""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING

from othello_ai.selection.heuristic import POSITION_WEIGHTS, PIECE_WEIGHT, evaluate
from othello_ai.selection.minimax import DEFAULT_DEPTH, best_move, minimax, score_moves

if TYPE_CHECKING:
    from othello_ai.games.game_base import GameBase


def select_move(
    game: "GameBase",
    depth: int = DEFAULT_DEPTH,
    debug: bool = False,
) -> Optional[int]:
    """
    Select the computer's move for the session's current position.

    Args:
        game: Current game session
        depth: Search depth in plies
        debug: If True, print the search value of every legal move

    Returns:
        Board index of the chosen move, or None if the side to act must pass
    """
    state = game.get_state()
    move = best_move(state, depth)

    if debug and move is not None:
        from othello_ai.debug.viz import render_move_scores
        print(render_move_scores(score_moves(state, depth), move))

    return move


__all__ = [
    "DEFAULT_DEPTH",
    "PIECE_WEIGHT",
    "POSITION_WEIGHTS",
    "best_move",
    "evaluate",
    "minimax",
    "score_moves",
    "select_move",
]
