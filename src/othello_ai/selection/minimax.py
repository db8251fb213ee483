"""
Depth-bounded minimax search with alpha-beta pruning.

Search is deterministic: moves are explored in ascending index order and the
root keeps the first move that strictly improves on the best score, so the
lowest index wins ties. Pruning never changes the chosen move; pass
``alphabeta=False`` to run plain minimax for comparison.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Tuple

from othello_ai.core.types import Player
from othello_ai.games.game_rules import apply_move, legal_moves
from othello_ai.games.game_state import GameState
from othello_ai.selection.heuristic import evaluate

logger = logging.getLogger(__name__)

DEFAULT_DEPTH = 2


def minimax(
    state: GameState,
    depth: int,
    maximizing: bool,
    root_player: Player,
    alpha: float = -math.inf,
    beta: float = math.inf,
    prune: bool = True,
) -> float:
    """
    Value of ``state`` for ``root_player`` searched ``depth`` plies deep.

    Levels alternate strictly: the children of a maximizing node are
    minimizing and vice versa, even when ``apply_move`` let the mover keep the
    turn. A side with no legal move passes: the ply is spent and the opponent
    searches with ``depth - 1``. If the opponent cannot move either, the node
    is terminal and evaluated directly.
    """
    if depth <= 0:
        return evaluate(state.board, root_player)

    moves = legal_moves(state)
    if not moves:
        passed = state.with_player(state.current_player.opponent)
        if not legal_moves(passed):
            return evaluate(state.board, root_player)
        return minimax(passed, depth - 1, not maximizing, root_player, alpha, beta, prune)

    if maximizing:
        value = -math.inf
        for move in moves:
            child = apply_move(state, move)
            score = minimax(child, depth - 1, not maximizing, root_player, alpha, beta, prune)
            value = max(value, score)
            if prune:
                alpha = max(alpha, score)
                if beta <= alpha:
                    break  # β cut
        return value

    value = math.inf
    for move in moves:
        child = apply_move(state, move)
        score = minimax(child, depth - 1, not maximizing, root_player, alpha, beta, prune)
        value = min(value, score)
        if prune:
            beta = min(beta, score)
            if beta <= alpha:
                break  # α cut
    return value


def _check_depth(depth: int) -> None:
    if depth < 1:
        raise ValueError(f"Search depth must be at least 1, got {depth}")


def score_moves(state: GameState, depth: int = DEFAULT_DEPTH) -> List[Tuple[int, float]]:
    """
    Exact search value of every legal move, in ascending move order.

    Each root move gets a full window, so the values are true minimax scores
    even with pruning enabled.
    """
    _check_depth(depth)
    root = state.current_player
    scored = []
    for move in legal_moves(state):
        child = apply_move(state, move)
        value = minimax(child, depth - 1, False, root)
        scored.append((move, value))
    return scored


def best_move(state: GameState, depth: int = DEFAULT_DEPTH, alphabeta: bool = True) -> Optional[int]:
    """
    Choose a move for the player to act.

    Returns None if there is no legal move and the sole move if there is only
    one. Otherwise each move is searched ``depth`` plies and the first move
    with the highest score wins.
    """
    _check_depth(depth)
    moves = legal_moves(state)
    if not moves:
        return None
    if len(moves) == 1:
        return moves[0]

    root = state.current_player
    chosen = moves[0]
    best_value = -math.inf

    for move in moves:
        child = apply_move(state, move)
        # A root alpha of best_value only tightens bounds for moves that
        # cannot beat it; any score above it is exact.
        alpha = best_value if alphabeta else -math.inf
        value = minimax(child, depth - 1, False, root, alpha, math.inf, prune=alphabeta)
        if value > best_value:
            best_value = value
            chosen = move

    logger.debug(
        "best_move: player=%s depth=%d move=%d value=%s (of %d)",
        root.name, depth, chosen, best_value, len(moves),
    )
    return chosen
