"""
Outcome evaluation for finished (or unfinished) boards.
"""

from __future__ import annotations

import numpy as np

from othello_ai.core.types import Draw, Outcome, Player, Playing, Win
from othello_ai.games.board import score


def outcome(board: np.ndarray, game_over: bool) -> Outcome:
    """
    Classify a board.

    Returns Playing unless ``game_over``; otherwise Draw on equal counts, or
    Win for the side with more pieces (``perfect`` when the loser has none).
    """
    if not game_over:
        return Playing()

    counts = score(board)
    if counts.first == counts.second:
        return Draw()

    if counts.first > counts.second:
        return Win(winner=Player.FIRST, perfect=counts.second == 0)
    return Win(winner=Player.SECOND, perfect=counts.first == 0)
