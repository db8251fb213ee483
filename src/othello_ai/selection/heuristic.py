"""
Static positional evaluation.

Corners are worth the most; the squares next to them are dangerous because
they hand the corner to the opponent. Edges are mildly good, the interior is
close to neutral. A piece-count term is added on top for tuning.
"""

from __future__ import annotations

import numpy as np

from othello_ai.core.types import Player

POSITION_WEIGHTS = np.array([
    100, -20,  10,   5,   5,  10, -20, 100,
    -20, -50,  -2,  -2,  -2,  -2, -50, -20,
     10,  -2,   1,   1,   1,   1,  -2,  10,
      5,  -2,   1,   0,   0,   1,  -2,   5,
      5,  -2,   1,   0,   0,   1,  -2,   5,
     10,  -2,   1,   1,   1,   1,  -2,  10,
    -20, -50,  -2,  -2,  -2,  -2, -50, -20,
    100, -20,  10,   5,   5,  10, -20, 100,
], dtype=np.int32)

# Weight of each piece of material difference
PIECE_WEIGHT = 10


def evaluate(board: np.ndarray, player: Player) -> int:
    """Board value from ``player``'s point of view (higher is better)."""
    p = int(player)
    own = board == p
    other = board == 3 - p

    positional = int(POSITION_WEIGHTS[own].sum()) - int(POSITION_WEIGHTS[other].sum())
    material = int(np.count_nonzero(own)) - int(np.count_nonzero(other))
    return positional + PIECE_WEIGHT * material
