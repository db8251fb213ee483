"""
GameState - immutable game state container.

Optimized for fast copying:
    board          1-D int8 array of 64 cells (see ``Cell``), row-major
    current_player Player to move
"""

from __future__ import annotations

import numpy as np

from othello_ai.core.types import TOTAL_CELLS, Player


class GameState:
    """
    Lightweight, immutable game state.

    The board array is frozen (``writeable = False``) on construction, so a
    state can be shared freely; moves produce a new state with a fresh board.
    A malformed board or an unknown player is a caller bug and raises
    ``ValueError``.
    """
    __slots__ = ('board', 'current_player')

    def __init__(self, board: np.ndarray, current_player: Player):
        board = np.asarray(board, dtype=np.int8)
        if board.shape != (TOTAL_CELLS,):
            raise ValueError(
                f"Board must have exactly {TOTAL_CELLS} cells, got shape {board.shape}"
            )
        if board.min() < 0 or board.max() > 2:
            raise ValueError("Board cells must be 0 (empty), 1 or 2")
        if not isinstance(current_player, Player):
            try:
                current_player = Player(current_player)
            except ValueError:
                raise ValueError(f"Unknown player: {current_player!r}") from None

        if board.flags.writeable:
            board = board.copy()
            board.flags.writeable = False

        object.__setattr__(self, 'board', board)
        object.__setattr__(self, 'current_player', current_player)

    def __setattr__(self, name, value):
        raise AttributeError("GameState is immutable")

    def __reduce__(self):
        # Frozen arrays pickle as writeable; __init__ re-freezes them.
        return (GameState, (self.board, self.current_player))

    def __repr__(self) -> str:
        return f"GameState(current_player={self.current_player.name}, board={self.board.tolist()})"

    def with_player(self, player: Player) -> "GameState":
        """Same board (shared, read-only), different player to move."""
        return GameState(self.board, player)

    def copy(self) -> "GameState":
        """Fast copy - board.copy() is optimized for contiguous int arrays."""
        return GameState(self.board.copy(), self.current_player)
