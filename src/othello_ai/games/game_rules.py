"""
Othello rules engine.

Pure functions over ``GameState`` / board arrays: legal moves, move
application with flipping and automatic passes, and game-over detection.

Directions are linear index offsets on the 64-cell board. Offset arithmetic
alone would wrap from column 7 of one row to column 0 of the next, so every
step is validated against its (row, col) delta via ``in_bounds``. Rays from
every cell are precomputed once with ``step``; the hot loops only walk them.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np

from othello_ai.core.types import BOARD_SIZE, TOTAL_CELLS, Cell, Player
from othello_ai.games.game_state import GameState

# Direction offsets and their (d_row, d_col) components
#   -9 NW   -8 N   -7 NE
#   -1 W           +1 E
#   +7 SW   +8 S   +9 SE
DIRECTIONS: Tuple[int, ...] = (-9, -8, -7, -1, 1, 7, 8, 9)

_DELTAS = {
    -9: (-1, -1), -8: (-1, 0), -7: (-1, 1),
    -1: (0, -1),               1: (0, 1),
    7: (1, -1),   8: (1, 0),   9: (1, 1),
}

_EMPTY = int(Cell.EMPTY)


def in_bounds(r: int, c: int) -> bool:
    """Return True if (r, c) is inside the 8x8 board."""
    return 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE


def step(index: int, direction: int) -> Optional[int]:
    """
    Neighbour of ``index`` in ``direction``, or None if the step leaves the board.

    A step is valid only when the column changes by exactly the horizontal
    component of the direction, so there is no wraparound between rows.
    """
    if direction not in _DELTAS:
        raise ValueError(f"Unknown direction: {direction}")
    if not 0 <= index < TOTAL_CELLS:
        return None

    r, c = divmod(index, BOARD_SIZE)
    dr, dc = _DELTAS[direction]
    nr, nc = r + dr, c + dc
    if not in_bounds(nr, nc):
        return None
    return nr * BOARD_SIZE + nc


def _build_ray(start: int, direction: int) -> Tuple[int, ...]:
    ray = []
    pos = step(start, direction)
    while pos is not None:
        ray.append(pos)
        pos = step(pos, direction)
    return tuple(ray)


# _RAYS[index][k] = cells walked from index in DIRECTIONS[k], nearest first
_RAYS: Tuple[Tuple[Tuple[int, ...], ...], ...] = tuple(
    tuple(_build_ray(i, d) for d in DIRECTIONS) for i in range(TOTAL_CELLS)
)


# ---------------------------------------------------------------------------
# Sandwich detection
# ---------------------------------------------------------------------------

def _run_length(cells: Sequence[int], ray: Tuple[int, ...], player: int, other: int) -> int:
    """Number of ``other`` cells bracketed by ``player`` along ``ray`` (0 if none)."""
    run = 0
    for pos in ray:
        cell = cells[pos]
        if cell == other:
            run += 1
        elif cell == player:
            return run
        else:
            return 0
    return 0


def _captures(cells: Sequence[int], move: int, player: int) -> List[int]:
    other = 3 - player
    flipped: List[int] = []
    for ray in _RAYS[move]:
        run = _run_length(cells, ray, player, other)
        if run:
            flipped.extend(ray[:run])
    return flipped


def _has_legal_move(cells: Sequence[int], player: int) -> bool:
    other = 3 - player
    for index in range(TOTAL_CELLS):
        if cells[index] != _EMPTY:
            continue
        for ray in _RAYS[index]:
            if _run_length(cells, ray, player, other):
                return True
    return False


def can_flip(board: np.ndarray, start: int, direction: int, player: Player) -> bool:
    """
    True if placing ``player`` at ``start`` sandwiches at least one opponent
    piece in ``direction``.
    """
    if direction not in _DELTAS:
        raise ValueError(f"Unknown direction: {direction}")
    if not 0 <= start < TOTAL_CELLS:
        return False
    ray = _RAYS[start][DIRECTIONS.index(direction)]
    p = int(player)
    return _run_length(board.tolist(), ray, p, 3 - p) > 0


def flips(board: np.ndarray, move: int, player: Player) -> List[int]:
    """Indices that would flip if ``player`` placed at ``move`` (direction order)."""
    if not 0 <= move < TOTAL_CELLS:
        return []
    return _captures(board.tolist(), move, int(player))


# ---------------------------------------------------------------------------
# State transitions
# ---------------------------------------------------------------------------

def legal_moves(state: GameState) -> List[int]:
    """Legal moves for the player to act, in ascending index order."""
    cells = state.board.tolist()
    player = int(state.current_player)
    other = 3 - player

    moves = []
    for index in range(TOTAL_CELLS):
        if cells[index] != _EMPTY:
            continue
        for ray in _RAYS[index]:
            if _run_length(cells, ray, player, other):
                moves.append(index)
                break
    return moves


def apply_move(state: GameState, move: int) -> GameState:
    """
    Place a piece for the player to act and flip every sandwiched run.

    Invalid input (non-integer, out of range, occupied, or illegal) returns
    ``state`` itself. On success returns a new state; the input board is
    never touched.

    Turn resolution: the opponent moves next if it can. Otherwise the mover
    keeps the turn if it can still move (the opponent passes). If neither
    side can move the opponent is left as current player and the position is
    terminal (see ``is_game_over``).
    """
    if isinstance(move, bool) or not isinstance(move, (int, np.integer)):
        return state
    if not 0 <= move < TOTAL_CELLS:
        return state

    move = int(move)
    cells = state.board.tolist()
    if cells[move] != _EMPTY:
        return state

    player = state.current_player
    captured = _captures(cells, move, int(player))
    if not captured:
        return state

    board = state.board.copy()
    board[move] = int(player)
    board[captured] = int(player)
    board.flags.writeable = False

    after = board.tolist()
    next_player = player.opponent
    if not _has_legal_move(after, int(next_player)) and _has_legal_move(after, int(player)):
        next_player = player

    return GameState(board, next_player)


def board_full(board: np.ndarray) -> bool:
    """Return True if the board has no empty cells."""
    return not np.any(board == Cell.EMPTY)


def is_game_over(state: GameState) -> bool:
    """Board full, or neither side has a legal move."""
    if board_full(state.board):
        return True
    cells = state.board.tolist()
    player = int(state.current_player)
    return not _has_legal_move(cells, player) and not _has_legal_move(cells, 3 - player)
