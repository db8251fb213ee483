"""
Board model: construction, scoring and cell naming.

Boards are 1-D int8 arrays of 64 cells, indexed row-major
(row = index // 8, col = index % 8).
"""

from __future__ import annotations

import numpy as np

from othello_ai.core.types import (
    BOARD_SIZE,
    INITIAL_PIECES,
    TOTAL_CELLS,
    Cell,
    Player,
    Score,
)

_COLUMNS = "abcdefgh"


def create_initial_board() -> np.ndarray:
    """Standard starting position: two pieces per side on the centre diagonals."""
    board = np.zeros(TOTAL_CELLS, dtype=np.int8)
    for index, value in INITIAL_PIECES.items():
        board[index] = value
    return board


def score(board: np.ndarray) -> Score:
    """Count pieces per player."""
    return Score(
        first=int(np.count_nonzero(board == Cell.FIRST)),
        second=int(np.count_nonzero(board == Cell.SECOND)),
    )


def opponent(player: Player) -> Player:
    return Player(player).opponent


def index_to_notation(index: int) -> str:
    """0 -> 'a1', 27 -> 'd4', 63 -> 'h8'."""
    if not 0 <= index < TOTAL_CELLS:
        raise ValueError(f"Index out of range: {index}")
    row, col = divmod(index, BOARD_SIZE)
    return f"{_COLUMNS[col]}{row + 1}"


def notation_to_index(text: str) -> int:
    """
    Parse a cell name ('d3') or a raw index ('19') into a board index.

    Raises ValueError for anything that does not name a cell.
    """
    raw = text.strip().lower()
    if raw.isdigit():
        index = int(raw)
        if index >= TOTAL_CELLS:
            raise ValueError(f"Index out of range: {index}")
        return index

    if len(raw) != 2 or raw[0] not in _COLUMNS or not raw[1].isdigit():
        raise ValueError(f"Not a cell name: '{text}' (expected e.g. 'd3' or 0-63)")

    col = _COLUMNS.index(raw[0])
    row = int(raw[1]) - 1
    if not 0 <= row < BOARD_SIZE:
        raise ValueError(f"Row out of range in '{text}'")
    return row * BOARD_SIZE + col
