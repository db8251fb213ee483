"""
Shared test fixtures for othello_ai tests.

Design principles:
- Boards are built from sparse {index: owner} maps
- Clean imports at module level
- Minimal, focused fixtures
"""

import random
from typing import Callable, Dict, List

import numpy as np
import pytest

from othello_ai.core.types import TOTAL_CELLS, Player
from othello_ai.games.board import create_initial_board
from othello_ai.games.game_rules import apply_move, is_game_over, legal_moves
from othello_ai.games.game_state import GameState
from othello_ai.games.othello import Othello

F = Player.FIRST
S = Player.SECOND


def board_from(pieces: Dict[int, int]) -> np.ndarray:
    """Empty board with the given cells occupied."""
    board = np.zeros(TOTAL_CELLS, dtype=np.int8)
    for index, owner in pieces.items():
        board[index] = int(owner)
    return board


def random_playout(seed: int, max_plies: int = 80) -> List[GameState]:
    """Every state of a seeded random game, initial state included."""
    rng = random.Random(seed)
    state = GameState(create_initial_board(), F)
    states = [state]
    for _ in range(max_plies):
        if is_game_over(state):
            break
        state = apply_move(state, rng.choice(legal_moves(state)))
        states.append(state)
    return states


# =============================================================================
# Board / State Fixtures
# =============================================================================

@pytest.fixture
def make_state() -> Callable[..., GameState]:
    """Factory: make_state({index: owner}, player) -> GameState."""
    def _make(pieces: Dict[int, int], player: Player = F) -> GameState:
        return GameState(board_from(pieces), player)
    return _make


@pytest.fixture
def initial_state() -> GameState:
    return GameState(create_initial_board(), F)


@pytest.fixture
def capture_state(make_state) -> GameState:
    """Cell 0 first player, cell 1 second player, cell 2 empty; first to move."""
    return make_state({0: F, 1: S})


@pytest.fixture
def pass_state(make_state) -> GameState:
    """
    After first plays 2 the second player has no move but first still does
    (56 captures 48 along column a).
    """
    return make_state({0: F, 8: F, 16: F, 24: F, 32: F, 40: F, 1: S, 48: S})


@pytest.fixture
def full_tied_board() -> np.ndarray:
    return board_from({i: (F if i < 32 else S) for i in range(TOTAL_CELLS)})


@pytest.fixture
def full_first_board() -> np.ndarray:
    return board_from({i: F for i in range(TOTAL_CELLS)})


@pytest.fixture
def playout_games() -> List[List[GameState]]:
    """A handful of seeded random games, each as its list of states."""
    return [random_playout(seed) for seed in range(5)]


@pytest.fixture
def playout_states(playout_games) -> List[GameState]:
    """Every state of the seeded random games."""
    return [state for states in playout_games for state in states]


# =============================================================================
# Session Fixtures
# =============================================================================

@pytest.fixture
def game() -> Othello:
    """Fresh Othello session."""
    return Othello()
