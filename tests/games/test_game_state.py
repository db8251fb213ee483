"""
Tests for othello_ai.games.game_state

Tests construction checks and immutability.
"""

import pickle

import numpy as np
import pytest

from othello_ai.core.types import Player
from othello_ai.games.board import create_initial_board
from othello_ai.games.game_state import GameState


class TestConstruction:
    """Precondition checks."""

    def test_valid(self):
        state = GameState(create_initial_board(), Player.FIRST)
        assert state.current_player is Player.FIRST
        assert state.board.shape == (64,)

    def test_int_player_coerced(self):
        state = GameState(create_initial_board(), 2)
        assert state.current_player is Player.SECOND

    @pytest.mark.parametrize("size", [0, 63, 65])
    def test_wrong_length_raises(self, size):
        with pytest.raises(ValueError):
            GameState(np.zeros(size, dtype=np.int8), Player.FIRST)

    def test_2d_board_raises(self):
        with pytest.raises(ValueError):
            GameState(np.zeros((8, 8), dtype=np.int8), Player.FIRST)

    def test_bad_cell_value_raises(self):
        board = create_initial_board()
        board[0] = 3
        with pytest.raises(ValueError):
            GameState(board, Player.FIRST)

    @pytest.mark.parametrize("player", [0, 3, "black", None])
    def test_unknown_player_raises(self, player):
        with pytest.raises(ValueError):
            GameState(create_initial_board(), player)


class TestImmutability:
    """GameState never changes once built."""

    def test_board_read_only(self):
        state = GameState(create_initial_board(), Player.FIRST)
        with pytest.raises(ValueError):
            state.board[0] = 1

    def test_attributes_frozen(self):
        state = GameState(create_initial_board(), Player.FIRST)
        with pytest.raises(AttributeError):
            state.current_player = Player.SECOND

    def test_caller_array_detached(self):
        """Mutating the array passed in does not affect the state."""
        board = create_initial_board()
        state = GameState(board, Player.FIRST)
        board[0] = 1
        assert state.board[0] == 0

    def test_with_player_shares_board(self):
        state = GameState(create_initial_board(), Player.FIRST)
        other = state.with_player(Player.SECOND)
        assert other.current_player is Player.SECOND
        assert other.board is state.board
        assert state.current_player is Player.FIRST

    def test_copy_independent_but_equal(self):
        state = GameState(create_initial_board(), Player.FIRST)
        clone = state.copy()
        assert clone is not state
        assert clone.board is not state.board
        np.testing.assert_array_equal(clone.board, state.board)
        assert not clone.board.flags.writeable

    def test_pickle_round_trip(self):
        """States cross process boundaries intact and still frozen."""
        state = GameState(create_initial_board(), Player.SECOND)
        restored = pickle.loads(pickle.dumps(state))
        np.testing.assert_array_equal(restored.board, state.board)
        assert restored.current_player is Player.SECOND
        assert not restored.board.flags.writeable
