"""
Tests for othello_ai.selection.heuristic

Tests the positional weight table and board evaluation.
"""

import numpy as np
import pytest

from othello_ai.core.types import CORNERS
from othello_ai.games.board import create_initial_board
from othello_ai.selection.heuristic import PIECE_WEIGHT, POSITION_WEIGHTS, evaluate

from conftest import board_from, F, S


class TestWeights:
    """POSITION_WEIGHTS table tests."""

    def test_shape(self):
        assert POSITION_WEIGHTS.shape == (64,)

    def test_symmetric(self):
        """Table is unchanged by transpose and by mirroring."""
        grid = POSITION_WEIGHTS.reshape(8, 8)
        np.testing.assert_array_equal(grid, grid.T)
        np.testing.assert_array_equal(grid, grid[:, ::-1])
        np.testing.assert_array_equal(grid, grid[::-1, :])

    def test_corners_highest(self):
        assert all(POSITION_WEIGHTS[c] == POSITION_WEIGHTS.max() for c in CORNERS)

    def test_x_squares_lowest(self):
        """Diagonal neighbours of the corners are the worst cells."""
        for index in (9, 14, 49, 54):
            assert POSITION_WEIGHTS[index] == POSITION_WEIGHTS.min()


class TestEvaluate:
    """evaluate() tests."""

    def test_initial_is_zero(self):
        board = create_initial_board()
        assert evaluate(board, F) == 0
        assert evaluate(board, S) == 0

    def test_empty_board(self):
        assert evaluate(board_from({}), F) == 0

    def test_single_corner(self):
        board = board_from({0: F})
        assert evaluate(board, F) == 100 + PIECE_WEIGHT
        assert evaluate(board, S) == -(100 + PIECE_WEIGHT)

    def test_material_term(self):
        """Two centre pieces against none: only material counts."""
        board = board_from({27: F, 28: F})
        assert evaluate(board, F) == 2 * PIECE_WEIGHT

    def test_x_square_penalised(self):
        board = board_from({9: F})
        assert evaluate(board, F) == -50 + PIECE_WEIGHT

    def test_antisymmetric(self, playout_states):
        for state in playout_states:
            assert evaluate(state.board, F) == -evaluate(state.board, S)

    def test_returns_int(self, initial_state):
        assert isinstance(evaluate(initial_state.board, F), int)

    @pytest.mark.parametrize("player", [F, S])
    def test_player_as_int(self, player):
        board = board_from({0: F, 63: S, 1: S})
        assert evaluate(board, int(player)) == evaluate(board, player)
