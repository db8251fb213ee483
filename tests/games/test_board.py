"""
Tests for othello_ai.games.board

Tests initial position, scoring and cell names.
"""

import numpy as np
import pytest

from othello_ai.core.types import Cell, Player, Score
from othello_ai.games.board import (
    create_initial_board,
    index_to_notation,
    notation_to_index,
    opponent,
    score,
)

from conftest import board_from, F, S


class TestInitialBoard:
    """create_initial_board tests."""

    def test_shape_and_dtype(self):
        board = create_initial_board()
        assert board.shape == (64,)
        assert board.dtype == np.int8

    def test_four_center_pieces(self):
        """Exactly 27, 28, 35, 36 are occupied, diagonal pairs."""
        board = create_initial_board()
        assert np.flatnonzero(board).tolist() == [27, 28, 35, 36]
        assert board[27] == Cell.SECOND and board[36] == Cell.SECOND
        assert board[28] == Cell.FIRST and board[35] == Cell.FIRST

    def test_fresh_each_call(self):
        """Each call returns an independent array."""
        a = create_initial_board()
        b = create_initial_board()
        a[0] = 1
        assert b[0] == 0


class TestScore:
    """score tests."""

    def test_initial_two_each(self):
        assert score(create_initial_board()) == Score(2, 2)

    def test_empty_not_counted(self):
        assert score(board_from({})) == Score(0, 0)

    def test_counts(self):
        board = board_from({0: F, 1: F, 2: F, 63: S})
        assert score(board) == Score(first=3, second=1)


class TestOpponent:
    """opponent tests."""

    @pytest.mark.parametrize("player", list(Player))
    def test_involution(self, player):
        assert opponent(opponent(player)) is player

    def test_accepts_int(self):
        assert opponent(1) is Player.SECOND


class TestNotation:
    """Cell name conversion tests."""

    @pytest.mark.parametrize("index, name", [
        (0, "a1"), (7, "h1"), (19, "d3"), (27, "d4"), (56, "a8"), (63, "h8"),
    ])
    def test_known_cells(self, index, name):
        assert index_to_notation(index) == name
        assert notation_to_index(name) == index

    def test_all_cells_round_trip(self):
        assert [notation_to_index(index_to_notation(i)) for i in range(64)] == list(range(64))

    def test_case_and_whitespace(self):
        assert notation_to_index("  D3 ") == 19

    def test_raw_index(self):
        assert notation_to_index("44") == 44

    @pytest.mark.parametrize("text", ["", "z1", "a9", "a0", "d", "d33", "64", "-1", "pass"])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            notation_to_index(text)

    @pytest.mark.parametrize("index", [-1, 64])
    def test_index_out_of_range(self, index):
        with pytest.raises(ValueError):
            index_to_notation(index)
