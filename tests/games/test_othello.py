"""
Tests for othello_ai.games.othello

Tests the mutable session wrapper: moves, passes, cloning and display.
"""

import pytest

from othello_ai.agent.agent import State
from othello_ai.core.types import Draw, Playing, Score, Win
from othello_ai.games.game_state import GameState
from othello_ai.games.othello import CELL_STRINGS, Othello

from conftest import F, S


class TestOthelloBasics:
    """Basic session properties."""

    def test_game_id(self, game):
        assert game.game_id() == "othello"

    def test_num_players(self, game):
        assert game.num_players() == 2

    def test_cell_strings(self):
        assert set(CELL_STRINGS) == {0, 1, 2}
        assert CELL_STRINGS[0] == " "

    def test_initial_position(self, game):
        assert game.current_player() is F
        assert game.score() == Score(2, 2)
        assert game.last_move is None
        assert game.passed_player is None

    def test_valid_moves(self, game):
        assert game.valid_moves() == [19, 26, 37, 44]


class TestApplyMove:
    """Session move application."""

    def test_legal_move(self, game):
        game.apply_move(19)
        assert game.last_move == 19
        assert game.current_player() is S
        assert game.score() == Score(4, 1)
        assert game.passed_player is None

    @pytest.mark.parametrize("move", [0, 27, 64, -1, "d3"])
    def test_illegal_move_raises(self, game, move):
        before = game.get_state()
        with pytest.raises(ValueError):
            game.apply_move(move)
        assert game.get_state() is before
        assert game.last_move is None

    def test_opponent_pass_recorded(self, game, pass_state):
        game.set_state(pass_state)
        game.apply_move(2)
        assert game.passed_player is S
        assert game.current_player() is F

    def test_pass_flag_clears(self, game):
        game.apply_move(19)
        game.passed_player = S
        game.apply_move(game.valid_moves()[0])
        assert game.passed_player is None


class TestPassTurn:
    """Explicit pass handling."""

    def test_cannot_pass_with_moves(self, game):
        with pytest.raises(ValueError):
            game.pass_turn()
        assert game.current_player() is F

    def test_pass_when_stuck(self, game, make_state):
        # Second player to move with nothing to capture; first can play 2
        game.set_state(make_state({0: F, 1: S}, S))
        game.pass_turn()
        assert game.current_player() is F
        assert game.passed_player is S
        assert game.valid_moves() == [2]


class TestCloneAndState:
    """clone / set_state / restart."""

    def test_clone_is_independent(self, game):
        clone = game.clone()
        clone.apply_move(19)
        assert game.last_move is None
        assert game.score() == Score(2, 2)
        assert clone.score() == Score(4, 1)

    def test_clone_copies_fields(self, game):
        game.apply_move(19)
        clone = game.clone()
        assert clone.get_state() is game.get_state()
        assert clone.last_move == 19

    def test_set_state_resets_history(self, game, initial_state):
        game.apply_move(19)
        game.set_state(initial_state)
        assert game.get_state() is initial_state
        assert game.last_move is None
        assert game.passed_player is None

    def test_restart(self, game):
        game.apply_move(19)
        game.restart()
        assert game.score() == Score(2, 2)
        assert game.current_player() is F
        assert game.last_move is None

    def test_initial_state_static(self):
        state = Othello.initial_state()
        assert isinstance(state, GameState)
        assert state.current_player is F


class TestResult:
    """outcome / get_result / is_over."""

    def test_in_progress(self, game):
        assert not game.is_over()
        assert game.outcome() == Playing()
        assert game.get_result(F) == State.NEUTRAL

    def test_win_and_loss(self, game, capture_state):
        game.set_state(capture_state)
        game.apply_move(2)
        assert game.is_over()
        assert game.outcome() == Win(F, perfect=True)
        assert game.get_result(F) == State.WIN
        assert game.get_result(S) == State.LOSS

    def test_tie(self, game, full_tied_board):
        game.set_state(GameState(full_tied_board, F))
        assert game.outcome() == Draw()
        assert game.get_result(F) == State.TIE
        assert game.get_result(S) == State.TIE


class TestStateString:
    """Text rendering."""

    def test_contains_pieces_and_labels(self, game):
        text = game.state_string()
        assert "●" in text and "○" in text
        assert "a   b   c" in text
        assert "Last move" not in text

    def test_last_move_line(self, game):
        game.apply_move(19)
        assert game.state_string().endswith("Last move: d3")
