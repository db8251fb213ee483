"""
Othello game session.

Uses int8 board:
    0 = empty
    1 = first player (black)
    2 = second player (white)
"""

from __future__ import annotations

from typing import List, Optional

from othello_ai.agent.agent import State
from othello_ai.core.types import BOARD_SIZE, Draw, Outcome, Player, Score, Win
from othello_ai.games import game_rules
from othello_ai.games.board import create_initial_board, index_to_notation
from othello_ai.games.board import score as count_pieces
from othello_ai.games.game_base import GameBase
from othello_ai.games.game_state import GameState
from othello_ai.games.outcome import outcome as classify

# Cell strings: each cell value maps to its display string
CELL_STRINGS = {0: " ", 1: "●", 2: "○"}


class Othello(GameBase):
    """
    Mutable session around an immutable GameState.

    ``passed_player`` is the player whose turn was skipped by the last move
    (detected by the player to act not changing), or None.
    """

    __slots__ = ('state', 'last_move', 'passed_player')

    def __init__(self):
        self.state = self.initial_state()
        self.last_move: Optional[int] = None
        self.passed_player: Optional[Player] = None

    @staticmethod
    def initial_state() -> GameState:
        """Standard opening position, first player to move."""
        return GameState(create_initial_board(), current_player=Player.FIRST)

    def game_id(self) -> str:
        return "othello"

    def num_players(self) -> int:
        return 2

    def clone(self) -> "Othello":
        g = Othello.__new__(Othello)
        g.state = self.state
        g.last_move = self.last_move
        g.passed_player = self.passed_player
        return g

    def get_state(self) -> GameState:
        return self.state

    def set_state(self, game_state: GameState) -> None:
        self.state = game_state
        self.last_move = None
        self.passed_player = None

    def restart(self) -> None:
        self.set_state(self.initial_state())

    def current_player(self) -> Player:
        return self.state.current_player

    def valid_moves(self) -> List[int]:
        return game_rules.legal_moves(self.state)

    def apply_move(self, move: int) -> None:
        before = self.state
        after = game_rules.apply_move(before, move)
        if after is before:
            raise ValueError(
                f"Illegal move for {before.current_player.name}: {move!r}"
            )

        self.state = after
        self.last_move = int(move)
        if after.current_player == before.current_player:
            self.passed_player = before.current_player.opponent
        else:
            self.passed_player = None

    def pass_turn(self) -> None:
        """Hand the turn over when the player to act has no legal move."""
        if self.valid_moves():
            raise ValueError(f"{self.state.current_player.name} has a legal move and cannot pass")
        passer = self.state.current_player
        self.state = self.state.with_player(passer.opponent)
        self.passed_player = passer

    def is_over(self) -> bool:
        return game_rules.is_game_over(self.state)

    def score(self) -> Score:
        return count_pieces(self.state.board)

    def outcome(self) -> Outcome:
        return classify(self.state.board, self.is_over())

    def get_result(self, agent_id: int) -> State:
        result = self.outcome()
        if isinstance(result, Win):
            return State.WIN if result.winner == agent_id else State.LOSS
        if isinstance(result, Draw):
            return State.TIE
        return State.NEUTRAL

    def state_string(self) -> str:
        board = self.state.board
        header = "    " + "   ".join("abcdefgh")
        lines = [header, "  ╭" + "───┬" * (BOARD_SIZE - 1) + "───╮"]
        for r in range(BOARD_SIZE):
            row = board[r * BOARD_SIZE:(r + 1) * BOARD_SIZE]
            lines.append(f"{r + 1} │ " + " │ ".join(CELL_STRINGS[int(v)] for v in row) + " │")
            if r < BOARD_SIZE - 1:
                lines.append("  ├" + "───┼" * (BOARD_SIZE - 1) + "───┤")
        lines.append("  ╰" + "───┴" * (BOARD_SIZE - 1) + "───╯")
        if self.last_move is not None:
            lines.append(f"Last move: {index_to_notation(self.last_move)}")
        return "\n".join(lines)
