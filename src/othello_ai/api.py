"""
Public API for Othello rules, search and terminal play.

Usage:
    from othello_ai import create_initial_board, GameState, Player, best_move

    state = GameState(create_initial_board(), Player.FIRST)
    move = best_move(state, depth=2)

    # or play in the terminal
    from othello_ai import start_game, Config
    start_game(Config(mode="pvc", user_color="black"))
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Optional, TYPE_CHECKING

from othello_ai.core.types import Outcome
from othello_ai.debug import viz
from othello_ai.games.board import index_to_notation, notation_to_index
from othello_ai.selection import select_move
from othello_ai.simulation import SearchRunner
from othello_ai.utils.config import DEFAULT_CONFIG, Config
from othello_ai.utils.factory import create_agents, create_game

if TYPE_CHECKING:
    from othello_ai.agent.agent import Agent
    from othello_ai.core.types import Player
    from othello_ai.games.othello import Othello

logger = logging.getLogger(__name__)


def _ai_turn(
    game: "Othello",
    runner: SearchRunner,
    agent: "Agent",
    delay: float,
    debug: bool = False,
) -> Optional[int]:
    """AI selects and applies move. Returns move or None if it has to pass."""
    if debug:
        # Score table is printed here, so search in this process
        if delay > 0:
            time.sleep(delay)
        move = select_move(game, agent.depth, debug=True)
    else:
        pending = runner.submit(game.get_state(), agent.depth)
        if delay > 0:
            time.sleep(delay)
        result = runner.collect(pending, game.get_state())
        move = None if result is None else result.move

    if move is None:
        return None

    game.apply_move(move)
    return move


def _human_turn(game: "Othello") -> int:
    """Prompt human for move, apply it, return move."""
    player = game.current_player()
    print(f"\nYour turn ({viz.PLAYER_NAMES[player]})")
    print("Format: cell name (e.g. d3) or index 0-63")

    while True:
        raw = input("Move: ")
        try:
            move = notation_to_index(raw)
            game.apply_move(move)
            return move
        except ValueError as e:
            print(f"Illegal move: {e}")


def _show(game: "Othello", hints: bool) -> None:
    legal = game.valid_moves() if hints else ()
    print(viz.render_board(game.get_state(), legal, game.last_move))
    print(viz.render_status(game.get_state(), game.score()))


def start_game(
    config: Config = DEFAULT_CONFIG,
    game: Optional["Othello"] = None,
    debug_move_statistics: bool = False,
) -> Outcome:
    """
    Main entry point: play one game in the terminal.

    Parameters
    ----------
    config : Config
        Mode, human colour, search depth, CPU delay and hint settings.
    game : Othello, optional
        Session to continue; a fresh game is created when omitted.
    debug_move_statistics : bool
        If True, show the search value of every move during CPU turns.

    Returns
    -------
    Outcome
        Result of the game (Playing if it was interrupted).
    """
    game = game if game is not None else create_game()
    agents: Dict["Player", "Agent"] = create_agents(config)
    runner = SearchRunner(config.num_workers)

    print(
        f"Starting {game.game_id()} ({config.mode.value}). "
        + ", ".join(f"{viz.PLAYER_NAMES[p]}: {a.label}" for p, a in agents.items())
    )

    try:
        with runner:
            while not game.is_over():
                _show(game, config.hints)
                current = game.current_player()
                agent = agents[current]

                if not game.valid_moves():
                    # apply_move resolves passes itself; only a position handed
                    # in through ``game`` can start with a stuck player
                    game.pass_turn()
                elif agent.is_human:
                    move = _human_turn(game)
                    print(f"\n{viz.PLAYER_NAMES[current]} played: {index_to_notation(move)}")
                else:
                    move = _ai_turn(game, runner, agent, config.cpu_delay, debug_move_statistics)
                    if move is not None:
                        print(f"\nCPU ({viz.PLAYER_NAMES[current]}) played: {index_to_notation(move)}")

                if game.passed_player is not None:
                    print(viz.render_pass(game.passed_player))

            print(viz.render_board(game.get_state(), (), game.last_move))
            print(viz.render_result(game.outcome(), game.score()))

    except (KeyboardInterrupt, EOFError):
        print("\nInterrupted - shutting down...")
        runner.shutdown(force=True)
    except Exception:
        logger.exception("Fatal error in game loop")
        raise

    return game.outcome()


__all__ = [
    "start_game",
    "Config",
]
