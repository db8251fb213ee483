#!/usr/bin/env python3
"""
Search Performance Profiler
===========================

Location: src/othello_ai/scripts/benchmarks.py

Times the rules engine and the minimax search over a fixed set of positions
taken from a deterministic self-play game, and compares the search against
its soft latency budgets.

USAGE
-----
    python -m othello_ai.scripts.benchmarks [max_depth] [options]

ARGUMENTS
---------
    max_depth   Deepest search to time (default: 3)

OPTIONS
-------
    --full      Also run cProfile on one search at max_depth
    --plain     Time plain minimax alongside alpha-beta

OUTPUT
------
1. RULES OPERATIONS
   - legal_moves / apply_move / evaluate: mean time per call

2. SEARCH LATENCY
   - best_move per depth: mean and worst time over the sample positions
   - flagged when the worst case exceeds the soft budget
     (depth 2: 0.5s, depth 3: 3s)

3. CPROFILE (--full)
   - Top functions by cumulative time for one deep search

NOTE
----
    Do NOT name this file "profile.py" - it will shadow Python's
    built-in profile module and break cProfile imports.
"""

import cProfile
import pstats
import sys
import time
from typing import Callable, List

from othello_ai.games.game_rules import apply_move, is_game_over, legal_moves
from othello_ai.games.game_state import GameState
from othello_ai.games.othello import Othello
from othello_ai.selection.heuristic import evaluate
from othello_ai.selection.minimax import best_move

SOFT_BUDGETS = {2: 0.5, 3: 3.0}


def sample_positions(every: int = 6, depth: int = 1) -> List[GameState]:
    """Positions from a depth-limited self-play game, one every ``every`` plies."""
    state = Othello.initial_state()
    positions = []
    ply = 0
    while not is_game_over(state):
        if ply % every == 0:
            positions.append(state)
        state = apply_move(state, best_move(state, depth))
        ply += 1
    return positions


def _mean_time(fn: Callable[[], object], iters: int) -> float:
    start = time.perf_counter()
    for _ in range(iters):
        fn()
    return (time.perf_counter() - start) / iters


def profile_rules(positions: List[GameState], iters: int = 200) -> None:
    for name, fn in [
        ("legal_moves", lambda s: legal_moves(s)),
        ("apply_move", lambda s: apply_move(s, (legal_moves(s) or [0])[0])),
        ("evaluate", lambda s: evaluate(s.board, s.current_player)),
    ]:
        per_call = sum(_mean_time(lambda: fn(s), iters) for s in positions) / len(positions)
        print(f"  {name:<12} {per_call * 1e6:9.1f} µs")


def profile_search(positions: List[GameState], max_depth: int, plain: bool) -> None:
    for depth in range(1, max_depth + 1):
        variants = [("alpha-beta", True)] + ([("minimax", False)] if plain else [])
        for label, alphabeta in variants:
            times = []
            for state in positions:
                start = time.perf_counter()
                best_move(state, depth, alphabeta=alphabeta)
                times.append(time.perf_counter() - start)
            worst = max(times)
            budget = SOFT_BUDGETS.get(depth)
            flag = "  OVER BUDGET" if budget is not None and worst > budget else ""
            print(
                f"  depth {depth} {label:<10} mean {sum(times) / len(times) * 1000:8.1f} ms"
                f"  worst {worst * 1000:8.1f} ms{flag}"
            )


def profile_deep_search(state: GameState, depth: int, top_n: int = 20) -> None:
    profiler = cProfile.Profile()
    profiler.enable()
    best_move(state, depth)
    profiler.disable()
    pstats.Stats(profiler).sort_stats("cumulative").print_stats(top_n)


def main():
    # Handle --help
    if "--help" in sys.argv or "-h" in sys.argv:
        print(__doc__)
        sys.exit(0)

    max_depth = 3
    do_full = False
    plain = False

    args = [a for a in sys.argv[1:] if not a.startswith("-")]
    flags = [a for a in sys.argv[1:] if a.startswith("-")]

    for flag in flags:
        if flag == "--full":
            do_full = True
        elif flag == "--plain":
            plain = True
        else:
            print(f"Unknown flag: {flag}")
            print("Use --help for usage information")
            sys.exit(1)

    for arg in args:
        if arg.isdigit() and int(arg) >= 1:
            max_depth = int(arg)
        else:
            print(f"Unknown argument: {arg}")
            print("Use --help for usage information")
            sys.exit(1)

    positions = sample_positions()
    print(f"\n{'='*80}")
    print(f"Profiling search up to depth {max_depth} on {len(positions)} positions")
    print(f"{'='*80}")

    print("\n[1/3] Rules Operations...")
    profile_rules(positions)

    print("\n[2/3] Search Latency...")
    profile_search(positions, max_depth, plain)

    if do_full:
        print("\n[3/3] cProfile...")
        profile_deep_search(positions[len(positions) // 2], max_depth)

    print("\nDone!")


if __name__ == "__main__":
    main()
