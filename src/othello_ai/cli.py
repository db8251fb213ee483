"""
Command-line interface for playing Othello in the terminal.
"""

import argparse
import logging

from othello_ai.api import start_game
from othello_ai.selection import DEFAULT_DEPTH
from othello_ai.utils.config import COLORS, DEFAULT_CPU_DELAY, Config, GameMode


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play Othello against a friend or a minimax opponent"
    )
    parser.add_argument(
        "--mode", "-m",
        choices=[m.value for m in GameMode],
        default=GameMode.PVC.value,
        help="pvp: two humans, pvc: human vs CPU, cvc: CPU self-play (default: pvc)",
    )
    parser.add_argument(
        "--color", "-c",
        choices=list(COLORS.keys()),
        default="black",
        help="Colour played by the human in pvc mode; black moves first (default: black)",
    )
    parser.add_argument(
        "--depth", "-d",
        type=int,
        default=DEFAULT_DEPTH,
        help=f"CPU search depth in plies (default: {DEFAULT_DEPTH})",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=DEFAULT_CPU_DELAY,
        help=f"Seconds to pause before showing a CPU move (default: {DEFAULT_CPU_DELAY})",
    )
    parser.add_argument(
        "--workers", "-w",
        type=int,
        default=1,
        help="Search worker processes; 0 searches in the main process (default: 1)",
    )
    parser.add_argument(
        "--no-hints",
        action="store_true",
        help="Do not mark legal moves on the board",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show the search value of every move on CPU turns",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    """Translate parsed arguments into a validated Config."""
    return Config(
        mode=GameMode(args.mode),
        user_color=args.color,
        depth=args.depth,
        cpu_delay=args.delay,
        hints=not args.no_hints,
        num_workers=args.workers,
    )


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        config = build_config(args)
    except ValueError as e:
        raise SystemExit(f"error: {e}") from e

    start_game(config, debug_move_statistics=args.debug)


if __name__ == "__main__":
    main()
