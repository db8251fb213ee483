"""
Terminal visualizer for Othello positions and search results.

Renders:
    - the board with coloured pieces, legal-move hints and the last move
    - score / turn status lines and the final result banner
    - a table of root search values per legal move (debug)
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Sequence, Tuple

from othello_ai.core.types import BOARD_SIZE, Draw, Outcome, Player, Playing, Score, Win
from othello_ai.games.board import index_to_notation
from othello_ai.games.game_state import GameState

# ═══════════════════════════════════════════════════════════════════════════════
# ANSI Colors & Styling
# ═══════════════════════════════════════════════════════════════════════════════

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"

FG = {
    "green": "\033[38;5;28m",
    "red": "\033[38;5;124m",
    "yellow": "\033[38;5;142m",
    "orange": "\033[38;5;166m",
    "white": "\033[38;5;255m",
    "black": "\033[38;5;233m",
}

BG = {
    "board": "\033[48;5;28m",  # Felt green
    "last": "\033[48;5;64m",  # Lighter green
}

PIECES = {
    Player.FIRST: f"{FG['black']}●",
    Player.SECOND: f"{FG['white']}●",
}
HINT = f"{FG['yellow']}·"

PLAYER_NAMES = {Player.FIRST: "Black", Player.SECOND: "White"}


def score_color(value: float) -> str:
    if value > 0:
        return FG["green"]
    if value == 0:
        return FG["yellow"]
    return FG["red"]


# ═══════════════════════════════════════════════════════════════════════════════
# Text utilities
# ═══════════════════════════════════════════════════════════════════════════════

_ANSI_RE = re.compile(r"\033\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    return _ANSI_RE.sub("", text)


def visible_len(text: str) -> int:
    return len(strip_ansi(text))


def pad(text: str, width: int, align: str = "left") -> str:
    gap = max(0, width - visible_len(text))
    if align == "right":
        return " " * gap + text
    if align == "center":
        left = gap // 2
        return " " * left + text + " " * (gap - left)
    return text + " " * gap


# ═══════════════════════════════════════════════════════════════════════════════
# Board rendering
# ═══════════════════════════════════════════════════════════════════════════════

def render_board(
    state: GameState,
    hints: Iterable[int] = (),
    last_move: Optional[int] = None,
) -> str:
    """Coloured board with column letters and row numbers."""
    hint_set = set(hints)
    board = state.board.tolist()

    lines = ["   " + " ".join(f" {c}" for c in "abcdefgh")]
    for r in range(BOARD_SIZE):
        cells = []
        for c in range(BOARD_SIZE):
            index = r * BOARD_SIZE + c
            value = board[index]
            bg = BG["last"] if index == last_move else BG["board"]
            if value:
                glyph = PIECES[Player(value)]
            elif index in hint_set:
                glyph = HINT
            else:
                glyph = " "
            cells.append(f"{bg} {glyph} {RESET}")
        lines.append(f"{r + 1:>2} " + "".join(cells))
    return "\n".join(lines)


def render_status(state: GameState, counts: Score) -> str:
    """Score line plus whose turn it is."""
    turn = PLAYER_NAMES[state.current_player]
    return (
        f"{BOLD}Black{RESET} {counts.first:>2}  "
        f"{BOLD}White{RESET} {counts.second:>2}   "
        f"{DIM}to move:{RESET} {turn}"
    )


def render_pass(player: Player) -> str:
    return f"{FG['orange']}{PLAYER_NAMES[player]} has no legal move and passes.{RESET}"


def render_result(result: Outcome, counts: Score) -> str:
    """Final banner for a finished game."""
    if isinstance(result, Playing):
        return ""
    bar = "=" * 40
    if isinstance(result, Draw):
        line = f"Draw {counts.first}-{counts.second}"
    elif isinstance(result, Win):
        line = f"{PLAYER_NAMES[result.winner]} wins {max(counts)}-{min(counts)}"
        if result.perfect:
            line += " (perfect game!)"
    else:
        raise TypeError(f"Unknown outcome: {result!r}")
    return "\n".join([bar, pad(f"{BOLD}GAME OVER{RESET}", 40, "center"), pad(line, 40, "center"), bar])


# ═══════════════════════════════════════════════════════════════════════════════
# Search table
# ═══════════════════════════════════════════════════════════════════════════════

H, V = "─", "│"
TABLE_W = 30


def hline(left: str, right: str, style: str = "") -> str:
    line = f"{left}{H * TABLE_W}{right}"
    return f"{style}{line}{RESET}" if style else line


def trow(content: str, style: str = "") -> str:
    padding = " " * max(0, TABLE_W - visible_len(content))
    if style:
        return f"{style}{V}{RESET}{content}{padding}{style}{V}{RESET}"
    return f"{V}{content}{padding}{V}"


def render_move_scores(scored: Sequence[Tuple[int, float]], chosen: Optional[int] = None) -> str:
    """One row per legal move: cell name, index and search value."""
    lines: List[str] = [hline("┌", "┐"), trow(f" {'move':<6}{'idx':>4}{'value':>10}"), hline("├", "┤")]
    for move, value in scored:
        marker = f" {FG['green']}★{RESET}" if move == chosen else ""
        row = f" {index_to_notation(move):<6}{move:>4}{score_color(value)}{value:>10g}{RESET}{marker}"
        lines.append(trow(row, BOLD if move == chosen else ""))
    lines.append(hline("└", "┘"))
    return "\n".join(lines)
