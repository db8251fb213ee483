"""
Core module - fundamental types and board constants.

This module provides the building blocks used throughout the engine.
"""

from othello_ai.core.types import (
    Player,
    Cell,
    Score,
    Outcome,
    Playing,
    Draw,
    Win,
    BOARD_SIZE,
    TOTAL_CELLS,
    CORNERS,
    INITIAL_PIECES,
)

__all__ = [
    # Types
    "Player",
    "Cell",
    "Score",
    "Outcome",
    "Playing",
    "Draw",
    "Win",
    # Constants
    "BOARD_SIZE",
    "TOTAL_CELLS",
    "CORNERS",
    "INITIAL_PIECES",
]
