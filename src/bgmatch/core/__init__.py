"""Core match data structures and dice."""

from bgmatch.core.types import (
    Player,
    CubeOwner,
    Point,
    Dice,
    CHECKERS,
    NUM_POINTS,
    BOARD_SIZE,
    BAR_PLAYER1,
    BAR_PLAYER2,
    CHECKERS_PER_SIDE,
)
from bgmatch.core.rules import Rules
from bgmatch.core.game import Game, initial_board
from bgmatch.core.dice import roll

__all__ = [
    "Player",
    "CubeOwner",
    "Point",
    "Dice",
    "CHECKERS",
    "NUM_POINTS",
    "BOARD_SIZE",
    "BAR_PLAYER1",
    "BAR_PLAYER2",
    "CHECKERS_PER_SIDE",
    "Rules",
    "Game",
    "initial_board",
    "roll",
]
