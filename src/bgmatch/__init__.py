"""
bgmatch - backgammon match rules, opening game state and fair dice.
"""

__version__ = "0.1.0"

# Core exports
from bgmatch.core.types import (
    Player,
    CubeOwner,
    Dice,
    CHECKERS,
)
from bgmatch.core.rules import Rules
from bgmatch.core.game import Game
from bgmatch.core.dice import roll

__all__ = [
    "Player",
    "CubeOwner",
    "Dice",
    "CHECKERS",
    "Rules",
    "Game",
    "roll",
]
