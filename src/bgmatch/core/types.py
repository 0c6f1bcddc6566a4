"""Core type definitions for bgmatch.

This module defines the seat and cube-ownership enums together with the
constants describing the board encoding shared by the rest of the package.
"""

from enum import Enum
from functools import total_ordering
from typing import Optional, Tuple


# ==============================================================================
# BOARD ENCODING
# ==============================================================================

# Type aliases
Point = int  # 0-23 = points, 24/25 = bars
CheckerCount = int  # signed: positive = Player 1, negative = Player 2

NUM_POINTS = 24
BOARD_SIZE = 26  # 24 points + one bar slot per side
BAR_PLAYER1 = 24
BAR_PLAYER2 = 25
CHECKERS_PER_SIDE = 15

# 24 points + 1 bar slot, as seen from one side
CHECKERS = 25


# ==============================================================================
# PLAYERS
# ==============================================================================

_PLAYER_NAMES = {
    0: "Nobody",
    1: "Player 1",
    2: "Player 2",
}


@total_ordering
class Player(Enum):
    """The two seats of a match, plus nobody.

    NOBODY is the zero value, used before anybody has acted (e.g. before the
    first roll). Members are ordered NOBODY < PLAYER1 < PLAYER2.
    """
    NOBODY = 0
    PLAYER1 = 1
    PLAYER2 = 2

    @classmethod
    def default(cls) -> "Player":
        return cls.NOBODY

    def opponent(self) -> "Player":
        """Return the other seat (NOBODY has no opponent)."""
        if self == Player.PLAYER1:
            return Player.PLAYER2
        if self == Player.PLAYER2:
            return Player.PLAYER1
        return Player.NOBODY

    def __lt__(self, other):
        if not isinstance(other, Player):
            return NotImplemented
        return self.value < other.value

    def __str__(self) -> str:
        return _PLAYER_NAMES[self.value]


@total_ordering
class CubeOwner(Enum):
    """Who controls the doubling cube. NOBODY while the cube is centered."""
    NOBODY = 0
    PLAYER1 = 1
    PLAYER2 = 2

    @classmethod
    def default(cls) -> "CubeOwner":
        return cls.NOBODY

    def to_player(self) -> Optional[Player]:
        """Convert to Player (None if the cube is centered)."""
        if self == CubeOwner.NOBODY:
            return None
        return Player(self.value)

    def __lt__(self, other):
        if not isinstance(other, CubeOwner):
            return NotImplemented
        return self.value < other.value

    def __str__(self) -> str:
        return _PLAYER_NAMES[self.value]


# Dice type
Dice = Tuple[int, int]  # (die1, die2) where 1 <= die1, die2 <= 6
