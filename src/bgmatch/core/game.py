"""Game state and the opening position.

Board encoding:
    The board is an array of 26 signed checker counts. The sign tells whose
    checkers sit on a slot (positive = Player 1, negative = Player 2) and the
    magnitude how many.

    Index:  0 .. 23   the 24 points
            24        Player 1's bar
            25        Player 2's bar

    The opening position is mirror symmetric: board[i] == -board[23 - i].
"""

from dataclasses import dataclass, field
import numpy as np
from numpy.typing import NDArray

from bgmatch.core.types import (
    Player,
    CubeOwner,
    CheckerCount,
    NUM_POINTS,
    BOARD_SIZE,
    BAR_PLAYER1,
    BAR_PLAYER2,
)


# ==============================================================================
# BOARD CONSTRUCTION
# ==============================================================================

_OPENING_LAYOUT = {
    0: 2,     # Player 1 back checkers
    5: -5,
    7: -3,
    11: 5,
    12: -5,
    16: 3,
    18: 5,
    23: -2,   # Player 2 back checkers
}


def initial_board() -> NDArray[np.int32]:
    """Create the standard backgammon opening layout.

    Returns:
        Fresh board array with 15 checkers per side and empty bars
    """
    board = np.zeros(BOARD_SIZE, dtype=np.int32)
    for point, count in _OPENING_LAYOUT.items():
        board[point] = count
    return board


# ==============================================================================
# GAME STATE
# ==============================================================================

@dataclass(eq=False)
class Game:
    """Snapshot of one match's live state.

    Attributes:
        points: Target score for this match instance
        board: 26 signed checker counts (see module docstring)
        cube: Current cube value, 0 while the cube has not been introduced
        cube_owner: Who may offer the cube; NOBODY while centered
        one_plays: True when Player 1's turn indicator is active
        crawford: Whether the current game is the Crawford game
        since_crawford: Games/rolls elapsed since the Crawford game
    """
    points: int = 3
    board: NDArray[np.int32] = field(default_factory=initial_board)
    cube: int = 0
    cube_owner: CubeOwner = CubeOwner.NOBODY
    one_plays: bool = True
    crawford: bool = False
    since_crawford: int = 0

    def __post_init__(self):
        """Validate board shape."""
        assert len(self.board) == BOARD_SIZE, f"board must have length {BOARD_SIZE}"

    @classmethod
    def default(cls) -> "Game":
        """Return the opening state: 3 points, cube unused, Player 1 to play."""
        return cls()

    @property
    def player_to_move(self) -> Player:
        return Player.PLAYER1 if self.one_plays else Player.PLAYER2

    def bar(self, player: Player) -> CheckerCount:
        """Number of checkers `player` has on the bar."""
        if player == Player.PLAYER1:
            return int(self.board[BAR_PLAYER1])
        if player == Player.PLAYER2:
            return int(-self.board[BAR_PLAYER2])
        raise ValueError(f"{player} has no bar")

    def checkers(self, player: Player) -> CheckerCount:
        """Total checkers `player` has on the points and the bar."""
        points = self.board[:NUM_POINTS]
        if player == Player.PLAYER1:
            on_points = int(points[points > 0].sum())
        elif player == Player.PLAYER2:
            on_points = int(-points[points < 0].sum())
        else:
            raise ValueError(f"{player} has no checkers")
        return on_points + self.bar(player)

    def copy(self) -> "Game":
        """Create a deep copy of the game."""
        return Game(
            points=self.points,
            board=self.board.copy(),
            cube=self.cube,
            cube_owner=self.cube_owner,
            one_plays=self.one_plays,
            crawford=self.crawford,
            since_crawford=self.since_crawford,
        )

    def __eq__(self, other):
        if not isinstance(other, Game):
            return NotImplemented
        return (
            self.points == other.points
            and np.array_equal(self.board, other.board)
            and self.cube == other.cube
            and self.cube_owner == other.cube_owner
            and self.one_plays == other.one_plays
            and self.crawford == other.crawford
            and self.since_crawford == other.since_crawford
        )

    __hash__ = None


def is_mirror_symmetric(board: NDArray[np.int32]) -> bool:
    """Check that point i mirrors point 23 - i with the opposite sign."""
    points = board[:NUM_POINTS]
    return bool(np.array_equal(points, -points[::-1]))


def board_to_string(game: Game) -> str:
    """Convert game to string representation.

    Args:
        game: Game to display

    Returns:
        ASCII representation, one line per board slot
    """
    lines = []
    lines.append("=" * 40)
    lines.append(f"Match to: {game.points}")
    lines.append(f"Player to move: {game.player_to_move}")
    owner = game.cube_owner.to_player()
    if owner is None:
        lines.append(f"Cube: {game.cube} (centered)")
    else:
        lines.append(f"Cube: {game.cube} (owned by {owner})")
    lines.append(f"Crawford: {game.crawford}, since Crawford: {game.since_crawford}")
    lines.append("")

    lines.append("Point | Player 1 | Player 2")
    lines.append("------+----------+---------")

    for point in range(BOARD_SIZE):
        count = int(game.board[point])
        if point == BAR_PLAYER1:
            point_name = "BAR1 "
        elif point == BAR_PLAYER2:
            point_name = "BAR2 "
        else:
            point_name = f"{point:2d}   "
        p1 = count if count > 0 else 0
        p2 = -count if count < 0 else 0
        lines.append(f"{point_name}|    {p1:2d}    |    {p2:2d}")

    lines.append("=" * 40)
    return "\n".join(lines)
