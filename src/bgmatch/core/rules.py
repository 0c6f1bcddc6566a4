"""Match rules.

This module holds the options a backgammon match is played under:
- Target score
- Cube variants (beaver, raccoon, Murphy automatic doubles, Jacoby)
- Match-play doubling restrictions (Crawford, Holland)

Rules is a frozen value. The ``with_*`` methods never touch the receiver;
each returns a new Rules with only its own field(s) changed, so calls chain:

    >>> rules = Rules.default().with_points(5).with_beaver().with_murphy(3)
    >>> rules.points, rules.beaver, rules.murphy_limit
    (5, True, 3)

The builders accept any combination. Consistency (e.g. Holland without
Crawford) is checked separately by ``problems()`` / ``validate()``.
"""

import logging
from dataclasses import dataclass, replace
from typing import List

from bgmatch.exceptions import InvalidRulesError

logger = logging.getLogger(__name__)

MAX_POINTS = 2**32 - 1
MAX_MURPHY_LIMIT = 255


def _flag(value: bool) -> str:
    return "true" if value else "false"


@dataclass(frozen=True, order=True)
class Rules:
    """Rules of a match.

    Attributes:
        points: Points to reach for declaring a winner
        beaver: When offered the cube, allow to re-double but keep it
        raccoon: After a beaver, the doubler may double again, letting the
            opponent keep the cube
        murphy: If both players roll the same opening number, the cube is
            doubled and stays in the middle
        murphy_limit: How often the automatic double applies (0 = always)
        jacoby: Gammons and backgammons only count if the cube was offered
        crawford: No doubling in the game after a player first reaches
            points - 1
        holland: After the Crawford game, doubling needs both players to
            have rolled at least twice
    """
    points: int = 7
    beaver: bool = False
    raccoon: bool = False
    murphy: bool = False
    murphy_limit: int = 0
    jacoby: bool = False
    crawford: bool = True
    holland: bool = False

    @classmethod
    def default(cls) -> "Rules":
        """Return the standard rules: 7 points, Crawford on, all else off."""
        return cls()

    # ------------------------------------------------------------------
    # Fluent setters
    # ------------------------------------------------------------------

    def with_points(self, points: int) -> "Rules":
        """Set the number of points needed to win the match."""
        return self._set(points=points)

    def with_beaver(self) -> "Rules":
        """Allow the player offered the cube to redouble and keep it."""
        return self._set(beaver=True)

    def with_raccoon(self) -> "Rules":
        """Allow the doubler to redouble a beaver. Does not turn on beaver."""
        return self._set(raccoon=True)

    def with_murphy(self, limit: int) -> "Rules":
        """Enable automatic doubles, applied at most `limit` times (0 = always)."""
        return self._set(murphy=True, murphy_limit=limit)

    def with_jacoby(self) -> "Rules":
        """Count gammons and backgammons only once the cube has been offered."""
        return self._set(jacoby=True)

    def with_crawford(self) -> "Rules":
        """Forbid doubling in the game after a player first reaches points - 1."""
        return self._set(crawford=True)

    def with_holland(self) -> "Rules":
        """Allow post-Crawford doubling only once both players rolled twice.

        Does not turn on crawford.
        """
        return self._set(holland=True)

    def _set(self, **changes) -> "Rules":
        rules = replace(self, **changes)
        logger.debug("Rules updated %s: %s", changes, rules)
        return rules

    # ------------------------------------------------------------------
    # Consistency
    # ------------------------------------------------------------------

    def problems(self) -> List[str]:
        """List the inconsistent option combinations in these rules.

        Returns:
            Human-readable descriptions, empty if the rules are consistent
        """
        found = []
        if self.points < 1:
            found.append(f"points must be at least 1, got {self.points}")
        elif self.points > MAX_POINTS:
            found.append(f"points must be at most {MAX_POINTS}, got {self.points}")
        if not 0 <= self.murphy_limit <= MAX_MURPHY_LIMIT:
            found.append(
                f"murphy_limit must be between 0 and {MAX_MURPHY_LIMIT}, "
                f"got {self.murphy_limit}"
            )
        if self.raccoon and not self.beaver:
            found.append("raccoon requires beaver")
        if self.murphy_limit and not self.murphy:
            found.append("murphy_limit is set but murphy is off")
        if self.holland and not self.crawford:
            found.append("holland requires crawford")
        return found

    def is_valid(self) -> bool:
        return not self.problems()

    def validate(self) -> "Rules":
        """Check the rules for consistency.

        Returns:
            The rules themselves, so validation can end a builder chain

        Raises:
            InvalidRulesError: If any inconsistency is found
        """
        found = self.problems()
        if found:
            raise InvalidRulesError(found)
        return self

    def __str__(self) -> str:
        return (
            f"Points: {self.points}, "
            f"Beaver: {_flag(self.beaver)}, "
            f"Raccoon: {_flag(self.raccoon)}, "
            f"Murphy: {_flag(self.murphy)}, "
            f"Murphy Limit: {self.murphy_limit}, "
            f"Jacoby: {_flag(self.jacoby)}, "
            f"Crawford: {_flag(self.crawford)}, "
            f"Holland: {_flag(self.holland)}"
        )
