"""Dice utilities for backgammon.

This module handles dice rolling, roll display, and a fairness check
for the roll primitive.

Every call to ``roll()`` draws from a fresh generator seeded from the
operating system's entropy source. Rolls cannot be seeded or replayed.
"""

import logging
from dataclasses import dataclass
import numpy as np
from numpy.typing import NDArray

from bgmatch.core.types import Dice

logger = logging.getLogger(__name__)

EXPECTED_DIE_MEAN = 3.5


def roll() -> Dice:
    """Roll two dice.

    Returns:
        Tuple of (die1, die2) where each is 1-6, in the order drawn
    """
    rng = np.random.default_rng()
    die1 = int(rng.integers(1, 7))
    die2 = int(rng.integers(1, 7))
    return (die1, die2)


def is_doubles(dice: Dice) -> bool:
    """Check if dice roll is doubles.

    An opening roll of doubles is what triggers the Murphy automatic double.
    """
    return dice[0] == dice[1]


def dice_to_string(dice: Dice) -> str:
    """Convert dice to readable string.

    Examples:
        >>> dice_to_string((3, 5))
        '3-5'
        >>> dice_to_string((4, 4))
        'Double 4s'
    """
    if is_doubles(dice):
        return f"Double {dice[0]}s"
    else:
        return f"{dice[0]}-{dice[1]}"


# ==============================================================================
# FAIRNESS
# ==============================================================================

@dataclass
class DiceStats:
    """Summary of a batch of rolls.

    Attributes:
        trials: Number of rolls (each roll is two dice)
        mean: Mean of (die1 + die2) / 2 over all rolls
        face_counts: How often each face 1-6 came up, across both dice
        doubles_rate: Fraction of rolls that were doubles (1/6 when fair)
    """
    trials: int
    mean: float
    face_counts: NDArray[np.int64]
    doubles_rate: float

    def is_fair(self, tolerance: float = 0.01) -> bool:
        """Check that the mean lies strictly within `tolerance` of 3.5."""
        return abs(self.mean - EXPECTED_DIE_MEAN) < tolerance

    def summary(self) -> str:
        counts = ", ".join(
            f"{face}: {int(count)}" for face, count in enumerate(self.face_counts, start=1)
        )
        return (
            f"Trials: {self.trials}, Mean: {self.mean:.4f}, "
            f"Doubles: {self.doubles_rate:.2%}, Faces: {counts}"
        )


def dice_fairness(trials: int = 1_000_000) -> DiceStats:
    """Roll the dice `trials` times and summarise the outcome.

    Args:
        trials: Number of rolls

    Returns:
        DiceStats for the batch

    Raises:
        ValueError: If trials is not positive
    """
    if trials < 1:
        raise ValueError(f"trials must be positive, got {trials}")

    rolls = np.array([roll() for _ in range(trials)], dtype=np.int64)
    face_counts = np.bincount(rolls.ravel(), minlength=7)[1:]
    stats = DiceStats(
        trials=trials,
        mean=float(rolls.sum() / (2 * trials)),
        face_counts=face_counts,
        doubles_rate=float(np.mean(rolls[:, 0] == rolls[:, 1])),
    )
    logger.debug("Dice fairness over %d rolls: mean=%.4f", trials, stats.mean)
    return stats
