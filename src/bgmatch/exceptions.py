"""
Exception hierarchy for bgmatch.

Core operations (building rules, the opening game, rolling dice) never fail;
these errors are raised at the edges, when rules are validated or loaded
from configuration.
"""

from typing import List


class BgmatchError(Exception):
    """Base exception for all bgmatch errors."""


class InvalidRulesError(BgmatchError, ValueError):
    """A Rules value holds an inconsistent combination of options."""

    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        super().__init__("Invalid rules: " + "; ".join(self.problems))


class ConfigError(BgmatchError):
    """Rules configuration could not be read or is malformed."""
