"""Pytest configuration and shared fixtures."""

import pytest

from bgmatch.core.game import Game
from bgmatch.core.rules import Rules


@pytest.fixture
def default_rules():
    """Standard match rules."""
    return Rules.default()


@pytest.fixture
def default_game():
    """Opening game state."""
    return Game.default()


@pytest.fixture
def rules_path(tmp_path):
    """Location for a rules config file."""
    return tmp_path / "rules.json"
