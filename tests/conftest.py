"""Shared test fixtures for draughts."""

import random

import pytest

from draughts.game.board import create_empty_board
from draughts.game.engine import GameState


@pytest.fixture
def empty_board():
    """A 10×10 board with no pieces on it."""
    return create_empty_board()


@pytest.fixture
def make_state():
    """Build a GameState around a given board with a fixed-seed RNG."""

    def _make(board=None, current_player="white", seed=0):
        return GameState(
            rng=random.Random(seed), board=board, current_player=current_player
        )

    return _make
