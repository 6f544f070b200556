"""SeedManager — deterministic, HMAC-derived RNG per game.

A session has one base seed (configured, or taken from the wall clock).
Per-game seeds are derived from it via HMAC-SHA256 so a replay with the
same base seed reproduces every game exactly.
"""

import hashlib
import hmac
import random
import time


def wall_clock_seed() -> int:
    """Seed derived from the current wall-clock time."""
    return time.time_ns()


class SeedManager:
    """Produces deterministic, isolated Random instances for each game."""

    def __init__(self, base_seed: int | None = None):
        self._base_seed = wall_clock_seed() if base_seed is None else base_seed

    @property
    def base_seed(self) -> int:
        return self._base_seed

    def get_game_seed(self, game_number: int = 1) -> int:
        """Derive a game seed via HMAC. Same inputs always produce the same seed."""
        key = (self._base_seed % 2**64).to_bytes(8, byteorder="big")
        msg = f"draughts:{game_number}".encode("utf-8")
        digest = hmac.new(key, msg, hashlib.sha256).digest()
        return int.from_bytes(digest[:8], byteorder="big")

    def get_rng(self, game_seed: int) -> random.Random:
        """Return an isolated Random instance. Never touches global state."""
        return random.Random(game_seed)
