"""draughts — 10×10 draughts against a random-move computer opponent."""

__version__ = "0.1.0"
