"""Draughts rules engine: board model, legality, execution, turn control."""
