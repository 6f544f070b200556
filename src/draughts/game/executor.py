"""Move execution — applies a validated move to the board in place.

The executor performs no legality checks. Callers only ever hand it moves
that already passed ``rules.is_valid_simple_move`` or
``rules.is_valid_capture_move``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .board import Board, Move, Square, owner, promoted
from .rules import capture_destinations


@dataclass(frozen=True)
class TurnComplete:
    """No further capture is forced; the turn passes to the opponent."""


@dataclass(frozen=True)
class MustContinueFrom:
    """The piece on ``square`` must keep capturing before the turn ends."""

    square: Square


MoveResult = Union[TurnComplete, MustContinueFrom]


def execute_move(board: Board, move: Move) -> MoveResult:
    """Relocate the piece, remove any jumped piece, promote on landing.

    After a capture, the same piece is checked for another capture from
    its landing square; if one exists the chain must continue from there.
    """
    fr_r, fr_c = move.fr
    to_r, to_c = move.to

    piece = board[fr_r][fr_c]
    player = owner(piece)
    board[fr_r][fr_c] = ""

    captured = move.captured
    if captured is not None:
        board[captured[0]][captured[1]] = ""

    board[to_r][to_c] = promoted(piece, to_r)

    if captured is not None and capture_destinations(board, player, move.to):
        return MustContinueFrom(move.to)
    return TurnComplete()
