"""Algebraic square notation — parse and format board squares.

A square is a file letter ``a``..``j`` (column 0..9) followed by a rank
number ``1``..``10``. Rank 1 is white's home row (board row 9) and rank
10 is black's home row (board row 0).

Parsing never raises: malformed text yields an unsuccessful ParseResult
carrying the reason, and the input loop decides what to do with it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from draughts.game.board import BOARD_SIZE, Move, Square

_FILES = "abcdefghij"
_SQUARE_RE = re.compile(r"^([a-z])([0-9]{1,2})$")


@dataclass(frozen=True)
class ParseResult:
    """Result of parsing one square in algebraic notation."""

    success: bool
    square: Square | None
    error: str | None


def parse_square(text: str) -> ParseResult:
    cleaned = text.strip().lower()
    if not 2 <= len(cleaned) <= 3:
        return ParseResult(
            success=False, square=None,
            error=f"Expected 2 or 3 characters, got {len(cleaned)}",
        )

    m = _SQUARE_RE.match(cleaned)
    if not m:
        return ParseResult(
            success=False, square=None,
            error=f"Not a square: {text.strip()!r}",
        )

    letter, digits = m.groups()
    if letter not in _FILES:
        return ParseResult(
            success=False, square=None,
            error=f"File {letter!r} is off the board (a-j)",
        )
    rank = int(digits)
    if not 1 <= rank <= BOARD_SIZE or digits.startswith("0"):
        return ParseResult(
            success=False, square=None,
            error=f"Rank {digits!r} is off the board (1-10)",
        )

    return ParseResult(
        success=True,
        square=(BOARD_SIZE - rank, _FILES.index(letter)),
        error=None,
    )


def format_square(square: Square) -> str:
    row, col = square
    return f"{_FILES[col]}{BOARD_SIZE - row}"


def format_move(move: Move) -> str:
    """e.g. ``d4-e5`` for a step, ``d4xf6`` for a capture."""
    sep = "x" if move.is_capture else "-"
    return f"{format_square(move.fr)}{sep}{format_square(move.to)}"
