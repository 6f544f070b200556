"""Move legality and mandatory-capture rules.

All functions here are pure: they read the board and never modify it.

Rule variant in force:
- Men step and jump forward only (no backward captures for men).
- Kings step and jump one square diagonally in all four directions.
- If any capture is available, the side to move must capture, with any
  piece that has one. There is no majority-capture rule.
"""

from __future__ import annotations

from dataclasses import dataclass

from .board import (
    BOARD_SIZE,
    Board,
    Move,
    Square,
    belongs_to,
    count_pieces,
    forward,
    is_dark,
    is_king,
    is_valid_square,
    opponent,
    piece_at,
)

STEP_DIRECTIONS: tuple[Square, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
CAPTURE_DIRECTIONS: tuple[Square, ...] = ((-2, -2), (-2, 2), (2, -2), (2, 2))


@dataclass(frozen=True)
class GameResult:
    """Outcome of a finished game."""

    winner: str
    reason: str  # "no_pieces" or "blocked"


def _direction_allowed(piece: str, player: str, dr: int) -> bool:
    """Kings go anywhere; men only toward the opponent's home row."""
    if is_king(piece):
        return True
    return (dr > 0) == (forward(player) > 0)


def _landing_ok(board: Board, square: Square) -> bool:
    r, c = square
    return is_valid_square(r, c) and is_dark(r, c) and board[r][c] == ""


# ── Legality predicates ──────────────────────────────────────────


def is_valid_simple_move(board: Board, player: str, move: Move) -> bool:
    """Diagonal one-square step onto an empty dark square."""
    piece = piece_at(board, move.fr)
    if not belongs_to(piece, player):
        return False
    if not _landing_ok(board, move.to):
        return False

    dr = move.to[0] - move.fr[0]
    dc = move.to[1] - move.fr[1]
    if abs(dr) != 1 or abs(dc) != 1:
        return False
    return _direction_allowed(piece, player, dr)


def is_valid_capture_move(board: Board, player: str, move: Move) -> bool:
    """Two-square jump over an opponent piece onto an empty dark square."""
    piece = piece_at(board, move.fr)
    if not belongs_to(piece, player):
        return False
    if not _landing_ok(board, move.to):
        return False

    dr = move.to[0] - move.fr[0]
    dc = move.to[1] - move.fr[1]
    if abs(dr) != 2 or abs(dc) != 2:
        return False
    if not _direction_allowed(piece, player, dr):
        return False

    jumped = piece_at(board, move.captured)
    return belongs_to(jumped, opponent(player))


# ── Mandatory-capture resolver ───────────────────────────────────


def player_pieces(board: Board, player: str) -> list[Square]:
    """Squares holding *player*'s pieces, in row-major order."""
    return [
        (r, c)
        for r in range(BOARD_SIZE)
        for c in range(BOARD_SIZE)
        if belongs_to(board[r][c], player)
    ]


def capture_destinations(board: Board, player: str, square: Square) -> list[Square]:
    """Landing squares of every legal capture by the piece on *square*."""
    r, c = square
    destinations = []
    for dr, dc in CAPTURE_DIRECTIONS:
        dest = (r + dr, c + dc)
        if is_valid_capture_move(board, player, Move(square, dest)):
            destinations.append(dest)
    return destinations


def simple_destinations(board: Board, player: str, square: Square) -> list[Square]:
    """Destinations of every legal simple move by the piece on *square*."""
    r, c = square
    destinations = []
    for dr, dc in STEP_DIRECTIONS:
        dest = (r + dr, c + dc)
        if is_valid_simple_move(board, player, Move(square, dest)):
            destinations.append(dest)
    return destinations


def pieces_with_captures(board: Board, player: str) -> list[Square]:
    return [
        sq for sq in player_pieces(board, player)
        if capture_destinations(board, player, sq)
    ]


def player_has_captures(board: Board, player: str) -> bool:
    for sq in player_pieces(board, player):
        if capture_destinations(board, player, sq):
            return True
    return False


def legal_moves(board: Board, player: str) -> list[Move]:
    """Return all legal moves for *player*.

    Mandatory capture: if any capture exists, only captures are returned.
    """
    captures: list[Move] = []
    simple: list[Move] = []
    for sq in player_pieces(board, player):
        for dest in capture_destinations(board, player, sq):
            captures.append(Move(sq, dest))
        if not captures:
            for dest in simple_destinations(board, player, sq):
                simple.append(Move(sq, dest))
    if captures:
        return captures
    return simple


def is_legal_move(board: Board, player: str, move: Move) -> bool:
    """Full legality for the side to move, mandatory capture included."""
    if player_has_captures(board, player):
        return is_valid_capture_move(board, player, move)
    return is_valid_simple_move(board, player, move)


# ── Game-over detection ──────────────────────────────────────────


def check_game_over(board: Board, current_player: str) -> GameResult | None:
    """Check if the game is over before *current_player* moves.

    Checked in order: opponent wiped out (mover wins), mover wiped out
    (opponent wins), mover has no legal move (opponent wins by blocking).
    """
    counts = count_pieces(board)
    other = opponent(current_player)

    if counts[other] == 0:
        return GameResult(winner=current_player, reason="no_pieces")
    if counts[current_player] == 0:
        return GameResult(winner=other, reason="no_pieces")
    if not legal_moves(board, current_player):
        return GameResult(winner=other, reason="blocked")
    return None
