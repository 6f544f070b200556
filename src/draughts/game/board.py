"""Draughts board logic — 10×10 row/col representation.

Uses direct (row, col) coordinates. Dark squares: (row + col) % 2 == 1.

Piece encoding (strings on a 10×10 grid):
  ""  — empty (or light square)
  "w" — white man
  "b" — black man
  "W" — white king
  "B" — black king

Black moves DOWN the board (increasing row).
White moves UP the board (decreasing row).
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 10

EMPTY = ""
WHITE_MAN = "w"
BLACK_MAN = "b"
WHITE_KING = "W"
BLACK_KING = "B"

WHITE = "white"
BLACK = "black"

# Rows each side's men start on
_BLACK_START_ROWS = range(0, 4)
_WHITE_START_ROWS = range(6, 10)

DEFAULT_GLYPHS: dict[str, str] = {
    "light": " ",
    "dark": ".",
    "white_man": WHITE_MAN,
    "black_man": BLACK_MAN,
    "white_king": WHITE_KING,
    "black_king": BLACK_KING,
}

Square = tuple[int, int]
Board = list[list[str]]


@dataclass(frozen=True)
class Move:
    """A single step: simple move (distance 1) or capture (distance 2)."""

    fr: Square  # (row, col) origin
    to: Square  # (row, col) destination

    @property
    def is_capture(self) -> bool:
        return abs(self.to[0] - self.fr[0]) == 2

    @property
    def captured(self) -> Square | None:
        """Midpoint square jumped over, None for simple moves."""
        if not self.is_capture:
            return None
        return ((self.fr[0] + self.to[0]) // 2, (self.fr[1] + self.to[1]) // 2)


def create_empty_board() -> Board:
    return [[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]


def create_initial_board() -> Board:
    """Return a fresh 10×10 board with 20 men per side in starting positions."""
    board = create_empty_board()
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            if not is_dark(r, c):
                continue
            if r in _BLACK_START_ROWS:
                board[r][c] = BLACK_MAN
            elif r in _WHITE_START_ROWS:
                board[r][c] = WHITE_MAN
    return board


def copy_board(board: Board) -> Board:
    return [row[:] for row in board]


# ── Square and piece predicates ──────────────────────────────────


def is_valid_square(r: int, c: int) -> bool:
    return 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE


def is_dark(r: int, c: int) -> bool:
    return (r + c) % 2 == 1


def piece_at(board: Board, square: Square) -> str | None:
    """Return the piece on *square*, or None when it is off the board."""
    r, c = square
    if not is_valid_square(r, c):
        return None
    return board[r][c]


def owner(piece: str | None) -> str | None:
    """Return 'white' or 'black' for a piece, None for empty."""
    if piece in (WHITE_MAN, WHITE_KING):
        return WHITE
    if piece in (BLACK_MAN, BLACK_KING):
        return BLACK
    return None


def belongs_to(piece: str | None, player: str) -> bool:
    return piece is not None and owner(piece) == player


def is_king(piece: str | None) -> bool:
    return piece in (WHITE_KING, BLACK_KING)


def opponent(player: str) -> str:
    return BLACK if player == WHITE else WHITE


def forward(player: str) -> int:
    """Row step a man of *player* takes toward the opponent's home row."""
    return -1 if player == WHITE else 1


def promotion_row(player: str) -> int:
    return 0 if player == WHITE else BOARD_SIZE - 1


def promotes(piece: str | None, row: int) -> bool:
    """True if a man landing on *row* becomes a king."""
    if piece == WHITE_MAN:
        return row == promotion_row(WHITE)
    if piece == BLACK_MAN:
        return row == promotion_row(BLACK)
    return False


def promoted(piece: str, row: int) -> str:
    """Return the piece as it stands after landing on *row*."""
    if promotes(piece, row):
        return piece.upper()
    return piece


# ── Counting and rendering ───────────────────────────────────────


def count_pieces(board: Board) -> dict[str, int]:
    """Count remaining pieces for each side."""
    counts = {WHITE: 0, BLACK: 0}
    for row in board:
        for piece in row:
            side = owner(piece)
            if side:
                counts[side] += 1
    return counts


def render_board(board: Board, glyphs: dict[str, str] | None = None) -> str:
    """Render the board as text with file letters and rank numbers.

    Row 0 is printed first and labelled 10; row 9 is labelled 1.
    """
    g = dict(DEFAULT_GLYPHS)
    if glyphs:
        g.update(glyphs)
    by_piece = {
        WHITE_MAN: g["white_man"],
        BLACK_MAN: g["black_man"],
        WHITE_KING: g["white_king"],
        BLACK_KING: g["black_king"],
    }

    header = "    " + " ".join(chr(ord("a") + c) for c in range(BOARD_SIZE))
    lines = [header]
    for r in range(BOARD_SIZE):
        cells = []
        for c in range(BOARD_SIZE):
            piece = board[r][c]
            if piece:
                cells.append(by_piece[piece])
            elif is_dark(r, c):
                cells.append(g["dark"])
            else:
                cells.append(g["light"])
        label = BOARD_SIZE - r
        lines.append(f"{label:>2}  " + " ".join(cells) + f"  {label}")
    lines.append(header)
    return "\n".join(lines)
