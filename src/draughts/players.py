"""Move sources — uniform interface for whoever picks the next move.

Provides ABC and concrete implementations:
- RandomPlayer: uniform random choice among legal moves (the computer)
- HumanPlayer: interactive console input with re-prompting
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable

from draughts.core.notation import format_square, parse_square
from draughts.core.referee import Referee, ViolationKind
from draughts.game.board import Board, Move, Square, belongs_to, piece_at, render_board
from draughts.game.rules import (
    capture_destinations,
    is_valid_capture_move,
    is_legal_move,
    legal_moves,
    player_has_captures,
    simple_destinations,
)

if TYPE_CHECKING:
    from draughts.game.engine import GameState

PROMPT_PIECE = "Enter piece to move: "
PROMPT_DESTINATION = "Enter destination: "
PROMPT_CONTINUATION = "Enter additional capture: "

MSG_BAD_SQUARE = "Invalid square! Use a letter a-j followed by a number 1-10."
MSG_NOT_YOURS = "That's not your piece!"
MSG_MUST_CAPTURE = "You must make a capture move!"
MSG_NO_MOVES = "That piece has no legal moves!"
MSG_BAD_CAPTURE = "Invalid capture move!"
MSG_BAD_MOVE = "Invalid move!"


class Player(ABC):
    """Abstract base for all move sources."""

    @abstractmethod
    def choose_move(self, state: GameState) -> Move:
        """Return a legal move for ``state.current_player``."""

    @abstractmethod
    def choose_continuation(self, state: GameState, square: Square) -> Move:
        """Return the next capture of a chain that must continue from *square*."""


# ── Random choice ────────────────────────────────────────────────


def random_move(board: Board, player: str, rng: random.Random) -> Move:
    """Pick uniformly among all legal moves, mandatory capture respected."""
    return rng.choice(legal_moves(board, player))


def random_continuation(
    board: Board, player: str, square: Square, rng: random.Random
) -> Move:
    """Pick uniformly among the captures available from *square*."""
    dest = rng.choice(capture_destinations(board, player, square))
    return Move(square, dest)


class RandomPlayer(Player):
    """Plays uniformly at random using the RNG owned by the game state."""

    def choose_move(self, state: GameState) -> Move:
        return random_move(state.board, state.current_player, state.rng)

    def choose_continuation(self, state: GameState, square: Square) -> Move:
        return random_continuation(state.board, state.current_player, square, state.rng)


# ── Console input ────────────────────────────────────────────────


class HumanPlayer(Player):
    """Reads moves from the console and re-prompts until they are legal.

    Takes ``input_fn`` and ``output_fn`` so tests can script a session.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        referee: Referee | None = None,
        glyphs: dict[str, str] | None = None,
    ) -> None:
        self._input = input_fn
        self._output = output_fn
        self._referee = referee or Referee()
        self._glyphs = glyphs

    @property
    def referee(self) -> Referee:
        return self._referee

    def choose_move(self, state: GameState) -> Move:
        self._output(render_board(state.board, self._glyphs))
        fr = self._read_piece(state)
        must_capture = player_has_captures(state.board, state.current_player)

        while True:
            to = self._read_square(state, PROMPT_DESTINATION)
            if is_legal_move(state.board, state.current_player, Move(fr, to)):
                return Move(fr, to)
            message = MSG_BAD_CAPTURE if must_capture else MSG_BAD_MOVE
            self._reject(state, ViolationKind.ILLEGAL_MOVE, message)

    def choose_continuation(self, state: GameState, square: Square) -> Move:
        self._output(render_board(state.board, self._glyphs))
        self._output(f"You must continue capturing from {format_square(square)}.")
        while True:
            to = self._read_square(state, PROMPT_CONTINUATION)
            move = Move(square, to)
            if is_valid_capture_move(state.board, state.current_player, move):
                return move
            self._reject(state, ViolationKind.ILLEGAL_MOVE, MSG_BAD_CAPTURE)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _read_piece(self, state: GameState) -> Square:
        """Prompt until the square holds one of our pieces that can move."""
        board, player = state.board, state.current_player
        while True:
            sq = self._read_square(state, PROMPT_PIECE)
            if not belongs_to(piece_at(board, sq), player):
                self._reject(state, ViolationKind.NOT_YOUR_PIECE, MSG_NOT_YOURS)
                continue
            if player_has_captures(board, player):
                if capture_destinations(board, player, sq):
                    return sq
                self._reject(state, ViolationKind.MISSED_CAPTURE, MSG_MUST_CAPTURE)
                continue
            if simple_destinations(board, player, sq):
                return sq
            self._reject(state, ViolationKind.ILLEGAL_MOVE, MSG_NO_MOVES)

    def _read_square(self, state: GameState, prompt: str) -> Square:
        while True:
            result = parse_square(self._input(prompt))
            if result.success:
                return result.square
            self._reject(state, ViolationKind.MALFORMED_SQUARE, MSG_BAD_SQUARE, result.error)

    def _reject(
        self,
        state: GameState,
        kind: ViolationKind,
        message: str,
        details: str | None = None,
    ) -> None:
        self._referee.record_violation(state.current_player, kind, details or message)
        self._output(message)
