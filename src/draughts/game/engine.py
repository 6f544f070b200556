"""GameState — turn controller for a single draughts game.

White moves first. Before every turn the side to move is checked for a
terminal condition; a move is then taken from that side's Player and
executed together with every capture the chain forces.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from draughts.core.notation import format_move

from .board import (
    WHITE,
    Board,
    Move,
    Square,
    copy_board,
    count_pieces,
    create_initial_board,
    is_king,
    opponent,
)
from .executor import MoveResult, MustContinueFrom, execute_move
from .rules import GameResult, check_game_over, legal_moves

if TYPE_CHECKING:
    from draughts.players import Player

__all__ = ["GameState", "MoveRecord"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveRecord:
    """One executed step of the game (a capture chain is several records)."""

    turn_number: int
    player: str
    fr: Square
    to: Square
    captured: Square | None
    promoted: bool


class GameState:
    """Board, side to move, terminal flag and the game's random source."""

    def __init__(
        self,
        rng: random.Random,
        board: Board | None = None,
        current_player: str = WHITE,
    ) -> None:
        self.rng = rng
        self.board: Board = board if board is not None else create_initial_board()
        self.current_player = current_player
        self.game_over = False
        self.result: GameResult | None = None
        self.turn_number = 0
        self.history: list[MoveRecord] = []

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def legal_moves(self) -> list[Move]:
        return legal_moves(self.board, self.current_player)

    def check_game_over(self) -> GameResult | None:
        """Evaluate the terminal conditions for the side about to move."""
        if self.game_over:
            return self.result
        result = check_game_over(self.board, self.current_player)
        if result is not None:
            self.game_over = True
            self.result = result
            logger.info(
                "Game over after %d turns: %s wins (%s)",
                self.turn_number, result.winner, result.reason,
            )
        return result

    def get_state_snapshot(self) -> dict:
        return {
            "board": copy_board(self.board),
            "current_player": self.current_player,
            "game_over": self.game_over,
            "winner": self.result.winner if self.result else None,
            "reason": self.result.reason if self.result else None,
            "pieces_remaining": count_pieces(self.board),
            "turn_number": self.turn_number,
        }

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def apply_move(self, move: Move) -> MoveResult:
        """Execute an already-validated move for the side to move."""
        before = self.board[move.fr[0]][move.fr[1]]
        outcome = execute_move(self.board, move)
        after = self.board[move.to[0]][move.to[1]]

        record = MoveRecord(
            turn_number=self.turn_number,
            player=self.current_player,
            fr=move.fr,
            to=move.to,
            captured=move.captured,
            promoted=is_king(after) and not is_king(before),
        )
        self.history.append(record)
        logger.debug(
            "Turn %d: %s plays %s%s",
            self.turn_number,
            self.current_player,
            format_move(move),
            " (crowned)" if record.promoted else "",
        )
        return outcome

    def switch_player(self) -> None:
        self.current_player = opponent(self.current_player)
        self.turn_number += 1

    # ------------------------------------------------------------------
    # Turn loop
    # ------------------------------------------------------------------

    def play_turn(self, player: Player) -> GameResult | None:
        """Play one full turn for the side to move.

        Returns the game result if the game was already decided before the
        move, otherwise None.
        """
        result = self.check_game_over()
        if result is not None:
            return result

        move = player.choose_move(self)
        outcome = self.apply_move(move)
        while isinstance(outcome, MustContinueFrom):
            move = player.choose_continuation(self, outcome.square)
            outcome = self.apply_move(move)

        self.switch_player()
        return None

    def run(
        self,
        players: dict[str, Player],
        on_turn: Callable[[GameState, MoveRecord], None] | None = None,
        max_turns: int | None = None,
    ) -> GameResult | None:
        """Play turns until the game ends or *max_turns* turns were played.

        *players* maps "white" and "black" to their move sources. *on_turn*
        is called after every completed turn with the last move record.
        """
        played = 0
        while max_turns is None or played < max_turns:
            result = self.play_turn(players[self.current_player])
            if result is not None:
                return result
            played += 1
            if on_turn is not None:
                on_turn(self, self.history[-1])
        return self.result
