"""Tests for the GameState turn controller."""

import random
from unittest.mock import MagicMock

import pytest

from draughts.game.board import (
    BLACK,
    WHITE,
    Move,
    copy_board,
    count_pieces,
    create_initial_board,
    is_dark,
)
from draughts.game.engine import GameState, MoveRecord
from draughts.game.executor import execute_move
from draughts.game.rules import GameResult, legal_moves
from draughts.players import RandomPlayer


def _random_players():
    return {WHITE: RandomPlayer(), BLACK: RandomPlayer()}


# ------------------------------------------------------------------
# Setup
# ------------------------------------------------------------------

class TestSetup:
    def test_defaults(self, make_state):
        state = make_state()
        snap = state.get_state_snapshot()
        assert snap["current_player"] == WHITE
        assert snap["game_over"] is False
        assert snap["winner"] is None
        assert snap["turn_number"] == 0
        assert snap["pieces_remaining"] == {"white": 20, "black": 20}

    def test_snapshot_board_is_a_copy(self, make_state):
        state = make_state()
        snap = state.get_state_snapshot()
        snap["board"][6][1] = ""
        assert state.board[6][1] == "w"

    def test_legal_moves_for_side_to_move(self, make_state):
        state = make_state(current_player=BLACK)
        assert all(m.fr[0] == 3 for m in state.legal_moves())


# ------------------------------------------------------------------
# Applying moves
# ------------------------------------------------------------------

class TestApplyMove:
    def test_apply_records_history(self, make_state):
        state = make_state()
        state.apply_move(Move((6, 3), (5, 4)))
        assert state.board[5][4] == "w"
        assert state.history == [
            MoveRecord(
                turn_number=0, player=WHITE, fr=(6, 3), to=(5, 4),
                captured=None, promoted=False,
            )
        ]

    def test_records_promotion(self, empty_board, make_state):
        empty_board[1][2] = "w"
        empty_board[5][4] = "b"
        state = make_state(board=empty_board)
        state.apply_move(Move((1, 2), (0, 1)))
        assert state.history[-1].promoted is True

    def test_switch_player(self, make_state):
        state = make_state()
        state.switch_player()
        assert state.current_player == BLACK
        assert state.turn_number == 1
        state.switch_player()
        assert state.current_player == WHITE


# ------------------------------------------------------------------
# Turns
# ------------------------------------------------------------------

class TestPlayTurn:
    def test_random_turn_from_start(self, make_state):
        state = make_state(seed=7)
        assert state.play_turn(RandomPlayer()) is None
        assert state.current_player == BLACK
        assert state.turn_number == 1
        assert len(state.history) == 1
        assert count_pieces(state.board) == {"white": 20, "black": 20}

    def test_forced_chain_completed_in_one_turn(self, empty_board, make_state):
        empty_board[6][3] = "w"
        empty_board[5][4] = "b"
        empty_board[3][6] = "b"
        empty_board[0][1] = "b"
        state = make_state(board=empty_board)

        state.play_turn(RandomPlayer())

        assert state.board[2][7] == "w"
        assert count_pieces(state.board) == {"white": 1, "black": 1}
        assert [(r.fr, r.to) for r in state.history] == [
            ((6, 3), (4, 5)),
            ((4, 5), (2, 7)),
        ]
        assert all(r.turn_number == 0 for r in state.history)
        assert state.current_player == BLACK

    def test_continuation_asks_same_player(self, empty_board, make_state):
        empty_board[6][3] = "w"
        empty_board[5][4] = "b"
        empty_board[3][6] = "b"
        empty_board[0][1] = "b"
        state = make_state(board=empty_board)

        player = MagicMock()
        player.choose_move.return_value = Move((6, 3), (4, 5))
        player.choose_continuation.return_value = Move((4, 5), (2, 7))
        state.play_turn(player)

        player.choose_continuation.assert_called_once_with(state, (4, 5))

    def test_game_over_checked_before_move(self, empty_board, make_state):
        empty_board[4][3] = "w"
        state = make_state(board=empty_board, current_player=BLACK)
        player = MagicMock()

        result = state.play_turn(player)

        assert result == GameResult(WHITE, "no_pieces")
        assert state.game_over is True
        player.choose_move.assert_not_called()

    def test_blocked_side_loses(self, empty_board, make_state):
        empty_board[9][0] = "w"
        empty_board[8][1] = "b"
        empty_board[7][2] = "b"
        state = make_state(board=empty_board)
        assert state.check_game_over() == GameResult(BLACK, "blocked")
        assert state.get_state_snapshot()["reason"] == "blocked"

    def test_check_game_over_is_sticky(self, empty_board, make_state):
        empty_board[4][3] = "w"
        state = make_state(board=empty_board, current_player=BLACK)
        first = state.check_game_over()
        state.board[5][2] = "b"
        assert state.check_game_over() is first


# ------------------------------------------------------------------
# Full games
# ------------------------------------------------------------------

class TestRun:
    def test_capture_ends_game(self, empty_board, make_state):
        empty_board[6][3] = "w"
        empty_board[5][4] = "b"
        state = make_state(board=empty_board)
        result = state.run(_random_players())
        assert result == GameResult(WHITE, "no_pieces")
        assert state.turn_number == 1

    def test_on_turn_called_per_turn(self, make_state):
        state = make_state(seed=3)
        seen = []
        state.run(_random_players(), on_turn=lambda s, rec: seen.append(rec), max_turns=6)
        assert len(seen) == 6
        assert [rec.player for rec in seen] == [WHITE, BLACK] * 3

    @pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
    def test_invariants_hold_through_random_play(self, make_state, seed):
        state = make_state(seed=seed)
        last_counts = count_pieces(state.board)

        def check(s, _rec):
            nonlocal last_counts
            for r, row in enumerate(s.board):
                for c, piece in enumerate(row):
                    if piece:
                        assert is_dark(r, c)
            counts = count_pieces(s.board)
            assert counts[WHITE] <= last_counts[WHITE]
            assert counts[BLACK] <= last_counts[BLACK]
            last_counts = counts

        state.run(_random_players(), on_turn=check, max_turns=400)

    def test_every_capture_removes_one_piece(self, make_state):
        state = make_state(seed=11)
        state.run(_random_players(), max_turns=200)
        board = create_initial_board()
        for rec in state.history:
            before = count_pieces(board)
            execute_move(board, Move(rec.fr, rec.to))
            after = count_pieces(board)
            other = BLACK if rec.player == WHITE else WHITE
            assert after[rec.player] == before[rec.player]
            expected_loss = 1 if rec.captured is not None else 0
            assert before[other] - after[other] == expected_loss

    def test_same_seed_same_game(self):
        histories = []
        for _ in range(2):
            state = GameState(rng=random.Random(99))
            state.run(_random_players(), max_turns=100)
            histories.append(list(state.history))
        assert histories[0] == histories[1]

    def test_black_always_has_a_reply_to_opening(self):
        start = create_initial_board()
        for move in legal_moves(start, WHITE):
            board = copy_board(start)
            execute_move(board, move)
            assert legal_moves(board, BLACK)
