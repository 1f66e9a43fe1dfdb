"""
Unit tests for the Othello game state.

Tests verify:
1. Starting position and legal move enumeration
2. Captures flip bracketed runs without mutating the input state
3. Pass handling and terminal detection
4. Input validation
"""

import numpy as np
import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from othello_minimax.game.game import Square
from othello_minimax.game.othello import Othello, EMPTY, PLAYER_1, PLAYER_2


def pass_position(game):
    """
    P1 to move with two options, P2 unable to ever reply after (0, 2).

    Row 0: P1 P2 .
    Row 7: P1 P1 P1 P1 P1 P1 P2 .
    """
    board = np.zeros((8, 8), dtype=np.int8)
    board[0, 0] = PLAYER_1
    board[0, 1] = PLAYER_2
    board[7, 0:6] = PLAYER_1
    board[7, 6] = PLAYER_2
    return game.make_state(board, PLAYER_1)


class TestSetup:
    """Initial state and construction."""

    def test_initial_state(self):
        game = Othello()
        state = game.get_initial_state()

        assert state.board.shape == (8, 8)
        assert game.player_to_move(state) == PLAYER_1
        assert game.token_counts(state) == (2, 2)
        assert state.board[3, 3] == PLAYER_2
        assert state.board[4, 4] == PLAYER_2
        assert state.board[3, 4] == PLAYER_1
        assert state.board[4, 3] == PLAYER_1

    def test_initial_legal_moves_row_major(self):
        game = Othello()
        state = game.get_initial_state()
        assert game.legal_moves(state) == [
            Square(2, 3), Square(3, 2), Square(4, 5), Square(5, 4)
        ]

    def test_small_board(self):
        game = Othello(board_size=4)
        state = game.get_initial_state()
        assert game.token_counts(state) == (2, 2)
        assert len(game.legal_moves(state)) == 4

    @pytest.mark.parametrize("n", [2, 3, 5, 7])
    def test_rejects_bad_sizes(self, n):
        with pytest.raises(ValueError):
            Othello(board_size=n)

    def test_make_state_validates(self):
        game = Othello()
        with pytest.raises(ValueError):
            game.make_state(np.zeros((6, 6)), PLAYER_1)
        with pytest.raises(ValueError):
            game.make_state(np.full((8, 8), 3), PLAYER_1)
        with pytest.raises(ValueError):
            game.make_state(np.zeros((8, 8)), 3)

    def test_state_board_is_read_only(self):
        game = Othello()
        state = game.get_initial_state()
        with pytest.raises(ValueError):
            state.board[0, 0] = PLAYER_1


class TestMoves:
    """Move application and captures."""

    def test_apply_flips_and_hands_over_turn(self):
        game = Othello()
        state = game.get_initial_state()

        next_state = game.apply_move(state, Square(2, 3))

        assert next_state.board[2, 3] == PLAYER_1
        assert next_state.board[3, 3] == PLAYER_1
        assert game.token_counts(next_state) == (4, 1)
        assert game.player_to_move(next_state) == PLAYER_2

    def test_apply_does_not_mutate_input(self):
        game = Othello()
        state = game.get_initial_state()
        before = state.board.copy()

        game.apply_move(state, Square(2, 3))

        np.testing.assert_array_equal(state.board, before)
        assert game.player_to_move(state) == PLAYER_1

    def test_flips_multiple_directions(self):
        game = Othello()
        board = np.zeros((8, 8), dtype=np.int8)
        # P1 at (3, 3) closes a vertical, a horizontal and a diagonal run
        board[0, 3] = PLAYER_1
        board[1, 3] = PLAYER_2
        board[2, 3] = PLAYER_2
        board[3, 0] = PLAYER_1
        board[3, 1] = PLAYER_2
        board[3, 2] = PLAYER_2
        board[1, 1] = PLAYER_1
        board[2, 2] = PLAYER_2
        # Open run, must not flip
        board[3, 4] = PLAYER_2
        state = game.make_state(board, PLAYER_1)

        next_state = game.apply_move(state, Square(3, 3))

        for square in [(1, 3), (2, 3), (3, 1), (3, 2), (2, 2)]:
            assert next_state.board[square] == PLAYER_1
        assert next_state.board[3, 4] == PLAYER_2
        assert game.token_counts(next_state) == (9, 1)

    def test_illegal_moves_raise(self):
        game = Othello()
        state = game.get_initial_state()
        with pytest.raises(ValueError):
            game.apply_move(state, Square(0, 0))   # brackets nothing
        with pytest.raises(ValueError):
            game.apply_move(state, Square(3, 3))   # occupied
        with pytest.raises(ValueError):
            game.apply_move(state, Square(8, 0))   # off board

    def test_player_two_moves(self):
        game = Othello()
        state = game.apply_move(game.get_initial_state(), Square(2, 3))
        moves = game.legal_moves(state)
        assert moves == [Square(2, 2), Square(2, 4), Square(4, 2)]


class TestPassAndTerminal:
    """Pass handling, terminal detection and winner."""

    def test_opponent_without_reply_passes(self):
        game = Othello()
        state = pass_position(game)
        assert game.legal_moves(state) == [Square(0, 2), Square(7, 7)]

        next_state = game.apply_move(state, Square(0, 2))

        assert not game.is_terminal(next_state)
        assert game.player_to_move(next_state) == PLAYER_1
        assert game.legal_moves(next_state) == [Square(7, 7)]

    def test_game_ends_when_nobody_can_move(self):
        game = Othello()
        state = game.apply_move(pass_position(game), Square(0, 2))
        final = game.apply_move(state, Square(7, 7))

        assert game.is_terminal(final)
        assert game.token_counts(final) == (11, 0)
        assert game.winner(final) == PLAYER_1

    def test_winner_none_while_running(self):
        game = Othello()
        assert game.winner(game.get_initial_state()) is None

    def test_draw(self):
        game = Othello(board_size=4)
        board = np.array([
            [1, 1, 2, 2],
            [1, 1, 2, 2],
            [1, 1, 2, 2],
            [1, 1, 2, 2],
        ])
        state = game.make_state(board, PLAYER_1)
        assert game.is_terminal(state)
        assert game.winner(state) == 0

    def test_no_moves_for_player_to_move(self):
        game = Othello()
        state = game.make_state(pass_position(game).board, PLAYER_2)
        assert game.legal_moves(state) == []
        assert not game.is_terminal(state)

    def test_empty_board_is_terminal(self):
        game = Othello()
        state = game.make_state(np.full((8, 8), EMPTY), PLAYER_1)
        assert game.is_terminal(state)
