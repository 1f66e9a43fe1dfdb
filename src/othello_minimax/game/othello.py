from dataclasses import dataclass

import numpy as np

from othello_minimax.game.game import Game, Square


EMPTY = 0
PLAYER_1 = 1
PLAYER_2 = 2

# (d_row, d_col) for the 8 lines a placed token can bracket
DIRECTIONS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


@dataclass(frozen=True, eq=False)
class OthelloState:
    """
    Immutable snapshot of an Othello position.

    The board array is made read-only on construction; every move produces a
    fresh state through Othello.apply_move.
    """
    board: np.ndarray
    player_in_turn: int

    def __post_init__(self):
        self.board.setflags(write=False)


class Othello(Game):
    """
    Othello (Reversi) game implementation.

    Board: n x n (n even, default 8), cells EMPTY / PLAYER_1 / PLAYER_2
    Actions: Square(row, col) that brackets at least one opponent run
    Pass: handled inside apply_move - if the opponent has no reply but the
          mover does, the mover keeps the turn
    End: neither player can move
    """

    def __init__(self, board_size=8):
        if board_size < 4 or board_size % 2 != 0:
            raise ValueError(f"Board size must be an even number >= 4, got {board_size}")
        self.board_size = board_size

    def __repr__(self):
        return f"Othello({self.board_size}x{self.board_size})"

    def get_initial_state(self):
        """
        Returns the standard starting position with player 1 to move.

        Returns:
            OthelloState with the four center tokens placed
        """
        n = self.board_size
        m = n // 2
        board = np.zeros((n, n), dtype=np.int8)
        board[m - 1, m - 1] = PLAYER_2
        board[m, m] = PLAYER_2
        board[m - 1, m] = PLAYER_1
        board[m, m - 1] = PLAYER_1
        return OthelloState(board, PLAYER_1)

    def make_state(self, board, player=PLAYER_1):
        """
        Wrap an arbitrary grid as a state (used for setting up positions).

        Args:
            board: Array-like of shape (n, n) with values in {0, 1, 2}
            player: Player to move

        Returns:
            OthelloState owning a private int8 copy of the grid
        """
        board = np.array(board, dtype=np.int8)
        if board.shape != (self.board_size, self.board_size):
            raise ValueError(
                f"Expected a {self.board_size}x{self.board_size} board, got shape {board.shape}"
            )
        if not np.isin(board, (EMPTY, PLAYER_1, PLAYER_2)).all():
            raise ValueError("Board cells must be 0, 1 or 2")
        if player not in (PLAYER_1, PLAYER_2):
            raise ValueError(f"Unknown player {player}")
        return OthelloState(board, player)

    def _flips(self, board, row, col, player):
        """
        Squares that would be flipped if player placed a token at (row, col).

        Returns an empty list when the square is occupied or brackets nothing,
        i.e. when the move is illegal.
        """
        if board[row, col] != EMPTY:
            return []

        n = self.board_size
        opponent = self.get_opponent(player)
        flipped = []
        for d_row, d_col in DIRECTIONS:
            run = []
            r, c = row + d_row, col + d_col
            while 0 <= r < n and 0 <= c < n and board[r, c] == opponent:
                run.append((r, c))
                r += d_row
                c += d_col
            # A run only flips when closed by one of the player's own tokens
            if run and 0 <= r < n and 0 <= c < n and board[r, c] == player:
                flipped.extend(run)
        return flipped

    def _has_legal_move(self, board, player):
        n = self.board_size
        for row in range(n):
            for col in range(n):
                if self._flips(board, row, col, player):
                    return True
        return False

    def legal_moves(self, state):
        """
        Legal squares for the player to move, in row-major order.

        Args:
            state: Current OthelloState

        Returns:
            List of Square; empty if the player to move cannot play
        """
        board = state.board
        player = state.player_in_turn
        n = self.board_size
        return [
            Square(row, col)
            for row in range(n)
            for col in range(n)
            if self._flips(board, row, col, player)
        ]

    def apply_move(self, state, square):
        """
        Play square for the player to move and resolve captures.

        Args:
            state: Current OthelloState (not modified)
            square: Square(row, col) to place on

        Returns:
            New OthelloState with the turn handed over (or kept on a forced pass)
        """
        row, col = square
        n = self.board_size
        player = state.player_in_turn
        if not (0 <= row < n and 0 <= col < n):
            raise ValueError(f"Square {tuple(square)} is off the {n}x{n} board")

        flipped = self._flips(state.board, row, col, player)
        if not flipped:
            raise ValueError(f"Illegal move {tuple(square)} for player {player}")

        board = state.board.copy()
        board[row, col] = player
        for r, c in flipped:
            board[r, c] = player

        opponent = self.get_opponent(player)
        if self._has_legal_move(board, opponent):
            next_player = opponent
        elif self._has_legal_move(board, player):
            # Opponent must pass
            next_player = player
        else:
            # Game over, turn value no longer matters
            next_player = opponent
        return OthelloState(board, next_player)

    def is_terminal(self, state):
        return not (
            self._has_legal_move(state.board, PLAYER_1)
            or self._has_legal_move(state.board, PLAYER_2)
        )

    def token_counts(self, state):
        board = state.board
        return int(np.count_nonzero(board == PLAYER_1)), int(np.count_nonzero(board == PLAYER_2))

    def player_to_move(self, state):
        return state.player_in_turn

    def board(self, state):
        return state.board

    def get_opponent(self, player):
        return PLAYER_2 if player == PLAYER_1 else PLAYER_1

    def winner(self, state):
        """
        Returns None while the game is running, 0 for a draw, else the winning player.
        """
        if not self.is_terminal(state):
            return None
        p1, p2 = self.token_counts(state)
        if p1 == p2:
            return 0
        return PLAYER_1 if p1 > p2 else PLAYER_2
