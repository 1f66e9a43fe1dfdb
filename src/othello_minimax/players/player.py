from typing import Protocol

from othello_minimax.game.game import Square


class Player(Protocol):
    """Anything that can pick a move for the player to move in a state."""

    def decide_move(self, state) -> Square:
        ...
