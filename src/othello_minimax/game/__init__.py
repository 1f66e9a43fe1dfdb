# Game module

from .game import Game, Square
from .othello import Othello, OthelloState, EMPTY, PLAYER_1, PLAYER_2

__all__ = ['Game', 'Square', 'Othello', 'OthelloState', 'EMPTY', 'PLAYER_1', 'PLAYER_2']
