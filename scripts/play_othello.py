#!/usr/bin/env python3
"""
Play a series of Othello games between the minimax engine and a random player.
Colors alternate every game so both sides get to open.
"""
import argparse
import logging
import sys
from pathlib import Path

from tqdm import tqdm

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from othello_minimax.config_othello import GAME_CONFIG, MATCH_CONFIG
from othello_minimax.game.othello import Othello, PLAYER_1, PLAYER_2, EMPTY
from othello_minimax.players import MinimaxPlayer, Player, RandomPlayer


def print_board(board):
    """Print the Othello board"""
    n = board.shape[0]
    symbols = {EMPTY: '.', PLAYER_1: 'X', PLAYER_2: 'O'}
    print("\n  " + " ".join(str(i) for i in range(n)))
    for row in range(n):
        print(f"{row} " + " ".join(symbols[int(cell)] for cell in board[row]))
    print()


def play_game(game, players: dict[int, Player]):
    """
    Play one game to the end.

    Args:
        game: Othello instance
        players: {PLAYER_1: player, PLAYER_2: player}

    Returns:
        (winner, final_state) - winner is 0 on a draw
    """
    state = game.get_initial_state()
    while not game.is_terminal(state):
        player = players[game.player_to_move(state)]
        move = player.decide_move(state)
        state = game.apply_move(state, move)
    return game.winner(state), state


def main():
    parser = argparse.ArgumentParser(description="Minimax vs random Othello match")
    parser.add_argument('--games', type=int, default=MATCH_CONFIG['num_games'])
    parser.add_argument('--depth', type=int, default=MATCH_CONFIG['depth_limit'])
    parser.add_argument('--board-size', type=int, default=GAME_CONFIG['board_size'])
    parser.add_argument('--seed', type=int, default=MATCH_CONFIG['seed'])
    parser.add_argument('--show-boards', action='store_true', help="Print every final position")
    parser.add_argument('--verbose', action='store_true', help="Log search summaries")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    game = Othello(board_size=args.board_size)
    minimax = MinimaxPlayer(game, depth_limit=args.depth)
    rando = RandomPlayer(game, seed=args.seed)

    print("=" * 60)
    print(f"Othello {args.board_size}x{args.board_size}: {minimax} vs {rando}")
    print("=" * 60)

    tally = {'minimax': 0, 'random': 0, 'draw': 0}
    for game_num in tqdm(range(args.games), desc="Games", ncols=80):
        if game_num % 2 == 0:
            players = {PLAYER_1: minimax, PLAYER_2: rando}
        else:
            players = {PLAYER_1: rando, PLAYER_2: minimax}

        winner, final_state = play_game(game, players)
        if winner == 0:
            tally['draw'] += 1
        elif players[winner] is minimax:
            tally['minimax'] += 1
        else:
            tally['random'] += 1

        if args.show_boards:
            p1, p2 = game.token_counts(final_state)
            print(f"\nGame {game_num + 1}: X={p1} O={p2}")
            print_board(final_state.board)

    print(f"\nMinimax wins: {tally['minimax']}")
    print(f"Random wins:  {tally['random']}")
    print(f"Draws:        {tally['draw']}")


if __name__ == "__main__":
    main()
