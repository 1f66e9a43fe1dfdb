"""
Configuration for Othello minimax search.
"""


# Board Configuration
GAME_CONFIG = {
    'board_size': 8,                    # Standard 8x8 Othello board
}

# Search Configuration
SEARCH_CONFIG = {
    'depth_limit': 7,                   # Plies searched below the root move
    'use_alpha_beta': True,             # False = plain minimax (same values, more nodes)
    'material_weight': 10,              # Token difference multiplier in leaf evaluation
}

# Static positional weights per square tier
POSITIONAL_WEIGHTS = {
    'corner': 10,                       # Can never be flipped
    'near_corner': -5,                  # Edge squares next to a corner (C-squares)
    'second_ring': -3,                  # Ring one step inside the border (n >= 6 only)
    'edge': 5,                          # Remaining border squares
    'center': 1,                        # Interior, neutral baseline
}

# Match driver defaults (scripts/play_othello.py)
MATCH_CONFIG = {
    'num_games': 10,
    'depth_limit': 3,                   # Shallow so a full match finishes in seconds
    'seed': 0,
}
