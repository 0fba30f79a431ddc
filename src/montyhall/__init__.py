"""
Monty Hall simulation

Plays the three-door game repeatedly and compares the stay and switch
strategies on identical games.
"""
from src.montyhall.game import (
    Game,
    Prize,
    Outcome,
    InvalidGameStateError,
    create_game,
    select_door,
    open_goat_door,
    determine_winner
)
from src.montyhall.strategies import StrategyType, change_door
from src.montyhall.simulation import play_game, play_n_games, summarize_results

__all__ = [
    'Game',
    'Prize',
    'Outcome',
    'InvalidGameStateError',
    'create_game',
    'select_door',
    'open_goat_door',
    'determine_winner',
    'StrategyType',
    'change_door',
    'play_game',
    'play_n_games',
    'summarize_results'
]
