"""Game package - door setup, contestant pick, host reveal and outcome"""
from .game_types import DOORS, Game, Prize, Outcome, InvalidGameStateError, validate_game, validate_door
from .game_setup import create_game
from .door_selector import select_door
from .host_reveal import open_goat_door
from .outcome_evaluator import determine_winner

__all__ = [
    'DOORS',
    'Game',
    'Prize',
    'Outcome',
    'InvalidGameStateError',
    'validate_game',
    'validate_door',
    'create_game',
    'select_door',
    'open_goat_door',
    'determine_winner'
]
