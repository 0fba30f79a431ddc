# game_setup.py
from typing import Optional

import numpy as np

from src.montyhall.game.game_types import Game, Prize
from src.montyhall.utils.random_source import resolve_rng

# Multiset shuffled into every new game
PRIZES = (Prize.GOAT, Prize.GOAT, Prize.CAR)


def create_game(rng: Optional[np.random.Generator] = None) -> Game:
    """
    Create a new Monty Hall game

    Places two goats and one car behind the three doors in a uniformly random
    order, so every door is equally likely to hide the car.

    Args:
        rng: Generator to draw from, the default generator when None

    Returns:
        Game with its prizes in shuffled order
    """
    order = resolve_rng(rng).permutation(len(PRIZES))
    game = Game(tuple(PRIZES[i] for i in order))
    return game
