# host_reveal.py
"""
Host behaviour after the initial pick

The host knows where the car is and always opens a goat door that the
contestant did not pick. When the contestant picked the car both remaining
doors hide goats and the host chooses between them at random; otherwise
exactly one door qualifies.
"""
import logging
from typing import Optional

import numpy as np

from src.montyhall.game.game_types import Game, Prize, validate_door, validate_game
from src.montyhall.utils.random_source import resolve_rng

logger = logging.getLogger(__name__)


def open_goat_door(game: Game, pick: int, rng: Optional[np.random.Generator] = None) -> int:
    """
    Open one of the remaining goat doors

    Args:
        game: Current game
        pick: Contestant's initial door
        rng: Generator used only when the host has a choice

    Returns:
        Index of the opened door, never the pick and never the car

    Raises:
        InvalidGameStateError: if the game does not hold exactly one car
        ValueError: if pick is not a valid door index
    """
    validate_game(game)
    validate_door(pick)

    goat_doors = game.goat_doors

    if game[pick] == Prize.CAR:
        opened_door = int(resolve_rng(rng).choice(goat_doors))
        logger.debug(f"Pick {pick} is the car, host chose goat door {opened_door} from {goat_doors}")
    else:
        opened_door = next(door for door in goat_doors if door != pick)
        logger.debug(f"Pick {pick} is a goat, host must open door {opened_door}")

    return opened_door
