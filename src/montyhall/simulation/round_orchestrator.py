# round_orchestrator.py
"""
One complete round of the game

Both strategies are evaluated against the same game, initial pick and
opened door, so the only difference between the two result rows is the
strategy itself.
"""
import logging
from typing import List, Optional, Tuple

import numpy as np
import pandas as pd

from src.montyhall.game import create_game, select_door, open_goat_door, determine_winner
from src.montyhall.strategies import StrategyFactory, StrategyType, change_door
from src.montyhall.utils.random_source import resolve_rng

logger = logging.getLogger(__name__)

RESULT_COLUMNS = ['strategy', 'outcome']


def play_round(rng: Optional[np.random.Generator] = None,
               factory: Optional[StrategyFactory] = None) -> List[Tuple[str, str]]:
    """Play one round and return (strategy, outcome) records, stay first"""
    rng = resolve_rng(rng)

    game = create_game(rng)
    first_pick = select_door(rng)
    opened_door = open_goat_door(game, first_pick, rng)

    records = []
    for strategy in (StrategyType.STAY, StrategyType.SWITCH):
        final_pick = change_door(strategy == StrategyType.STAY, opened_door, first_pick, factory)
        outcome = determine_winner(final_pick, game)
        records.append((strategy.value, outcome.value))

    logger.debug(f"Round: game={game.labels()} pick={first_pick} opened={opened_door} results={records}")
    return records


def play_game(rng: Optional[np.random.Generator] = None,
              factory: Optional[StrategyFactory] = None) -> pd.DataFrame:
    """
    Play a complete round of the game

    Args:
        rng: Generator for the game, the pick and the host, the default generator when None
        factory: Strategy factory resolving stay and switch, the default factory when None

    Returns:
        Two-row DataFrame with columns strategy and outcome, one row for
        staying and one for switching
    """
    return pd.DataFrame(play_round(rng, factory), columns=RESULT_COLUMNS)
