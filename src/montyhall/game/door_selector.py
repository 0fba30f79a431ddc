# door_selector.py
from typing import Optional

import numpy as np

from src.montyhall.game.game_types import DOORS
from src.montyhall.utils.random_source import resolve_rng


def select_door(rng: Optional[np.random.Generator] = None) -> int:
    """Contestant's blind initial pick, uniform over the three doors"""
    return int(resolve_rng(rng).choice(DOORS))
