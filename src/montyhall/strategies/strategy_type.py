# strategy_type.py
from enum import Enum


class StrategyType(Enum):
    """
    Contestant's policy for the final choice
    Usage: StrategyType.SWITCH.value  # returns "switch"
    """
    STAY = "stay"
    SWITCH = "switch"
