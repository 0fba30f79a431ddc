# strategy_interface.py
# Protocol-based interface for contestant decision strategies

from typing import Protocol

from src.montyhall.strategies.strategy_type import StrategyType


class DecisionStrategy(Protocol):
    """Protocol defining how a final door is derived from the opened door and the initial pick"""

    name: str

    def get_strategy_type(self) -> StrategyType:
        """Return strategy type identifier"""
        ...

    def final_pick(self, opened_door: int, initial_pick: int) -> int:
        """Return the door the contestant ends up with"""
        ...
