# strategy_factory.py
# Factory for creating contestant decision strategies

import logging
from typing import List, Union

from src.montyhall.strategies.strategy_interface import DecisionStrategy
from src.montyhall.strategies.strategy_type import StrategyType
from src.montyhall.strategies.implementation import StayStrategy, SwitchStrategy

logger = logging.getLogger(__name__)


class StrategyFactory:
    """Factory for creating decision strategy instances"""

    def __init__(self):
        self._strategies = {}
        self._register_default_strategies()

    def _register_default_strategies(self):
        """Register default strategy types"""
        self._strategies[StrategyType.STAY.value] = StayStrategy
        self._strategies[StrategyType.SWITCH.value] = SwitchStrategy

    def register_strategy(self, name: str, strategy_class: type):
        """Register a new strategy type"""
        self._strategies[name] = strategy_class
        logger.debug(f"Registered strategy: {name}")

    def get_available_strategies(self) -> List[str]:
        """Get list of available strategy names"""
        return list(self._strategies.keys())

    def create_strategy(self, strategy: Union[StrategyType, str]) -> DecisionStrategy:
        """
        Create a strategy by enum member or registered name

        Raises:
            ValueError: If the strategy is not registered
        """
        name = strategy.value if isinstance(strategy, StrategyType) else strategy

        if name not in self._strategies:
            available = list(self._strategies.keys())
            raise ValueError(f"Unknown strategy: {name}. Available: {available}")

        return self._strategies[name](name=name)
