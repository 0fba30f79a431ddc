# src/montyhall/strategies/__init__.py
# Strategies package initialization

from .strategy_type import StrategyType
from .strategy_interface import DecisionStrategy
from .strategy_factory import StrategyFactory
from .decision_resolver import change_door

__all__ = ['StrategyType', 'DecisionStrategy', 'StrategyFactory', 'change_door']
