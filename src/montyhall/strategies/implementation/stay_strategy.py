# stay_strategy.py
from src.montyhall.game.game_types import validate_door
from src.montyhall.strategies.strategy_type import StrategyType


class StayStrategy:
    """Keep the initial pick whatever door the host opened"""

    def __init__(self, name: str = StrategyType.STAY.value):
        self.name = name

    def get_strategy_type(self) -> StrategyType:
        return StrategyType.STAY

    def final_pick(self, opened_door: int, initial_pick: int) -> int:
        validate_door(initial_pick)
        return initial_pick
