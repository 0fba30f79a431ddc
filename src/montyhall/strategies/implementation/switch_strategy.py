# switch_strategy.py
from src.montyhall.game.game_types import DOORS, validate_door
from src.montyhall.strategies.strategy_type import StrategyType


class SwitchStrategy:
    """Move to the only door that is neither opened nor initially picked"""

    def __init__(self, name: str = StrategyType.SWITCH.value):
        self.name = name

    def get_strategy_type(self) -> StrategyType:
        return StrategyType.SWITCH

    def final_pick(self, opened_door: int, initial_pick: int) -> int:
        """
        Args:
            opened_door: Door revealed by the host
            initial_pick: Contestant's first choice

        Raises:
            ValueError: if either door is invalid or both are the same door,
                in which case no unique remaining door exists
        """
        validate_door(opened_door)
        validate_door(initial_pick)

        remaining = [door for door in DOORS if door != opened_door and door != initial_pick]
        if len(remaining) != 1:
            raise ValueError(
                f"Opened door {opened_door} must differ from initial pick {initial_pick} to switch"
            )
        return remaining[0]
