# decision_resolver.py
from typing import Optional

from src.montyhall.strategies.strategy_factory import StrategyFactory
from src.montyhall.strategies.strategy_type import StrategyType

_DEFAULT_FACTORY = StrategyFactory()


def change_door(stay: bool, opened_door: int, pick: int,
                factory: Optional[StrategyFactory] = None) -> int:
    """
    Final door after the host's reveal

    Args:
        stay: True to keep the initial pick, False to switch
        opened_door: Door opened by the host
        pick: Contestant's initial pick
        factory: Source of the stay and switch strategies, the module default when None

    Returns:
        The pick itself when staying, otherwise the one remaining closed door
    """
    factory = factory or _DEFAULT_FACTORY
    strategy = factory.create_strategy(StrategyType.STAY if stay else StrategyType.SWITCH)
    return strategy.final_pick(opened_door, pick)
