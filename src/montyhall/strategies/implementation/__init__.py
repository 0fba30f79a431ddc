# Strategy implementations package initialization

from .stay_strategy import StayStrategy
from .switch_strategy import SwitchStrategy


__all__ = ['StayStrategy', 'SwitchStrategy']
