# src/montyhall/game/game_types.py
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple

import numpy as np

# Door indices are 1-based, matching how a contestant numbers the doors
DOORS = (1, 2, 3)


class Prize(Enum):
    """What stands behind a door"""
    GOAT = "goat"
    CAR = "car"


class Outcome(Enum):
    """Result of a final pick"""
    WIN = "WIN"
    LOSE = "LOSE"


class InvalidGameStateError(RuntimeError):
    """Raised when a game does not hold exactly one car and two goats"""


@dataclass(frozen=True)
class Game:
    """Immutable arrangement of prizes behind the three doors"""
    slots: Tuple[Prize, ...]

    @classmethod
    def from_labels(cls, labels: Iterable[str]) -> 'Game':
        """Build a game from plain labels, e.g. ["car", "goat", "goat"]"""
        return cls(tuple(Prize(label) for label in labels))

    def __getitem__(self, door: int) -> Prize:
        validate_door(door)
        return self.slots[int(door) - 1]

    def __len__(self) -> int:
        return len(self.slots)

    @property
    def car_door(self) -> int:
        validate_game(self)
        return self.slots.index(Prize.CAR) + 1

    @property
    def goat_doors(self) -> Tuple[int, ...]:
        validate_game(self)
        return tuple(door for door in DOORS if self.slots[door - 1] == Prize.GOAT)

    def labels(self) -> Tuple[str, ...]:
        return tuple(slot.value for slot in self.slots)


def validate_door(door) -> None:
    """Reject anything that is not one of the integer door indices 1, 2, 3"""
    if isinstance(door, bool) or not isinstance(door, (int, np.integer)) or door not in DOORS:
        raise ValueError(f"Door index must be one of {DOORS}, got {door!r}")


def validate_game(game: Game) -> None:
    """
    Assert the one-car, two-goat invariant

    Raises:
        InvalidGameStateError: if the game has the wrong size, an unknown slot
            value, or a car count other than one
    """
    slots = game.slots
    if len(slots) != len(DOORS):
        raise InvalidGameStateError(f"Game must have {len(DOORS)} doors, got {len(slots)}")

    unknown = [slot for slot in slots if not isinstance(slot, Prize)]
    if unknown:
        raise InvalidGameStateError(f"Game holds unknown slot values: {unknown}")

    car_count = sum(1 for slot in slots if slot == Prize.CAR)
    if car_count != 1:
        raise InvalidGameStateError(f"Game must hold exactly one car, found {car_count}: {game.labels()}")
