"""Potion recipes expressed as magimint ratios."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class PotionKind(IntEnum):
    """Family a potion belongs to."""

    POTION = 0
    TONIC = 1
    ENHANCER = 2
    CURE = 3


@dataclass(frozen=True)
class Potion:
    """A potion and its required magimint ratio (A to E)."""

    magimints: tuple[int, int, int, int, int]
    kind: PotionKind
    name: str

    def magimint_unit(self) -> int:
        """Sum of the ratio; every valid magimint total is a multiple of it."""
        return sum(self.magimints)

    def last_magimint_index(self) -> int:
        """Index of the last non-zero magimint in the ratio."""
        for index in range(len(self.magimints) - 1, 0, -1):
            if self.magimints[index]:
                return index
        return 0


_K = PotionKind

POTIONS: tuple[Potion, ...] = (
    Potion((1, 1, 0, 0, 0), _K.POTION, "Health"),
    Potion((0, 1, 1, 0, 0), _K.POTION, "Mana"),
    Potion((1, 0, 0, 0, 1), _K.POTION, "Stamina"),
    Potion((0, 0, 1, 1, 0), _K.POTION, "Speed"),
    Potion((0, 0, 0, 1, 1), _K.POTION, "Tolerance"),
    Potion((1, 0, 1, 0, 0), _K.TONIC, "Fire"),
    Potion((1, 0, 0, 1, 0), _K.TONIC, "Ice"),
    Potion((0, 1, 0, 1, 0), _K.TONIC, "Thunder"),
    Potion((0, 1, 0, 0, 1), _K.TONIC, "Shadow"),
    Potion((0, 0, 1, 0, 1), _K.TONIC, "Radiation"),
    Potion((3, 4, 3, 0, 0), _K.ENHANCER, "Sight"),
    Potion((0, 3, 4, 3, 0), _K.ENHANCER, "Alertness"),
    Potion((4, 3, 0, 0, 3), _K.ENHANCER, "Insight"),
    Potion((3, 0, 0, 3, 4), _K.ENHANCER, "Dowsing"),
    Potion((0, 0, 3, 4, 3), _K.ENHANCER, "Seeking"),
    Potion((2, 0, 1, 1, 0), _K.CURE, "Poison"),
    Potion((1, 1, 0, 2, 0), _K.CURE, "Drowsiness"),
    Potion((1, 0, 2, 0, 1), _K.CURE, "Petrification"),
    Potion((0, 2, 1, 0, 1), _K.CURE, "Silence"),
    Potion((0, 1, 1, 0, 2), _K.CURE, "Curse"),
)

_BY_NAME = {potion.name: potion for potion in POTIONS}


def potion_by_name(name: str) -> Potion:
    """Return the potion with this exact name."""
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(f"unknown potion: {name!r}") from None