"""Dice rolling and the other random-valued query fields.

A single ``DiceRoller`` is created per application and shared by every
request, so all draws come from one process-wide pseudo-random source.
"""

import random
from dataclasses import dataclass

DEFAULT_SIDES = 6

GREETING = "Hello world!"
QUOTES = ("Take it easy", "Salvation lies within")


class InvalidArgument(ValueError):
    """Raised when a side count or roll count is out of range."""

    pass


def _check_sides(sides: int) -> None:
    if sides < 1:
        raise InvalidArgument(f"Number of sides must be at least 1, got {sides}")


def _check_count(count: int, name: str) -> None:
    if count < 0:
        raise InvalidArgument(f"{name} must not be negative, got {count}")


@dataclass(frozen=True)
class RandomDie:
    """A die with a fixed number of sides, rolled with its roller's source."""

    num_sides: int
    roller: "DiceRoller"

    def roll_once(self) -> int:
        return self.roller.roll_once(self.num_sides)

    def roll(self, num_rolls: int) -> list[int]:
        return self.roller.roll(self.num_sides, num_rolls)


class DiceRoller:
    """Random-valued operations backed by one ``random.Random`` instance."""

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng if rng is not None else random.Random()

    def hello(self) -> str:
        return GREETING

    def roll_once(self, sides: int) -> int:
        """Return a uniformly random integer in ``[1, sides]``.

        Raises:
            InvalidArgument: If ``sides`` is less than 1
        """
        _check_sides(sides)
        return self._rng.randint(1, sides)

    def roll(self, sides: int, num_rolls: int) -> list[int]:
        """Roll a ``sides``-sided die ``num_rolls`` times, in roll order.

        Raises:
            InvalidArgument: If ``sides`` is less than 1 or ``num_rolls`` is negative
        """
        _check_sides(sides)
        _check_count(num_rolls, "Number of rolls")
        return [self._rng.randint(1, sides) for _ in range(num_rolls)]

    def roll_dice(self, num_dice: int, num_sides: int | None = None) -> list[int]:
        """Roll ``num_dice`` dice; zero or missing ``num_sides`` means six-sided."""
        _check_count(num_dice, "Number of dice")
        return self.roll(num_sides or DEFAULT_SIDES, num_dice)

    def roll_three_dice(self) -> list[int]:
        return self.roll(DEFAULT_SIDES, 3)

    def quote_of_the_day(self) -> str:
        return QUOTES[0] if self._rng.random() < 0.5 else QUOTES[1]

    def random_fraction(self) -> float:
        """Return a uniform float in ``[0, 1)``."""
        return self._rng.random()

    def get_die(self, num_sides: int | None = None) -> RandomDie:
        """Build a die; zero or missing ``num_sides`` means six-sided.

        Raises:
            InvalidArgument: If ``num_sides`` is negative
        """
        sides = num_sides or DEFAULT_SIDES
        _check_sides(sides)
        return RandomDie(num_sides=sides, roller=self)
