"""
Dice and greeting resolvers
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...dice import DiceRoller, InvalidArgument
from ...logging import get_logger

if TYPE_CHECKING:
    from ..types.die import RandomDie

logger = get_logger(__name__)


def get_dice_roller(info: strawberry.Info) -> DiceRoller:
    """Get the dice roller injected into the GraphQL context."""
    return info.context["dice"]


def resolve_hello(info: strawberry.Info) -> str:
    return get_dice_roller(info).hello()


def resolve_quote_of_the_day(info: strawberry.Info) -> str:
    return get_dice_roller(info).quote_of_the_day()


def resolve_random(info: strawberry.Info) -> float:
    return get_dice_roller(info).random_fraction()


def resolve_roll_three_dice(info: strawberry.Info) -> list[int]:
    return get_dice_roller(info).roll_three_dice()


def resolve_roll_dice(info: strawberry.Info, num_dice: int, num_sides: int | None) -> list[int]:
    try:
        return get_dice_roller(info).roll_dice(num_dice, num_sides)
    except InvalidArgument as e:
        logger.warning("Rejected dice roll", num_dice=num_dice, num_sides=num_sides, error=str(e))
        raise


def resolve_die(info: strawberry.Info, num_sides: int | None) -> RandomDie:
    from ..types.die import RandomDie

    try:
        die = get_dice_roller(info).get_die(num_sides)
    except InvalidArgument as e:
        logger.warning("Rejected die", num_sides=num_sides, error=str(e))
        raise

    return RandomDie.from_die(die)


def resolve_die_roll_once(die: RandomDie, info: strawberry.Info) -> int:
    _ = info
    return die.die.roll_once()


def resolve_die_roll(die: RandomDie, info: strawberry.Info, num_rolls: int) -> list[int]:
    _ = info
    try:
        return die.die.roll(num_rolls)
    except InvalidArgument as e:
        logger.warning(
            "Rejected die roll", num_sides=die.num_sides, num_rolls=num_rolls, error=str(e)
        )
        raise
