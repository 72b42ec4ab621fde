"""
RandomDie GraphQL type definitions
"""

import strawberry

from ...dice import RandomDie as Die


@strawberry.type
class RandomDie:
    """A die with a fixed number of sides; each field read rolls it again."""

    num_sides: int
    die: strawberry.Private[Die]

    @classmethod
    def from_die(cls, die: Die) -> "RandomDie":
        return cls(num_sides=die.num_sides, die=die)

    @strawberry.field
    def roll_once(self, info: strawberry.Info) -> int:
        """Roll the die once."""
        from ..resolvers.dice import resolve_die_roll_once

        return resolve_die_roll_once(self, info)

    @strawberry.field
    def roll(self, info: strawberry.Info, num_rolls: int) -> list[int | None] | None:
        """Roll the die several times, in roll order."""
        from ..resolvers.dice import resolve_die_roll

        return resolve_die_roll(self, info, num_rolls)
