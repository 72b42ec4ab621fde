"""
Root GraphQL query definitions
"""

import strawberry

from ..types.die import RandomDie
from ..types.message import Message


@strawberry.type(name="Query")
class MessageQuery:
    """Root query type of the message schema."""

    @strawberry.field
    def get_message(self, info: strawberry.Info, id: strawberry.ID) -> Message | None:
        """Get a message by ID."""
        from ..resolvers.message import resolve_message_by_id

        return resolve_message_by_id(info, id)


@strawberry.type
class Query(MessageQuery):
    """Root GraphQL query type."""

    @strawberry.field
    def hello(self, info: strawberry.Info) -> str | None:
        """A fixed greeting."""
        from ..resolvers.dice import resolve_hello

        return resolve_hello(info)

    @strawberry.field
    def quote_of_the_day(self, info: strawberry.Info) -> str | None:
        """One of two quotes, picked at random on every call."""
        from ..resolvers.dice import resolve_quote_of_the_day

        return resolve_quote_of_the_day(info)

    @strawberry.field
    def random(self, info: strawberry.Info) -> float:
        """A uniform random number in [0, 1)."""
        from ..resolvers.dice import resolve_random

        return resolve_random(info)

    @strawberry.field
    def roll_three_dice(self, info: strawberry.Info) -> list[int | None] | None:
        """Roll three six-sided dice."""
        from ..resolvers.dice import resolve_roll_three_dice

        return resolve_roll_three_dice(info)

    @strawberry.field
    def roll_dice(
        self, info: strawberry.Info, num_dice: int, num_sides: int | None = strawberry.UNSET
    ) -> list[int | None] | None:
        """Roll several dice with the same number of sides (six by default)."""
        from ..resolvers.dice import resolve_roll_dice

        return resolve_roll_dice(info, num_dice, num_sides or None)

    @strawberry.field
    def get_die(
        self, info: strawberry.Info, num_sides: int | None = strawberry.UNSET
    ) -> RandomDie | None:
        """Get a die that can be rolled through its fields."""
        from ..resolvers.dice import resolve_die

        return resolve_die(info, num_sides or None)
