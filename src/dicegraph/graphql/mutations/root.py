"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.message import Message


@strawberry.input
class MessageInput:
    """Input for creating or replacing a message."""

    content: str | None = strawberry.UNSET
    author: str | None = strawberry.UNSET


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="createMessage")
    def create_message(
        self, info: strawberry.Info, input: MessageInput | None = strawberry.UNSET
    ) -> Message | None:
        """Store a new message under a generated ID."""
        from ..resolvers.message import create_message

        return create_message(info, input)

    @strawberry.mutation(name="updateMessage")
    def update_message(
        self,
        info: strawberry.Info,
        id: strawberry.ID,
        input: MessageInput | None = strawberry.UNSET,
    ) -> Message | None:
        """Replace the content and author of an existing message."""
        from ..resolvers.message import update_message

        return update_message(info, id, input)
