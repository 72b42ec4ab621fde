"""
Message GraphQL type definitions
"""

import strawberry

from ...store import Message as StoredMessage


@strawberry.type
class Message:
    """Message type for GraphQL API."""

    id: strawberry.ID
    content: str | None
    author: str | None

    @classmethod
    def from_stored(cls, message: StoredMessage) -> "Message":
        return cls(
            id=strawberry.ID(message.id),
            content=message.content,
            author=message.author,
        )
