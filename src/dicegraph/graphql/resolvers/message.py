"""
Message resolvers
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store import MessageNotFound, MessageStore

if TYPE_CHECKING:
    from ..mutations.root import MessageInput
    from ..types.message import Message

logger = get_logger(__name__)


def get_message_store(info: strawberry.Info) -> MessageStore:
    """Get the message store injected into the GraphQL context."""
    return info.context["store"]


def resolve_message_by_id(info: strawberry.Info, id: str) -> Message:
    from ..types.message import Message

    try:
        message = get_message_store(info).get(id)
    except MessageNotFound:
        logger.warning("Message not found", message_id=id)
        raise

    return Message.from_stored(message)


def input_fields(input: MessageInput | None) -> tuple[str | None, str | None]:
    """Content and author of a message input; omitted fields are None."""
    if not input:
        return None, None

    content = None if input.content is strawberry.UNSET else input.content
    author = None if input.author is strawberry.UNSET else input.author
    return content, author


def create_message(info: strawberry.Info, input: MessageInput | None) -> Message:
    from ..types.message import Message

    content, author = input_fields(input)

    message = get_message_store(info).create(content=content, author=author)
    logger.info("Message created", message_id=message.id)

    return Message.from_stored(message)


def update_message(info: strawberry.Info, id: str, input: MessageInput | None) -> Message:
    from ..types.message import Message

    content, author = input_fields(input)

    try:
        message = get_message_store(info).update(id, content=content, author=author)
    except MessageNotFound:
        logger.warning("Cannot update missing message", message_id=id)
        raise

    logger.info("Message updated", message_id=message.id)
    return Message.from_stored(message)
