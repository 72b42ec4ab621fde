"""Message store for dicegraph.

The store stands in for a database: an in-process mapping from generated
ids to messages, created once per application and never persisted.
"""

from .base import (
    Message,
    MessageNotFound,
    MessageStore,
    MessageStoreException,
    generate_message_id,
)

__all__ = [
    "Message",
    "MessageStore",
    "MessageStoreException",
    "MessageNotFound",
    "generate_message_id",
]
