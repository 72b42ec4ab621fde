"""In-memory message store."""

import secrets
import threading
from collections.abc import Callable
from dataclasses import dataclass, replace

from ..logging import get_logger

logger = get_logger(__name__)

# 10 random bytes, rendered as 20 hex characters
ID_BYTES = 10


@dataclass
class Message:
    """A stored message."""

    id: str
    content: str | None = None
    author: str | None = None


class MessageStoreException(Exception):
    """Base exception for message store operations."""

    pass


class MessageNotFound(MessageStoreException):
    """No message is stored under the requested id."""

    def __init__(self, message_id: str):
        self.message_id = message_id
        super().__init__(f"No message with that id: {message_id}")


def generate_message_id() -> str:
    """Generate a random message id from a cryptographically strong source."""
    return secrets.token_hex(ID_BYTES)


class MessageStore:
    """Process-lifetime mapping from message id to message.

    Every operation runs under one lock, so the existence check and the
    write that follows it are atomic. Callers always receive copies.
    """

    def __init__(self, id_factory: Callable[[], str] = generate_message_id):
        self._id_factory = id_factory
        self._messages: dict[str, Message] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)

    def __contains__(self, message_id: object) -> bool:
        with self._lock:
            return message_id in self._messages

    def get(self, message_id: str) -> Message:
        """Return the message stored under ``message_id``.

        Raises:
            MessageNotFound: If the id is absent
        """
        with self._lock:
            stored = self._messages.get(message_id)
            if stored is None:
                raise MessageNotFound(message_id)
            return replace(stored)

    def create(self, content: str | None = None, author: str | None = None) -> Message:
        """Store a new message under a freshly generated id and return it."""
        with self._lock:
            message_id = self._id_factory()
            while message_id in self._messages:
                logger.warning("Generated message id collided, retrying", message_id=message_id)
                message_id = self._id_factory()

            stored = Message(id=message_id, content=content, author=author)
            self._messages[message_id] = stored
            return replace(stored)

    def update(
        self, message_id: str, content: str | None = None, author: str | None = None
    ) -> Message:
        """Replace the content and author of an existing message.

        Both fields are replaced; a field not supplied becomes ``None``.

        Raises:
            MessageNotFound: If the id is absent (the store is left unchanged)
        """
        with self._lock:
            if message_id not in self._messages:
                raise MessageNotFound(message_id)

            stored = Message(id=message_id, content=content, author=author)
            self._messages[message_id] = stored
            return replace(stored)
