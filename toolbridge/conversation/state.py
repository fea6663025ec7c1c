"""Process-wide conversation log.

The log always starts with exactly one system message and only grows.
Callers hold ``exclusive()`` for a whole inbound-message cycle, which
serializes concurrent messages into one-at-a-time handling.
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from toolbridge.conversation.models import ChatMessage, SystemMessage

logger = logging.getLogger(__name__)


class ConversationState:
    """Ordered chat turns shared by every inbound message."""

    def __init__(self, system_prompt: str):
        self._messages: list[ChatMessage] = [SystemMessage(content=system_prompt)]
        self._lock = asyncio.Lock()

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        """Read-only snapshot of the log."""
        return tuple(self._messages)

    @property
    def locked(self) -> bool:
        return self._lock.locked()

    def __len__(self) -> int:
        return len(self._messages)

    def append(self, message: ChatMessage) -> None:
        """Add a turn to the end of the log."""
        if isinstance(message, SystemMessage):
            raise ValueError("Conversation already has its system message")
        self._messages.append(message)
        logger.debug(f"Appended {message.role} message ({len(self._messages)} total)")

    def as_payload(self) -> list[dict[str, Any]]:
        """Wire-format messages for the model client."""
        return [message.to_wire() for message in self._messages]

    @asynccontextmanager
    async def exclusive(self) -> AsyncIterator["ConversationState"]:
        """Hold the log for one full handling cycle."""
        async with self._lock:
            yield self
