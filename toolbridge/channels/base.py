from typing import Protocol


class ChannelError(Exception):
    """Exception raised when an outbound message cannot be delivered."""

    pass


class Channel(Protocol):
    """Outbound side of a chat transport."""

    async def send(self, text: str) -> None: ...
