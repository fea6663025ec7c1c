"""Slack Web API adapter for outbound messages."""

import asyncio
import logging
from typing import Any

import requests

from toolbridge.channels.base import ChannelError

logger = logging.getLogger(__name__)

# Request timeout in seconds
REQUEST_TIMEOUT = 15


class SlackChannel:
    """Posts plain-text messages to one channel of one workspace."""

    def __init__(
        self,
        workspace: str,
        channel: str,
        token: str | None,
        api_url: str = "https://slack.com/api",
    ):
        self.workspace = workspace
        self.channel = channel
        self.token = token
        self.api_url = api_url.rstrip("/")

    def post_message(self, text: str) -> dict[str, Any]:
        """Blocking ``chat.postMessage`` call."""
        if not self.token:
            raise ChannelError("Slack bot token is not configured")

        try:
            response = requests.post(
                f"{self.api_url}/chat.postMessage",
                headers={"Authorization": f"Bearer {self.token}"},
                json={"channel": self.channel, "text": text},
                timeout=REQUEST_TIMEOUT,
            )
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            raise ChannelError(f"Slack request failed: {e}") from e
        except ValueError as e:
            raise ChannelError(f"Slack returned invalid JSON: {e}") from e

        if not data.get("ok"):
            raise ChannelError(f"Slack rejected message: {data.get('error', 'unknown error')}")
        return data

    async def send(self, text: str) -> None:
        logger.debug(f"Sending {len(text)} chars to {self.workspace}/{self.channel}")
        await asyncio.to_thread(self.post_message, text)
