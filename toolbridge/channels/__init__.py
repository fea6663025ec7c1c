"""Chat transport adapters."""

from toolbridge.channels.base import Channel, ChannelError
from toolbridge.channels.console import ConsoleChannel
from toolbridge.channels.slack import SlackChannel

__all__ = ["Channel", "ChannelError", "ConsoleChannel", "SlackChannel"]
