"""Toolbridge - a chat-channel bridge to a tool-calling language model.

Listens on a Slack channel, forwards user text to the model, runs the
capability functions the model asks for, and posts the final reply back.
"""

from toolbridge.version import __version__

__all__ = [
    "__version__",
    "bridge",
    "channels",
    "cli",
    "config",
    "conversation",
    "llm",
    "session",
    "tools",
]
