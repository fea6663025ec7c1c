"""
Shared dependencies: the session store and the process-wide Bridge.

Both are singletons so every inbound message sees the same conversation
log and session flag.
"""

from functools import lru_cache

from toolbridge.bridge.dispatcher import ToolDispatcher
from toolbridge.bridge.handler import Bridge
from toolbridge.channels.base import Channel
from toolbridge.channels.slack import SlackChannel
from toolbridge.config import Settings, get_settings
from toolbridge.conversation.state import ConversationState
from toolbridge.llm.client import chat_completion
from toolbridge.session.flag import SessionFlag
from toolbridge.session.store import SessionStore, create_session_store
from toolbridge.tools import create_default_registry


@lru_cache(maxsize=1)
def get_session_store() -> SessionStore:
    """Get the singleton session store selected by config."""
    return create_session_store(get_settings())


def build_bridge(channel: Channel, settings: Settings | None = None) -> Bridge:
    """Wire a Bridge around ``channel`` with a fresh conversation log."""
    s = settings or get_settings()
    flag = SessionFlag(get_session_store())
    dispatcher = ToolDispatcher(
        chat_completion,
        create_default_registry(),
        flag,
        model=s.ollama_model,
        max_tokens=s.max_tokens,
    )
    return Bridge(
        state=ConversationState(s.system_prompt),
        flag=flag,
        dispatcher=dispatcher,
        channel=channel,
        trigger_word=s.trigger_word,
    )


@lru_cache(maxsize=1)
def get_bridge() -> Bridge:
    """
    Get the singleton Slack bridge.

    Uses lru_cache to ensure only one conversation log exists per process.
    """
    s = get_settings()
    channel = SlackChannel(
        workspace=s.slack_workspace,
        channel=s.slack_channel,
        token=s.slack_bot_token,
        api_url=s.slack_api_url,
    )
    return build_bridge(channel, s)
