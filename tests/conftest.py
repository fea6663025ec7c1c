"""Pytest configuration and fixtures."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from toolbridge.conversation.models import (
    AssistantMessage,
    ChatCompletion,
    Choice,
    FinishReason,
    ToolCallIntent,
)


class RecordingChannel:
    """Channel that keeps every outbound message."""

    def __init__(self):
        self.sent: list[str] = []

    async def send(self, text: str) -> None:
        self.sent.append(text)


def reply(content: str | None) -> ChatCompletion:
    """A completion with plain text content."""
    return ChatCompletion(
        model="test-model",
        choices=[Choice(finish_reason=FinishReason.STOP, message=AssistantMessage(content=content))],
    )


def tool_request(*calls: tuple[str, dict | str]) -> ChatCompletion:
    """A completion asking for the given (name, arguments) tool calls."""
    intents = [
        ToolCallIntent(name=name, arguments=args if isinstance(args, str) else json.dumps(args))
        for name, args in calls
    ]
    return ChatCompletion(
        model="test-model",
        choices=[
            Choice(
                finish_reason=FinishReason.TOOL_CALLS,
                message=AssistantMessage(content="", tool_calls=intents),
            )
        ],
    )


@pytest.fixture
def store():
    from toolbridge.session.store import MemorySessionStore

    return MemorySessionStore()


@pytest.fixture
def flag(store):
    from toolbridge.session.flag import SessionFlag

    return SessionFlag(store)


@pytest.fixture
def state():
    from toolbridge.conversation.state import ConversationState

    return ConversationState("Perform function requests for the user")


@pytest.fixture
def tool_handlers():
    """Mocked capability functions keyed by tool name."""
    return {
        "getWeather": MagicMock(return_value="\nToday in Rome\nClear"),
        "scraper": AsyncMock(return_value="page text"),
        "getTimeOfDay": MagicMock(return_value="2026-10-19T12:00:00+00:00"),
    }


@pytest.fixture
def registry(tool_handlers):
    """A registry with the real descriptors and mocked handlers."""
    from toolbridge.tools.registry import TOOL_DESCRIPTORS, ToolRegistry

    registry = ToolRegistry()
    for descriptor in TOOL_DESCRIPTORS:
        registry.register(descriptor, tool_handlers[descriptor.name])
    return registry


@pytest.fixture
def complete():
    """Mock model round-trip; set side_effect per test."""
    return AsyncMock()


@pytest.fixture
def dispatcher(complete, registry, flag):
    from toolbridge.bridge.dispatcher import ToolDispatcher

    return ToolDispatcher(complete, registry, flag, model="test-model", max_tokens=512)


@pytest.fixture
def channel():
    return RecordingChannel()


@pytest.fixture
def bridge(state, flag, dispatcher, channel):
    from toolbridge.bridge.handler import Bridge

    return Bridge(state=state, flag=flag, dispatcher=dispatcher, channel=channel, trigger_word="tool_calls")


@pytest.fixture
def weather_payload():
    """Provider payload for a clear day in Paris."""
    return {
        "weather": [{"main": "Clear"}],
        "main": {"temp_min": 10.7, "temp_max": 20.9},
        "wind": {"speed": 5.4},
    }
