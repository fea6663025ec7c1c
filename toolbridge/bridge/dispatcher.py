"""Tool-call dispatch loop.

One user utterance gets exactly two model rounds:

1. The full conversation plus the advertised tools. If the model asks for
   tools, each call is run in order and its result appended as a function
   turn. Only this one batch of tool calls is serviced.
2. The full conversation again, without tools. Its content is the reply.

The second round happens even when the first did not ask for tools; the
first round's text is discarded in that case.
"""

import json
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from toolbridge.conversation.models import (
    AssistantMessage,
    ChatCompletion,
    Choice,
    FunctionMessage,
    ToolCallIntent,
    UserMessage,
)
from toolbridge.conversation.state import ConversationState
from toolbridge.session.flag import SessionFlag
from toolbridge.tools.registry import ToolName, ToolRegistry

logger = logging.getLogger(__name__)

CompletionFn = Callable[..., Awaitable[ChatCompletion]]


class DispatchError(Exception):
    """Fatal failure while servicing one utterance."""

    pass


class MalformedResponseError(DispatchError):
    """The model response lacks the structure the loop relies on."""

    pass


class ToolArgumentsError(DispatchError):
    """A tool call's argument payload could not be used."""

    pass


def parse_arguments(call: ToolCallIntent) -> dict[str, str]:
    """Decode a tool call's JSON payload into a flat str -> str mapping."""
    try:
        payload = json.loads(call.arguments or "{}")
    except json.JSONDecodeError as e:
        raise ToolArgumentsError(f"Invalid JSON arguments for {call.name}: {e}") from e

    if not isinstance(payload, dict):
        raise ToolArgumentsError(f"Arguments for {call.name} must be a JSON object")

    for key, value in payload.items():
        if not isinstance(value, str):
            raise ToolArgumentsError(
                f"Argument '{key}' for {call.name} must be a string, got {type(value).__name__}"
            )
    return payload


class ToolDispatcher:
    """Runs the two-round model protocol for a single utterance."""

    def __init__(
        self,
        complete: CompletionFn,
        registry: ToolRegistry,
        flag: SessionFlag,
        model: str | None = None,
        max_tokens: int | None = None,
    ):
        self.complete = complete
        self.registry = registry
        self.flag = flag
        self.model = model
        self.max_tokens = max_tokens

    @property
    def tool_schemas(self) -> list[dict[str, Any]]:
        return [descriptor.to_wire() for descriptor in self.registry.descriptors()]

    async def run(self, utterance: str, state: ConversationState) -> str | None:
        """Service one utterance against ``state``.

        The caller must hold ``state.exclusive()``.

        Returns:
            The final reply, or None when the model produced no content.

        Raises:
            DispatchError: On a malformed response or unusable tool arguments.
            LLMError: If either model request fails.
        """
        state.append(UserMessage(content=utterance))

        first = self._first_choice(
            await self.complete(
                state.as_payload(),
                tools=self.tool_schemas,
                model=self.model,
                max_tokens=self.max_tokens,
            )
        )

        if first.wants_tools:
            calls = first.message.tool_calls
            if not calls:
                raise MalformedResponseError("Model signalled tool calls but sent none")
            state.append(AssistantMessage(content=first.message.content, tool_calls=calls))
            await self._dispatch_all(calls, state)

        final = self._first_choice(
            await self.complete(
                state.as_payload(), model=self.model, max_tokens=self.max_tokens
            )
        )
        content = final.message.content
        if not content:
            return None

        state.append(AssistantMessage(content=content))
        return content

    async def _dispatch_all(self, calls: Sequence[ToolCallIntent], state: ConversationState):
        for call in calls:
            content = await self.dispatch(call)
            state.append(FunctionMessage(name=call.name, content=content))

    async def dispatch(self, call: ToolCallIntent) -> str:
        """Run one tool call and return the text fed back to the model.

        Recognized tools clear the session flag before they run, whatever
        their outcome. Unknown names yield empty content.
        """
        tool = ToolName.resolve(call.name)
        if tool is None or not self.registry.has(tool.value):
            logger.warning(f"Model requested unknown tool: {call.name!r}")
            return ""

        self.flag.deactivate()
        arguments = parse_arguments(call)

        kwargs = {}
        for key in self.registry.required_arguments(tool.value):
            if key not in arguments:
                raise ToolArgumentsError(f"Missing required argument '{key}' for {call.name}")
            kwargs[key] = arguments[key]

        logger.info(f"Dispatching tool {tool.value} with {kwargs}")
        return await self.registry.invoke(tool.value, kwargs)

    @staticmethod
    def _first_choice(completion: ChatCompletion) -> Choice:
        choice = completion.first_choice
        if choice is None:
            raise MalformedResponseError("Model response contained no choices")
        return choice
