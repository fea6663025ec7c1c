"""Chat message and model-response types.

Messages are kept in a provider-neutral shape and converted to the model
server's wire format with ``to_wire()``.
"""

import json
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field


class FinishReason(str, Enum):
    """Why the model stopped producing output."""

    STOP = "stop"
    LENGTH = "length"
    TOOL_CALLS = "tool_calls"


class ToolCallIntent(BaseModel):
    """A model's request to run one named tool."""

    name: str
    arguments: str = "{}"  # JSON-encoded payload, parsed at dispatch time

    def to_wire(self) -> dict[str, Any]:
        try:
            arguments = json.loads(self.arguments)
        except json.JSONDecodeError:
            arguments = {}
        return {"function": {"name": self.name, "arguments": arguments}}


class SystemMessage(BaseModel):
    role: Literal["system"] = "system"
    content: str

    def to_wire(self) -> dict[str, Any]:
        return {"role": "system", "content": self.content}


class UserMessage(BaseModel):
    role: Literal["user"] = "user"
    content: str

    def to_wire(self) -> dict[str, Any]:
        return {"role": "user", "content": self.content}


class AssistantMessage(BaseModel):
    role: Literal["assistant"] = "assistant"
    content: str | None = None
    tool_calls: list[ToolCallIntent] | None = None

    def to_wire(self) -> dict[str, Any]:
        wire: dict[str, Any] = {"role": "assistant", "content": self.content or ""}
        if self.tool_calls:
            wire["tool_calls"] = [call.to_wire() for call in self.tool_calls]
        return wire


class FunctionMessage(BaseModel):
    """Result of a dispatched tool, fed back to the model."""

    role: Literal["function"] = "function"
    name: str
    content: str

    def to_wire(self) -> dict[str, Any]:
        # Ollama carries tool results as "tool" turns tagged with the tool name
        return {"role": "tool", "tool_name": self.name, "content": self.content}


ChatMessage = Annotated[
    SystemMessage | UserMessage | AssistantMessage | FunctionMessage,
    Field(discriminator="role"),
]


class Choice(BaseModel):
    finish_reason: FinishReason = FinishReason.STOP
    message: AssistantMessage = Field(default_factory=AssistantMessage)

    @property
    def wants_tools(self) -> bool:
        return self.finish_reason == FinishReason.TOOL_CALLS


class ChatCompletion(BaseModel):
    """One model round-trip's response."""

    model: str = ""
    choices: list[Choice] = []

    @property
    def first_choice(self) -> Choice | None:
        return self.choices[0] if self.choices else None
