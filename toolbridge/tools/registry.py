import asyncio
import inspect
import logging
from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class ToolName(str, Enum):
    """Closed set of tools the model may call."""

    GET_WEATHER = "getWeather"
    SCRAPER = "scraper"
    GET_TIME_OF_DAY = "getTimeOfDay"

    @classmethod
    def resolve(cls, name: str) -> "ToolName | None":
        """Exact-name lookup; None for anything unrecognized."""
        try:
            return cls(name)
        except ValueError:
            return None


class ToolDescriptor(BaseModel):
    """A tool as advertised to the model."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    parameters: dict[str, Any]

    @property
    def required(self) -> list[str]:
        return list(self.parameters.get("required", []))

    def to_wire(self) -> dict[str, Any]:
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }


TOOL_DESCRIPTORS: tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        name=ToolName.GET_WEATHER.value,
        description="Get weather forecast for the city passed to it",
        parameters={
            "type": "object",
            "properties": {
                "city": {
                    "type": "string",
                    "description": "The city specified by the user",
                },
            },
            "required": ["city"],
        },
    ),
    ToolDescriptor(
        name=ToolName.SCRAPER.value,
        description="Get the text content of the webpage from the url passed to it",
        parameters={
            "type": "object",
            "properties": {
                "url": {
                    "type": "string",
                    "description": "The url from which to fetch the content",
                },
            },
            "required": ["url"],
        },
    ),
    ToolDescriptor(
        name=ToolName.GET_TIME_OF_DAY.value,
        description="Get the time of day.",
        parameters={
            "type": "object",
            "properties": {},
            "required": [],
        },
    ),
)


class ToolRegistry:
    """Registry of capability functions keyed by tool name."""

    def __init__(self):
        self.tools: dict[str, Callable[..., Any]] = {}
        self._descriptors: dict[str, ToolDescriptor] = {}

    def register(self, descriptor: ToolDescriptor, func: Callable[..., Any]) -> None:
        """Register a tool function under its descriptor's name."""
        logger.debug(f"Registering tool: {descriptor.name}")
        self.tools[descriptor.name] = func
        self._descriptors[descriptor.name] = descriptor

    def get(self, name: str) -> Callable[..., Any]:
        """Get a registered tool by name."""
        if name not in self.tools:
            available = ", ".join(self.tools.keys())
            raise KeyError(f"Tool '{name}' not registered. Available: {available}")
        return self.tools[name]

    def list_tools(self) -> list[str]:
        """List all registered tool names."""
        return list(self.tools.keys())

    def has(self, name: str) -> bool:
        """Check if a tool is registered."""
        return name in self.tools

    def descriptors(self) -> list[ToolDescriptor]:
        return list(self._descriptors.values())

    def required_arguments(self, name: str) -> list[str]:
        self.get(name)
        return self._descriptors[name].required

    async def invoke(self, name: str, arguments: dict[str, str]) -> str:
        """Run a tool and return its display string.

        Coroutine functions are awaited; plain functions run in a worker
        thread so blocking HTTP calls don't stall the event loop.
        """
        func = self.get(name)
        if inspect.iscoroutinefunction(func):
            return await func(**arguments)
        return await asyncio.to_thread(func, **arguments)
