"""Capability functions the model can call, and their registry."""

from toolbridge.tools.registry import (
    TOOL_DESCRIPTORS,
    ToolDescriptor,
    ToolName,
    ToolRegistry,
)

__all__ = [
    "TOOL_DESCRIPTORS",
    "ToolDescriptor",
    "ToolName",
    "ToolRegistry",
    "clock",
    "create_default_registry",
    "scraper",
    "weather",
]


def create_default_registry() -> ToolRegistry:
    """Create a ToolRegistry with all default tools registered."""
    from toolbridge.tools import clock, scraper, weather

    handlers = {
        ToolName.GET_WEATHER: weather.get_weather,
        ToolName.SCRAPER: scraper.scrape,
        ToolName.GET_TIME_OF_DAY: clock.get_time_of_day,
    }

    registry = ToolRegistry()
    for descriptor in TOOL_DESCRIPTORS:
        registry.register(descriptor, handlers[ToolName(descriptor.name)])
    return registry
