"""Gating, the tool-call dispatch loop, and the message handler."""

from toolbridge.bridge.dispatcher import (
    DispatchError,
    MalformedResponseError,
    ToolArgumentsError,
    ToolDispatcher,
)
from toolbridge.bridge.gate import apply_gate
from toolbridge.bridge.handler import Bridge

__all__ = [
    "Bridge",
    "DispatchError",
    "MalformedResponseError",
    "ToolArgumentsError",
    "ToolDispatcher",
    "apply_gate",
]
