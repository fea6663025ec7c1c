"""LLM client using official Ollama Python library.

One chat round-trip per call, no streaming and no retries. Responses are
normalised into ``ChatCompletion`` so the dispatch loop never sees
provider types.
"""

import asyncio
import json
import logging
from collections.abc import Sequence
from typing import Any

import ollama
from ollama import AsyncClient, RequestError, ResponseError

from toolbridge.config import get_settings
from toolbridge.conversation.models import (
    AssistantMessage,
    ChatCompletion,
    Choice,
    FinishReason,
    ToolCallIntent,
)

logger = logging.getLogger(__name__)


class LLMError(Exception):
    """Custom exception for LLM-related errors."""

    pass


# Create client instances (reusable, connection pooled)
_client: ollama.Client | None = None
_async_client: AsyncClient | None = None
_async_client_loop: asyncio.AbstractEventLoop | None = None


def _get_host() -> str:
    """Get the Ollama host URL."""
    host = get_settings().ollama_url.replace("/api/chat", "")
    if host.endswith("/"):
        host = host[:-1]
    return host


def _get_client() -> ollama.Client:
    """Get or create the Ollama sync client singleton."""
    global _client
    if _client is None:
        _client = ollama.Client(host=_get_host(), timeout=get_settings().request_timeout)
    return _client


def _get_async_client() -> AsyncClient:
    """Get or create the Ollama async client singleton.

    Creates a new client if:
    - No client exists yet
    - The event loop has changed (previous loop was closed)
    """
    global _async_client, _async_client_loop

    try:
        current_loop = asyncio.get_running_loop()
    except RuntimeError:
        current_loop = None

    if _async_client is None or _async_client_loop is not current_loop:
        _async_client = AsyncClient(host=_get_host(), timeout=get_settings().request_timeout)
        _async_client_loop = current_loop
        logger.debug("Created new AsyncClient for current event loop")

    return _async_client


def _to_intent(tool_call: Any) -> ToolCallIntent:
    """Convert an Ollama tool call into a ToolCallIntent."""
    function = tool_call.function
    arguments = function.arguments
    if not isinstance(arguments, str):
        arguments = json.dumps(dict(arguments or {}))
    return ToolCallIntent(name=function.name, arguments=arguments)


def to_completion(response: Any) -> ChatCompletion:
    """Normalise an Ollama ChatResponse.

    Ollama has no dedicated finish reason for tool use, so the presence of
    tool calls is what marks a tool-call turn.
    """
    message = getattr(response, "message", None)
    if message is None:
        return ChatCompletion(model=getattr(response, "model", None) or "")

    tool_calls = [_to_intent(tc) for tc in (message.tool_calls or [])]
    if tool_calls:
        finish_reason = FinishReason.TOOL_CALLS
    elif getattr(response, "done_reason", None) == "length":
        finish_reason = FinishReason.LENGTH
    else:
        finish_reason = FinishReason.STOP

    return ChatCompletion(
        model=response.model or "",
        choices=[
            Choice(
                finish_reason=finish_reason,
                message=AssistantMessage(
                    content=message.content,
                    tool_calls=tool_calls or None,
                ),
            )
        ],
    )


async def chat_completion(
    messages: list[dict[str, Any]],
    tools: Sequence[dict[str, Any]] | None = None,
    model: str | None = None,
    max_tokens: int | None = None,
) -> ChatCompletion:
    """
    One chat round-trip.

    Args:
        messages: Wire-format conversation, oldest first
        tools: Tool schemas to advertise; omitted from the request when None
        model: Optional model override
        max_tokens: Output-token ceiling, defaults to config

    Returns:
        The normalised completion

    Raises:
        LLMError: If the LLM request fails.
    """
    try:
        client = _get_async_client()
        s = get_settings()
        active_model = model or s.ollama_model
        logger.debug(
            f"Calling LLM chat with model={active_model}, {len(messages)} messages, "
            f"tools={'on' if tools else 'off'}"
        )

        kwargs: dict[str, Any] = {
            "model": active_model,
            "messages": messages,
            "options": {"num_predict": max_tokens or s.max_tokens},
        }
        if tools:
            kwargs["tools"] = list(tools)

        response = await client.chat(**kwargs)
        return to_completion(response)

    except RequestError as e:
        raise LLMError(f"Cannot connect to Ollama. Is it running? Error: {e}") from e
    except ResponseError as e:
        raise LLMError(f"Ollama error: {e}") from e
    except Exception as e:
        raise LLMError(f"LLM chat request failed: {e}") from e


def list_models() -> list[str]:
    """List available models from Ollama.

    Returns:
        List of model names
    """
    try:
        response = _get_client().list()
        return [model.model for model in response.models]
    except Exception as e:
        logger.warning(f"Failed to list models: {e}")
        return []


def check_model_exists(model_name: str | None = None) -> bool:
    """Check if a model exists in Ollama."""
    model = model_name or get_settings().ollama_model
    models = list_models()
    return any(m == model or m.split(":")[0] == model.split(":")[0] for m in models)


def check_ollama_health() -> tuple[bool, str | None]:
    """Check if Ollama is running and accessible.

    Returns:
        Tuple of (is_healthy, error_message)
    """
    try:
        _get_client().list()
        return True, None
    except RequestError as e:
        return False, f"Connection refused. Is Ollama running? ({e})"
    except ResponseError as e:
        return False, f"Ollama error: {e}"
    except Exception as e:
        return False, f"Unknown error: {e}"
