"""LLM client module for Toolbridge."""

__all__ = ["chat_completion", "LLMError"]


def __getattr__(name: str):
    """Lazy import."""
    if name in ("chat_completion", "LLMError"):
        from toolbridge.llm import client

        return getattr(client, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
