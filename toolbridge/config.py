"""Centralized configuration for Toolbridge using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from toolbridge.version import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings can be overridden via environment variables with the
    TOOLBRIDGE_ prefix. For example:
        TOOLBRIDGE_TRIGGER_WORD=hey_bot
        TOOLBRIDGE_WEATHER_API_KEY=...
    """

    model_config = SettingsConfigDict(
        env_prefix="TOOLBRIDGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def version(self) -> str:
        return __version__

    # Chat channel
    slack_workspace: str = "secondstate"
    slack_channel: str = "test-flow"
    slack_bot_token: str | None = None
    slack_signing_secret: str | None = None
    slack_api_url: str = "https://slack.com/api"
    trigger_word: str = "tool_calls"

    # LLM Settings
    ollama_url: str = "http://localhost:11434"
    ollama_model: str = "llama3.1"
    max_tokens: int = 512  # Output ceiling for both model rounds
    system_prompt: str = "Perform function requests for the user"

    # Capability functions
    weather_api_key: str = "fake_api_key"
    weather_url: str = "https://api.openweathermap.org/data/2.5/weather"
    request_timeout: float | None = None  # None waits indefinitely

    # Session flag storage
    session_backend: str = "memory"  # "memory" or "file"
    session_file: str = "~/.toolbridge/session.json"

    # Server Settings
    server_host: str = "127.0.0.1"
    server_port: int = 8000
    log_level: str = "INFO"

    @property
    def session_path(self) -> str:
        """Expand session file path."""
        from pathlib import Path

        return str(Path(self.session_file).expanduser())


def get_settings() -> Settings:
    """Get settings instance.

    Creates a new instance each time to pick up .env changes.
    For performance-critical code, cache the result yourself.
    """
    return Settings()


# Default settings instance (loaded at import time)
settings = get_settings()
