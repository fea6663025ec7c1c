"""Unit tests for config module."""

from toolbridge.config import Settings, get_settings


class TestSettings:
    """Tests for Settings configuration."""

    def test_default_values(self, monkeypatch):
        """Should fall back to hardcoded defaults when nothing is set."""
        for var in (
            "TOOLBRIDGE_SLACK_WORKSPACE",
            "TOOLBRIDGE_SLACK_CHANNEL",
            "TOOLBRIDGE_TRIGGER_WORD",
            "TOOLBRIDGE_WEATHER_API_KEY",
        ):
            monkeypatch.delenv(var, raising=False)

        settings = Settings(_env_file=None)

        assert settings.slack_workspace == "secondstate"
        assert settings.slack_channel == "test-flow"
        assert settings.trigger_word == "tool_calls"
        assert settings.weather_api_key == "fake_api_key"
        assert settings.max_tokens == 512
        assert settings.request_timeout is None

    def test_env_override(self, monkeypatch):
        """Should read TOOLBRIDGE_-prefixed environment variables."""
        monkeypatch.setenv("TOOLBRIDGE_TRIGGER_WORD", "hey_bot")
        monkeypatch.setenv("TOOLBRIDGE_SLACK_CHANNEL", "C0123")

        settings = Settings(_env_file=None)

        assert settings.trigger_word == "hey_bot"
        assert settings.slack_channel == "C0123"

    def test_session_path_expands_home(self):
        """session_path should not contain a literal tilde."""
        settings = Settings(_env_file=None, session_file="~/bridge/session.json")

        assert "~" not in settings.session_path
        assert settings.session_path.endswith("bridge/session.json")


class TestGetSettings:
    """Tests for get_settings function."""

    def test_returns_settings_instance(self):
        """Should return a Settings instance."""
        assert isinstance(get_settings(), Settings)
