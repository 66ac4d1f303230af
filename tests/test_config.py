"""Tests for configuration management."""

import pytest
from pydantic import ValidationError

from alertbridge.config import Settings, get_settings
from alertbridge.exceptions import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DISCORD_WEBHOOK", "HOST", "PORT", "LOG_LEVEL", "DELIVERY_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self) -> None:
        settings = Settings()
        assert settings.host == "0.0.0.0"
        assert settings.port == 9094
        assert settings.log_level == "INFO"
        assert settings.discord_webhook == ""
        assert settings.delivery_timeout == 10.0

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DISCORD_WEBHOOK", "https://discord.com/api/webhooks/1/x")
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("DELIVERY_TIMEOUT", "2.5")

        settings = Settings()

        assert settings.discord_webhook == "https://discord.com/api/webhooks/1/x"
        assert settings.port == 8080
        assert settings.delivery_timeout == 2.5

    def test_require_webhook_url(self) -> None:
        settings = Settings(discord_webhook="https://discord.com/api/webhooks/1/x")
        assert settings.require_webhook_url() == "https://discord.com/api/webhooks/1/x"

    def test_require_webhook_url_missing(self) -> None:
        with pytest.raises(ConfigError, match="DISCORD_WEBHOOK not found"):
            Settings().require_webhook_url()

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Settings(delivery_timeout=0)

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()
