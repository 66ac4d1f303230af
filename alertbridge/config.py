"""Configuration management for alertbridge."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from alertbridge.exceptions import ConfigError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server settings
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=9094)
    log_level: str = Field(default="INFO")

    # Destination webhook
    discord_webhook: str = Field(default="")
    delivery_timeout: float = Field(default=10.0, gt=0)

    def require_webhook_url(self) -> str:
        if not self.discord_webhook:
            raise ConfigError("environment variable DISCORD_WEBHOOK not found")
        return self.discord_webhook


@lru_cache
def get_settings() -> Settings:
    return Settings()
