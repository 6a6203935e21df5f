"""Bot configuration read from the environment (and an optional .env file).

Every field maps to an upper-case environment variable of the same name,
e.g. ``SLACK_BOT_TOKEN`` or ``TRANSCRIPT_LANGUAGES=de,en``.
"""

import logging
from functools import lru_cache
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for the summary bot."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Slack
    slack_bot_token: str = ""
    slack_signing_secret: str = ""  # Empty disables signature verification (local dev)

    # Gemini
    gemini_api_key: str = ""

    # Captions
    youtube_proxy_url: str = ""
    transcript_languages: Annotated[list[str], NoDecode] = ["en"]

    # Redelivery suppression
    dedup_ttl_seconds: int = 600
    dedup_max_entries: int = 1024

    # Service
    environment: str = "development"
    log_level: str = "INFO"
    port: int = 8080

    @field_validator("transcript_languages", mode="before")
    @classmethod
    def _split_languages(cls, value: object) -> object:
        """Accept "de,en" from the environment as well as a real list."""
        if isinstance(value, str):
            value = value.split(",")
        if isinstance(value, (list, tuple)):
            codes = [str(code).strip() for code in value if str(code).strip()]
            return codes or ["en"]
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> str:
        """Upper-case known level names; anything else becomes INFO."""
        name = str(value).strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            return "INFO"
        return name


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, built on first use."""
    return Settings()
