"""Async Slack client factory.

Builds an AsyncWebClient configured with the bot token from application
settings. The app lifespan owns the instance (see context.py).
"""

from slack_sdk.web.async_client import AsyncWebClient

from yt_summary_bot.config import Settings


def create_slack_client(settings: Settings) -> AsyncWebClient:
    """Return a new async Slack client using slack_bot_token from settings."""
    return AsyncWebClient(token=settings.slack_bot_token)
