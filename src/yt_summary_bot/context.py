"""Explicitly constructed collaborators shared by request handlers.

The app lifespan builds one BotContext from settings and stores it on
app.state; routes receive it through the get_bot_context dependency, and
tests replace it via app.dependency_overrides.
"""

from dataclasses import dataclass, field

from fastapi import Request
from google import genai
from slack_sdk.web.async_client import AsyncWebClient
from youtube_transcript_api import YouTubeTranscriptApi

from yt_summary_bot.config import Settings
from yt_summary_bot.dedup import EventDeduplicator
from yt_summary_bot.extraction import create_transcript_api
from yt_summary_bot.llm import create_gemini_client
from yt_summary_bot.slack.client import create_slack_client


@dataclass
class BotContext:
    """Clients and per-process state used to handle Slack events."""

    slack_client: AsyncWebClient
    gemini_client: genai.Client
    transcript_api: YouTubeTranscriptApi
    deduplicator: EventDeduplicator
    transcript_languages: list[str] = field(default_factory=lambda: ["en"])


def build_bot_context(settings: Settings) -> BotContext:
    """Construct every collaborator from the given settings."""
    return BotContext(
        slack_client=create_slack_client(settings),
        gemini_client=create_gemini_client(settings),
        transcript_api=create_transcript_api(settings),
        deduplicator=EventDeduplicator(
            ttl_seconds=settings.dedup_ttl_seconds, maxsize=settings.dedup_max_entries
        ),
        transcript_languages=list(settings.transcript_languages),
    )


def get_bot_context(request: Request) -> BotContext:
    """FastAPI dependency returning the context built at startup."""
    return request.app.state.bot
