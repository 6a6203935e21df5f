"""Gemini client factory with async support.

Builds a genai.Client configured with the API key from application settings
and a 60-second HTTP timeout. Does NOT configure HttpRetryOptions -- tenacity
handles retries at the application level to avoid double-retry behavior.
The app lifespan owns the instance; nothing here caches it.
"""

from google import genai
from google.genai import types

from yt_summary_bot.config import Settings


def create_gemini_client(settings: Settings) -> genai.Client:
    """Return a new Gemini client using gemini_api_key from settings."""
    return genai.Client(
        api_key=settings.gemini_api_key,
        http_options=types.HttpOptions(timeout=60_000),
    )
