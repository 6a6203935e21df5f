"""Shared test fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from yt_summary_bot.app import app
from yt_summary_bot.context import BotContext
from yt_summary_bot.dedup import EventDeduplicator


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def bot() -> BotContext:
    """BotContext with mocked collaborators and a fresh deduplicator."""
    return BotContext(
        slack_client=AsyncMock(),
        gemini_client=MagicMock(),
        transcript_api=MagicMock(),
        deduplicator=EventDeduplicator(ttl_seconds=600),
        transcript_languages=["en"],
    )
