"""Tests for application startup wiring."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from yt_summary_bot.app import app
from yt_summary_bot.config import Settings
from yt_summary_bot.context import BotContext, build_bot_context
from yt_summary_bot.dedup import EventDeduplicator
from yt_summary_bot.logging_config import NOISY_LOGGERS, build_logging_config, configure_logging


def test_lifespan_builds_bot_context():
    """Startup stores settings and an explicitly built BotContext on app.state."""
    with (
        patch("yt_summary_bot.app.configure_logging") as mock_logging,
        patch("yt_summary_bot.app.build_bot_context") as mock_build,
        TestClient(app),
    ):
        assert app.state.bot is mock_build.return_value
        mock_build.assert_called_once_with(app.state.settings)
        mock_logging.assert_called_once_with(app.state.settings.log_level)


def test_build_bot_context_wires_collaborators():
    settings = Settings(
        slack_bot_token="xoxb-test",
        gemini_api_key="test-key",
        transcript_languages=["de", "en"],
        dedup_ttl_seconds=30,
    )
    with (
        patch("yt_summary_bot.context.create_slack_client") as mock_slack,
        patch("yt_summary_bot.context.create_gemini_client") as mock_gemini,
        patch("yt_summary_bot.context.create_transcript_api") as mock_transcripts,
    ):
        ctx = build_bot_context(settings)

    assert isinstance(ctx, BotContext)
    assert ctx.slack_client is mock_slack.return_value
    assert ctx.gemini_client is mock_gemini.return_value
    assert ctx.transcript_api is mock_transcripts.return_value
    assert isinstance(ctx.deduplicator, EventDeduplicator)
    assert ctx.transcript_languages == ["de", "en"]
    mock_slack.assert_called_once_with(settings)
    mock_gemini.assert_called_once_with(settings)
    mock_transcripts.assert_called_once_with(settings)


def test_logging_config_unknown_level_falls_back_to_info():
    config = build_logging_config("verbose")
    assert config["root"]["level"] == "INFO"
    assert config["formatters"]["json"]["static_fields"] == {"service": "yt-summary-bot"}


def test_logging_config_quiets_client_libraries():
    config = build_logging_config("info")
    assert config["root"]["level"] == "INFO"
    assert {name: cfg["level"] for name, cfg in config["loggers"].items()} == {
        name: "WARNING" for name in NOISY_LOGGERS
    }


def test_logging_config_debug_opens_client_libraries():
    config = build_logging_config("debug")
    assert config["root"]["level"] == "DEBUG"
    assert all(cfg["level"] == "DEBUG" for cfg in config["loggers"].values())


def test_configure_logging_applies_level():
    with patch("yt_summary_bot.logging_config.logging.config.dictConfig") as mock_dict_config:
        configure_logging("warning")

    assert mock_dict_config.call_args.args[0]["root"]["level"] == "WARNING"
