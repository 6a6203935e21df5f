"""Integration tests for the /slack/events endpoint."""

import hashlib
import hmac
import json
import time
from collections.abc import Iterator
from unittest.mock import AsyncMock, MagicMock, patch
from urllib.parse import urlencode

import pytest
from fastapi.testclient import TestClient

from yt_summary_bot.app import app
from yt_summary_bot.context import BotContext, get_bot_context

TEST_SIGNING_SECRET = "test_signing_secret_1234"


def _mock_settings(signing_secret: str = "") -> MagicMock:
    """Create a mock Settings for router tests (empty secret disables verification)."""
    settings = MagicMock()
    settings.slack_signing_secret = signing_secret
    return settings


def _sign_request(body: bytes, secret: str) -> tuple[str, str]:
    """Generate Slack-compatible signature headers."""
    timestamp = str(int(time.time()))
    sig_basestring = f"v0:{timestamp}:{body.decode()}"
    signature = "v0=" + hmac.new(
        secret.encode(), sig_basestring.encode(), hashlib.sha256
    ).hexdigest()
    return timestamp, signature


def _mention_payload(text: str, event_id: str = "Ev0001") -> dict:
    return {
        "type": "event_callback",
        "event_id": event_id,
        "event": {
            "type": "app_mention",
            "text": text,
            "user": "U123",
            "channel": "C456",
            "ts": "1234567890.123456",
        },
    }


def _post_json(client: TestClient, payload: object, headers: dict | None = None):
    return client.post(
        "/slack/events",
        content=json.dumps(payload).encode(),
        headers={"Content-Type": "application/json", **(headers or {})},
    )


@pytest.fixture(autouse=True)
def _override_bot(bot: BotContext) -> Iterator[None]:
    """Route requests to the mocked BotContext and disable signature checks."""
    app.dependency_overrides[get_bot_context] = lambda: bot
    with patch(
        "yt_summary_bot.slack.verification.get_settings",
        return_value=_mock_settings(),
    ):
        yield
    app.dependency_overrides.clear()


def _posted_texts(bot: BotContext) -> list[str]:
    return [c.kwargs["text"] for c in bot.slack_client.chat_postMessage.call_args_list]


# -- Classification --


def test_url_verification_challenge(client: TestClient):
    response = _post_json(client, {"type": "url_verification", "challenge": "abc123"})
    assert response.status_code == 200
    assert response.json() == {"challenge": "abc123"}


def test_numeric_challenge_is_echoed_unchanged(client: TestClient):
    response = _post_json(client, {"type": "url_verification", "challenge": 12345})
    assert response.status_code == 200
    assert response.json() == {"challenge": 12345}


def test_unknown_payload_type_returns_ok(client: TestClient, bot: BotContext):
    response = _post_json(client, {"type": "app_rate_limited"})
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    bot.slack_client.chat_postMessage.assert_not_called()


def test_non_mention_event_returns_ok(client: TestClient, bot: BotContext):
    payload = _mention_payload("hi")
    payload["event"]["type"] = "message"
    response = _post_json(client, payload)
    assert response.json() == {"status": "ok"}
    bot.slack_client.chat_postMessage.assert_not_called()


def test_form_encoded_payload_is_accepted(client: TestClient):
    body = urlencode(
        {"payload": json.dumps({"type": "url_verification", "challenge": "form-token"})}
    )
    response = client.post(
        "/slack/events",
        content=body.encode(),
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    assert response.status_code == 200
    assert response.json() == {"challenge": "form-token"}


def test_malformed_body_returns_400(client: TestClient):
    response = client.post(
        "/slack/events",
        content=b"this is not a slack payload",
        headers={"Content-Type": "text/plain"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request format"}


def test_internal_error_returns_500(client: TestClient):
    with patch(
        "yt_summary_bot.slack.router.handle_slack_event",
        side_effect=RuntimeError("boom"),
    ):
        response = _post_json(client, {"type": "url_verification", "challenge": "x"})
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


# -- Mentions (background work runs before TestClient returns) --


def test_mention_without_url_posts_usage_hint(client: TestClient, bot: BotContext):
    response = _post_json(client, _mention_payload("<@U0BOT> summarize please"))

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    texts = _posted_texts(bot)
    assert len(texts) == 1
    assert "Please provide a YouTube URL to summarize!" in texts[0]
    assert texts[0].startswith("<@U123>")


@patch("yt_summary_bot.slack.handlers.process_video_url", new_callable=AsyncMock)
def test_mention_with_url_posts_notice_and_report(
    mock_pipeline: AsyncMock, client: TestClient, bot: BotContext
):
    mock_pipeline.return_value = "# YouTube Video Summary\n\nreport body"

    response = _post_json(
        client, _mention_payload("<@U0BOT> check <https://youtu.be/dQw4w9WgXcQ> please")
    )

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert mock_pipeline.call_args.args[0] == "https://youtu.be/dQw4w9WgXcQ"
    texts = _posted_texts(bot)
    assert texts[0].startswith("<@U123> Processing video: https://youtu.be/dQw4w9WgXcQ")
    assert texts[1] == "# YouTube Video Summary\n\nreport body"


@patch("yt_summary_bot.slack.handlers.process_video_url", new_callable=AsyncMock)
def test_redelivered_event_is_processed_once(
    mock_pipeline: AsyncMock, client: TestClient, bot: BotContext
):
    mock_pipeline.return_value = "report"
    payload = _mention_payload("<https://youtu.be/dQw4w9WgXcQ>", event_id="EvDUP")

    first = _post_json(client, payload)
    second = _post_json(client, payload)

    assert first.status_code == second.status_code == 200
    mock_pipeline.assert_called_once()


@patch("yt_summary_bot.slack.handlers.process_video_url", new_callable=AsyncMock)
def test_retry_header_returns_200_immediately(
    mock_pipeline: AsyncMock, client: TestClient, bot: BotContext
):
    response = _post_json(
        client,
        _mention_payload("<https://youtu.be/dQw4w9WgXcQ>"),
        headers={"X-Slack-Retry-Num": "1"},
    )
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    mock_pipeline.assert_not_called()
    bot.slack_client.chat_postMessage.assert_not_called()


def test_malformed_retry_still_returns_400(client: TestClient, bot: BotContext):
    response = client.post(
        "/slack/events",
        content=b"this is not a slack payload",
        headers={"Content-Type": "text/plain", "X-Slack-Retry-Num": "2"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request format"}
    bot.slack_client.chat_postMessage.assert_not_called()


# -- Signature verification --


def test_valid_signature_is_accepted(client: TestClient):
    body = json.dumps({"type": "url_verification", "challenge": "signed"}).encode()
    timestamp, signature = _sign_request(body, TEST_SIGNING_SECRET)
    with patch(
        "yt_summary_bot.slack.verification.get_settings",
        return_value=_mock_settings(TEST_SIGNING_SECRET),
    ):
        response = client.post(
            "/slack/events",
            content=body,
            headers={
                "X-Slack-Request-Timestamp": timestamp,
                "X-Slack-Signature": signature,
                "Content-Type": "application/json",
            },
        )
    assert response.status_code == 200
    assert response.json() == {"challenge": "signed"}


def test_invalid_signature_returns_403(client: TestClient):
    body = json.dumps({"type": "url_verification", "challenge": "x"}).encode()
    with patch(
        "yt_summary_bot.slack.verification.get_settings",
        return_value=_mock_settings(TEST_SIGNING_SECRET),
    ):
        response = client.post(
            "/slack/events",
            content=body,
            headers={
                "X-Slack-Request-Timestamp": str(int(time.time())),
                "X-Slack-Signature": "v0=invalid_signature",
                "Content-Type": "application/json",
            },
        )
    assert response.status_code == 403
