"""Slack request signature verification as a FastAPI dependency."""

from fastapi import HTTPException, Request
from slack_sdk.signature import SignatureVerifier

from yt_summary_bot.config import get_settings


async def verify_slack_request(request: Request) -> bytes:
    """Verify the Slack request signature and return the raw body.

    Reads the raw body before any parsing so verification uses the exact
    bytes Slack signed. Verification is skipped when no signing secret is
    configured (local development).

    Raises HTTPException(403) if the signature is invalid.
    """
    settings = get_settings()
    body = await request.body()

    if not settings.slack_signing_secret:
        return body

    timestamp = request.headers.get("X-Slack-Request-Timestamp", "")
    signature = request.headers.get("X-Slack-Signature", "")

    verifier = SignatureVerifier(signing_secret=settings.slack_signing_secret)

    if not verifier.is_valid(body=body, timestamp=timestamp, signature=signature):
        raise HTTPException(status_code=403, detail="Invalid Slack signature")

    return body
