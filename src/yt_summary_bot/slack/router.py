"""Slack webhook router with signature verification."""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Request
from fastapi.responses import JSONResponse

from yt_summary_bot.context import BotContext, get_bot_context
from yt_summary_bot.slack.handlers import handle_slack_event
from yt_summary_bot.slack.payload import MalformedPayloadError, classify_payload, parse_payload
from yt_summary_bot.slack.verification import verify_slack_request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["slack"])


@router.post("/slack/events")
async def slack_events(
    request: Request,
    background_tasks: BackgroundTasks,
    body: bytes = Depends(verify_slack_request),
    bot: BotContext = Depends(get_bot_context),
) -> JSONResponse:
    """Receive Slack webhook events.

    Malformed bodies get 400, retried or not. Well-formed Slack retries
    (X-Slack-Retry-Num header) are then acknowledged without processing.
    Any other unexpected failure gets 500.
    """
    try:
        payload = parse_payload(body)
    except MalformedPayloadError as exc:
        logger.warning("Rejected malformed Slack request: %s", exc)
        return JSONResponse({"error": "Invalid request format"}, status_code=400)

    retry_num = request.headers.get("X-Slack-Retry-Num")
    if retry_num:
        logger.info("Acknowledging Slack retry %s without processing", retry_num)
        return JSONResponse({"status": "ok"})

    try:
        event = classify_payload(payload)
        return handle_slack_event(event, background_tasks, bot)
    except Exception:
        logger.error("Unhandled error processing Slack request", exc_info=True)
        return JSONResponse({"error": "Internal server error"}, status_code=500)
