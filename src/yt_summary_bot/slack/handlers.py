"""Slack event dispatch and mention processing."""

import logging

from fastapi import BackgroundTasks
from fastapi.responses import JSONResponse

from yt_summary_bot.context import BotContext
from yt_summary_bot.models.slack import EventKind, InboundEvent
from yt_summary_bot.pipeline import process_video_url
from yt_summary_bot.slack.notifier import (
    notify_error,
    notify_usage_hint,
    post_message,
    post_processing_notice,
)
from yt_summary_bot.slack.urls import first_youtube_url

logger = logging.getLogger(__name__)


def handle_slack_event(
    event: InboundEvent, background_tasks: BackgroundTasks, bot: BotContext
) -> JSONResponse:
    """Dispatch a classified Slack event.

    - handshake: return the challenge token
    - notification: process app_mention events, acknowledge everything else
    - unrecognized: acknowledge with 200
    """
    if event.kind == EventKind.HANDSHAKE:
        return JSONResponse({"challenge": event.challenge_token})

    if event.kind == EventKind.NOTIFICATION and event.event_type == "app_mention":
        handle_mention_event(event, background_tasks, bot)

    return JSONResponse({"status": "ok"})


def handle_mention_event(
    event: InboundEvent, background_tasks: BackgroundTasks, bot: BotContext
) -> None:
    """Skip redeliveries, find the video URL, and schedule the reply work.

    Only the first YouTube URL in the mention is processed.
    """
    dedup_key = event.dedup_key
    if dedup_key is not None and bot.deduplicator.seen(dedup_key):
        logger.info("Skipping duplicate event %s", dedup_key)
        return

    video_url = first_youtube_url(event.mention_text)

    if video_url is None:
        background_tasks.add_task(
            notify_usage_hint, bot.slack_client, event.channel_id, event.user_id
        )
        return

    logger.info(
        "Dispatching %s from user %s in channel %s",
        video_url,
        event.user_id,
        event.channel_id,
    )

    background_tasks.add_task(
        process_mention,
        bot=bot,
        channel_id=event.channel_id,
        user_id=event.user_id,
        video_url=video_url,
    )


async def process_mention(
    bot: BotContext, channel_id: str, user_id: str, video_url: str
) -> None:
    """Acknowledge, run the summary pipeline, and post its report.

    Any exception (Slack post failure, unexpected pipeline error) is turned
    into a best-effort error message to the user.
    """
    try:
        await post_processing_notice(bot.slack_client, channel_id, user_id, video_url)
        report = await process_video_url(
            video_url,
            bot.transcript_api,
            bot.gemini_client,
            bot.transcript_languages,
        )
        await post_message(bot.slack_client, channel_id, report)
        logger.info("Posted report for %s to %s", video_url, channel_id)
    except Exception as exc:
        logger.error("Mention processing failed for %s: %s", video_url, exc, exc_info=True)
        await notify_error(bot.slack_client, channel_id, user_id, str(exc))
