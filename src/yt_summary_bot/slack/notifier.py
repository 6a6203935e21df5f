"""Slack messages posted in response to mentions.

post_message raises so the caller's guard can react. The notify_* helpers are
best-effort: they log Slack API and transport errors but never raise, since
they are the last message a failing path sends.
"""

import logging

import aiohttp
from slack_sdk.errors import SlackApiError
from slack_sdk.web.async_client import AsyncWebClient

logger = logging.getLogger(__name__)

# Failures a best-effort post logs instead of raising
_POST_ERRORS = (SlackApiError, aiohttp.ClientError)

USAGE_HINT = "Please provide a YouTube URL to summarize!"


async def post_message(client: AsyncWebClient, channel_id: str, text: str) -> None:
    """Post a plain message to a channel.

    Raises:
        SlackApiError: If Slack rejects the message.
        aiohttp.ClientError: If Slack cannot be reached.
    """
    await client.chat_postMessage(channel=channel_id, text=text)


async def post_processing_notice(
    client: AsyncWebClient, channel_id: str, user_id: str, video_url: str
) -> None:
    """Tell the mentioning user their video is being processed."""
    await post_message(
        client,
        channel_id,
        f"<@{user_id}> Processing video: {video_url}\n\nThis may take a moment...",
    )


async def notify_usage_hint(client: AsyncWebClient, channel_id: str, user_id: str) -> None:
    """Reply to a mention that carried no YouTube URL.

    Args:
        client: Slack client.
        channel_id: Channel the mention came from.
        user_id: Mentioning user, addressed in the reply.
    """
    try:
        await post_message(
            client,
            channel_id,
            f"<@{user_id}> {USAGE_HINT}\nUsage: @bot https://youtube.com/watch?v=...",
        )
    except _POST_ERRORS:
        logger.warning("Failed to send usage hint to %s", channel_id, exc_info=True)


async def notify_error(
    client: AsyncWebClient, channel_id: str, user_id: str, detail: str
) -> None:
    """Tell the mentioning user that processing failed.

    Args:
        client: Slack client.
        channel_id: Channel the mention came from.
        user_id: Mentioning user, addressed in the reply.
        detail: Human-readable error description.
    """
    try:
        await post_message(
            client,
            channel_id,
            f"<@{user_id}> Sorry, an error occurred while processing your request: {detail}",
        )
    except _POST_ERRORS:
        logger.warning("Failed to send error notification to %s", channel_id, exc_info=True)
