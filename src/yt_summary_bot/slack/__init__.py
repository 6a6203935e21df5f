"""Slack ingress: webhook handling, signature verification, URL detection, and replies.

The router lives in yt_summary_bot.slack.router and is imported by the app
directly (it depends on yt_summary_bot.context, which depends on this package).
"""

from yt_summary_bot.slack.client import create_slack_client
from yt_summary_bot.slack.notifier import (
    notify_error,
    notify_usage_hint,
    post_message,
    post_processing_notice,
)

__all__ = [
    "create_slack_client",
    "notify_error",
    "notify_usage_hint",
    "post_message",
    "post_processing_notice",
]
