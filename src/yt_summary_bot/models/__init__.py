"""Data models and enums for the YouTube summary pipeline."""

from yt_summary_bot.models.slack import EventKind, InboundEvent
from yt_summary_bot.models.summary import SummaryResult, SummaryStatus
from yt_summary_bot.models.transcript import (
    MIN_TRANSCRIPT_LENGTH,
    TranscriptFailure,
    TranscriptResult,
)

__all__ = [
    "EventKind",
    "InboundEvent",
    "MIN_TRANSCRIPT_LENGTH",
    "SummaryResult",
    "SummaryStatus",
    "TranscriptFailure",
    "TranscriptResult",
]
