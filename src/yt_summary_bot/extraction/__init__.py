"""Transcript extraction: video ID parsing and transcript retrieval.

Public API:
    extract_video_id(text) -> str | None
        Ordered URL-shape matching; first pattern wins.
    retrieve_transcript(url_or_id, api, languages) -> TranscriptResult
        Raw-input fetch with a bare-ID fallback and a minimum-length check.
"""

from yt_summary_bot.extraction.transcript import create_transcript_api, retrieve_transcript
from yt_summary_bot.extraction.video_id import extract_video_id

__all__ = [
    "create_transcript_api",
    "extract_video_id",
    "retrieve_transcript",
]
