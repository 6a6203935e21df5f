"""Video summary pipeline: transcript retrieval -> summarization -> chat-ready report.

Every branch returns user-facing text. Nothing here raises for an expected
failure, so the dispatcher always has something to post.
"""

import logging
from collections.abc import Sequence
from datetime import datetime, timezone

from google import genai
from youtube_transcript_api import YouTubeTranscriptApi

from yt_summary_bot.extraction import retrieve_transcript
from yt_summary_bot.llm import summarize_transcript
from yt_summary_bot.models.summary import SummaryResult, SummaryStatus
from yt_summary_bot.models.transcript import TranscriptFailure

logger = logging.getLogger(__name__)

INVALID_URL_MESSAGE = "Invalid YouTube URL format"
NO_TRANSCRIPT_MESSAGE = (
    "Could not retrieve transcript for this video. "
    "The video might not have captions available."
)
TOO_SHORT_MESSAGE = "Transcript is too short to summarize meaningfully"

_FAILURE_MESSAGES = {
    TranscriptFailure.INVALID_FORMAT: INVALID_URL_MESSAGE,
    TranscriptFailure.NO_CAPTIONS: NO_TRANSCRIPT_MESSAGE,
    TranscriptFailure.FETCH_ERROR: NO_TRANSCRIPT_MESSAGE,
    TranscriptFailure.TOO_SHORT: TOO_SHORT_MESSAGE,
}

_REPORT_TEMPLATE = """\
# YouTube Video Summary

**Video URL:** {video_url}
**Processing Time:** {processed_at}

---

{summary}

---
*Generated by YouTube Summarizer Bot*"""

_SUMMARY_FAILED_TEMPLATE = """\
Could not summarize {video_url}

Error creating summary: {error}"""


def format_report(
    video_url: str, summary: SummaryResult, processed_at: datetime | None = None
) -> str:
    """Render a SummaryResult as chat text.

    SUCCESS gets the full report (header with URL and ISO-8601 timestamp,
    body, footer). FAILED gets a short error message instead.
    """
    if summary.status == SummaryStatus.FAILED:
        return _SUMMARY_FAILED_TEMPLATE.format(video_url=video_url, error=summary.error)

    processed_at = processed_at or datetime.now(timezone.utc)
    return _REPORT_TEMPLATE.format(
        video_url=video_url,
        processed_at=processed_at.isoformat(),
        summary=summary.text,
    )


async def process_video_url(
    video_url: str,
    transcript_api: YouTubeTranscriptApi,
    gemini_client: genai.Client,
    languages: Sequence[str] = ("en",),
) -> str:
    """Turn a YouTube URL into a report (or a static explanation of why not).

    Args:
        video_url: URL (or bare ID) found in the mention.
        transcript_api: Transcript fetcher.
        gemini_client: Configured Gemini client instance.
        languages: Preferred caption languages, in priority order.

    Returns:
        Text ready to post to Slack.
    """
    logger.info("Processing video URL: %s", video_url)

    transcript = await retrieve_transcript(video_url, transcript_api, languages)
    if not transcript.ok:
        logger.info("Transcript unavailable for %s: %s", video_url, transcript.failure.value)
        return _FAILURE_MESSAGES[transcript.failure]

    summary = await summarize_transcript(gemini_client, transcript.text, video_url)
    return format_report(video_url, summary)
