"""YouTube transcript retrieval using youtube-transcript-api."""

import asyncio
import logging
from collections.abc import Sequence

from youtube_transcript_api import YouTubeTranscriptApi
from youtube_transcript_api._errors import (
    InvalidVideoId,
    NoTranscriptFound,
    TranscriptsDisabled,
    VideoUnavailable,
)
from youtube_transcript_api.proxies import GenericProxyConfig

from yt_summary_bot.config import Settings
from yt_summary_bot.extraction.video_id import extract_video_id
from yt_summary_bot.models.transcript import (
    MIN_TRANSCRIPT_LENGTH,
    TranscriptFailure,
    TranscriptResult,
)

logger = logging.getLogger(__name__)

# Expected outcomes for a target without usable captions (not dependency faults).
# InvalidVideoId is what a full URL produces on the first attempt.
_NO_CAPTION_ERRORS = (TranscriptsDisabled, NoTranscriptFound, InvalidVideoId, VideoUnavailable)


def create_transcript_api(settings: Settings) -> YouTubeTranscriptApi:
    """Build a transcript API instance, routed through the proxy when one is configured."""
    proxy_url = settings.youtube_proxy_url
    proxy_config = GenericProxyConfig(https_url=proxy_url) if proxy_url else None
    return YouTubeTranscriptApi(proxy_config=proxy_config)


async def _fetch(
    api: YouTubeTranscriptApi, target: str, languages: Sequence[str]
) -> tuple[str | None, bool]:
    """Fetch and join one transcript attempt without ever raising.

    Returns:
        Tuple of (joined_text, dependency_fault). joined_text is None when the
        attempt produced nothing; dependency_fault is True when it failed with
        something other than a caption-availability error.
    """
    try:
        # Sync call wrapped in to_thread
        transcript = await asyncio.to_thread(api.fetch, target, languages=list(languages))
    except _NO_CAPTION_ERRORS as exc:
        logger.info("No transcript for %s: %s", target, type(exc).__name__)
        return None, False
    except Exception as exc:
        # Catch-all for IP blocks, request errors, etc.
        logger.warning("Transcript fetch failed for %s (%s)", target, exc, exc_info=True)
        return None, True

    fragments = [snippet.text for snippet in transcript]
    if not fragments:
        logger.info("Transcript is empty for %s", target)
        return None, False

    logger.info("Fetched transcript for %s (%d fragments)", target, len(fragments))
    return " ".join(fragments), False


async def retrieve_transcript(
    url_or_id: str,
    api: YouTubeTranscriptApi,
    languages: Sequence[str] = ("en",),
) -> TranscriptResult:
    """Retrieve a transcript with a raw-input attempt followed by a bare-ID fallback.

    1. Fetch with the input exactly as given.
    2. On no result, derive the video ID (INVALID_FORMAT if none) and fetch again.
    3. Both attempts empty -> NO_CAPTIONS (FETCH_ERROR if the last one faulted).
    4. Joined text under MIN_TRANSCRIPT_LENGTH characters -> TOO_SHORT.
    """
    text, _ = await _fetch(api, url_or_id, languages)
    video_id = None

    if text is None:
        video_id = extract_video_id(url_or_id)
        if video_id is None:
            logger.info("Invalid YouTube URL format: %s", url_or_id)
            return TranscriptResult(failure=TranscriptFailure.INVALID_FORMAT)

        logger.info("Retrying transcript fetch with video ID %s", video_id)
        text, faulted = await _fetch(api, video_id, languages)
        if text is None:
            failure = TranscriptFailure.FETCH_ERROR if faulted else TranscriptFailure.NO_CAPTIONS
            return TranscriptResult(failure=failure, video_id=video_id)

    if len(text) < MIN_TRANSCRIPT_LENGTH:
        logger.info("Transcript too short (%d chars): %s", len(text), url_or_id)
        return TranscriptResult(failure=TranscriptFailure.TOO_SHORT, video_id=video_id)

    return TranscriptResult(text=text, video_id=video_id)
