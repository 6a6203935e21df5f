"""YouTube video ID extraction from free-form text."""

import logging
import re

logger = logging.getLogger(__name__)

_ID = r"([a-zA-Z0-9_-]{11})"

# Ordered: first match wins. Exact watch?v= precedes the loose "contains v=" variant.
VIDEO_ID_PATTERNS: tuple[re.Pattern[str], ...] = (
    # Standard watch URLs
    re.compile(r"(?:https?://)?(?:www\.)?youtube\.com/watch\?v=" + _ID),
    re.compile(r"(?:https?://)?(?:www\.)?youtube\.com/watch\?.*[&?]v=" + _ID),
    # Short links
    re.compile(r"(?:https?://)?youtu\.be/" + _ID),
    # Embeds
    re.compile(r"(?:https?://)?(?:www\.)?youtube\.com/embed/" + _ID),
    # Legacy /v/ URLs
    re.compile(r"(?:https?://)?(?:www\.)?youtube\.com/v/" + _ID),
    # Mobile
    re.compile(r"(?:https?://)?m\.youtube\.com/watch\?v=" + _ID),
    re.compile(r"(?:https?://)?m\.youtube\.com/watch\?.*[&?]v=" + _ID),
    # Music and gaming subdomains
    re.compile(r"(?:https?://)?music\.youtube\.com/watch\?v=" + _ID),
    re.compile(r"(?:https?://)?gaming\.youtube\.com/watch\?v=" + _ID),
    # Shorts
    re.compile(r"(?:https?://)?(?:www\.)?youtube\.com/shorts/" + _ID),
    # Bare video ID
    re.compile(r"^" + _ID + r"$"),
)


def extract_video_id(text: str) -> str | None:
    """Extract the 11-character video ID from a YouTube URL or bare ID.

    Handles watch?v= (including extra query params before v=), youtu.be/,
    embed/, /v/, m., music., gaming., shorts/, and a bare 11-character ID.
    Leading and trailing whitespace is stripped before matching.
    """
    text = text.strip()
    for pattern in VIDEO_ID_PATTERNS:
        match = pattern.search(text)
        if match:
            logger.debug("Extracted video ID %s from %s", match.group(1), text)
            return match.group(1)

    logger.debug("No video ID found in %s", text)
    return None
