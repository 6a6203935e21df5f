"""YouTube URL detection in Slack mention text."""

import html
import re

# Only watch?v= and youtu.be/ shapes are recognized in mentions. Stops at
# whitespace and at Slack mrkdwn delimiters so <url> and <url|label> yield the bare URL.
MENTION_URL_PATTERN = re.compile(
    r"https?://(?:www\.)?(?:youtube\.com/watch\?v=|youtu\.be/)[^\s>|]+"
)


def find_youtube_urls(text: str) -> list[str]:
    """Return every YouTube URL in the text, in order of appearance.

    Slack escapes & as &amp; in message text; matches are unescaped.
    """
    return [html.unescape(url) for url in MENTION_URL_PATTERN.findall(text)]


def first_youtube_url(text: str) -> str | None:
    """Return the first YouTube URL in the text. Later URLs are ignored."""
    urls = find_youtube_urls(text)
    return urls[0] if urls else None
