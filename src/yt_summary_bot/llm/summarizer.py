"""Summarizer: transcript -> markdown summary via Gemini.

Handles Gemini API calls with tenacity retry logic and converts every outcome
into a tagged SummaryResult so callers can choose how to present failures.
"""

import logging

from google import genai
from google.genai import types
from google.genai.errors import ClientError, ServerError
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from yt_summary_bot.llm.prompts import (
    GEMINI_MODEL,
    MAX_OUTPUT_TOKENS,
    SYSTEM_PROMPT,
    TEMPERATURE,
    build_summary_prompt,
)
from yt_summary_bot.models.summary import SummaryResult

logger = logging.getLogger(__name__)


def _is_retryable(error: BaseException) -> bool:
    """Determine if a Gemini API error is transient and worth retrying.

    Returns True for server errors (5xx) and rate limits (429).
    Returns False for permanent client errors (400, 401, 403).
    """
    if isinstance(error, ServerError):
        return True
    if isinstance(error, ClientError) and error.code == 429:
        return True
    return False


@retry(
    retry=retry_if_exception(_is_retryable),
    wait=wait_exponential_jitter(initial=1, max=30, jitter=2),
    stop=stop_after_attempt(4),
    before_sleep=before_sleep_log(logger, logging.WARNING),
    reraise=True,
)
async def _call_gemini(client: genai.Client, prompt: str) -> str | None:
    """Call Gemini with the fixed completion config, retrying on transient errors.

    Thinking is disabled so the whole output budget goes to the summary.

    Returns:
        Generated text, or None if the response carried no text.

    Raises:
        ClientError: On permanent API errors (400, 401, 403).
        ServerError: After exhausting retries on server errors.
    """
    response = await client.aio.models.generate_content(
        model=GEMINI_MODEL,
        contents=prompt,
        config=types.GenerateContentConfig(
            system_instruction=SYSTEM_PROMPT,
            max_output_tokens=MAX_OUTPUT_TOKENS,
            temperature=TEMPERATURE,
            thinking_config=types.ThinkingConfig(thinking_budget=0),
        ),
    )
    return response.text


async def summarize_transcript(
    client: genai.Client, transcript: str, video_url: str
) -> SummaryResult:
    """Summarize a transcript into structured markdown.

    Never raises: API errors, unexpected exceptions, and empty responses all
    become SummaryResult.failure with a human-readable detail.

    Args:
        client: Configured Gemini client instance.
        transcript: Joined caption text.
        video_url: Source URL, embedded in the prompt for context.

    Returns:
        SummaryResult tagged SUCCESS (with text) or FAILED (with error).
    """
    prompt = build_summary_prompt(transcript, video_url)

    try:
        text = await _call_gemini(client, prompt)
    except Exception as exc:
        logger.error("Gemini summarization failed for %s", video_url, exc_info=True)
        return SummaryResult.failure(str(exc) or type(exc).__name__)

    if not text or not text.strip():
        logger.warning("Gemini returned an empty summary for %s", video_url)
        return SummaryResult.failure("Failed to generate summary")

    logger.info(
        "Gemini summarization complete",
        extra={
            "url": video_url,
            "model": GEMINI_MODEL,
            "transcript_chars": len(transcript),
            "summary_chars": len(text),
        },
    )
    return SummaryResult.success(text)
