"""LLM processing: transcript summarization via Gemini.

Public API:
    summarize_transcript(client, transcript, video_url) -> SummaryResult
        Builds the fixed summary prompt, calls Gemini with retry logic,
        and returns a tagged success/failure result.
"""

from yt_summary_bot.llm.client import create_gemini_client
from yt_summary_bot.llm.summarizer import summarize_transcript

__all__ = [
    "create_gemini_client",
    "summarize_transcript",
]
