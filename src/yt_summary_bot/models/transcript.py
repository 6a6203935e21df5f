"""Transcript retrieval outcome and failure reasons."""

from enum import Enum

from pydantic import BaseModel

# Joined transcripts shorter than this are not worth summarizing
MIN_TRANSCRIPT_LENGTH = 50


class TranscriptFailure(str, Enum):
    """Why no usable transcript was produced."""

    INVALID_FORMAT = "invalid_format"  # No video ID could be derived from the input
    NO_CAPTIONS = "no_captions"  # Both fetch attempts returned nothing
    FETCH_ERROR = "fetch_error"  # Last attempt failed with an unexpected dependency error
    TOO_SHORT = "too_short"  # Joined text under MIN_TRANSCRIPT_LENGTH


class TranscriptResult(BaseModel):
    """Caption text joined in order, or the reason it is absent."""

    text: str | None = None
    failure: TranscriptFailure | None = None
    video_id: str | None = None  # Set when the bare-ID fallback was used

    @property
    def ok(self) -> bool:
        return self.failure is None and self.text is not None
