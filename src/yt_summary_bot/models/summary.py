"""Tagged result of the summarization stage."""

from enum import Enum

from pydantic import BaseModel


class SummaryStatus(str, Enum):
    """Summarization outcome status."""

    SUCCESS = "success"
    FAILED = "failed"


class SummaryResult(BaseModel):
    """Either generated markdown (SUCCESS) or an error detail (FAILED)."""

    status: SummaryStatus
    text: str | None = None
    error: str | None = None

    @classmethod
    def success(cls, text: str) -> "SummaryResult":
        return cls(status=SummaryStatus.SUCCESS, text=text)

    @classmethod
    def failure(cls, error: str) -> "SummaryResult":
        return cls(status=SummaryStatus.FAILED, error=error)
