"""Classified inbound Slack webhook event."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class EventKind(str, Enum):
    """How an inbound webhook payload was classified."""

    HANDSHAKE = "handshake"
    NOTIFICATION = "notification"
    UNRECOGNIZED = "unrecognized"


class InboundEvent(BaseModel):
    """A webhook payload reduced to the fields the dispatcher needs (no raw payload)."""

    model_config = ConfigDict(frozen=True)

    kind: EventKind
    challenge_token: Any = None  # url_verification only, echoed back as received

    # event_callback only
    event_type: str | None = None  # e.g., "app_mention"
    mention_text: str = ""
    user_id: str | None = None
    channel_id: str | None = None
    event_ts: str | None = None  # Slack message ts, e.g., "1234567890.123456"
    event_id: str | None = None  # Envelope event_id, e.g., "Ev08MFMKH6"

    @property
    def dedup_key(self) -> str | None:
        """Identity used to skip redelivered events.

        None when the payload carries neither an event_id nor a message ts,
        in which case the event cannot be told apart from others and is
        always processed.
        """
        if self.event_id:
            return self.event_id
        if self.event_ts:
            return f"{self.channel_id}:{self.event_ts}"
        return None
