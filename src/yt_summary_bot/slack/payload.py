"""Webhook body parsing and event classification."""

import json
from urllib.parse import parse_qs

from yt_summary_bot.models.slack import EventKind, InboundEvent


class MalformedPayloadError(ValueError):
    """Body is neither JSON nor form data carrying a JSON `payload` field."""


def parse_payload(body: bytes) -> object:
    """Decode a webhook body.

    Tries JSON first, then form-encoded data whose `payload` field holds JSON
    (the shape Slack uses for interactive payloads).

    Raises:
        MalformedPayloadError: If neither interpretation yields JSON.
    """
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedPayloadError("Body is not valid UTF-8") from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    form = parse_qs(text)
    payload_values = form.get("payload")
    if not payload_values:
        raise MalformedPayloadError("Body is not JSON and has no payload field")

    try:
        return json.loads(payload_values[0])
    except json.JSONDecodeError as exc:
        raise MalformedPayloadError("payload field is not valid JSON") from exc


def classify_payload(payload: object) -> InboundEvent:
    """Reduce a decoded payload to an InboundEvent.

    - url_verification -> HANDSHAKE carrying the challenge token
    - event_callback with an event object -> NOTIFICATION
    - anything else (including non-object JSON) -> UNRECOGNIZED
    """
    if not isinstance(payload, dict):
        return InboundEvent(kind=EventKind.UNRECOGNIZED)

    payload_type = payload.get("type")

    if payload_type == "url_verification":
        return InboundEvent(
            kind=EventKind.HANDSHAKE,
            challenge_token=payload.get("challenge"),
        )

    event = payload.get("event")
    if payload_type == "event_callback" and isinstance(event, dict):
        return InboundEvent(
            kind=EventKind.NOTIFICATION,
            event_type=event.get("type"),
            mention_text=event.get("text") or "",
            user_id=event.get("user"),
            channel_id=event.get("channel"),
            event_ts=event.get("ts"),
            event_id=payload.get("event_id"),
        )

    return InboundEvent(kind=EventKind.UNRECOGNIZED)
