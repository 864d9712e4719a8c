"""Helpers for recognising Lambda trigger events and extracting payloads."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from typing import Any

SNS_SOURCE = "aws:sns"
SQS_SOURCE = "aws:sqs"


class UnsupportedEventError(ValueError):
    """Raised when an event does not come from a supported trigger."""


def decode_payload(raw: bytes) -> str:
    """Decode a message body as UTF-8, replacing bytes that are not valid."""

    return raw.decode("utf-8", errors="replace")


class EventKind(enum.Enum):
    SNS = "sns"
    SQS = "sqs"
    DIRECT = "direct"
    HTTP = "http"


def _record_source(record: Mapping[str, Any]) -> str | None:
    # SNS capitalises the key, SQS does not.
    return record.get("EventSource") or record.get("eventSource")


def classify_event(event: Any) -> EventKind:
    """Decide which trigger produced ``event``."""

    if isinstance(event, (str, bytes)):
        return EventKind.DIRECT
    if not isinstance(event, Mapping):
        raise UnsupportedEventError(f"Unsupported event type: {type(event).__name__}")

    records = event.get("Records")
    if records is None:
        # Every HTTP source Mangum understands carries a request context.
        if "requestContext" in event:
            return EventKind.HTTP
        raise UnsupportedEventError(f"Unrecognised event with keys: {sorted(map(str, event))}")
    if not records:
        raise UnsupportedEventError("Event contains no records")

    sources = {_record_source(record) for record in records}
    if sources == {SNS_SOURCE}:
        return EventKind.SNS
    if sources == {SQS_SOURCE}:
        return EventKind.SQS
    raise UnsupportedEventError(f"Unsupported event source(s): {sorted(map(str, sources))}")


def extract_payloads(event: Any, kind: EventKind) -> list[str]:
    """Return the message payloads carried by a non-HTTP event, in record order."""

    if kind is EventKind.DIRECT:
        return [decode_payload(event) if isinstance(event, bytes) else event]
    if kind is EventKind.SNS:
        return [record["Sns"]["Message"] for record in event["Records"]]
    if kind is EventKind.SQS:
        return [record["body"] for record in event["Records"]]
    raise UnsupportedEventError(f"{kind.value} events carry no message payloads")
