"""AWS Lambda entry point.

HTTP events (API Gateway, ALB, function URLs) go through Mangum to the
FastAPI app. SNS, SQS and direct invocations call the function named by
``APP_FUNCTION_DEFINITION`` once per message. Both paths share the store
created by :mod:`subscriber_registry.main`.
"""

from __future__ import annotations

import logging
from typing import Any

from mangum import Mangum

from subscriber_registry.core.config import settings
from subscriber_registry.core.logging_config import configure_logging
from subscriber_registry.functions.subscribers import SubscriberFunctions
from subscriber_registry.main import app
from subscriber_registry.schema.subscriber import SubscriberResponse
from subscriber_registry.services.events import EventKind, classify_event, extract_payloads
from subscriber_registry.services.subscriber_store import Subscriber

configure_logging()
logger = logging.getLogger(__name__)

http_handler = Mangum(app, lifespan="off")


def _serialize(result: Any) -> Any:
    if isinstance(result, Subscriber):
        return SubscriberResponse.from_record(result).model_dump()
    if isinstance(result, list):
        return [_serialize(item) for item in result]
    return result


def dispatch_messages(
    functions: SubscriberFunctions,
    function_name: str,
    payloads: list[str],
) -> list[Any] | None:
    """Invoke ``function_name`` for each payload and collect non-empty results."""

    binding = functions.lookup(function_name)
    results = []
    for payload in payloads:
        result = binding.invoke(payload)
        if result is not None:
            results.append(_serialize(result))
    return results or None


def handler(event: Any, context: Any) -> Any:
    kind = classify_event(event)
    if kind is EventKind.HTTP:
        return http_handler(event, context)

    payloads = extract_payloads(event, kind)
    logger.info(
        "Dispatching %s event",
        kind.value,
        extra={"function": settings.function_definition, "count": len(payloads)},
    )
    return dispatch_messages(app.state.functions, settings.function_definition, payloads)
