"""HTTP bindings for the subscriber functions."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, Response, status

from subscriber_registry.functions.subscribers import SubscriberFunctions
from subscriber_registry.schema.subscriber import SubscriberResponse
from subscriber_registry.services.events import decode_payload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["subscribers"])


def get_functions(request: Request) -> SubscriberFunctions:
    """FastAPI dependency returning the bindings owned by the app."""

    return request.app.state.functions


@router.post("/create", status_code=status.HTTP_202_ACCEPTED)
async def create(request: Request, functions: SubscriberFunctions = Depends(get_functions)) -> Response:
    """Register the raw request body as a subscriber email."""

    payload = await request.body()
    functions.create(decode_payload(payload))
    logger.info("Accepted subscriber over HTTP", extra={"payload_length": len(payload)})
    return Response(status_code=status.HTTP_202_ACCEPTED)


@router.get("/findAll", response_model=list[SubscriberResponse])
async def find_all(functions: SubscriberFunctions = Depends(get_functions)) -> list[SubscriberResponse]:
    return [SubscriberResponse.from_record(subscriber) for subscriber in functions.find_all()]
