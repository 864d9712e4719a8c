"""Pydantic models for the subscriber API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from subscriber_registry.services.subscriber_store import Subscriber


class SubscriberResponse(BaseModel):
    """Serialized subscriber record."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str

    @classmethod
    def from_record(cls, subscriber: Subscriber) -> "SubscriberResponse":
        return cls.model_validate(subscriber)
