"""In-memory subscriber storage for the lifetime of the process."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Subscriber:
    """A registered email address and its sequential identifier."""

    id: int
    email: str


class SubscriberStore:
    """Append-only list of subscribers with an auto-incrementing id.

    Nothing is persisted: records live as long as the store object does.
    Emails are kept exactly as given, so duplicates and empty strings are
    stored like any other value.

    Allocating an id and appending the record happen under one lock, which
    keeps ids unique and the list in id order when several invocations run
    at once. Reads take no lock and return a copy of the list.
    """

    def __init__(self) -> None:
        self._subscribers: list[Subscriber] = []
        self._last_id = 0
        self._lock = threading.Lock()

    def create_subscriber(self, email: str) -> None:
        """Append a subscriber with the next id."""

        with self._lock:
            self._last_id += 1
            subscriber = Subscriber(id=self._last_id, email=email)
            self._subscribers.append(subscriber)
        logger.debug("Created subscriber", extra={"subscriber_id": subscriber.id})

    def find_all(self) -> list[Subscriber]:
        """Return every subscriber in creation order."""

        return list(self._subscribers)
