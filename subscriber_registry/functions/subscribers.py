"""Named entry points over the subscriber store.

Each trigger (HTTP route, SNS topic, SQS queue, direct invoke) ends up
calling one of these bindings by name:

``create``
    consumer; takes the raw email string and returns nothing.
``findAll``
    supplier; ignores its input and returns the current subscriber list.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from subscriber_registry.services.subscriber_store import Subscriber, SubscriberStore

logger = logging.getLogger(__name__)

CREATE = "create"
FIND_ALL = "findAll"


class FunctionNotFoundError(LookupError):
    """Raised when a trigger asks for a function that is not registered."""


@dataclass(slots=True)
class FunctionBinding:
    """A callable registered under a public function name."""

    name: str
    target: Callable[..., Any]
    accepts_input: bool

    def invoke(self, payload: Any = None) -> Any:
        logger.debug("Invoking function %s", self.name)
        if self.accepts_input:
            return self.target(payload)
        return self.target()


class SubscriberFunctions:
    """The ``create`` and ``findAll`` bindings for one store."""

    def __init__(self, store: SubscriberStore) -> None:
        self._store = store
        self._catalog = {
            CREATE: FunctionBinding(name=CREATE, target=self.create, accepts_input=True),
            FIND_ALL: FunctionBinding(name=FIND_ALL, target=self.find_all, accepts_input=False),
        }

    @property
    def names(self) -> list[str]:
        return list(self._catalog)

    def create(self, email: str) -> None:
        self._store.create_subscriber(email)

    def find_all(self) -> list[Subscriber]:
        return self._store.find_all()

    def lookup(self, name: str) -> FunctionBinding:
        """Return the binding registered as ``name``."""

        try:
            return self._catalog[name]
        except KeyError as exc:
            logger.warning("Function %r is not registered", name)
            raise FunctionNotFoundError(
                f"Unknown function {name!r}; expected one of {', '.join(self._catalog)}"
            ) from exc
