"""Tests for the named subscriber function bindings."""

from __future__ import annotations

import logging

import pytest

from subscriber_registry.functions.subscribers import (
    CREATE,
    FIND_ALL,
    FunctionNotFoundError,
    SubscriberFunctions,
)
from subscriber_registry.services.subscriber_store import Subscriber, SubscriberStore


@pytest.fixture
def functions() -> SubscriberFunctions:
    return SubscriberFunctions(SubscriberStore())


def test_create_and_find_all_delegate_to_store() -> None:
    store = SubscriberStore()
    functions = SubscriberFunctions(store)

    functions.create("user@example.com")

    assert store.find_all() == [Subscriber(id=1, email="user@example.com")]
    assert functions.find_all() == store.find_all()


def test_catalog_names(functions: SubscriberFunctions) -> None:
    assert functions.names == [CREATE, FIND_ALL]


def test_invoke_create_consumes_payload(functions: SubscriberFunctions) -> None:
    result = functions.lookup("create").invoke("a@x.com")

    assert result is None
    assert functions.find_all() == [Subscriber(id=1, email="a@x.com")]


def test_invoke_find_all_ignores_payload(functions: SubscriberFunctions) -> None:
    functions.create("a@x.com")

    assert functions.lookup("findAll").invoke("ignored") == [Subscriber(id=1, email="a@x.com")]
    assert functions.lookup("findAll").invoke() == [Subscriber(id=1, email="a@x.com")]


def test_lookup_unknown_function(functions: SubscriberFunctions) -> None:
    with pytest.raises(FunctionNotFoundError, match="delete"):
        functions.lookup("delete")


def test_invoke_logs_function_name(functions: SubscriberFunctions, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="subscriber_registry.functions.subscribers")

    functions.lookup("findAll").invoke()

    assert "Invoking function findAll" in caplog.text


def test_lookup_unknown_function_logs_warning(
    functions: SubscriberFunctions, caplog: pytest.LogCaptureFixture
) -> None:
    with pytest.raises(FunctionNotFoundError):
        functions.lookup("delete")

    assert "'delete' is not registered" in caplog.text
