import pytest

from sample_handlers import (
    CountingRegistry,
    FailingHandler,
    HandlerA,
    HandlerB,
    HandlerC,
    OrderContext,
    StopHandler,
    SyncHandler,
)


@pytest.fixture
def registry():
    registry = CountingRegistry()
    for handler_type in (HandlerA, HandlerB, HandlerC, StopHandler, FailingHandler, SyncHandler):
        registry.add_transient(handler_type)
    return registry


@pytest.fixture
def context():
    return OrderContext()
