"""
Tests for ChainBuilder registration and argument validation.
"""

import pytest

from chainkit import ChainBuilder, HandlerDescriptor
from sample_handlers import FailingHandler, HandlerA, HandlerB, OrderContext, StopHandler


def test_requires_resolver():
    with pytest.raises(ValueError):
        ChainBuilder(None)


def test_conditional_handler_requires_predicate(registry):
    with pytest.raises(ValueError):
        ChainBuilder(registry).add_conditional_handler(HandlerA, None)


def test_exception_handler_is_required(registry):
    with pytest.raises(ValueError):
        ChainBuilder(registry).use_exception_handler(None)


def test_diagnostics_callback_is_required(registry):
    with pytest.raises(ValueError):
        ChainBuilder(registry).use_diagnostics(None)


def test_descriptor_is_required(registry):
    with pytest.raises(ValueError):
        ChainBuilder(registry).add_handler_descriptor(None)


def test_descriptor_requires_factory_and_name():
    with pytest.raises(ValueError):
        HandlerDescriptor(factory=None, name="A")
    with pytest.raises(ValueError):
        HandlerDescriptor(factory=lambda resolver: None, name=None)


def test_methods_return_builder(registry):
    builder = ChainBuilder(registry)

    assert builder.add_handler(HandlerA) is builder
    assert builder.add_conditional_handler(HandlerB, lambda ctx: True) is builder
    assert builder.use_exception_handler(lambda exception, ctx: None) is builder
    assert builder.use_diagnostics(lambda diagnostics: None) is builder
    assert builder.handler_count() == 2


def test_descriptors_use_handler_names(registry):
    chain = (ChainBuilder(registry)
             .add_handler(HandlerA)
             .add_conditional_handler(StopHandler, lambda ctx: True)
             .add_handler("payment")
             .build())

    assert [d.name for d in chain.descriptors] == ["HandlerA", "StopHandler", "payment"]
    assert chain.descriptors[0].condition is None
    assert chain.descriptors[1].condition is not None


@pytest.mark.asyncio
async def test_built_chain_ignores_later_registrations(registry):
    builder = ChainBuilder(registry).add_handler(HandlerA)
    chain = builder.build()

    builder.add_handler(HandlerB)
    context = OrderContext()
    await chain.run(context)

    assert context.log == ["A"]
    assert chain.handler_count() == 1
    assert builder.build().handler_count() == 2


@pytest.mark.asyncio
async def test_last_exception_handler_wins(registry):
    calls = []
    chain = (ChainBuilder(registry)
             .add_handler(FailingHandler)
             .use_exception_handler(lambda exception, ctx: calls.append("first"))
             .use_exception_handler(lambda exception, ctx: calls.append("second"))
             .build())

    await chain.run(OrderContext())

    assert calls == ["second"]


@pytest.mark.asyncio
async def test_last_diagnostics_callback_wins(registry):
    calls = []
    chain = (ChainBuilder(registry)
             .add_handler(HandlerA)
             .use_diagnostics(lambda diagnostics: calls.append("first"))
             .use_diagnostics(lambda diagnostics: calls.append("second"))
             .build())

    await chain.run(OrderContext())

    assert calls == ["second"]


def test_repr(registry):
    builder = ChainBuilder(registry).add_handler(HandlerA)

    assert repr(builder) == "ChainBuilder(handlers=1, exception_handler=False, diagnostics=False)"
    assert "handlers=1" in repr(builder.build())
