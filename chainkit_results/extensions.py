"""
Builder extensions for registering result handlers.
"""

from chainkit import ChainBuilder, HandlerDescriptor, HandlerResult
from chainkit.descriptor import handler_name

from .adapter import ResultHandlerAdapter


def _require_chain_builder(builder):
    if builder is None:
        raise ValueError("builder is required")
    if not isinstance(builder, ChainBuilder):
        raise TypeError("Builder must be a ChainBuilder instance to add result handlers")
    return builder


def _adapter_factory(handler_key, on_result=None):
    def factory(resolver):
        return ResultHandlerAdapter(resolver.resolve(handler_key), on_result)
    return factory


def add_result_handler(builder, handler_key, on_result=None):
    """
    Add a result handler to a ChainBuilder.

    Args:
        builder: ChainBuilder to extend
        handler_key: Key of a ResultHandler known to the builder's resolver
        on_result: Optional callable receiving each raw Result

    Returns:
        builder (for method chaining)
    """
    _require_chain_builder(builder)
    return builder.add_handler_descriptor(HandlerDescriptor(
        factory=_adapter_factory(handler_key, on_result),
        name=handler_name(handler_key),
    ))


def add_conditional_result_handler(builder, handler_key, predicate):
    """
    Add a result handler that only runs when predicate(context) is true.

    Returns:
        builder (for method chaining)
    """
    _require_chain_builder(builder)
    if predicate is None:
        raise ValueError("predicate is required")

    return builder.add_handler_descriptor(HandlerDescriptor(
        factory=_adapter_factory(handler_key),
        name=handler_name(handler_key),
        condition=predicate,
    ))


class ResultChainBuilder(ChainBuilder):
    """ChainBuilder with fluent methods for result handlers."""

    def add_result_handler(self, handler_key, on_result=None):
        return add_result_handler(self, handler_key, on_result)

    def add_conditional_result_handler(self, handler_key, predicate):
        return add_conditional_result_handler(self, handler_key, predicate)


def format_result_diagnostics(diagnostics):
    """
    Summarise diagnostics of a chain made of result handlers.

    A handler counts as failed when it returned STOP without raising.
    """
    if diagnostics is None:
        raise ValueError("diagnostics is required")

    total = len(diagnostics.handlers)
    if total == 0:
        return "No handlers in chain."

    failed = sum(1 for h in diagnostics.handlers
                 if h.result == HandlerResult.STOP and not h.has_exception)
    skipped = sum(1 for h in diagnostics.handlers if h.skipped)

    return f"Result handlers: {total}, Failed: {failed}, Skipped: {skipped}"
