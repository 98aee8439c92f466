"""
Chain - Orchestrates sequential execution of handlers over a shared context.
"""

import asyncio
import inspect
import logging
import time

from .cancellation import CancellationToken
from .diagnostics import ChainDiagnostics, HandlerDiagnostics
from .handler import HandlerResult

logger = logging.getLogger(__name__)


async def _maybe_await(value):
    if inspect.isawaitable(value):
        return await value
    return value


class Chain:
    """
    Executes an immutable sequence of handler descriptors.

    The chain manages:
    - Sequential handler execution in registration order
    - Conditional skipping through descriptor guards
    - Early termination when a handler returns STOP
    - Exception routing to an optional exception handler
    - Optional diagnostics delivered once per run

    Chains are built by ChainBuilder and hold no per-run state, so one chain
    may run any number of times, including concurrently over separate contexts.
    """

    def __init__(self, resolver, descriptors, exception_handler=None,
                 diagnostics_handler=None, name=None):
        """
        Initialize a Chain.

        Args:
            resolver: Object with resolve(key) used by descriptor factories
            descriptors: Sequence of HandlerDescriptor, copied into a tuple
            exception_handler: Optional callable(exception, context)
            diagnostics_handler: Optional callable(ChainDiagnostics)
            name: Optional display name used in log messages
        """
        if resolver is None:
            raise ValueError("resolver is required")
        if descriptors is None:
            raise ValueError("descriptors is required")

        self._resolver = resolver
        self._descriptors = tuple(descriptors)
        self._exception_handler = exception_handler
        self._diagnostics_handler = diagnostics_handler
        self._name = name or "chain"

    @property
    def descriptors(self):
        """The descriptors of this chain, in execution order."""
        return self._descriptors

    async def run(self, context, cancellation=None):
        """
        Run every handler of the chain against the context.

        Args:
            context: Caller-owned context shared by all handlers
            cancellation: Optional CancellationToken checked before each step

        Raises:
            ValueError: If context is None
            asyncio.CancelledError: If cancellation was requested before a step
            Exception: Whatever a handler raised, when no exception handler is registered
        """
        if context is None:
            raise ValueError("context is required")

        if cancellation is None:
            cancellation = CancellationToken()

        diagnostics = ChainDiagnostics() if self._diagnostics_handler is not None else None
        chain_started = time.perf_counter() if diagnostics is not None else None

        try:
            for descriptor in self._descriptors:
                cancellation.raise_if_cancelled()

                if not descriptor.should_run(context):
                    logger.debug("%s: skipping %s, condition not met", self._name, descriptor.name)
                    if diagnostics is not None:
                        diagnostics.handlers.append(
                            HandlerDiagnostics(handler_name=descriptor.name, skipped=True))
                    continue

                handler = descriptor.create(self._resolver)
                started = time.perf_counter() if diagnostics is not None else None

                try:
                    result = await _maybe_await(handler.handle(context, cancellation))

                    if diagnostics is not None:
                        diagnostics.handlers.append(HandlerDiagnostics(
                            handler_name=descriptor.name,
                            execution_time=time.perf_counter() - started,
                            result=result,
                        ))

                    if result == HandlerResult.STOP:
                        logger.debug("%s: %s returned Stop", self._name, descriptor.name)
                        if diagnostics is not None:
                            diagnostics.stopped_early = True
                            diagnostics.early_stop_reason = f"Handler '{descriptor.name}' returned Stop"
                        break
                except asyncio.CancelledError as e:
                    if diagnostics is not None:
                        diagnostics.handlers.append(HandlerDiagnostics(
                            handler_name=descriptor.name,
                            execution_time=time.perf_counter() - started,
                            has_exception=True,
                            exception_message=str(e),
                        ))
                    logger.debug("%s: %s was cancelled", self._name, descriptor.name)
                    raise
                except Exception as e:
                    if diagnostics is not None:
                        diagnostics.handlers.append(HandlerDiagnostics(
                            handler_name=descriptor.name,
                            execution_time=time.perf_counter() - started,
                            has_exception=True,
                            exception_message=str(e),
                        ))

                    if self._exception_handler is None:
                        raise

                    logger.warning("%s: %s raised %s: %s", self._name, descriptor.name,
                                   type(e).__name__, e)
                    await _maybe_await(self._exception_handler(e, context))
        finally:
            if diagnostics is not None:
                diagnostics.total_execution_time = time.perf_counter() - chain_started
                logger.debug("%s: run finished in %.6fs", self._name, diagnostics.total_execution_time)
                await _maybe_await(self._diagnostics_handler(diagnostics))

    def handler_count(self):
        """Return the number of handlers in the chain."""
        return len(self._descriptors)

    def __repr__(self):
        return (f"Chain(name={self._name!r}, handlers={len(self._descriptors)}, "
                f"exception_handler={self._exception_handler is not None}, "
                f"diagnostics={self._diagnostics_handler is not None})")
