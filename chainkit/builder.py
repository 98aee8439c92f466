"""
ChainBuilder - Fluent accumulator of handler descriptors that produces a Chain.
"""

from .chain import Chain
from .descriptor import HandlerDescriptor, handler_name


class ChainBuilder:
    """
    Collects handlers, an exception handler and a diagnostics callback,
    then freezes them into a Chain.

    Handlers are identified by a key (typically the handler class) that the
    resolver turns into an instance at run time. The builder never checks that
    a key can be resolved.
    """

    def __init__(self, resolver, name=None):
        """
        Initialize a ChainBuilder.

        Args:
            resolver: Object with resolve(key) returning handler instances
            name: Optional display name passed on to built chains
        """
        if resolver is None:
            raise ValueError("resolver is required")

        self._resolver = resolver
        self._name = name
        self._descriptors = []
        self._exception_handler = None
        self._diagnostics_handler = None

    @property
    def resolver(self):
        return self._resolver

    def add_handler(self, handler_key):
        """
        Add a handler that always runs.

        Args:
            handler_key: Key passed to resolver.resolve() at run time

        Returns:
            self (for method chaining)
        """
        return self.add_handler_descriptor(HandlerDescriptor(
            factory=lambda resolver: resolver.resolve(handler_key),
            name=handler_name(handler_key),
        ))

    def add_conditional_handler(self, handler_key, predicate):
        """
        Add a handler that only runs when predicate(context) is true.

        Args:
            handler_key: Key passed to resolver.resolve() at run time
            predicate: Callable taking the context and returning a bool

        Returns:
            self (for method chaining)
        """
        if predicate is None:
            raise ValueError("predicate is required")

        return self.add_handler_descriptor(HandlerDescriptor(
            factory=lambda resolver: resolver.resolve(handler_key),
            name=handler_name(handler_key),
            condition=predicate,
        ))

    def add_handler_descriptor(self, descriptor):
        """Append a prebuilt HandlerDescriptor. Used by extensions."""
        if descriptor is None:
            raise ValueError("descriptor is required")

        self._descriptors.append(descriptor)
        return self

    def use_exception_handler(self, callback):
        """
        Register the chain-level exception handler.

        The callback receives (exception, context) and may be a coroutine
        function. When registered, a raising handler no longer aborts the run:
        the exception is passed to the callback and the chain continues.
        Only the last registration is kept.

        Returns:
            self (for method chaining)
        """
        if callback is None:
            raise ValueError("callback is required")

        self._exception_handler = callback
        return self

    def use_diagnostics(self, callback):
        """
        Register the diagnostics callback, invoked once per run with ChainDiagnostics.
        Only the last registration is kept.

        Returns:
            self (for method chaining)
        """
        if callback is None:
            raise ValueError("callback is required")

        self._diagnostics_handler = callback
        return self

    def build(self):
        """
        Build a Chain from the current configuration.

        The descriptors are copied, so later changes to this builder do not
        affect chains that were already built.
        """
        return Chain(
            self._resolver,
            list(self._descriptors),
            exception_handler=self._exception_handler,
            diagnostics_handler=self._diagnostics_handler,
            name=self._name,
        )

    def handler_count(self):
        """Return the number of handlers registered so far."""
        return len(self._descriptors)

    def __repr__(self):
        return (f"{self.__class__.__name__}(handlers={len(self._descriptors)}, "
                f"exception_handler={self._exception_handler is not None}, "
                f"diagnostics={self._diagnostics_handler is not None})")
