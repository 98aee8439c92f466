"""
HandlerRegistry - A minimal resolver that maps handler keys to factories.
"""

import inspect
from typing import Any, Protocol

from .builder import ChainBuilder


class Resolver(Protocol):
    """Anything that can turn a handler key into a handler instance."""

    def resolve(self, key: Any) -> Any:
        ...


class HandlerNotRegisteredError(LookupError):
    """Raised when a key is resolved that was never registered."""

    def __init__(self, key):
        self.key = key
        super().__init__(f"No registration for {getattr(key, '__name__', key)!r}")


class _Registration:
    def __init__(self, factory, singleton):
        self.factory = factory
        self.singleton = singleton
        self.instance = None
        self.created = False

    def get(self, registry):
        if not self.singleton:
            return self.factory(registry)
        if not self.created:
            self.instance = self.factory(registry)
            self.created = True
        return self.instance


class HandlerRegistry:
    """
    Resolver backed by a dictionary of registrations.

    Example:
        registry = HandlerRegistry()
        registry.add_singleton(ConsoleLogger)
        registry.add_transient(ValidationHandler,
                               lambda r: ValidationHandler(r.resolve(ConsoleLogger)))

        chain = ChainBuilder(registry).add_handler(ValidationHandler).build()
    """

    def __init__(self):
        self._registrations = {}

    def add_transient(self, key, factory=None):
        """
        Register a key that produces a new instance on every resolve.

        Args:
            key: Registration key, usually a class
            factory: Optional callable(registry); defaults to calling key()

        Returns:
            self (for method chaining)
        """
        self._registrations[key] = _Registration(self._factory_for(key, factory), singleton=False)
        return self

    def add_singleton(self, key, factory=None):
        """Register a key whose instance is created on first resolve and then reused."""
        self._registrations[key] = _Registration(self._factory_for(key, factory), singleton=True)
        return self

    def add_instance(self, key, instance):
        """Register an already created instance."""
        registration = _Registration(lambda registry: instance, singleton=True)
        registration.instance = instance
        registration.created = True
        self._registrations[key] = registration
        return self

    def add_chain(self, key, configure):
        """
        Register a chain built lazily from this registry.

        Args:
            key: Registration key for the chain
            configure: Callable receiving a ChainBuilder bound to this registry

        Returns:
            self (for method chaining)
        """
        if configure is None:
            raise ValueError("configure is required")

        def build_chain(registry):
            builder = ChainBuilder(registry, name=getattr(key, '__name__', str(key)))
            configure(builder)
            return builder.build()

        return self.add_singleton(key, build_chain)

    def add_chain_builder(self, key):
        """Register a ChainBuilder bound to this registry."""
        return self.add_singleton(key, lambda registry: ChainBuilder(registry))

    def resolve(self, key):
        """
        Return the instance registered for key.

        Raises:
            HandlerNotRegisteredError: If key was never registered
        """
        try:
            registration = self._registrations[key]
        except KeyError:
            raise HandlerNotRegisteredError(key) from None
        return registration.get(self)

    def is_registered(self, key):
        return key in self._registrations

    def __contains__(self, key):
        return self.is_registered(key)

    def __len__(self):
        return len(self._registrations)

    def __repr__(self):
        return f"HandlerRegistry(registrations={len(self._registrations)})"

    @staticmethod
    def _factory_for(key, factory):
        if factory is not None:
            return factory
        if not inspect.isclass(key):
            raise TypeError(f"A factory is required for non-class key {key!r}")
        return lambda registry: key()
