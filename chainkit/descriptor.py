"""
HandlerDescriptor - Internal record binding a handler factory to its guard and name.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional


def handler_name(handler_key):
    """Display name for a handler key: its __name__ when it has one."""
    return getattr(handler_key, '__name__', None) or str(handler_key)


@dataclass(frozen=True)
class HandlerDescriptor:
    """
    Describes one step of a chain.

    Attributes:
        factory: Callable taking the resolver and returning a handler instance
        name: Display name used in diagnostics and stop reasons
        condition: Optional predicate over the context; None means always run
    """

    factory: Callable[[Any], Any]
    name: str
    condition: Optional[Callable[[Any], bool]] = None

    def __post_init__(self):
        if self.factory is None:
            raise ValueError("factory is required")
        if self.name is None:
            raise ValueError("name is required")

    def should_run(self, context):
        """Return True if the guard allows this step for the given context."""
        return self.condition is None or bool(self.condition(context))

    def create(self, resolver):
        """Produce a handler instance through the factory."""
        return self.factory(resolver)
