"""
Handler - Base class for units of work in a chain.
"""

from enum import Enum


class HandlerResult(Enum):
    """Signal returned by a handler to control the chain."""
    CONTINUE = "continue"  # Proceed to the next handler
    STOP = "stop"          # Halt the chain, remaining handlers never run


class Handler:
    """
    Base class for handlers in a chain.
    Each handler represents a discrete unit of work on a shared context.

    Handlers should be stateless - all state flows through the context.
    Any object with a compatible ``handle`` method can be used in place of a subclass.
    """

    async def handle(self, context, cancellation):
        """
        Execute the handler logic.

        Args:
            context: Caller-owned context object shared by the whole chain
            cancellation: CancellationToken to observe cooperatively

        Returns:
            HandlerResult.CONTINUE or HandlerResult.STOP

        Raises:
            NotImplementedError: This method must be implemented by subclasses
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement handle()")

    def __repr__(self):
        return f"{self.__class__.__name__}()"

    def __str__(self):
        return self.__class__.__name__
