"""
Result handlers and the adapter that lets them run inside a chain.
"""

import inspect

from chainkit import Handler, HandlerResult


class ResultHandler:
    """
    Base class for handlers that report a Result instead of a HandlerResult.

    A successful Result lets the chain continue, a failed one stops it.
    """

    async def handle(self, context, cancellation):
        """
        Execute the handler logic.

        Returns:
            Result indicating success or failure
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement handle()")

    def __repr__(self):
        return f"{self.__class__.__name__}()"


class ResultHandlerAdapter(Handler):
    """
    Wraps a ResultHandler so it satisfies the Handler contract.

    Success maps to CONTINUE and failure to STOP. When on_result is given it
    receives the raw Result once per call, before the translation. Exceptions
    raised by the wrapped handler propagate unchanged.
    """

    def __init__(self, result_handler, on_result=None):
        if result_handler is None:
            raise ValueError("result_handler is required")

        self._result_handler = result_handler
        self._on_result = on_result

    @property
    def inner(self):
        return self._result_handler

    async def handle(self, context, cancellation):
        result = self._result_handler.handle(context, cancellation)
        if inspect.isawaitable(result):
            result = await result

        if self._on_result is not None:
            self._on_result(result)

        return HandlerResult.CONTINUE if result.is_success() else HandlerResult.STOP

    def __repr__(self):
        return f"ResultHandlerAdapter({self._result_handler!r})"
