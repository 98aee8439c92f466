"""
Result - Success or failure outcome returned by result handlers.

A result handler reports what happened as a Result rather than steering the
chain directly. ResultHandlerAdapter turns a successful Result into
HandlerResult.CONTINUE and a failed one into HandlerResult.STOP.
"""


class Result:
    """
    Outcome of a result handler.

    Attributes:
        success: True when the handler succeeded
        error: Human readable error message (a str, not an exception);
            None for successful results
        data: Optional payload produced by the handler, passed through untouched

    Use the ok() and fail() constructors instead of calling Result directly.
    A Result is truthy exactly when it is successful, so ``if result:`` reads
    as "if it worked".
    """

    def __init__(self, success, error=None, data=None):
        self.success = success
        self.error = error
        self.data = data

    @staticmethod
    def ok(data=None):
        """
        Create a successful result.

        Args:
            data: Optional payload, e.g. an identifier created by the handler

        Returns:
            Result with success=True and error=None
        """
        return Result(True, data=data)

    @staticmethod
    def fail(error, data=None):
        """
        Create a failed result.

        Args:
            error: Message describing why the handler failed. Handlers that
                caught an exception should pass str(exception) here, and raise
                instead when the exception itself must reach the chain.
            data: Optional payload describing the failure

        Returns:
            Result with success=False

        Raises:
            ValueError: If error is empty
        """
        if not error:
            raise ValueError("A failed result requires an error message")
        return Result(False, error=error, data=data)

    def is_success(self):
        """True when the handler succeeded; the adapter maps this to CONTINUE."""
        return self.success

    def is_failure(self):
        """True when the handler failed; the adapter maps this to STOP."""
        return not self.success

    def __bool__(self):
        return self.success

    def __repr__(self):
        if self.success:
            return f"Result.ok(data={self.data!r})"
        return f"Result.fail(error={self.error!r}, data={self.data!r})"

    def __str__(self):
        return "Success" if self.success else f"Failure: {self.error}"
