"""
CancellationToken - Cooperative cancellation signal shared by one chain run.
"""

import asyncio


class CancellationToken:
    """
    Cooperative cancellation signal.

    The chain checks the token before every step; handlers receive the same
    token and are expected to honour it themselves.
    """

    def __init__(self):
        self._event = asyncio.Event()

    def cancel(self):
        """Signal cancellation. Idempotent."""
        self._event.set()

    @property
    def is_cancelled(self):
        """True once cancel() has been called."""
        return self._event.is_set()

    def raise_if_cancelled(self):
        """Raise asyncio.CancelledError if cancellation was requested."""
        if self._event.is_set():
            raise asyncio.CancelledError("Chain run was cancelled")

    async def wait(self):
        """Suspend until cancel() is called."""
        await self._event.wait()

    def __repr__(self):
        return f"CancellationToken(cancelled={self.is_cancelled})"
