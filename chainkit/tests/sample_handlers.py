"""
Handlers and contexts shared by the ChainKit tests.
"""

from dataclasses import dataclass, field

from chainkit import Handler, HandlerRegistry, HandlerResult


@dataclass
class OrderContext:
    amount: float = 0.0
    log: list = field(default_factory=list)


class HandlerA(Handler):
    async def handle(self, context, cancellation):
        context.log.append("A")
        return HandlerResult.CONTINUE


class HandlerB(Handler):
    async def handle(self, context, cancellation):
        context.log.append("B")
        return HandlerResult.CONTINUE


class HandlerC(Handler):
    async def handle(self, context, cancellation):
        context.log.append("C")
        return HandlerResult.CONTINUE


class StopHandler(Handler):
    async def handle(self, context, cancellation):
        context.log.append("StopHandler")
        return HandlerResult.STOP


class FailingHandler(Handler):
    async def handle(self, context, cancellation):
        context.log.append("FailingHandler")
        raise RuntimeError("Intentional failure")


class SyncHandler:
    """Duck-typed handler whose handle() is a plain function."""

    def handle(self, context, cancellation):
        context.log.append("Sync")
        return HandlerResult.CONTINUE


class CountingRegistry(HandlerRegistry):
    """Registry that records every resolved key."""

    def __init__(self):
        super().__init__()
        self.resolved = []

    def resolve(self, key):
        self.resolved.append(key)
        return super().resolve(key)
