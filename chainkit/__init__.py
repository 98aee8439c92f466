"""
ChainKit - Sequential chain of responsibility for async Python

ChainKit runs an ordered list of handlers over a shared context object.
It provides a structured approach to building workflows where:
- Handlers represent individual steps and return CONTINUE or STOP
- Context is any caller-owned object, mutated by the handlers
- Guards decide per run whether a handler executes
- Diagnostics report timing and outcome of every step

Example:
    from chainkit import ChainBuilder, Handler, HandlerRegistry, HandlerResult

    class Double(Handler):
        async def handle(self, context, cancellation):
            context['output'] = context['input'] * 2
            return HandlerResult.CONTINUE

    registry = HandlerRegistry().add_transient(Double)
    chain = ChainBuilder(registry).add_handler(Double).build()

    context = {'input': 5}
    await chain.run(context)
    print(context['output'])  # 10
"""

__version__ = "1.0.0"
__author__ = "ChainKit Contributors"

from .builder import ChainBuilder
from .cancellation import CancellationToken
from .chain import Chain
from .descriptor import HandlerDescriptor
from .diagnostics import ChainDiagnostics, HandlerDiagnostics, format_diagnostics
from .handler import Handler, HandlerResult
from .registry import HandlerNotRegisteredError, HandlerRegistry, Resolver

__all__ = [
    'Chain',
    'ChainBuilder',
    'CancellationToken',
    'Handler',
    'HandlerResult',
    'HandlerDescriptor',
    'ChainDiagnostics',
    'HandlerDiagnostics',
    'format_diagnostics',
    'HandlerRegistry',
    'HandlerNotRegisteredError',
    'Resolver',
]
