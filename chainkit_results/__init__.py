"""
ChainKit Results - Result-returning handlers for ChainKit

Lets handlers report a success/failure Result instead of CONTINUE/STOP:
- ResultHandler base class for result-returning handlers
- ResultHandlerAdapter translating success to CONTINUE and failure to STOP
- Builder extensions (add_result_handler, add_conditional_result_handler)
- Result-oriented diagnostics summary

Example:
    from chainkit import HandlerRegistry
    from chainkit_results import Result, ResultChainBuilder, ResultHandler

    class CheckAmount(ResultHandler):
        async def handle(self, context, cancellation):
            if context.amount <= 0:
                return Result.fail("Amount must be positive")
            return Result.ok()

    registry = HandlerRegistry().add_transient(CheckAmount)
    chain = (ResultChainBuilder(registry)
             .add_result_handler(CheckAmount, on_result=print)
             .build())
"""

__version__ = "1.0.0"
__author__ = "ChainKit Contributors"

from .adapter import ResultHandler, ResultHandlerAdapter
from .extensions import (
    ResultChainBuilder,
    add_conditional_result_handler,
    add_result_handler,
    format_result_diagnostics,
)
from .result import Result

__all__ = [
    'Result',
    'ResultHandler',
    'ResultHandlerAdapter',
    'ResultChainBuilder',
    'add_result_handler',
    'add_conditional_result_handler',
    'format_result_diagnostics',
]
