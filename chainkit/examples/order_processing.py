"""
Order processing example demonstrating business workflow with ChainKit.

Run with: python -m chainkit.examples.order_processing
"""

import asyncio
import logging
from dataclasses import dataclass, field

from chainkit import ChainBuilder, Handler, HandlerRegistry, HandlerResult, format_diagnostics
from chainkit_results import Result, ResultChainBuilder, ResultHandler, format_result_diagnostics


@dataclass
class OrderContext:
    order_id: str = ""
    amount: float = 0.0
    customer_email: str = ""
    is_valid: bool = True
    processing_log: list = field(default_factory=list)


# Handlers
class ValidationHandler(Handler):
    def __init__(self, logger):
        self.logger = logger

    async def handle(self, context, cancellation):
        context.processing_log.append("Validation")
        self.logger.info("Validating order %s...", context.order_id)

        if not context.order_id or context.amount <= 0:
            context.is_valid = False
            self.logger.error("Validation failed!")
            return HandlerResult.STOP

        print(f"✓ Order {context.order_id} validated")
        return HandlerResult.CONTINUE


class ProcessingHandler(Handler):
    def __init__(self, logger):
        self.logger = logger

    async def handle(self, context, cancellation):
        context.processing_log.append("Processing")
        self.logger.info("Processing order %s...", context.order_id)

        # Simulate payment processing
        await asyncio.sleep(0.1)

        print(f"✓ Order processed: ${context.amount:.2f}")
        return HandlerResult.CONTINUE


class NotificationHandler(Handler):
    def __init__(self, logger):
        self.logger = logger

    async def handle(self, context, cancellation):
        context.processing_log.append("Notification")
        self.logger.info("Sending notification to %s...", context.customer_email)

        await asyncio.sleep(0.05)

        print(f"✓ Confirmation email sent to {context.customer_email}")
        return HandlerResult.CONTINUE


class ResultValidationHandler(ResultHandler):
    def __init__(self, logger):
        self.logger = logger

    async def handle(self, context, cancellation):
        context.processing_log.append("ResultValidation")
        self.logger.info("Result-based validation for order %s...", context.order_id)

        if not context.order_id or context.amount <= 0:
            return Result.fail("Invalid order data")

        print(f"✓ Order {context.order_id} validated")
        return Result.ok()


class ResultProcessingHandler(ResultHandler):
    def __init__(self, logger):
        self.logger = logger

    async def handle(self, context, cancellation):
        context.processing_log.append("ResultProcessing")
        self.logger.info("Result-based processing for order %s...", context.order_id)

        await asyncio.sleep(0.05)

        print(f"✓ Order processed: ${context.amount:.2f}")
        return Result.ok()


def create_registry():
    registry = HandlerRegistry()
    registry.add_instance(logging.Logger, logging.getLogger("orders"))

    for handler_type in (ValidationHandler, ProcessingHandler, NotificationHandler,
                         ResultValidationHandler, ResultProcessingHandler):
        registry.add_transient(
            handler_type,
            lambda r, handler_type=handler_type: handler_type(r.resolve(logging.Logger)),
        )
    return registry


async def basic_chain(registry):
    print("=== Example 1: Basic Chain Execution ===\n")

    chain = (ChainBuilder(registry)
             .add_handler(ValidationHandler)
             .add_handler(ProcessingHandler)
             .add_handler(NotificationHandler)
             .use_diagnostics(lambda diagnostics: print(format_diagnostics(diagnostics)))
             .build())

    context = OrderContext(order_id="ORD-12345", amount=150.00, customer_email="customer@example.com")
    await chain.run(context)

    print(f"\nProcessing log: {' -> '.join(context.processing_log)}\n")


async def early_exit_chain(registry):
    print("=== Example 2: Chain with Early Exit ===\n")

    def report(diagnostics):
        if diagnostics.stopped_early:
            print(f"✗ Chain stopped early: {diagnostics.early_stop_reason}")

    chain = (ChainBuilder(registry)
             .add_handler(ValidationHandler)
             .add_handler(ProcessingHandler)
             .add_handler(NotificationHandler)
             .use_diagnostics(report)
             .build())

    context = OrderContext(order_id="", amount=-10.00, customer_email="invalid@example.com")
    await chain.run(context)

    print(f"\nProcessing log: {' -> '.join(context.processing_log)}\n")


async def result_chain(registry):
    print("=== Example 3: Result-based Chain ===\n")

    def report(diagnostics):
        print(f"Total execution time: {diagnostics.total_execution_time * 1000:.2f}ms")
        print(format_result_diagnostics(diagnostics))

    chain = (ResultChainBuilder(registry)
             .add_result_handler(ResultValidationHandler)
             .add_result_handler(ResultProcessingHandler)
             .use_diagnostics(report)
             .build())

    context = OrderContext(order_id="ORD-67890", amount=250.00, customer_email="result@example.com")
    await chain.run(context)

    print(f"\nProcessing log: {' -> '.join(context.processing_log)}\n")


async def conditional_chain(registry):
    print("=== Example 4: Conditional Handlers ===\n")

    chain = (ChainBuilder(registry)
             .add_handler(ValidationHandler)
             .add_conditional_handler(ProcessingHandler, lambda ctx: ctx.amount > 100)
             .add_handler(NotificationHandler)
             .use_diagnostics(lambda diagnostics: print(f"Skipped handlers: {len(diagnostics.skipped)}"))
             .build())

    context = OrderContext(order_id="ORD-SMALL", amount=50.00, customer_email="small@example.com")
    await chain.run(context)

    print(f"\nProcessing log: {' -> '.join(context.processing_log)}\n")


async def mixed_chain(registry):
    print("=== Example 5: Mixing Handler Types with Result Capture ===\n")

    results = []

    chain = (ResultChainBuilder(registry)
             .add_handler(ValidationHandler)
             .add_result_handler(ResultValidationHandler,
                                 lambda result: results.append(("ResultValidationHandler", result)))
             .add_result_handler(ResultProcessingHandler,
                                 lambda result: results.append(("ResultProcessingHandler", result)))
             .build())

    context = OrderContext(order_id="ORD-MIXED", amount=300.00, customer_email="mixed@example.com")
    await chain.run(context)

    print(f"\nProcessing log: {' -> '.join(context.processing_log)}")
    print(f"Captured {len(results)} Result objects:")
    for name, result in results:
        print(f"  - {name}: {result}")
    print()


async def main():
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(name)s: %(message)s")
    registry = create_registry()

    await basic_chain(registry)
    await early_exit_chain(registry)
    await result_chain(registry)
    await conditional_chain(registry)
    await mixed_chain(registry)


if __name__ == "__main__":
    asyncio.run(main())
