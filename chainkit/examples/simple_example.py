"""
Simple example demonstrating a ChainKit chain with an exception handler.

Run with: python -m chainkit.examples.simple_example
"""

import asyncio
import datetime

from chainkit import ChainBuilder, Handler, HandlerRegistry, HandlerResult, format_diagnostics


# Define some simple handlers
class GreetUser(Handler):
    async def handle(self, context, cancellation):
        name = context.get('name', 'World')
        context['greeting'] = f"Hello, {name}!"
        print(f"Handler: {context['greeting']}")
        return HandlerResult.CONTINUE


class AddTimestamp(Handler):
    async def handle(self, context, cancellation):
        context['timestamp'] = datetime.datetime.now().isoformat()
        print(f"Handler: Added timestamp {context['timestamp']}")
        return HandlerResult.CONTINUE


class FlakyHandler(Handler):
    async def handle(self, context, cancellation):
        raise RuntimeError("Upstream service unavailable")


class FormatMessage(Handler):
    async def handle(self, context, cancellation):
        context['final_message'] = f"{context['greeting']} (at {context['timestamp']})"
        print("Handler: Formatted message")
        return HandlerResult.CONTINUE


async def log_exception(exception, context):
    print(f"[ERROR] {type(exception).__name__}: {exception}")
    context.setdefault('errors', []).append(str(exception))


async def main():
    print("=" * 60)
    print("ChainKit Simple Example")
    print("=" * 60)
    print()

    registry = HandlerRegistry()
    for handler_type in (GreetUser, AddTimestamp, FlakyHandler, FormatMessage):
        registry.add_singleton(handler_type)

    # Build the chain
    chain = (ChainBuilder(registry, name="greeting")
             .add_handler(GreetUser)
             .add_handler(AddTimestamp)
             .add_handler(FlakyHandler)
             .add_handler(FormatMessage)
             .use_exception_handler(log_exception)
             .use_diagnostics(lambda diagnostics: print(format_diagnostics(diagnostics)))
             .build())

    print(f"Chain built: {chain}")
    print()

    print("Executing chain...")
    print("-" * 60)

    context = {'name': 'Alice'}
    await chain.run(context)

    print("-" * 60)
    print()
    print(f"Final message: {context.get('final_message')}")
    print(f"Errors absorbed: {context.get('errors', [])}")
    print()
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
