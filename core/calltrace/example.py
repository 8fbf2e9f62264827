"""Example usage of the call trace module."""

import asyncio
import logging

from .recorder import Recorder, trace_async_function, trace_function
from .render import check_balance, render_trace

logger = logging.getLogger(__name__)

recorder = Recorder("example")


@trace_function(recorder=recorder)
def double(x: int) -> int:
    return x * 2


@trace_function(recorder=recorder)
def negate(x: int) -> int:
    return -1 * x


@trace_function(name="void", recorder=recorder)
def no_value():
    logger.info("No return value here!")


@trace_function(recorder=recorder)
def factorial(n: int) -> int:
    if n in (0, 1):
        return 1
    return n * factorial(n - 1)


@trace_function(recorder=recorder)
def do_stuff(x: int) -> int:
    """Mix of nested, repeated and recursive traced calls."""
    logger.info("%d", double(x) + double(x))
    logger.info("%d", factorial(x))
    result = double(x) + negate(5) + 1
    no_value()
    return result


@trace_async_function(recorder=recorder)
async def do_async_stuff(x: int) -> int:
    await asyncio.sleep(0)
    return double(x)


def demonstrate_tracing(x: int = 3) -> str:
    """Run the traced functions and return the rendered trace."""
    with recorder.span("demonstrate_tracing"):
        result = do_stuff(x)
        logger.info("do_stuff(%d) = %d", x, result)
        asyncio.run(do_async_stuff(x))

    check_balance(recorder)
    logger.info(
        "Recorded %d entries (%d entered, %d exited)",
        len(recorder),
        recorder.entered_count,
        recorder.exited_count,
    )
    return render_trace(recorder)


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    print("Execution trace:")
    print(demonstrate_tracing())
