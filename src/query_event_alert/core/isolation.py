"""Fault boundary for event handlers: a failure is reported, never raised."""

import sys
import traceback
from collections.abc import Awaitable, Callable
from contextlib import suppress

FallbackWriter = Callable[[str], None]
ErrorReporter = Callable[[Exception], Awaitable[None]]

SECONDARY_FAILURE = "Another error occurred while handling an error in the event listener."


def write_stderr(text: str) -> None:
    print(text, file=sys.stderr, flush=True)


async def isolate(
    name: str,
    action: Callable[[], Awaitable[None]],
    fallback: FallbackWriter = write_stderr,
    report: ErrorReporter | None = None,
) -> bool:
    """Run ``action``, absorbing any exception it raises.

    On failure one diagnostic naming the handler goes to ``fallback`` and
    ``report`` is awaited. If either of those raises, a second, simpler
    diagnostic is attempted and anything it raises is discarded.

    Returns True when the action completed.
    """
    try:
        await action()
        return True
    except Exception as e:
        try:
            fallback(f"Error in an event listener handler {name}!\n{traceback.format_exc()}")
            if report is not None:
                await report(e)
        except Exception:
            with suppress(Exception):
                fallback(f"{SECONDARY_FAILURE}\n{traceback.format_exc()}")
        return False
