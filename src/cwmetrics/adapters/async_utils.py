"""Async-to-sync bridge for non-async callers."""

import asyncio
from collections.abc import Coroutine
from typing import Any, TypeVar

T = TypeVar("T")


def _run_sync(coro: Coroutine[Any, Any, T]) -> T:
    """Run a coroutine to completion in a new event loop.

    Args:
        coro: The coroutine to run.

    Returns:
        The coroutine's result. Exceptions propagate unchanged.

    Raises:
        RuntimeError: If called while an event loop is running in this
            thread. The coroutine is closed without being run.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)
    coro.close()
    raise RuntimeError(
        "write_sync() cannot be used inside a running event loop; await write()"
    )
