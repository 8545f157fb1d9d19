"""Helpers for running storage writes under task cancellation."""

import asyncio
from collections.abc import Coroutine
from typing import Any, TypeVar

import structlog

T = TypeVar("T")

logger = structlog.get_logger(__name__)


async def run_to_completion(coro: Coroutine[Any, Any, T]) -> T:
    """
    Await ``coro`` so that cancelling the caller cannot interrupt it.

    If the calling task is cancelled while the write is in flight, the write
    still finishes before ``CancelledError`` is re-raised to the caller. A
    failure of the write in that situation is logged, since the cancelled
    caller will never see it.
    """
    task = asyncio.ensure_future(coro)
    try:
        return await asyncio.shield(task)
    except asyncio.CancelledError:
        while not task.done():
            try:
                await asyncio.wait({task})
            except asyncio.CancelledError:
                continue
        if not task.cancelled() and task.exception() is not None:
            logger.error("write_failed_after_cancellation", exc_info=task.exception())
        raise
