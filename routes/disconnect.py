"""Helpers for abandoning backend calls when the browser goes away."""

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

from fastapi import Request

from exceptions import ClientDisconnectedError

T = TypeVar("T")

DISCONNECT_POLL_SECONDS = 1.0

# Non-standard status logged when the client left before a reply was ready.
CLIENT_CLOSED_REQUEST = 499


async def cancel_on_disconnect(
    request: Request,
    awaitable: Awaitable[T],
    poll_interval: float | None = None,
) -> T:
    """
    Awaits a backend call while watching the inbound connection.

    Raises:
        ClientDisconnectedError: If the client disconnects first; the pending
            call is cancelled and has finished unwinding when this returns.
    """
    if poll_interval is None:
        poll_interval = DISCONNECT_POLL_SECONDS

    task = asyncio.ensure_future(awaitable)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=poll_interval)
            if done:
                return task.result()
            if await request.is_disconnected():
                raise ClientDisconnectedError()
    finally:
        if not task.done():
            task.cancel()
            await asyncio.wait({task})
