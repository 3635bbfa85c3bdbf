"""Adapters – forward failures of async request handlers to an error channel."""
from __future__ import annotations

import functools
import inspect
from typing import Any, Awaitable, Callable, TypeVar

T = TypeVar("T")

ErrorChannel = Callable[[Exception], Any]


def handle_async_request(
    handler: Callable[..., Awaitable[T]],
    on_error: ErrorChannel,
) -> Callable[..., Awaitable[T | None]]:
    """Wrap *handler* so any exception it raises reaches *on_error* once.

    *on_error* may be sync or async.  The wrapper returns ``None`` after a
    failure instead of re-raising.  ``asyncio.CancelledError`` is a
    ``BaseException`` and is left to propagate.

    Usage::

        async def on_error(exc: Exception) -> None:
            payload = extract_generic_payload_or_default(exc)
            await reply(payload)

        get_user = handle_async_request(get_user, on_error)
    """

    @functools.wraps(handler)
    async def wrapper(*args: Any, **kwargs: Any) -> T | None:
        try:
            return await handler(*args, **kwargs)
        except Exception as exc:
            outcome = on_error(exc)
            if inspect.isawaitable(outcome):
                await outcome
            return None

    return wrapper


__all__ = ["ErrorChannel", "handle_async_request"]
