from __future__ import annotations

import asyncio
import functools
import inspect
from typing import Any, Callable, Optional


async def sleep(seconds: float = 0.15) -> None:
    await asyncio.sleep(seconds)


def _invoke(fn: Callable[..., Any], args: tuple, kwargs: dict) -> None:
    result = fn(*args, **kwargs)
    if inspect.isawaitable(result):
        asyncio.ensure_future(result)


def debounce(fn: Callable[..., Any], delay: float = 0.3) -> Callable[..., None]:
    """Run ``fn`` only after calls have stopped for ``delay`` seconds.

    Every call restarts the timer; the last call's arguments win. Timers are
    scheduled on the running event loop, so the wrapper must be called from
    inside one. ``wrapper.cancel()`` drops a pending call.
    """
    handle: Optional[asyncio.TimerHandle] = None

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> None:
        nonlocal handle
        if handle is not None:
            handle.cancel()
        loop = asyncio.get_running_loop()
        handle = loop.call_later(delay, _invoke, fn, args, kwargs)

    def cancel() -> None:
        nonlocal handle
        if handle is not None:
            handle.cancel()
            handle = None

    wrapper.cancel = cancel  # type: ignore[attr-defined]
    return wrapper


def throttle(fn: Callable[..., Any], delay: float = 0.3) -> Callable[..., None]:
    """Run ``fn`` at most once per ``delay`` seconds.

    The first call in a window is scheduled to run when the window closes;
    further calls until then are dropped. Must be called from inside a
    running event loop.
    """
    handle: Optional[asyncio.TimerHandle] = None

    def fire(args: tuple, kwargs: dict) -> None:
        nonlocal handle
        handle = None
        _invoke(fn, args, kwargs)

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> None:
        nonlocal handle
        if handle is not None:
            return
        loop = asyncio.get_running_loop()
        handle = loop.call_later(delay, fire, args, kwargs)

    def cancel() -> None:
        nonlocal handle
        if handle is not None:
            handle.cancel()
            handle = None

    wrapper.cancel = cancel  # type: ignore[attr-defined]
    return wrapper
