"""TTL memoization for sync and async callables.

    async def load_user(set_ttl, user_id):
        data = await api.get(f"/users/{user_id}")
        set_ttl(data["max_age"])  # applies to this entry only
        return data

    fetch_user = with_cache(load_user, 60)

    await fetch_user(1)
    await fetch_user(1)        # served from cache
    fetch_user.clear()         # drop everything
    fetch_user.update_ttl(180) # new default, renews unexpired entries

Each ``with_cache`` call owns its own cache and TTL. Async results are stored
as the pending task before they settle, so concurrent callers with the same
arguments share one computation. Each caller awaits its own shield around
that task: cancelling one caller (``asyncio.wait_for`` timing out, say) never
cancels the shared computation. A failed computation is evicted and the next
call retries.
"""
from __future__ import annotations

import asyncio
import functools
import inspect
import logging
import math
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from utilkit.utils.cache_key import make_key

logger = logging.getLogger(__name__)

NEVER_EXPIRE = -1

SetTtl = Callable[[float], None]


@dataclass
class CacheEntry:
    value: Any
    expires_at: float
    is_async: bool = False
    # set by update_ttl; a later set_ttl from the pending call no longer applies
    renewed: bool = False


def _expires_at(now: float, ttl_seconds: float) -> float:
    if ttl_seconds == NEVER_EXPIRE:
        return math.inf
    return now + ttl_seconds


def _resolved(value: Any) -> asyncio.Future:
    fut = asyncio.get_running_loop().create_future()
    fut.set_result(value)
    return fut


class CachedFunction:
    """Callable returned by :func:`with_cache`."""

    def __init__(
        self,
        fn: Callable[..., Any],
        ttl_seconds: float = NEVER_EXPIRE,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._fn = fn
        self._ttl = ttl_seconds
        self._clock = clock
        self._cache: Dict[str, CacheEntry] = {}
        functools.update_wrapper(self, fn)

    @property
    def ttl(self) -> float:
        return self._ttl

    def __len__(self) -> int:
        return len(self._cache)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        key = make_key(args, kwargs)
        now = self._clock()
        entry = self._cache.get(key)
        if entry is not None and now < entry.expires_at:
            if not entry.is_async:
                return entry.value
            if isinstance(entry.value, asyncio.Future):
                return asyncio.shield(entry.value)
            return _resolved(entry.value)

        override: Optional[float] = None

        def set_ttl(seconds: float) -> None:
            nonlocal override
            override = seconds

        result = self._fn(set_ttl, *args, **kwargs)

        if inspect.isawaitable(result):
            task = asyncio.ensure_future(result)
            pending = CacheEntry(task, _expires_at(now, self._ttl), is_async=True)
            self._cache[key] = pending

            def _settle(fut: asyncio.Future) -> None:
                if self._cache.get(key) is not pending:
                    # cleared or superseded while in flight
                    return
                if fut.cancelled() or fut.exception() is not None:
                    logger.debug("evicting failed computation for %s", key)
                    del self._cache[key]
                    return
                pending.value = fut.result()
                if override is not None and not pending.renewed:
                    pending.expires_at = _expires_at(now, override)

            task.add_done_callback(_settle)
            return asyncio.shield(task)

        ttl = self._ttl if override is None else override
        self._cache[key] = CacheEntry(result, _expires_at(now, ttl))
        return result

    def clear(self) -> None:
        """Drop every entry. In-flight computations are not written back."""
        self._cache.clear()

    def update_ttl(self, seconds: float) -> None:
        """Set the default TTL and renew every unexpired entry from now.

        Renewal also covers pending entries and takes precedence over a
        ``set_ttl`` their computation calls afterwards.
        """
        self._ttl = seconds
        now = self._clock()
        expires_at = _expires_at(now, seconds)
        for entry in self._cache.values():
            if entry.expires_at > now:
                entry.expires_at = expires_at
                entry.renewed = True


def with_cache(
    fn: Callable[..., Any],
    ttl_seconds: float = NEVER_EXPIRE,
    *,
    clock: Callable[[], float] = time.monotonic,
) -> CachedFunction:
    """Memoize ``fn(set_ttl, *args, **kwargs)`` by its arguments.

    ``ttl_seconds=-1`` never expires. ``fn`` may call ``set_ttl(seconds)`` to
    override the TTL of the result it is producing.
    """
    return CachedFunction(fn, ttl_seconds, clock=clock)


def cached(ttl_seconds: float = NEVER_EXPIRE, *, clock: Callable[[], float] = time.monotonic):
    """Decorator form of :func:`with_cache`."""
    def decorator(fn):
        return with_cache(fn, ttl_seconds, clock=clock)
    return decorator
