from typing import Awaitable, Optional, Tuple, TypeVar

T = TypeVar("T")


async def to(awaitable: Awaitable[T]) -> Tuple[Optional[BaseException], Optional[T]]:
    """Await ``awaitable`` and return ``(error, result)`` instead of raising.

    Examples
    --------
    ::

        err, data = await to(api.get("/blogs/hello-world"))
        if err:
            log(err)
            return

    Only ``Exception`` subclasses are captured; cancellation still propagates.
    """
    try:
        return None, await awaitable
    except Exception as e:
        return e, None
