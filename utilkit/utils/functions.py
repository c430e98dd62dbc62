import inspect
from typing import Any, Awaitable, Callable, Optional, TypeVar, Union

T = TypeVar("T")


class LoopLimitError(RuntimeError): ...


async def loop_until(
    fn: Callable[[int], Union[T, Awaitable[T]]],
    *,
    max_retries: int = 5,
    should_stop: Optional[Callable[[T], bool]] = None,
) -> T:
    """Call ``fn(attempt)`` until ``should_stop`` accepts its result.

    ``fn`` may be sync or async and receives the zero-based attempt number.
    Without ``should_stop`` the loop runs ``max_retries`` times and returns
    the last result.

    Raises
    ------
    LoopLimitError
        If ``should_stop`` was given and never returned True.
    """

    last: Any = None
    for i in range(max_retries):
        last = fn(i)
        if inspect.isawaitable(last):
            last = await last
        if should_stop is not None and should_stop(last) is True:
            return last

    if should_stop is None:
        return last

    raise LoopLimitError(f"stop condition not met after {max_retries} attempts")
