import dataclasses
import json
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Set, Tuple
from uuid import UUID

from pydantic import BaseModel


class CacheKeyError(TypeError):
    """Raised when an argument list cannot be turned into a stable key."""


def _encode(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        # one level only; nested values go back through _normalize
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if isinstance(obj, (set, frozenset)):
        try:
            return sorted(obj)
        except TypeError:
            return sorted(obj, key=repr)
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (datetime, date, time)):
        return obj.isoformat()
    if isinstance(obj, (Decimal, UUID)):
        return str(obj)
    raise CacheKeyError(f"Cannot derive cache key: {type(obj).__name__} is not serializable")


def _normalize(obj: Any, active: Set[int]) -> Any:
    if obj is None or isinstance(obj, (str, int, float)):
        return obj

    oid = id(obj)
    if oid in active:
        raise CacheKeyError(f"Cannot derive cache key: circular reference through {type(obj).__name__}")
    active.add(oid)
    try:
        if isinstance(obj, dict):
            out = {}
            for k, v in obj.items():
                # json would turn 1 and "1" into the same key
                if not isinstance(k, str):
                    raise CacheKeyError(f"Cannot derive cache key: dict key {k!r} is not a str")
                out[k] = _normalize(v, active)
            return out
        if isinstance(obj, (list, tuple)):
            return [_normalize(v, active) for v in obj]
        return _normalize(_encode(obj), active)
    finally:
        active.discard(oid)


def make_key(args: Tuple[Any, ...], kwargs: Dict[str, Any] | None = None) -> str:
    """Return a canonical JSON key for a call's arguments.

    Object keys are sorted, so ``{"a": 1, "b": 2}`` and ``{"b": 2, "a": 1}``
    produce the same key. Tuples serialize as lists.

    Raises
    ------
    CacheKeyError
        If an argument is cyclic, has a dict key that is not a ``str``, or
        is of a type with no stable encoding (functions, arbitrary class
        instances).
    """

    normalized = _normalize([list(args), kwargs or {}], set())
    return json.dumps(normalized, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
