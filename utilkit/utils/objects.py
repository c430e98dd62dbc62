from typing import Any, Callable, Dict, Optional, Union

from utilkit.utils.predicates import is_object

Key = Union[str, int]


def merge_objects(*objects: Any) -> Dict[str, Any]:
    """Deep-merge dicts from left to right into a new dict.

    Lists under the same key are concatenated, nested dicts are merged
    recursively, anything else is overwritten by the later value. Arguments
    that are not plain dicts are skipped. Inputs are left untouched.
    """
    out: Dict[str, Any] = {}
    for obj in objects:
        if not is_object(obj):
            continue
        for key, value in obj.items():
            current = out.get(key)
            if isinstance(current, list) and isinstance(value, list):
                out[key] = current + value
            elif is_object(current) and is_object(value):
                out[key] = merge_objects(current, value)
            elif is_object(value):
                out[key] = merge_objects(value)
            elif isinstance(value, list):
                out[key] = list(value)
            else:
                out[key] = value
    return out


def map_keys(obj: Any, get_new_key: Callable[[str], str]) -> Any:
    """Rename every dict key, recursing through dicts and lists.

    ``map_keys({"a": {"b": 1}}, str.upper) == {"A": {"B": 1}}``
    """
    if isinstance(obj, list):
        return [map_keys(item, get_new_key) for item in obj]
    if is_object(obj):
        return {get_new_key(k): map_keys(v, get_new_key) for k, v in obj.items()}
    return obj


def map_values(
    obj: Any,
    get_new_value: Callable[[Any, Key], Any],
    *,
    filter: Optional[Callable[[Any, Key], bool]] = None,
) -> Any:
    """Map every leaf value, keeping the dict/list structure.

    ``get_new_value(value, key)`` receives the dict key, or the list index for
    list items. ``filter(new_value, key)`` drops entries it returns False for.
    Non-container input is returned unchanged.
    """
    if isinstance(obj, list):
        mapped = [
            map_values(item, get_new_value, filter=filter) if is_object(item) else get_new_value(item, i)
            for i, item in enumerate(obj)
        ]
        if filter is not None:
            return [item for i, item in enumerate(mapped) if filter(item, i)]
        return mapped

    if is_object(obj):
        out: Dict[str, Any] = {}
        for key, value in obj.items():
            if is_object(value) or isinstance(value, list):
                new_value = map_values(value, get_new_value, filter=filter)
            else:
                new_value = get_new_value(value, key)
            if filter is None or filter(new_value, key):
                out[key] = new_value
        return out

    return obj
