from typing import Any


def is_nil(value: Any) -> bool:
    return value is None


def is_object(value: Any) -> bool:
    """True only for plain ``dict`` instances, not subclasses or mappings."""
    return type(value) is dict


def is_primitive(value: Any) -> bool:
    return value is None or isinstance(value, (bool, int, float, complex, str, bytes))


def is_truthy(value: Any) -> bool:
    return bool(value)
