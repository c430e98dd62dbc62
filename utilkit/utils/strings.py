import math
import re

_SNAKE_RE = re.compile(r"_([a-zA-Z])")
_UPPER_RE = re.compile(r"([A-Z])")
_NEWLINE_RE = re.compile(r"\r?\n")
_SPACE_RE = re.compile(r"\s+")


def snake_to_camel(s: str) -> str:
    """``"user_name"`` -> ``"userName"``."""
    return _SNAKE_RE.sub(lambda m: m.group(1).upper(), s)


def camel_to_snake(s: str) -> str:
    """``"shouldComponentUpdate"`` -> ``"should_component_update"``."""
    return _UPPER_RE.sub(lambda m: "_" + m.group(1).lower(), s)


def capitalize(s: str) -> str:
    # str.capitalize() would lowercase the rest
    return s[:1].upper() + s[1:]


def decapitalize(s: str) -> str:
    return s[:1].lower() + s[1:]


def compact_str(
    text: str = "",
    *,
    max_length: float = math.inf,
    disable_newline_replace: bool = False,
    disable_whitespace_collapse: bool = False,
    omission: str = "...",
) -> str:
    """Squash ``text`` onto a single line.

    Newlines become a literal ``\\n`` (or a space when
    ``disable_newline_replace`` is set), whitespace runs collapse to one
    space, and the result is trimmed. When ``max_length`` is positive and
    finite the text is cut to that length and ``omission`` is appended.
    """
    if not text:
        return ""

    if disable_newline_replace:
        result = _NEWLINE_RE.sub(" ", text)
    else:
        result = _NEWLINE_RE.sub(r"\\n", text)

    if not disable_whitespace_collapse:
        result = _SPACE_RE.sub(" ", result)
    result = result.strip()

    if 0 < max_length < len(result):
        return result[: int(max_length)] + omission
    return result
