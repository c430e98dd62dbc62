import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[2]))

from utilkit.utils.strings import camel_to_snake, capitalize, compact_str, decapitalize, snake_to_camel


@pytest.mark.parametrize(
    "snake, camel",
    [("user_name", "userName"), ("a_b_c", "aBC"), ("plain", "plain"), ("trailing_", "trailing_")],
)
def test_snake_to_camel(snake, camel):
    assert snake_to_camel(snake) == camel


def test_camel_to_snake():
    assert camel_to_snake("shouldComponentUpdate") == "should_component_update"
    assert camel_to_snake("plain") == "plain"


def test_capitalize_only_touches_first_letter():
    assert capitalize("hello") == "Hello"
    assert capitalize("hELLO") == "HELLO"
    assert capitalize("") == ""
    assert decapitalize("Hello") == "hello"
    assert decapitalize("HELLO") == "hELLO"


def test_compact_str_replaces_newlines_with_literal():
    assert compact_str("a\r\nb\nc") == "a\\nb\\nc"


def test_compact_str_collapses_whitespace():
    text = "\n  Hello,\n       world!\n"
    assert compact_str(text, disable_newline_replace=True) == "Hello, world!"
    assert compact_str("a \t  b", disable_whitespace_collapse=True) == "a \t  b"


def test_compact_str_truncates():
    assert compact_str("hello world", max_length=5) == "hello..."
    assert compact_str("hello world", max_length=5, omission="~") == "hello~"
    assert compact_str("hello", max_length=0) == "hello"
    assert compact_str("hello", max_length=5) == "hello"


def test_compact_str_empty():
    assert compact_str() == ""
    assert compact_str("") == ""
