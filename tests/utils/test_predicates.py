import sys
from collections import OrderedDict
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[2]))

from utilkit.utils.predicates import is_nil, is_object, is_primitive, is_truthy


def test_is_nil():
    assert is_nil(None)
    assert not is_nil(0)
    assert not is_nil("")


def test_is_object_only_plain_dicts():
    assert is_object({})
    assert not is_object(OrderedDict())
    assert not is_object([])
    assert not is_object(None)


@pytest.mark.parametrize("value", [None, 1, 1.5, True, "s", b"b"])
def test_is_primitive_true(value):
    assert is_primitive(value)


@pytest.mark.parametrize("value", [[], {}, object(), lambda: None])
def test_is_primitive_false(value):
    assert not is_primitive(value)


def test_is_truthy():
    assert is_truthy(1)
    assert not is_truthy("")
    assert not is_truthy([])
