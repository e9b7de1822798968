import pytest

from json2markdown.core.depth import ensure_depth_within, nesting_depth
from json2markdown.errors import DepthLimitError


def test_nesting_depth() -> None:
    assert nesting_depth(1) == 0
    assert nesting_depth({}) == 1
    assert nesting_depth([]) == 1
    assert nesting_depth({"a": [{"b": 1}], "c": 2}) == 3


def test_nesting_depth_handles_very_deep_documents() -> None:
    value: list = []
    for _ in range(4999):
        value = [value]
    assert nesting_depth(value) == 5000


def test_ensure_depth_within() -> None:
    ensure_depth_within({"a": {"b": {}}}, None)
    ensure_depth_within({"a": {"b": {}}}, 3)
    with pytest.raises(DepthLimitError, match="3 levels deep; the limit is 2"):
        ensure_depth_within({"a": {"b": {}}}, 2)
