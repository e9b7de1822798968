from __future__ import annotations

from ..errors import DepthLimitError
from ..models.types import JsonStructure


def nesting_depth(value: JsonStructure) -> int:
    """
    Return how many containers are nested along the deepest path of ``value``.

    Scalars have depth 0, ``{}`` and ``[]`` have depth 1. The walk uses an
    explicit stack so that it cannot exhaust the interpreter's recursion limit.
    """
    deepest = 0
    stack: list[tuple[JsonStructure, int]] = [(value, 0)]
    while stack:
        current, level = stack.pop()
        if isinstance(current, dict):
            children = list(current.values())
        elif isinstance(current, list):
            children = current
        else:
            deepest = max(deepest, level)
            continue
        deepest = max(deepest, level + 1)
        stack.extend((child, level + 1) for child in children)
    return deepest


def ensure_depth_within(value: JsonStructure, max_depth: int | None) -> None:
    """Raise DepthLimitError when ``value`` nests deeper than ``max_depth``.

    Args:
        value: Parsed document.
        max_depth: Maximum allowed container nesting; None disables the check.
    """
    if max_depth is None:
        return
    depth = nesting_depth(value)
    if depth > max_depth:
        raise DepthLimitError(
            f"Document nests {depth} levels deep; the limit is {max_depth}."
        )


__all__ = ["ensure_depth_within", "nesting_depth"]
