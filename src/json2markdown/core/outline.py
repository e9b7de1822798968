from __future__ import annotations

from collections.abc import Callable

from ..models.types import JsonStructure
from .casing import title_case
from .renderer import MAX_HEADING_LEVEL, cap_heading_runs, scalar_text

TAB = "  "
LIST_TAG = "* "
H_TAG = "#"


def _header_chain(label: str, depth: int) -> str:
    hashes = H_TAG * min(depth + 1, MAX_HEADING_LEVEL)
    prefix = LIST_TAG if depth > 0 else ""
    return f"{prefix}{hashes} {label} {hashes}\n"


def _value_chain(label: str, value: JsonStructure, depth: int) -> str:
    return f"{TAB * max(depth - 1, 0)}{LIST_TAG}{label}: {scalar_text(value)}\n"


class _OutlineWalker:
    def __init__(self, key_formatter: Callable[[str], str]) -> None:
        self.key_formatter = key_formatter
        self.lines: list[str] = []

    def walk(self, block: JsonStructure, depth: int) -> None:
        if isinstance(block, dict):
            self.walk_mapping(block, depth)
        elif isinstance(block, list):
            self.walk_sequence(block, depth)

    def walk_mapping(self, mapping: dict[str, JsonStructure], depth: int) -> None:
        for key, value in mapping.items():
            label = self.key_formatter(str(key))
            if isinstance(value, (dict, list)):
                self.lines.append(_header_chain(label, depth))
                self.walk(value, depth + 1)
            else:
                self.lines.append(_value_chain(label, value, depth))

    def walk_sequence(self, items: list[JsonStructure], depth: int) -> None:
        for index, item in enumerate(items):
            if isinstance(item, (dict, list)):
                self.walk(item, depth)
            else:
                self.lines.append(_value_chain(str(index), item, depth))


def render_outline(
    value: JsonStructure, *, key_formatter: Callable[[str], str] = title_case
) -> str:
    """
    Render ``value`` as a heading-chain outline.

    Keys holding containers become headings whose level follows the nesting
    depth (``# Key #``, ``* ## Child ##``, ...); scalar entries become
    ``* Key: value`` bullets and array scalars are labelled by their index.
    A scalar root renders to an empty string.
    """
    walker = _OutlineWalker(key_formatter)
    walker.walk(value, 0)
    return cap_heading_runs("".join(walker.lines))


__all__ = ["render_outline"]
