from __future__ import annotations

from enum import Enum

from .types import JsonPrimitive, JsonStructure


class RenderStyle(Enum):
    """Structural role of the context a key/value pair is rendered in."""

    ROOT = "root"
    SECTION = "section"
    SUBSECTION = "subsection"
    LIST_ITEM = "list_item"
    NESTED_ITEM = "nested_item"

    @property
    def is_heading(self) -> bool:
        """True for styles whose labels are emitted as Markdown headings."""
        return self in (RenderStyle.SECTION, RenderStyle.SUBSECTION)


__all__ = ["JsonPrimitive", "JsonStructure", "RenderStyle"]
