from __future__ import annotations

from collections.abc import Callable
import logging
import re

from ..errors import ConfigError
from ..models import RenderStyle
from ..models.types import JsonStructure
from .casing import title_case
from .reflow import has_sentence_break, split_at_period

logger = logging.getLogger(__name__)

MAX_HEADING_LEVEL = 6
NULL_TEXT = "N/A"

_HEADING_RUN = re.compile("#{%d,}" % (MAX_HEADING_LEVEL + 1))


def heading_marker(level: int) -> str:
    """Return an ATX heading marker clamped to the Markdown range 1..6."""
    return "#" * max(1, min(level, MAX_HEADING_LEVEL)) + " "


def cap_heading_runs(text: str) -> str:
    """Collapse every run of seven or more ``#`` characters to exactly six."""
    capped = _HEADING_RUN.sub("#" * MAX_HEADING_LEVEL, text)
    if capped != text:
        logger.debug("Collapsed heading markers deeper than level %d", MAX_HEADING_LEVEL)
    return capped


def scalar_text(value: JsonStructure) -> str:
    """Canonical display text of a scalar (JSON spelling for booleans, N/A for null)."""
    if value is None:
        return NULL_TEXT
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_value(text: str, style: RenderStyle, label_written: bool) -> str:
    """
    Format a scalar for the current style.

    List styles end the line; paragraph styles (root and headings) leave a
    blank line after the text. ``": "`` joins the value to a label written
    just before it.
    """
    prefix = ": " if label_written else ""
    match style:
        case RenderStyle.LIST_ITEM | RenderStyle.NESTED_ITEM:
            return f"{prefix}{text}\n"
        case _:
            return f"{prefix}{text}\n\n"


class _MarkdownBuffer:
    """Append-only text buffer that remembers its last two characters."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._tail = ""

    def write(self, text: str) -> None:
        if not text:
            return
        self._parts.append(text)
        self._tail = (self._tail + text)[-2:]

    def end_line(self) -> None:
        """Terminate an open line."""
        if self._tail and not self._tail.endswith("\n"):
            self.write("\n")

    def blank_line(self) -> None:
        """Make sure the text written so far is followed by exactly one empty line."""
        if not self._tail or self._tail == "\n\n":
            return
        self.write("\n" if self._tail.endswith("\n") else "\n\n")

    def getvalue(self) -> str:
        return "".join(self._parts)


class MarkdownRenderer:
    """
    Recursive JSON to Markdown renderer.

    Top-level keys become ``##`` headings, their children ``###`` headings and
    everything below that bold-keyed bullets indented by ``depth_increment``
    units of ``indent_spaces`` spaces. Instances are immutable and can be
    reused across documents.

    Examples:
        >>> MarkdownRenderer().render({"title": "My Project"})
        '## Title\\n\\nMy Project\\n'
    """

    def __init__(
        self,
        indent_spaces: int = 1,
        depth_increment: int = 2,
        *,
        key_formatter: Callable[[str], str] = title_case,
    ) -> None:
        if indent_spaces < 0:
            raise ConfigError(f"indent_spaces must be >= 0, got {indent_spaces}")
        if depth_increment < 0:
            raise ConfigError(f"depth_increment must be >= 0, got {depth_increment}")
        self.indent_spaces = indent_spaces
        self.depth_increment = depth_increment
        self.key_formatter = key_formatter

    def __repr__(self) -> str:
        return (
            f"MarkdownRenderer(indent_spaces={self.indent_spaces}, "
            f"depth_increment={self.depth_increment})"
        )

    def render(self, value: JsonStructure) -> str:
        """Render a parsed JSON value into a Markdown string."""
        out = _MarkdownBuffer()
        self._render_value(value, 0, RenderStyle.ROOT, out)
        return cap_heading_runs(out.getvalue())

    def _indent(self, depth: int) -> str:
        return " " * (depth * self.indent_spaces)

    def _transition(
        self, depth: int, style: RenderStyle
    ) -> tuple[RenderStyle, str, int]:
        """Return (style for the entries, heading marker, depth step) for an object."""
        match (depth, style):
            case (0, RenderStyle.ROOT):
                return RenderStyle.SECTION, heading_marker(2), 1
            case (1, RenderStyle.SECTION):
                return RenderStyle.SUBSECTION, heading_marker(3), 1
            case _:
                return RenderStyle.LIST_ITEM, "", self.depth_increment

    def _render_value(
        self,
        value: JsonStructure,
        depth: int,
        style: RenderStyle,
        out: _MarkdownBuffer,
        label_written: bool = False,
    ) -> None:
        if isinstance(value, dict):
            self._render_object(value, depth, style, out)
        elif isinstance(value, list):
            self._render_array(value, depth, style, out)
        else:
            out.write(format_value(scalar_text(value), style, label_written))

    def _render_object(
        self,
        mapping: dict[str, JsonStructure],
        depth: int,
        style: RenderStyle,
        out: _MarkdownBuffer,
    ) -> None:
        indent = self._indent(depth)
        new_style, marker, step = self._transition(depth, style)
        child_depth = depth + step

        for key, value in mapping.items():
            label = self.key_formatter(str(key))
            if new_style.is_heading:
                out.blank_line()
                out.write(f"{indent}{marker}{label}\n\n")
            else:
                out.write(f"{indent}- **{label}**")

            if isinstance(value, dict) and value:
                out.blank_line()
                self._render_object(value, child_depth, new_style, out)
            elif isinstance(value, list) and value:
                out.blank_line()
                self._render_array(value, child_depth, RenderStyle.NESTED_ITEM, out)
                out.blank_line()
            elif isinstance(value, (dict, list)):
                out.end_line()
            elif isinstance(value, str):
                self._render_text(value, depth, new_style, out)
            else:
                self._render_value(
                    value, child_depth, RenderStyle.NESTED_ITEM, out, label_written=True
                )

    def _render_text(
        self, text: str, depth: int, style: RenderStyle, out: _MarkdownBuffer
    ) -> None:
        indent = self._indent(depth)
        is_url = text.startswith("http")
        if style.is_heading:
            if is_url:
                out.write(f"{indent}{text}\n")
            else:
                out.write(split_at_period(text, 0, indent_spaces=self.indent_spaces))
                out.write("\n")
            return

        if is_url or not has_sentence_break(text):
            out.write(format_value(text, RenderStyle.NESTED_ITEM, label_written=True))
            return
        out.blank_line()
        out.write(split_at_period(text, depth + 2, indent_spaces=self.indent_spaces))
        out.write("\n")

    def _render_array(
        self,
        items: list[JsonStructure],
        depth: int,
        style: RenderStyle,
        out: _MarkdownBuffer,
    ) -> None:
        indent = self._indent(depth)
        marker = "  - " if style is RenderStyle.NESTED_ITEM else "- "
        child_depth = depth + self.depth_increment

        for item in items:
            if isinstance(item, dict):
                # the nested renderer writes its own bullets
                if item:
                    self._render_object(item, child_depth, RenderStyle.NESTED_ITEM, out)
            elif isinstance(item, list):
                if item:
                    self._render_array(item, child_depth, RenderStyle.NESTED_ITEM, out)
            elif isinstance(item, str):
                out.write(f"{indent}{marker}{item}\n")
            else:
                out.write(f"{indent}{marker}")
                self._render_value(item, child_depth, RenderStyle.NESTED_ITEM, out)


__all__ = [
    "MAX_HEADING_LEVEL",
    "NULL_TEXT",
    "MarkdownRenderer",
    "cap_heading_runs",
    "format_value",
    "heading_marker",
    "scalar_text",
]
