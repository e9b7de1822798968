from __future__ import annotations

from .casing import title_case
from .depth import ensure_depth_within, nesting_depth
from .outline import render_outline
from .reflow import has_sentence_break, split_at_period
from .renderer import MarkdownRenderer, cap_heading_runs, format_value

__all__ = [
    "MarkdownRenderer",
    "cap_heading_runs",
    "ensure_depth_within",
    "format_value",
    "has_sentence_break",
    "nesting_depth",
    "render_outline",
    "split_at_period",
    "title_case",
]
