from __future__ import annotations

import logging
from pathlib import Path

from .core.casing import title_case
from .core.outline import render_outline
from .core.reflow import split_at_period
from .core.renderer import MarkdownRenderer
from .engine import (
    InputOptions,
    Layout,
    MarkdownEngine,
    OutputOptions,
    RenderOptions,
    build_render_options,
)
from .errors import (
    ConfigError,
    DepthLimitError,
    InputError,
    Json2MarkdownError,
    MissingDependencyError,
    OutputError,
)
from .io import load_document, parse_document, save_markdown
from .models import RenderStyle
from .models.types import JsonStructure

logger = logging.getLogger(__name__)

__version__ = "0.2.1"

__all__ = [
    "render",
    "render_file",
    "convert_file",
    "MarkdownRenderer",
    "MarkdownEngine",
    "RenderOptions",
    "InputOptions",
    "OutputOptions",
    "RenderStyle",
    "render_outline",
    "split_at_period",
    "title_case",
    "load_document",
    "parse_document",
    "save_markdown",
    "Json2MarkdownError",
    "ConfigError",
    "InputError",
    "MissingDependencyError",
    "OutputError",
    "DepthLimitError",
]


def render(
    value: JsonStructure,
    *,
    layout: Layout = "document",
    indent_spaces: int = 1,
    depth_increment: int = 2,
    max_depth: int | None = None,
) -> str:
    """
    Render a parsed JSON value as Markdown.

    Args:
        value: Parsed JSON document (dict/list/scalar).
        layout: "document" (headings + bullets) or "outline" (heading chains).
        indent_spaces: Width of one indentation unit.
        depth_increment: Indentation units added per nesting level below headings.
        max_depth: Reject documents nesting deeper than this.

    Returns:
        Markdown text.

    Raises:
        ConfigError: If an option is out of range.
        DepthLimitError: If the document exceeds max_depth.

    Examples:
        >>> from json2markdown import render
        >>> render({"title": "My Project"})
        '## Title\\n\\nMy Project\\n'
    """
    options = build_render_options(
        layout=layout,
        indent_spaces=indent_spaces,
        depth_increment=depth_increment,
        max_depth=max_depth,
    )
    return MarkdownEngine(options=options).render(value)


def render_file(
    file_path: str | Path,
    fmt: str | None = None,
    *,
    options: RenderOptions | None = None,
) -> str:
    """
    Load a JSON/YAML file and return its Markdown rendering.

    Args:
        file_path: Input document.
        fmt: json/yaml/yml; inferred from the extension when None.
        options: Render options; defaults to RenderOptions().

    Raises:
        InputError: If the file is missing or cannot be parsed.
    """
    engine = MarkdownEngine(options=options)
    return engine.render(engine.load(file_path, fmt=fmt))


def convert_file(
    input_path: str | Path,
    output_path: str | Path,
    fmt: str | None = None,
    *,
    options: RenderOptions | None = None,
) -> Path:
    """
    Convert a JSON/YAML file into a Markdown file.

    Args:
        input_path: Source document.
        output_path: Destination Markdown file (parent directories are created).
        fmt: Input format override.
        options: Render options; defaults to RenderOptions().

    Returns:
        The written path.

    Raises:
        InputError: If the input cannot be read or parsed.
        OutputError: If the Markdown file cannot be written.

    Examples:
        >>> from json2markdown import convert_file
        >>> convert_file("input.json", "out/input.md")  # doctest: +SKIP
    """
    engine = MarkdownEngine(options=options)
    engine.process(input_path, output_path, fmt=fmt)
    logger.info("Converted %s -> %s", input_path, output_path)
    return Path(output_path)
