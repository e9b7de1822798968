from __future__ import annotations

import logging
from pathlib import Path
import sys
from typing import Literal, TextIO

from pydantic import BaseModel, ConfigDict, Field, SkipValidation, ValidationError

from .core.depth import ensure_depth_within
from .core.outline import render_outline
from .core.renderer import MarkdownRenderer
from .errors import ConfigError
from .io import infer_format, load_document, save_markdown, write_markdown
from .models.types import JsonStructure

logger = logging.getLogger(__name__)

Layout = Literal["document", "outline"]


class RenderOptions(BaseModel):
    """Render-time options for MarkdownEngine.

    Examples:
        >>> RenderOptions(indent_spaces=2, depth_increment=1, max_depth=32)
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    layout: Layout = Field(
        default="document",
        description="document: headings + bold-keyed bullets; outline: heading chains.",
    )
    indent_spaces: int = Field(
        default=1, ge=0, description="Width of one indentation unit."
    )
    depth_increment: int = Field(
        default=2,
        ge=0,
        description="Indentation units added per nesting level below the heading zone.",
    )
    max_depth: int | None = Field(
        default=None,
        ge=1,
        description="Reject documents nesting deeper than this; None disables the check.",
    )


class InputOptions(BaseModel):
    """How input documents are read."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    fmt: Literal["json", "yaml", "yml"] | None = Field(
        default=None, description="Input format; None -> inferred from the file suffix."
    )
    encoding: str = Field(default="utf-8", description="Text encoding of input files.")


class OutputOptions(BaseModel):
    """Where rendered Markdown goes when no output path is given."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    stream: SkipValidation[TextIO | None] = Field(
        default=None, description="Stream override for primary output (stdout)."
    )


def build_render_options(**kwargs: object) -> RenderOptions:
    """Build RenderOptions, reporting validation failures as ConfigError."""
    try:
        return RenderOptions.model_validate(kwargs)
    except ValidationError as e:
        raise ConfigError(f"Invalid render options: {e}") from e


class MarkdownEngine:
    """
    Configurable engine for JSON to Markdown conversion.

    Instances are immutable; override options per call if needed.

    Key behaviors:
        - RenderOptions: layout, indentation width, depth increment, depth limit.
        - InputOptions: input format and encoding for file-based calls.
        - Main methods:
            render(value) -> str
            load(path, fmt=None) -> JsonStructure
            export(value, output_path=None, stream=None)
                - Writes to file or stdout
            process(file_path, output_path=None, ...) -> str
                - One-shot load->render->write (CLI equivalent)
    """

    def __init__(
        self,
        options: RenderOptions | None = None,
        input_options: InputOptions | None = None,
        output: OutputOptions | None = None,
    ) -> None:
        self.options = options or RenderOptions()
        self.input = input_options or InputOptions()
        self.output = output or OutputOptions()
        self._renderer = MarkdownRenderer(
            indent_spaces=self.options.indent_spaces,
            depth_increment=self.options.depth_increment,
        )

    @staticmethod
    def from_defaults() -> MarkdownEngine:
        """Factory to create an engine with default options."""
        return MarkdownEngine()

    @property
    def renderer(self) -> MarkdownRenderer:
        return self._renderer

    def render(self, value: JsonStructure) -> str:
        """
        Render a parsed value with the configured layout.

        Raises:
            DepthLimitError: If the value nests deeper than RenderOptions.max_depth.
        """
        ensure_depth_within(value, self.options.max_depth)
        logger.debug("Rendering %s layout", self.options.layout)
        match self.options.layout:
            case "outline":
                text = render_outline(value)
            case _:
                text = self._renderer.render(value)
        logger.debug("Rendered %d characters", len(text))
        return text

    def load(self, file_path: str | Path, *, fmt: str | None = None) -> JsonStructure:
        """
        Read and parse an input document.

        Args:
            file_path: JSON/YAML file to read.
            fmt: Format override; defaults to InputOptions.fmt, then the suffix.
        """
        chosen_fmt = infer_format(file_path, fmt or self.input.fmt)
        return load_document(file_path, chosen_fmt, encoding=self.input.encoding)

    def export(
        self,
        value: JsonStructure,
        output_path: str | Path | None = None,
        *,
        stream: TextIO | None = None,
    ) -> str:
        """
        Render ``value`` and write it to a file or stream.

        Args:
            value: Parsed document.
            output_path: Target Markdown file; writes to the stream when None.
            stream: Stream override when output_path is None (defaults to stdout).

        Returns:
            The rendered Markdown.
        """
        text = self.render(value)
        if output_path is not None:
            save_markdown(text, output_path)
        else:
            write_markdown(text, stream or self.output.stream or sys.stdout)
        return text

    def process(
        self,
        file_path: str | Path,
        output_path: str | Path | None = None,
        *,
        fmt: str | None = None,
        stream: TextIO | None = None,
    ) -> str:
        """
        One-shot load->render->write wrapper (CLI equivalent).

        Args:
            file_path: Input document path.
            output_path: Target Markdown file; writes to the stream when None.
            fmt: Input format override (json/yaml/yml).
            stream: Stream override when writing to stdout.

        Returns:
            The rendered Markdown.
        """
        value = self.load(file_path, fmt=fmt)
        return self.export(value, output_path, stream=stream)
