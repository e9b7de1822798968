from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from ..errors import InputError, OutputError
from ..models.types import JsonStructure
from .parse import ensure_format_hint, format_from_suffix, parse_payload_from_hint

logger = logging.getLogger(__name__)


def infer_format(path: str | Path | None, fmt: str | None = None) -> str:
    """
    Decide the input format: explicit hint first, then file suffix, then json.

    Raises:
        ConfigError: If an explicit hint is not json/yaml/yml.
    """
    if fmt:
        return ensure_format_hint(fmt)
    if path is None:
        return "json"
    return format_from_suffix(Path(path).suffix)


def parse_document(text: str, fmt: str = "json") -> JsonStructure:
    """Parse JSON (or YAML) text into a JSON-compatible value."""
    return parse_payload_from_hint(text, ensure_format_hint(fmt))


def load_document(
    path: str | Path, fmt: str | None = None, *, encoding: str = "utf-8"
) -> JsonStructure:
    """
    Read and parse a document from disk.

    Args:
        path: Input file path.
        fmt: json/yaml/yml; inferred from the suffix when None.
        encoding: Text encoding of the file.

    Raises:
        InputError: If the file is missing, unreadable or unparsable.
        MissingDependencyError: If YAML is requested without pyyaml.
    """
    src = Path(path)
    format_hint = infer_format(src, fmt)
    try:
        text = src.read_text(encoding=encoding)
    except FileNotFoundError as e:
        raise InputError(f"File not found: {src}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Failed to read {src}: {e}") from e
    logger.debug("Loaded %s (%d chars, format=%s)", src, len(text), format_hint)
    return parse_payload_from_hint(text, format_hint)


def save_markdown(text: str, path: str | Path) -> Path:
    """
    Write Markdown to ``path`` (UTF-8), creating parent directories.

    Raises:
        OutputError: If the file cannot be written.
    """
    dest = Path(path)
    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputError(f"Failed to write Markdown to {dest}: {e}") from e
    logger.debug("Wrote %d chars to %s", len(text), dest)
    return dest


def write_markdown(text: str, stream: TextIO) -> None:
    """Write Markdown to a text stream, ending with a newline."""
    try:
        stream.write(text)
        if not text.endswith("\n"):
            stream.write("\n")
    except OSError as e:
        raise OutputError(f"Failed to write Markdown to stream: {e}") from e


__all__ = [
    "infer_format",
    "load_document",
    "parse_document",
    "save_markdown",
    "write_markdown",
]
