from __future__ import annotations

"""Project-specific exception hierarchy for json2markdown."""


class Json2MarkdownError(Exception):
    """Base exception for json2markdown."""


class ConfigError(Json2MarkdownError):
    """Raised when user-provided configuration or parameters are invalid."""


class InputError(Json2MarkdownError):
    """Raised when an input document cannot be read or parsed."""


class MissingDependencyError(Json2MarkdownError):
    """Raised when an optional dependency required for the requested operation is missing."""


class OutputError(Json2MarkdownError):
    """Raised when writing Markdown to disk or streams fails."""


class DepthLimitError(Json2MarkdownError, ValueError):
    """Raised when a document nests deeper than the configured limit (also a ValueError)."""
