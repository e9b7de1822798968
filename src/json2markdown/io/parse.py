from __future__ import annotations

import importlib
import json
from types import ModuleType

from ..errors import ConfigError, InputError, MissingDependencyError
from ..models.types import JsonStructure

_FORMAT_HINTS: set[str] = {"json", "yaml"}
_SUFFIX_HINTS: dict[str, str] = {".json": "json", ".yaml": "yaml", ".yml": "yaml"}


def _normalize_format_hint(fmt: str) -> str:
    """Normalize a format hint string.

    Args:
        fmt: Format string such as "json", "yaml", or "yml".

    Returns:
        Normalized format hint.
    """
    format_hint = fmt.lower().lstrip(".")
    if format_hint == "yml":
        return "yaml"
    return format_hint


def ensure_format_hint(fmt: str) -> str:
    """Validate and normalize an input format hint.

    Raises:
        ConfigError: If the format is not json/yaml/yml.
    """
    format_hint = _normalize_format_hint(fmt)
    if format_hint not in _FORMAT_HINTS:
        raise ConfigError(
            f"Unsupported input format '{fmt}'. Allowed: json, yaml, yml."
        )
    return format_hint


def format_from_suffix(suffix: str) -> str:
    """Map a file suffix to a format hint, defaulting to json."""
    return _SUFFIX_HINTS.get(suffix.lower(), "json")


def parse_payload_from_hint(text: str, format_hint: str) -> JsonStructure:
    """Parse document text using a normalized format hint.

    Args:
        text: Raw document text.
        format_hint: Normalized format hint ("json" or "yaml").

    Returns:
        Parsed JSON-compatible value.

    Raises:
        InputError: If the text is not valid for the format.
    """
    match format_hint:
        case "json":
            try:
                return json.loads(text)
            except json.JSONDecodeError as e:
                raise InputError(f"Invalid JSON: {e}") from e
        case "yaml":
            yaml = _require_yaml()
            try:
                return yaml.safe_load(text)
            except yaml.YAMLError as e:
                raise InputError(f"Invalid YAML: {e}") from e
        case _:
            raise ConfigError(
                f"Unsupported input format '{format_hint}'. Allowed: json, yaml, yml."
            )


def _require_yaml() -> ModuleType:
    """Ensure pyyaml is installed; otherwise raise with guidance."""
    try:
        module = importlib.import_module("yaml")
    except ImportError as e:
        raise MissingDependencyError(
            "YAML input requires pyyaml. Install it via `pip install pyyaml` or add the 'yaml' extra."
        ) from e
    return module
