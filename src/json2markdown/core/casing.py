from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[\s_\-]+")
# lower/digit -> Upper ("camelCase") and acronym -> Word ("HTTPServer")
_CASE_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def split_words(text: str) -> list[str]:
    """Split a snake_case, kebab-case, camelCase or spaced key into words."""
    words: list[str] = []
    for chunk in _SEPARATORS.split(text.strip()):
        words.extend(part for part in _CASE_BOUNDARY.split(chunk) if part)
    return words


def title_case(text: str) -> str:
    """
    Convert a raw key into Title Case for display.

    Examples:
        >>> title_case("first_name")
        'First Name'
        >>> title_case("httpServerURL")
        'Http Server Url'

    Keys without any word characters are returned unchanged.
    """
    words = split_words(text)
    if not words:
        return text
    return " ".join(word[:1].upper() + word[1:].lower() for word in words)


__all__ = ["split_words", "title_case"]
