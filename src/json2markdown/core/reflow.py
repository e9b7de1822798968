from __future__ import annotations

import re

# Titles whose trailing period is never treated as the end of a sentence.
TITLE_ABBREVIATIONS: tuple[str, ...] = ("Dr", "Mr", "Mrs", "Ms", "Prof", "Sr", "Jr", "St")

_ABBREVIATION_GUARDS = "".join(rf"(?<!\b{abbr}\.)" for abbr in TITLE_ABBREVIATIONS)

# Zero-width break right after a period that is followed by whitespace, unless the
# next token is an initial such as "S." (keeps "U. S." together).
SENTENCE_BREAK = re.compile(rf"(?<=\.){_ABBREVIATION_GUARDS}(?=\s+(?![A-Z]\.))")


def has_sentence_break(text: str) -> bool:
    """Return True if ``text`` contains at least one sentence break."""
    return SENTENCE_BREAK.search(text) is not None


def split_at_period(text: str, depth: int = 0, *, indent_spaces: int = 1) -> str:
    """
    Reflow prose into one paragraph per sentence.

    Args:
        text: String to reflow.
        depth: Indentation depth applied to every paragraph.
        indent_spaces: Width of one indentation unit.

    Returns:
        ``text`` unchanged when it has no sentence break; otherwise the stripped
        sentences, each prefixed with the indentation and separated by one
        blank line.

    Examples:
        >>> split_at_period("Dr. Smith went home. He was tired.")
        'Dr. Smith went home.\\n\\nHe was tired.'
    """
    if not has_sentence_break(text):
        return text
    indent = " " * (depth * indent_spaces)
    chunks = (chunk.strip() for chunk in SENTENCE_BREAK.split(text))
    return "\n\n".join(f"{indent}{chunk}" for chunk in chunks if chunk)


__all__ = ["SENTENCE_BREAK", "TITLE_ABBREVIATIONS", "has_sentence_break", "split_at_period"]
