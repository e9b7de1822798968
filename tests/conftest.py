from __future__ import annotations

from collections.abc import Callable
import json
from pathlib import Path

import pytest

from json2markdown.models.types import JsonStructure


@pytest.fixture
def project_document() -> dict[str, JsonStructure]:
    """A small manifest touching every rendering branch."""
    return {
        "project": "json2markdown",
        "description": "Converts JSON into Markdown. It keeps nesting readable.",
        "homepage": "https://example.com/docs. Not split.",
        "details": {
            "license": "MIT",
            "maintainers": ["Ann", "Bob"],
            "build": {"python": 3.11, "typed": True},
        },
    }


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory that dumps a value to a JSON file under tmp_path."""

    def _write(value: JsonStructure, name: str = "input.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(value, ensure_ascii=False), encoding="utf-8")
        return path

    return _write
