from __future__ import annotations

from pathlib import Path

import pytest

from json2markdown import convert_file, render, render_file
from json2markdown.errors import (
    ConfigError,
    DepthLimitError,
    InputError,
    Json2MarkdownError,
    MissingDependencyError,
    OutputError,
)


@pytest.mark.parametrize(
    "error_type",
    [ConfigError, InputError, MissingDependencyError, OutputError, DepthLimitError],
)
def test_errors_share_base(error_type: type[Exception]) -> None:
    assert issubclass(error_type, Json2MarkdownError)


def test_depth_limit_is_value_error() -> None:
    assert issubclass(DepthLimitError, ValueError)


def test_render_never_raises_for_json_values() -> None:
    for value in ({}, [], None, 0, -1.5, "", True, {"": {"": [None, [], {}]}}):
        assert isinstance(render(value), str)


def test_render_rejects_bad_options() -> None:
    with pytest.raises(ConfigError):
        render({"a": 1}, depth_increment=-1)


def test_render_file_missing_input(tmp_path: Path) -> None:
    with pytest.raises(InputError):
        render_file(tmp_path / "missing.json")


def test_convert_file_output_failure(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    src = tmp_path / "in.json"
    src.write_text('{"a": 1}', encoding="utf-8")

    def _fail_write(self: Path, *args: object, **kwargs: object) -> None:
        raise OSError("read-only file system")

    monkeypatch.setattr(Path, "write_text", _fail_write)
    with pytest.raises(OutputError):
        convert_file(src, tmp_path / "out.md")
