from __future__ import annotations

from collections.abc import Callable
import io
import os
from pathlib import Path
import subprocess
import sys

import pytest

from json2markdown.cli.main import build_parser, main as cli_main

SRC_DIR = Path(__file__).resolve().parents[2] / "src"


def test_parser_defaults() -> None:
    args = build_parser().parse_args(["in.json"])
    assert args.layout == "document"
    assert args.indent_spaces == 1
    assert args.depth_increment == 2
    assert args.max_depth is None
    assert args.output is None


@pytest.mark.parametrize(
    "argv",
    [
        ["in.json", "--indent-spaces", "-1"],
        ["in.json", "--max-depth", "0"],
        ["in.json", "--layout", "html"],
    ],
)
def test_parser_rejects_bad_values(argv: list[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(argv)
    assert excinfo.value.code == 2


def test_cli_writes_stdout(
    write_json: Callable[..., Path], capsys: pytest.CaptureFixture[str]
) -> None:
    src = write_json({"title": "My Project"})
    assert cli_main([str(src)]) == 0
    assert capsys.readouterr().out == "## Title\n\nMy Project\n"


def test_cli_writes_file(
    tmp_path: Path,
    write_json: Callable[..., Path],
    capsys: pytest.CaptureFixture[str],
) -> None:
    src = write_json({"a": {"b": {"c": "x"}}})
    out = tmp_path / "out.md"
    assert cli_main([str(src), "-o", str(out), "--indent-spaces", "0"]) == 0
    assert out.read_text(encoding="utf-8") == "## A\n\n### B\n\n- **C**: x\n"
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "out.md" in captured.err


def test_cli_outline_layout(
    write_json: Callable[..., Path], capsys: pytest.CaptureFixture[str]
) -> None:
    src = write_json({"a": {"b": 1}})
    assert cli_main([str(src), "--layout", "outline"]) == 0
    assert capsys.readouterr().out == "# A #\n* B: 1\n"


def test_cli_reads_stdin(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO('{"a": 1}'))
    assert cli_main(["-"]) == 0
    assert capsys.readouterr().out == "## A\n\n: 1\n"


def test_cli_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_main([str(tmp_path / "missing.json")]) == 1
    assert "File not found" in capsys.readouterr().out


def test_cli_invalid_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    src = tmp_path / "bad.json"
    src.write_text("{nope", encoding="utf-8")
    assert cli_main([str(src)]) == 1
    assert capsys.readouterr().out.startswith("Error: Invalid JSON")


def test_cli_max_depth(
    write_json: Callable[..., Path], capsys: pytest.CaptureFixture[str]
) -> None:
    src = write_json({"a": {"b": {"c": 1}}})
    assert cli_main([str(src), "--max-depth", "2"]) == 1
    assert "limit is 2" in capsys.readouterr().out


def test_cli_module_entrypoint(tmp_path: Path) -> None:
    env = {**os.environ, "PYTHONPATH": str(SRC_DIR)}
    cmd = [sys.executable, "-m", "json2markdown.cli.main", str(tmp_path / "none.json")]
    result = subprocess.run(cmd, capture_output=True, text=True, env=env)
    assert result.returncode == 1
    assert "file not found" in (result.stdout + result.stderr).lower()
