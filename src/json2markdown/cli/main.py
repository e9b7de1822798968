from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from json2markdown.engine import MarkdownEngine, build_render_options
from json2markdown.errors import Json2MarkdownError
from json2markdown.io import parse_document

STDIN_MARKER = "-"


def _ensure_utf8_stdout() -> None:
    """Reconfigure stdout to UTF-8 when supported.

    Consoles with a legacy default encoding raise on non-ASCII keys and values
    when the Markdown is piped; environments already on UTF-8 are unaffected.
    """

    try:
        sys.stdout.reconfigure(encoding="utf-8", errors="strict")
    except (AttributeError, ValueError):
        return


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def _positive(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="json2markdown",
        description="Convert a JSON (or YAML) document into readable Markdown.",
    )
    parser.add_argument(
        "input", help="Input document (.json/.yaml/.yml), or '-' to read stdin."
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output Markdown path. If omitted, writes to stdout.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "yaml", "yml"],
        help="Input format. Defaults to the file extension (json for stdin).",
    )
    parser.add_argument(
        "--layout",
        default="document",
        choices=["document", "outline"],
        help="document: headings and bold-keyed bullets; outline: heading chains.",
    )
    parser.add_argument(
        "--indent-spaces",
        type=_non_negative,
        default=1,
        help="Width of one indentation unit (default: 1).",
    )
    parser.add_argument(
        "--depth-increment",
        type=_non_negative,
        default=2,
        help="Indentation units per nesting level below the headings (default: 2).",
    )
    parser.add_argument(
        "--max-depth",
        type=_positive,
        help="Fail instead of rendering documents nested deeper than this.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI entrypoint.

    Args:
        argv: Optional argument list for testing.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    _ensure_utf8_stdout()
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        engine = MarkdownEngine(
            options=build_render_options(
                layout=args.layout,
                indent_spaces=args.indent_spaces,
                depth_increment=args.depth_increment,
                max_depth=args.max_depth,
            )
        )
        if args.input == STDIN_MARKER:
            value = parse_document(sys.stdin.read(), args.format or "json")
            text = engine.export(value, args.output)
        else:
            input_path = Path(args.input)
            if not input_path.exists():
                print(f"File not found: {input_path}", flush=True)
                return 1
            text = engine.process(input_path, args.output, fmt=args.format)
    except Json2MarkdownError as e:
        print(f"Error: {e}", flush=True)
        return 1

    if args.output is not None:
        print(f"Wrote {len(text)} characters to {args.output}", file=sys.stderr)
    return 0


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    raise SystemExit(main())
