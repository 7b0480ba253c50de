"""Main CLI entry point for serialedit."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .. import __version__
from ..cli.analyze import analyze_result
from ..codec.encoder import dumps
from ..config import CodecConfig
from ..editor import ArrayEditor
from ..exceptions import EncodeError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="serialedit",
        description="serialedit: Serialized Array Editor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  serialedit 'a:2:{i:0;s:5:"hello";i:1;s:3:"foo";}'      Show entries
  serialedit --file array.txt --delete 0 --add bar        Edit and re-encode
  serialedit --encode hello foo                          Encode values
  serialedit --version                                   Show version
        """,
    )

    parser.add_argument("text", nargs="?", help="Serialized array to decode")
    parser.add_argument(
        "--file",
        metavar="PATH",
        type=str,
        help="Read the serialized array from PATH ('-' for stdin)",
    )
    parser.add_argument(
        "--set",
        metavar="INDEX=VALUE",
        action="append",
        default=[],
        help="Replace the value at INDEX (repeatable)",
    )
    parser.add_argument(
        "--delete",
        metavar="INDEX",
        type=int,
        action="append",
        default=[],
        help="Delete the entry at INDEX and renumber the rest (repeatable)",
    )
    parser.add_argument(
        "--add",
        metavar="VALUE",
        action="append",
        default=[],
        help="Append an entry (repeatable)",
    )
    parser.add_argument(
        "--encode",
        metavar="VALUE",
        nargs="+",
        help="Encode the given values and print the serialized array",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Payload text encoding (default: utf-8)",
    )
    parser.add_argument("--json", action="store_true", help="Print entries as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--version",
        action="version",
        version=f"serialedit {__version__}",
    )
    return parser


def _read_input(args: argparse.Namespace, config: CodecConfig) -> str | None:
    if args.file == "-":
        return sys.stdin.read()
    if args.file:
        file_path = Path(args.file)
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")
        return file_path.read_bytes().decode(config.encoding, config.errors)
    return args.text


def _parse_assignment(raw: str) -> tuple[int, str]:
    index, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"--set expects INDEX=VALUE, got {raw!r}")
    try:
        return int(index), value
    except ValueError as e:
        raise ValueError(f"--set index must be an integer, got {index!r}") from e


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the serialedit CLI.

    Mutations are applied in the order ``--set``, ``--delete``, ``--add``.
    Each ``--delete`` renumbers the entries after it before the next one runs.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = CodecConfig(encoding=args.encoding)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Handle --encode
    if args.encode:
        try:
            print(dumps(args.encode, config))
            return 0
        except EncodeError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    try:
        text = _read_input(args, config)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # If no input given, show help
    if text is None:
        parser.print_help()
        return 0

    editor = ArrayEditor(config=config)
    result = editor.load(text)
    if editor.error is not None:
        print(f"Error: {editor.error_message}: {editor.error}", file=sys.stderr)
        return 1

    try:
        for raw in args.set:
            index, value = _parse_assignment(raw)
            editor.update(index, value)
        for index in args.delete:
            editor.delete(index)
        for value in args.add:
            editor.add(value)
    except (IndexError, ValueError, EncodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    mutated = bool(args.set or args.delete or args.add)

    if args.json:
        print(json.dumps([entry.model_dump() for entry in editor.entries], ensure_ascii=False))
    elif mutated:
        print(editor.output)
    else:
        analyze_result(result, config)

    return 0


if __name__ == "__main__":
    sys.exit(main())
