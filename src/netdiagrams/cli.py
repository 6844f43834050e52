"""Command-line interface for rendering diagram documents."""
from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from . import options as o
from .assets import list_icons
from .config import debug_enabled
from .document import build_diagram, load_document, parse_document
from .errors import (
    AssetError,
    DocumentError,
    NetDiagramsError,
    RendererError,
    UnsupportedFormatError,
)
from .renderer import DOT_FORMAT, IMAGE_FORMATS

COMMANDS_HINT = "Use one of: render, icons."


@dataclass
class CliError(Exception):
    code: str
    message: str
    hint: Optional[str] = None
    exit_code: int = 1
    file: Optional[str] = None
    retryable: bool = True


class UsageError(Exception):
    pass


class FriendlyArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # pragma: no cover - argparse callback
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = FriendlyArgumentParser(
        prog="netdiagrams",
        description="Render network diagram documents to Graphviz DOT and images.",
    )
    parser.add_argument("--error-format", choices=["text", "json"], default="text")
    parser.add_argument("--debug", action="store_true")

    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser("render", help="Render a JSON diagram document")
    render_parser.add_argument("input", nargs="?", help="Input .json document")
    render_parser.add_argument("--text", help="Raw JSON document")
    render_parser.add_argument("-o", "--output-dir", help="Output directory")
    render_parser.add_argument(
        "-f",
        "--format",
        help=f"Output format ({', '.join((DOT_FORMAT,) + IMAGE_FORMATS)})",
    )
    render_parser.add_argument("--filename", help="Base name of the written files")

    icons_parser = subparsers.add_parser("icons", help="List bundled icons")
    icons_parser.add_argument("--provider", help="Only list icons of this provider")

    return parser


def _read_document(path: Optional[str], text: Optional[str]) -> tuple[dict, Optional[Path]]:
    if path and text is not None:
        raise CliError(
            "E_ARGS",
            "--text cannot be combined with file input",
            hint="Use either FILE or --text.",
            exit_code=2,
        )

    if text is not None:
        try:
            return parse_document(json.loads(text)), None
        except json.JSONDecodeError as exc:
            raise DocumentError(f"failed to parse <text>: {exc}") from exc

    if path:
        input_path = Path(path)
        if not input_path.exists():
            raise CliError(
                "E_IO_READ",
                f"input file not found: {input_path}",
                exit_code=2,
                file=str(input_path),
            )
        try:
            return load_document(input_path), input_path
        except OSError as exc:
            raise CliError(
                "E_IO_READ",
                f"failed to read input file: {input_path}",
                hint=str(exc),
                exit_code=2,
                file=str(input_path),
            )

    if sys.stdin.isatty():
        raise CliError(
            "E_ARGS",
            "no input provided",
            hint="Pass FILE, --text, or pipe a JSON document on stdin.",
            exit_code=2,
        )

    data = sys.stdin.read()
    if not data.strip():
        raise CliError(
            "E_ARGS",
            "stdin was empty",
            hint="Pipe a JSON diagram document into stdin.",
            exit_code=2,
        )
    try:
        return parse_document(json.loads(data)), None
    except json.JSONDecodeError as exc:
        raise DocumentError(f"failed to parse <stdin>: {exc}") from exc


def _error_from_exception(exc: Exception) -> CliError:
    if isinstance(exc, CliError):
        return exc
    if isinstance(exc, UnsupportedFormatError):
        return CliError(
            exc.code,
            str(exc),
            hint=f"Supported formats: {', '.join((DOT_FORMAT,) + IMAGE_FORMATS)}.",
            exit_code=3,
        )
    if isinstance(exc, RendererError):
        return CliError(
            exc.code,
            str(exc),
            hint="Check that Graphviz is installed or set NETDIAGRAMS_RENDERER.",
            exit_code=4,
        )
    if isinstance(exc, AssetError):
        return CliError(
            exc.code,
            str(exc),
            hint="Run `netdiagrams icons` to list bundled icons.",
            exit_code=4,
        )
    if isinstance(exc, NetDiagramsError):
        return CliError(
            exc.code,
            str(exc),
            hint="Check node ids, group names and edge endpoints in the document.",
            exit_code=3,
        )
    if isinstance(exc, OSError):
        return CliError(
            "E_IO_WRITE",
            f"failed to write output: {exc}",
            hint=str(exc.strerror or exc),
            exit_code=4,
            file=exc.filename if isinstance(exc.filename, str) else None,
        )
    return CliError(
        "E_INTERNAL",
        str(exc) or exc.__class__.__name__,
        hint="Re-run with --debug to see traceback.",
        exit_code=1,
        retryable=False,
    )


def _emit_error(err: CliError, *, error_format: str) -> None:
    if error_format == "json":
        payload = {
            "ok": False,
            "code": err.code,
            "message": err.message,
            "file": err.file,
            "hint": err.hint,
            "retryable": err.retryable,
        }
        sys.stderr.write(json.dumps(payload) + "\n")
        return

    sys.stderr.write(f"error[{err.code}]: {err.message}\n")
    if err.hint:
        sys.stderr.write(f"hint: {err.hint}\n")


def _handle_render(args: argparse.Namespace) -> int:
    doc, source_path = _read_document(args.input, args.text)

    overrides: List[o.DiagramOption] = []
    if args.output_dir:
        overrides.append(o.name(args.output_dir))
    elif source_path is not None and "name" not in doc:
        overrides.append(o.name(str(source_path.parent)))
    if args.format:
        overrides.append(o.output_format(args.format))
    if args.filename:
        overrides.append(o.filename(args.filename))
    elif source_path is not None and "filename" not in doc:
        overrides.append(o.filename(source_path.stem))

    diagram = build_diagram(doc, *overrides)
    output_path = diagram.render()
    print(f"Wrote {output_path}")
    return 0


def _handle_icons(args: argparse.Namespace) -> int:
    icons = list_icons(args.provider)
    if not icons:
        raise CliError(
            "E_ARGS",
            f"no icons found for provider: {args.provider}",
            hint="Run `netdiagrams icons` without --provider to see all icons.",
            exit_code=2,
        )
    for icon in icons:
        print(icon)
    return 0


def main(argv: Optional[Iterable[str]] = None) -> int:
    raw_argv = list(argv) if argv is not None else sys.argv[1:]
    parser = _build_parser()

    if not raw_argv:
        err = CliError(
            "E_ARGS",
            "missing subcommand",
            hint=COMMANDS_HINT,
            exit_code=2,
        )
        _emit_error(err, error_format="text")
        return err.exit_code

    debug = "--debug" in raw_argv or debug_enabled()
    if debug:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")
    error_format = "text"
    if "--error-format" in raw_argv:
        idx = raw_argv.index("--error-format")
        if idx + 1 < len(raw_argv):
            error_format = raw_argv[idx + 1]

    try:
        args = parser.parse_args(raw_argv)
        error_format = args.error_format

        if args.command == "render":
            return _handle_render(args)
        if args.command == "icons":
            return _handle_icons(args)

        raise CliError(
            "E_ARGS",
            "missing subcommand",
            hint=COMMANDS_HINT,
            exit_code=2,
        )
    except UsageError as exc:
        err = CliError(
            "E_ARGS",
            str(exc),
            hint=COMMANDS_HINT,
            exit_code=2,
        )
        _emit_error(err, error_format=error_format)
        return err.exit_code
    except Exception as exc:  # pragma: no cover - exercised in acceptance tests
        err = _error_from_exception(exc)
        _emit_error(err, error_format=error_format)
        if debug:
            traceback.print_exc(file=sys.stderr)
        return err.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
