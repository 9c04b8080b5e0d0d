"""Command-line interface for flight_check.

Sub-commands:
- check: validate one or more record lines, save the good ones
- analyze: batch-validate a file, optionally export valid rows as CSV
- show: list the stored records
- cat: print a text file verbatim (first N lines)
- rules: print the input rules
- menu: the interactive menu

Exit codes: 0 all good, 1 some lines invalid, 2 usage or file access error.
"""

from __future__ import annotations
import argparse
from dataclasses import replace
import logging
from pathlib import Path
import sys
from typing import TextIO

from .analyze import FileAccessFailure, analyze_file, write_export
from .colors import Painter
from .config import Settings
from .errors import FileAccessError
from .records import Valid, parse_line
from .render import QUICK_RULES, record_details, report_lines, stored_lines
from .store import Session, read_raw

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def positive_int(text: str) -> int:
    try:
        v = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None
    if v < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {v}")
    return v


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="flight-check", description="Validate flight check records.")
    p.add_argument("--store", type=Path, help="Append-only store for accepted records")
    p.add_argument("--strict", action="store_true", help="Reject lines with more than three pieces")
    p.add_argument("--no-color", action="store_true", help="Disable colored output")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    sub = p.add_subparsers(dest="command")

    c = sub.add_parser("check", help="Validate record lines given as arguments")
    c.add_argument("lines", nargs="+", help='Record line, e.g. "09:25:30 ABC123 XYZ"')
    c.add_argument("--no-save", action="store_true", help="Do not append valid records to the store")

    a = sub.add_parser("analyze", help="Batch-validate a file")
    a.add_argument("path", nargs="?", type=Path, help="File to analyze (default: data.txt)")
    a.add_argument("--export", action="store_true", help="Write valid records next to the file as CSV")

    sub.add_parser("show", help="List stored records")

    r = sub.add_parser("cat", help="Print a file verbatim")
    r.add_argument("path", nargs="?", type=Path, help="File to print (default: data.txt)")
    r.add_argument("--limit", type=positive_int, help="Maximum number of lines")

    sub.add_parser("rules", help="Print the input rules")
    sub.add_parser("menu", help="Interactive menu")
    return p


def settings_from_args(args: argparse.Namespace, base: Settings) -> Settings:
    s = base
    if args.store is not None:
        s = replace(s, store_path=args.store)
    if args.strict:
        s = replace(s, strict_tokens=True)
    if args.no_color:
        s = replace(s, color=False)
    return s


def _emit(stream: TextIO, lines) -> None:
    for line in lines:
        stream.write(line + "\n")


def cmd_check(args, settings: Settings, paint: Painter, out: TextIO, err: TextIO) -> int:
    session = Session(settings.store_path)
    status = EXIT_OK
    for line in args.lines:
        outcome = parse_line(line, strict=settings.strict_tokens)
        if not isinstance(outcome, Valid):
            _emit(out, [paint.red(f"Invalid: {outcome.reason}")])
            status = max(status, EXIT_INVALID)
            continue
        _emit(out, [paint.green("Record valid."), *record_details(outcome.record)])
        if args.no_save:
            continue
        try:
            session.remember(outcome.record)
        except FileAccessError as ex:
            err.write(f"error: {ex}\n")
            return EXIT_ERROR
        _emit(out, [f"Saved to {settings.store_path}"])
    return status


def cmd_analyze(args, settings: Settings, paint: Painter, out: TextIO, err: TextIO) -> int:
    path = args.path or settings.default_data_path
    result = analyze_file(path, strict=settings.strict_tokens)
    if isinstance(result, FileAccessFailure):
        err.write(paint.red(f"error: {result.describe()}") + "\n")
        return EXIT_ERROR

    _emit(out, [f"Analyzing file: {path}", ""])
    _emit(out, report_lines(result, paint, settings.max_errors_shown))

    if args.export and result.valid_records:
        try:
            dest = write_export(result, path)
        except OSError as ex:
            err.write(f"error: cannot write export: {ex}\n")
            return EXIT_ERROR
        _emit(out, ["", f"Wrote {len(result.valid_records)} records to {dest}"])
    return EXIT_INVALID if result.bad_count else EXIT_OK


def cmd_show(args, settings: Settings, paint: Painter, out: TextIO, err: TextIO) -> int:
    _emit(out, [f"Stored values ({settings.store_path}):"])
    try:
        lines = Session(settings.store_path).stored()
    except FileAccessError as ex:
        err.write(paint.red(f"error: {ex}") + "\n")
        return EXIT_ERROR
    if not lines:
        _emit(out, [paint.yellow("  No saved answers yet.")])
        return EXIT_OK
    _emit(out, stored_lines(lines))
    return EXIT_OK


def cmd_cat(args, settings: Settings, paint: Painter, out: TextIO, err: TextIO) -> int:
    path = args.path or settings.default_data_path
    limit = args.limit if args.limit is not None else settings.raw_view_limit
    try:
        view = read_raw(path, limit)
    except FileAccessError as ex:
        err.write(paint.red(f"error: {ex}") + "\n")
        return EXIT_ERROR
    _emit(out, view.lines)
    if view.truncated:
        _emit(out, [f"... (file long; only first {limit} lines shown)"])
    return EXIT_OK


def cmd_rules(args, settings: Settings, paint: Painter, out: TextIO, err: TextIO) -> int:
    _emit(out, QUICK_RULES)
    return EXIT_OK


def cmd_menu(args, settings: Settings, paint: Painter, out: TextIO, err: TextIO) -> int:
    from .menu import Menu

    Menu(settings, paint=paint, write=out.write).run()
    return EXIT_OK


COMMANDS = {
    "check": cmd_check,
    "analyze": cmd_analyze,
    "show": cmd_show,
    "cat": cmd_cat,
    "rules": cmd_rules,
    "menu": cmd_menu,
}


def main(argv: list[str] | None = None, *, out: TextIO | None = None, err: TextIO | None = None) -> int:
    out = out or sys.stdout
    err = err or sys.stderr
    p = build_parser()
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command is None:
        p.print_help(err)
        return EXIT_ERROR

    settings = settings_from_args(args, Settings.from_env())
    paint = Painter(settings.color and out.isatty())
    log.debug("command %s with %s", args.command, settings)
    return COMMANDS[args.command](args, settings, paint, out, err)


if __name__ == "__main__":
    raise SystemExit(main())
