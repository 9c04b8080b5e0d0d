"""Interactive menu and guided entry.

Thin glue over the parser, analyzer and store. Input and output are
callables so the whole loop can be driven from a script.
"""

from __future__ import annotations
import sys
from typing import Callable, Optional

from .analyze import FileAccessFailure, analyze_file, write_export
from .colors import Painter
from .config import Settings
from .errors import FileAccessError
from .records import Record, Valid, build_record, parse_line, render_record
from .render import QUICK_RULES, record_details, report_lines, stored_lines
from .store import Session, read_raw
from .validators import validate_computer_id, validate_flight_field

Ask = Callable[[str], str]
Write = Callable[[str], object]

CLEAR_SCREEN = "\033[2J\033[H"
CANCEL_WORDS = ("q", "Q")

MENU_ITEMS = (
    "[1] Quick check (one-line input)",
    "[2] Guided mode",
    "[3] Display stored records",
    "[4] Read & display file (raw)",
    "[5] Analyze file (batch validation + export)",
    "[6] Help / examples",
    "[7] Exit",
)


def ask_number(ask: Ask, write: Write, paint: Painter, label: str, lo: int, hi: int) -> Optional[int]:
    """Ask until a number in [lo, hi] is given. None if the user cancels."""
    while True:
        text = ask(f"{label} ({lo}-{hi}, or 'q' to cancel): ").strip()
        if text in CANCEL_WORDS:
            return None
        if not text:
            continue
        try:
            v = int(text)
        except ValueError:
            write(paint.red("Type numbers only.") + "\n")
            continue
        if v < lo or v > hi:
            write(paint.red(f"Please stay between {lo} and {hi}.") + "\n")
            continue
        return v


def ask_field(ask: Ask, write: Write, paint: Painter, prompt: str, check) -> Optional[str]:
    while True:
        text = ask(prompt)
        if text in CANCEL_WORDS:
            return None
        msg = check(text)
        if msg is None:
            return text
        write(paint.red(f"Try again: {msg}") + "\n")


def guided_entry(ask: Ask, write: Write, paint: Painter) -> Optional[Record]:
    """Build a record one field at a time. None means the user cancelled."""
    write("\nGuided mode, we will build the line together.\n")
    hh = ask_number(ask, write, paint, "Hour", 0, 23)
    if hh is None:
        return None
    mm = ask_number(ask, write, paint, "Minute", 0, 59)
    if mm is None:
        return None
    ss = ask_number(ask, write, paint, "Second", 0, 59)
    if ss is None:
        return None
    flight = ask_field(ask, write, paint, "Flight ID (start with a letter): ", validate_flight_field)
    if flight is None:
        return None
    computer = ask_field(
        ask, write, paint, "Computer ID (3 letters/numbers, no I or O in last two): ", validate_computer_id
    )
    if computer is None:
        return None
    return build_record(hh, mm, ss, flight, computer).unwrap()


class Menu:
    def __init__(self, settings: Settings, *, paint: Optional[Painter] = None,
                 write: Optional[Write] = None, ask: Ask = input) -> None:
        self.settings = settings
        self.paint = paint or Painter(settings.color)
        self.write = write or sys.stdout.write
        self.ask = ask
        self.session = Session(settings.store_path)

    def _say(self, *lines: str) -> None:
        for line in lines:
            self.write(line + "\n")

    def _pause(self) -> None:
        self.ask("\nPress Enter to continue...")

    def _save(self, record: Record) -> None:
        try:
            self.session.remember(record)
        except FileAccessError as ex:
            self._say(self.paint.red(str(ex)))
            return
        self._say(f"Saved to {self.settings.store_path}")

    def quick_check(self) -> None:
        self._say("", "Enter record now (or type 'cancel'):")
        line = self.ask("> ")
        if line == "cancel":
            return
        outcome = parse_line(line, strict=self.settings.strict_tokens)
        if isinstance(outcome, Valid):
            self._say(self.paint.green("Record valid."), *record_details(outcome.record))
            self._save(outcome.record)
        else:
            self._say(self.paint.red(f"Invalid: {outcome.reason}"), "", *QUICK_RULES)
        self._pause()

    def guided(self) -> None:
        rec = guided_entry(self.ask, self.write, self.paint)
        if rec is None:
            self._say(self.paint.yellow("Canceled guided entry."))
        else:
            self._say(self.paint.green("Nice! Record is ready."), f"It looks like: {render_record(rec)}")
            self._save(rec)
        self._pause()

    def display_stored(self) -> None:
        self._say("", f"Stored values ({self.settings.store_path}):")
        try:
            lines = self.session.stored()
        except FileAccessError as ex:
            self._say(self.paint.red(f"  {ex}"))
        else:
            if lines:
                self._say(*stored_lines(lines))
            else:
                self._say(self.paint.yellow("  No saved answers yet. Try option 1 or 2 first."))
        if self.session.last is not None:
            self._say("", "Last record this session:", *record_details(self.session.last))
        self._pause()

    def _ask_path(self, prompt: str):
        default = self.settings.default_data_path
        return self.ask(f"{prompt} (default {default}): ").strip() or default

    def raw_view(self) -> None:
        path = self._ask_path("Enter path")
        limit = self.settings.raw_view_limit
        try:
            view = read_raw(path, limit)
        except FileAccessError as ex:
            self._say(self.paint.red(str(ex)))
        else:
            self._say("", "---- File content ----", *view.lines)
            if view.truncated:
                self._say(f"... (file long; only first {limit} lines shown)")
        self._pause()

    def analyze(self) -> None:
        path = self._ask_path("Enter path to analyze")
        result = analyze_file(path, strict=self.settings.strict_tokens)
        if isinstance(result, FileAccessFailure):
            self._say(self.paint.red(result.describe()))
            self._pause()
            return
        self._say(f"Analyzing file: {path}", "")
        self._say(*report_lines(result, self.paint, self.settings.max_errors_shown))
        if result.valid_records:
            ans = self.ask("\nExport valid records to CSV? (y/N): ")
            if ans[:1] in ("y", "Y"):
                try:
                    dest = write_export(result, path)
                except OSError as ex:
                    self._say(self.paint.red(f"Cannot write export: {ex}"))
                else:
                    self._say(f"Wrote {len(result.valid_records)} records to {dest}")
        self._pause()

    def help(self) -> None:
        self._say("", *QUICK_RULES, "", "Use guided mode if you are unsure. Type 'q' while answering to cancel.")
        self._pause()

    def run(self) -> None:
        actions = {
            "1": self.quick_check,
            "2": self.guided,
            "3": self.display_stored,
            "4": self.raw_view,
            "5": self.analyze,
            "6": self.help,
        }
        while True:
            if self.paint.enabled:
                self.write(CLEAR_SCREEN)
            self._say(self.paint.cyan("=" * 40), self.paint.cyan("   FLIGHT CHECKER"), self.paint.cyan("=" * 40))
            self._say(*MENU_ITEMS, "")
            try:
                opt = self.ask("Choose option: ").strip()
                if not opt:
                    continue
                if opt == "7":
                    self._say("Goodbye!")
                    return
                action = actions.get(opt)
                if action is None:
                    self._say("Unknown option.")
                    self._pause()
                    continue
                action()
            except EOFError:
                self._say("")
                return
