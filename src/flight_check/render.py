"""Text rendering shared by the command line and the interactive menu."""

from __future__ import annotations

from .analyze import AnalysisReport
from .colors import Painter
from .records import Record
from .store import StoredLine

QUICK_RULES = (
    "Quick rules and examples:",
    " 1) Time: 09:25:30 or 092530 (24-hour clock).",
    " 2) Flight: start with a letter, up to 10 letters/numbers.",
    " 3) Computer: 3 letters/numbers, avoid I or O in last two spots.",
    "Sample line: 09:25:30 ABC123 XYZ",
)

GUIDED_TIP = "Tip: use guided mode to practice building a correct line."


def record_details(r: Record) -> list[str]:
    return [
        f"  Time: {r.time_text}",
        f"  Flight: {r.flight}",
        f"  Computer: {r.computer}",
    ]


def report_lines(report: AnalysisReport, paint: Painter, max_errors: int = 10) -> list[str]:
    """Summary, then at most `max_errors` error entries."""
    out = ["Summary:", paint.green(f"  OK: {report.ok_count}")]
    if report.bad_count:
        out.append(paint.red(f"  Invalid: {report.bad_count}"))
        out.append("")
        out.append(f"Detailed errors (first {max_errors}):")
        out.extend(f"  {e.describe()}" for e in report.first_errors(max_errors))
        out.append("")
        out.append(paint.yellow(GUIDED_TIP))
    return out


def stored_lines(lines: list[StoredLine]) -> list[str]:
    return [f"  {s.number}) {s.text}" for s in lines]
