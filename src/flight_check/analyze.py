"""Batch analysis of record files.

Pipeline shape:
- read lines (file or any iterable)
- parse each line -> Valid / Invalid
- fold outcomes into an AnalysisReport
- optionally render the valid records as CSV

Bad lines never stop the scan. A file that cannot be opened is reported
as a FileAccessFailure before any line is parsed.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Iterable, Sequence, Union

from .errors import ErrorKind
from .records import Record, Valid, parse_line

log = logging.getLogger(__name__)

CSV_HEADER = "time,flight,computer"
EXPORT_SUFFIX = ".valid.csv"
DEFAULT_ERROR_LIMIT = 10


@dataclass(frozen=True)
class LineError:
    line_no: int
    reason: str
    raw: str

    def describe(self) -> str:
        return f'Line {self.line_no}: {self.reason} -- "{self.raw}"'


@dataclass
class AnalysisReport:
    total_lines: int = 0
    ok_count: int = 0
    bad_count: int = 0
    errors: list[LineError] = field(default_factory=list)
    valid_records: list[Record] = field(default_factory=list)

    def first_errors(self, limit: int = DEFAULT_ERROR_LIMIT) -> list[LineError]:
        return self.errors[:limit]


@dataclass(frozen=True)
class FileAccessFailure:
    path: Path
    reason: str
    kind: ErrorKind = ErrorKind.FILE_ACCESS

    def describe(self) -> str:
        return f"{self.reason}: {self.path}"


AnalysisResult = Union[AnalysisReport, FileAccessFailure]


def analyze(lines: Iterable[str], *, strict: bool = False) -> AnalysisReport:
    """Run the parser over every line, in order."""
    report = AnalysisReport()
    for line_no, line in enumerate(lines, start=1):
        raw = line.rstrip("\r\n")
        outcome = parse_line(raw, strict=strict)
        report.total_lines += 1
        if isinstance(outcome, Valid):
            report.ok_count += 1
            report.valid_records.append(outcome.record)
        else:
            report.bad_count += 1
            report.errors.append(LineError(line_no, outcome.reason, raw))
    return report


def analyze_file(path: str | Path, *, strict: bool = False) -> AnalysisResult:
    """Analyze a file on disk.

    Returns a FileAccessFailure (never raises) when the file is missing,
    is a directory, or cannot be read.
    """
    p = Path(path)
    if not p.exists():
        log.info("analyze: %s does not exist", p)
        return FileAccessFailure(p, "File not found")
    if p.is_dir():
        return FileAccessFailure(p, "Not a file")
    try:
        # split on \n only; undecodable bytes become U+FFFD and fail that line alone
        with p.open("r", encoding="utf-8", errors="replace", newline="\n") as fh:
            report = analyze(fh, strict=strict)
    except OSError as ex:
        log.warning("analyze: cannot read %s: %s", p, ex)
        return FileAccessFailure(p, "Cannot open file")
    log.debug("analyze: %s -> %d ok, %d bad", p, report.ok_count, report.bad_count)
    return report


def export_csv(records: Sequence[Record]) -> str:
    """Render valid records as CSV text, header first, input order kept."""
    rows = [CSV_HEADER]
    rows.extend(f"{r.time_text},{r.flight},{r.computer}" for r in records)
    return "\n".join(rows) + "\n"


def export_path(path: str | Path) -> Path:
    """Sibling of the analyzed file with its extension replaced."""
    p = Path(path)
    return p.with_name(p.stem + EXPORT_SUFFIX)


def write_export(report: AnalysisReport, path: str | Path) -> Path:
    """Write the CSV export next to `path` and return where it went.

    Raises:
        OSError: if the export file cannot be written.
    """
    out = export_path(path)
    out.write_text(export_csv(report.valid_records), encoding="utf-8")
    log.info("export: wrote %d records to %s", len(report.valid_records), out)
    return out
