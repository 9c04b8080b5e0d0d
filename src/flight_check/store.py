"""Append-only store of accepted records, plus the session holder.

Each accepted record becomes one line `HH:MM:SS FLIGHT COMPUTER`.
Reading back is line by line, numbered from 1.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Optional

from .errors import FileAccessError
from .records import Record, render_record

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredLine:
    number: int
    text: str


@dataclass(frozen=True)
class RawView:
    lines: list[str]
    truncated: bool


def append_record(record: Record, path: str | Path) -> None:
    """Append one record in canonical form.

    Raises:
        FileAccessError: if the store cannot be opened for appending.
    """
    p = Path(path)
    try:
        if p.parent != Path("."):
            p.parent.mkdir(parents=True, exist_ok=True)
        with p.open("a", encoding="utf-8") as fh:
            fh.write(render_record(record) + "\n")
    except OSError as ex:
        log.warning("store: append to %s failed: %s", p, ex)
        raise FileAccessError(p, "Could not open store to save the entry") from ex
    log.debug("store: appended %s to %s", render_record(record), p)


def read_store(path: str | Path) -> list[StoredLine]:
    """Return stored lines, numbered from 1. A missing store is empty.

    Raises:
        FileAccessError: if the store exists but cannot be read.
    """
    p = Path(path)
    if not p.exists():
        return []
    try:
        with p.open("r", encoding="utf-8") as fh:
            return [StoredLine(i, line.rstrip("\r\n")) for i, line in enumerate(fh, start=1)]
    except (OSError, UnicodeDecodeError) as ex:
        raise FileAccessError(p, "Cannot open") from ex


def read_raw(path: str | Path, limit: int = 200) -> RawView:
    """Read at most `limit` lines of any text file, verbatim.

    Raises:
        FileAccessError: if the file cannot be opened.
    """
    p = Path(path)
    out: list[str] = []
    truncated = False
    try:
        with p.open("r", encoding="utf-8", errors="replace") as fh:
            for line in fh:
                if len(out) >= limit:
                    truncated = True
                    break
                out.append(line.rstrip("\r\n"))
    except OSError as ex:
        raise FileAccessError(p, "Cannot open") from ex
    return RawView(out, truncated)


@dataclass
class Session:
    """State owned by one interactive caller: the store and the last record."""
    store_path: Path
    last: Optional[Record] = field(default=None)

    def remember(self, record: Record) -> None:
        """Keep `record` as the last one and append it to the store.

        Raises:
            FileAccessError: if the store cannot be written; `last` is still updated.
        """
        self.last = record
        append_record(record, self.store_path)

    def stored(self) -> list[StoredLine]:
        return read_store(self.store_path)
