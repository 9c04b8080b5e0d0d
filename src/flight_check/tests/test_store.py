from pathlib import Path

import pytest

from flight_check.errors import FileAccessError
from flight_check.records import Record, parse_line
from flight_check.store import Session, append_record, read_raw, read_store


def test_append_then_read(tmp_path: Path) -> None:
    store = tmp_path / "sub" / "latestValues.txt"
    append_record(parse_line("092530,ABC123,XY1").unwrap(), store)
    append_record(Record(1, 2, 3, "b", "c12"), store)

    assert store.read_text(encoding="utf-8") == "09:25:30 ABC123 XY1\n01:02:03 b c12\n"
    lines = read_store(store)
    assert [(s.number, s.text) for s in lines] == [(1, "09:25:30 ABC123 XY1"), (2, "01:02:03 b c12")]


def test_stored_lines_parse_back(tmp_path: Path) -> None:
    store = tmp_path / "store.txt"
    rec = Record(23, 0, 5, "Flight9", "z12")
    append_record(rec, store)
    assert parse_line(read_store(store)[0].text).unwrap() == rec


def test_missing_store_is_empty(tmp_path: Path) -> None:
    assert read_store(tmp_path / "none.txt") == []


def test_append_to_directory_fails(tmp_path: Path) -> None:
    with pytest.raises(FileAccessError):
        append_record(Record(1, 2, 3, "A", "B12"), tmp_path)


def test_read_raw_limit(tmp_path: Path) -> None:
    p = tmp_path / "data.txt"
    p.write_text("".join(f"line {i}\n" for i in range(5)), encoding="utf-8")
    view = read_raw(p, limit=3)
    assert view.lines == ["line 0", "line 1", "line 2"]
    assert view.truncated
    full = read_raw(p, limit=5)
    assert len(full.lines) == 5
    assert not full.truncated


def test_read_raw_missing(tmp_path: Path) -> None:
    with pytest.raises(FileAccessError):
        read_raw(tmp_path / "missing.txt")


def test_session_remembers_last(tmp_path: Path) -> None:
    session = Session(tmp_path / "store.txt")
    assert session.last is None
    first = Record(1, 0, 0, "A", "B12")
    second = Record(2, 0, 0, "C", "D34")
    session.remember(first)
    session.remember(second)
    assert session.last == second
    assert [s.text for s in session.stored()] == ["01:00:00 A B12", "02:00:00 C D34"]
