import io
from pathlib import Path

import pytest

from flight_check.cli import EXIT_ERROR, EXIT_INVALID, EXIT_OK, main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("FLIGHT_CHECK_STORE", "FLIGHT_CHECK_DATA", "FLIGHT_CHECK_STRICT", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)


def run(*argv: str):
    out, err = io.StringIO(), io.StringIO()
    code = main(list(argv), out=out, err=err)
    return code, out.getvalue(), err.getvalue()


def test_check_valid_saves(tmp_path: Path) -> None:
    store = tmp_path / "latest.txt"
    code, out, _ = run("--store", str(store), "check", "092530,ABC123,XY1")
    assert code == EXIT_OK
    assert "Record valid." in out
    assert "  Time: 09:25:30" in out
    assert store.read_text(encoding="utf-8") == "09:25:30 ABC123 XY1\n"


def test_check_invalid(tmp_path: Path) -> None:
    store = tmp_path / "latest.txt"
    code, out, _ = run("--store", str(store), "check", "25:00:00 ABC XYZ")
    assert code == EXIT_INVALID
    assert "Invalid: time out of range" in out
    assert not store.exists()


def test_check_no_save(tmp_path: Path) -> None:
    store = tmp_path / "latest.txt"
    code, _, _ = run("--store", str(store), "check", "--no-save", "09:25:30 ABC123 XYZ")
    assert code == EXIT_OK
    assert not store.exists()


def test_check_strict(tmp_path: Path) -> None:
    code, out, _ = run("--store", str(tmp_path / "s.txt"), "--strict", "check", "09:25:30 ABC123 XYZ extra")
    assert code == EXIT_INVALID
    assert "too many pieces" in out


def test_analyze_with_export(tmp_path: Path) -> None:
    data = tmp_path / "data.txt"
    data.write_text("09:25:30 ABC123 XYZ\n\n092530,B2,C34\n", encoding="utf-8")
    code, out, _ = run("analyze", str(data), "--export")
    assert code == EXIT_INVALID
    assert "  OK: 2" in out
    assert "  Invalid: 1" in out
    assert 'Line 2: empty line -- ""' in out
    csv = (tmp_path / "data.valid.csv").read_text(encoding="utf-8").splitlines()
    assert csv == ["time,flight,computer", "09:25:30,ABC123,XYZ", "09:25:30,B2,C34"]


def test_analyze_all_good(tmp_path: Path) -> None:
    data = tmp_path / "data.txt"
    data.write_text("09:25:30 ABC123 XYZ\n", encoding="utf-8")
    code, out, _ = run("analyze", str(data))
    assert code == EXIT_OK
    assert "Invalid" not in out
    assert not (tmp_path / "data.valid.csv").exists()


def test_analyze_missing_file_is_distinct(tmp_path: Path) -> None:
    code, out, err = run("analyze", str(tmp_path / "missing.txt"))
    assert code == EXIT_ERROR
    assert "File not found" in err
    assert "OK:" not in out


def test_show(tmp_path: Path) -> None:
    store = tmp_path / "latest.txt"
    code, out, _ = run("--store", str(store), "show")
    assert code == EXIT_OK
    assert "No saved answers yet." in out

    run("--store", str(store), "check", "09:25:30 ABC123 XYZ")
    code, out, _ = run("--store", str(store), "show")
    assert "  1) 09:25:30 ABC123 XYZ" in out


def test_store_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    store = tmp_path / "env-store.txt"
    monkeypatch.setenv("FLIGHT_CHECK_STORE", str(store))
    code, _, _ = run("check", "09:25:30 ABC123 XYZ")
    assert code == EXIT_OK
    assert store.exists()


def test_cat_with_limit(tmp_path: Path) -> None:
    data = tmp_path / "data.txt"
    data.write_text("a\nb\nc\n", encoding="utf-8")
    code, out, _ = run("cat", str(data), "--limit", "2")
    assert code == EXIT_OK
    assert out.splitlines() == ["a", "b", "... (file long; only first 2 lines shown)"]


def test_cat_missing(tmp_path: Path) -> None:
    code, _, err = run("cat", str(tmp_path / "nope.txt"))
    assert code == EXIT_ERROR
    assert "Cannot open" in err


def test_rules() -> None:
    code, out, _ = run("rules")
    assert code == EXIT_OK
    assert "Sample line: 09:25:30 ABC123 XYZ" in out


def test_no_command() -> None:
    code, _, err = run()
    assert code == EXIT_ERROR
    assert "usage" in err


@pytest.mark.parametrize("limit", ["0", "-1", "ten"])
def test_cat_rejects_bad_limit(tmp_path: Path, limit: str, capsys: pytest.CaptureFixture) -> None:
    with pytest.raises(SystemExit) as exc:
        run("cat", str(tmp_path / "data.txt"), "--limit", limit)
    assert exc.value.code == 2
    assert "--limit" in capsys.readouterr().err
