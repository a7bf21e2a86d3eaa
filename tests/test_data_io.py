"""
Tests for table file and stream I/O.

This module tests:
  - read_table / write_table with paths and text streams.
  - Round-trip read/write correctness.
  - Encoding and line-ending defaults from settings.
  - Error handling (missing file, empty file, missing parent directory).

All tests use temporary directories (via tmp_path fixture).
"""

import io

import pytest

from csvtable.config.settings import reset_settings
from csvtable.data.io import read_table, resolve_table_path, write_table
from csvtable.data.schemas import EmptyInputError
from csvtable.data.table import Table


def make_table() -> Table:
    return Table(
        headers=["id", "name", "qty"],
        rows=[["1", "apple", "3"], ["2", "pear", "5"], ["3", "plum", ""]],
    )


# ============================================================================
# Paths
# ============================================================================

def test_round_trip_via_file(tmp_path):
    """Writing a rectangular table then reading it back gives an equal table."""
    path = tmp_path / "table.csv"
    table = make_table()

    write_table(table, path)
    loaded = read_table(path)

    assert loaded == table
    assert loaded.headers == table.headers
    assert loaded.rows == table.rows


def test_write_exact_bytes(tmp_path):
    path = tmp_path / "table.csv"
    write_table(Table(["a", "b"], [["1", "2"]]), path)
    assert path.read_bytes() == b"a,b\n1,2\n"


def test_write_empty_headers(tmp_path):
    path = tmp_path / "table.csv"
    write_table(Table(rows=[["x"]]), path)
    assert path.read_text() == "x\n"


def test_write_truncates_existing_file(tmp_path):
    path = tmp_path / "table.csv"
    path.write_text("old,content\nthat,is,longer\n")
    write_table(Table(["a"]), path)
    assert path.read_text() == "a\n"


def test_write_creates_parent_directories(tmp_path):
    path = tmp_path / "nested" / "dir" / "table.csv"
    write_table(make_table(), path)
    assert path.exists()


def test_write_without_create_parents_fails(tmp_path):
    path = tmp_path / "missing" / "table.csv"
    with pytest.raises(OSError):
        write_table(make_table(), path, create_parents=False)


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError) as exc_info:
        read_table(tmp_path / "nope.csv")
    assert "nope.csv" in str(exc_info.value)


def test_read_empty_file_raises(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("\n\n")
    with pytest.raises(EmptyInputError):
        read_table(path)


def test_read_crlf_file(tmp_path):
    path = tmp_path / "windows.csv"
    path.write_bytes(b"a,b\r\n1,2\r\n")
    assert read_table(path) == Table(["a", "b"], [["1", "2"]])


def test_read_accepts_str_path(tmp_path):
    path = tmp_path / "table.csv"
    path.write_text("a\n1\n")
    assert read_table(str(path)).column("a") == ["1"]


def test_crlf_line_terminator(tmp_path):
    path = tmp_path / "table.csv"
    write_table(Table(["a"], [["1"]]), path, line_terminator="\r\n")
    assert path.read_bytes() == b"a\r\n1\r\n"
    assert read_table(path) == Table(["a"], [["1"]])


def test_encoding_argument(tmp_path):
    path = tmp_path / "latin.csv"
    table = Table(["café"], [["crème"]])
    write_table(table, path, encoding="latin-1")
    assert path.read_bytes() == "café\ncrème\n".encode("latin-1")
    assert read_table(path, encoding="latin-1") == table


def test_invalid_bytes_propagate(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_bytes(b"a\n\xff\xfe\n")
    with pytest.raises(UnicodeDecodeError):
        read_table(path, encoding="utf-8")


def test_settings_defaults_apply(tmp_path, monkeypatch):
    """Encoding and line ending fall back to CSVTABLE_* settings."""
    monkeypatch.setenv("CSVTABLE_LINE_ENDING", "CRLF")
    monkeypatch.setenv("CSVTABLE_ENCODING", "utf-16")
    reset_settings()

    path = tmp_path / "table.csv"
    write_table(Table(["a"], [["1"]]), path)

    assert path.read_bytes().decode("utf-16") == "a\r\n1\r\n"
    assert read_table(path) == Table(["a"], [["1"]])


# ============================================================================
# Streams and Table convenience methods
# ============================================================================

def test_read_from_stream():
    stream = io.StringIO("a,b\n1,2\n")
    assert read_table(stream) == Table(["a", "b"], [["1", "2"]])


def test_write_to_stream_does_not_close():
    stream = io.StringIO()
    write_table(make_table(), stream)
    assert not stream.closed
    assert stream.getvalue() == "id,name,qty\n1,apple,3\n2,pear,5\n3,plum,\n"


def test_table_read_and_write_methods(tmp_path):
    path = tmp_path / "table.csv"
    table = make_table()
    table.write(path)
    assert Table.read(path) == table


@pytest.mark.parametrize("terminator", ["\r", ";", ""])
def test_unsupported_line_terminator_rejected(tmp_path, terminator):
    path = tmp_path / "table.csv"
    with pytest.raises(ValueError) as exc_info:
        write_table(make_table(), path, line_terminator=terminator)
    assert "line_terminator" in str(exc_info.value)
    assert not path.exists()


def test_unsupported_line_terminator_rejected_for_stream():
    stream = io.StringIO()
    with pytest.raises(ValueError):
        write_table(make_table(), stream, line_terminator="\r")
    assert stream.getvalue() == ""


def test_resolve_table_path(tmp_path, monkeypatch):
    (tmp_path / "people.csv").write_text("id\n1\n")
    monkeypatch.chdir(tmp_path.parent)

    # Existing and absolute paths are returned as-is
    assert resolve_table_path(tmp_path / "people.csv") == tmp_path / "people.csv"
    # Missing relative paths fall back to the given directory
    assert resolve_table_path("people.csv", tmp_path) == tmp_path / "people.csv"

    # ... or to CSVTABLE_DATA_DIR
    monkeypatch.setenv("CSVTABLE_DATA_DIR", str(tmp_path))
    reset_settings()
    assert resolve_table_path("people.csv") == tmp_path / "people.csv"
