"""
Table readers and writers for files and text streams.

**Conceptual**: This module is the I/O boundary for tables. `Table.parse` and
`Table.to_text` only ever see strings; everything that touches the filesystem
or a stream goes through `read_table` and `write_table`. That keeps the table
logic testable without files and gives one place to handle encodings, line
endings, and parent directories.

**Sources and sinks**:
  - A `str` or `os.PathLike` is treated as a filesystem path.
  - Anything else is treated as an already-open text stream (`read()` for
    sources, `write()`/`flush()` for sinks). The caller keeps ownership of
    streams; they are flushed but never closed here.
  - To parse a string that holds table text, use `Table.parse` directly.

**Errors**: I/O failures (missing file, permission denied, disk full, bad
bytes for the configured encoding) propagate unchanged as `OSError` /
`UnicodeError`. They are never retried or swallowed.
"""

import os
from pathlib import Path
from typing import IO

from csvtable.config.settings import get_settings
from csvtable.data.schemas import SUPPORTED_LINE_TERMINATORS
from csvtable.data.table import Table


def _is_path(target) -> bool:
    return isinstance(target, (str, os.PathLike))


def resolve_table_path(path: "str | os.PathLike", data_dir: "Path | None" = None) -> Path:
    """
    Resolve a user-supplied path, falling back to the data directory.

    Args:
        path: Path as typed on the command line.
        data_dir: Directory to try when `path` is relative and missing.
                 Defaults to the configured data directory (CSVTABLE_DATA_DIR).

    Returns:
        `path` itself if it exists (or is absolute), otherwise data_dir / path.
    """
    candidate = Path(path)
    if candidate.exists() or candidate.is_absolute():
        return candidate
    if data_dir is None:
        data_dir = get_settings().table.data_dir
    return Path(data_dir) / candidate


def read_table(
    source: "str | os.PathLike | IO[str]",
    encoding: str | None = None,
) -> Table:
    """
    Read a delimited text file (or stream) into a Table.

    **Functionally**:
      - Opens the file with `newline=""` so "\\r\\n" reaches the parser
        intact; the parser strips the carriage return itself.
      - Reads the whole source into memory (no streaming parse).
      - Delegates to `Table.parse`: first non-empty line = headers.

    Args:
        source: Path to a file, or a readable text stream.
        encoding: Text encoding for paths. Defaults to the configured
                 encoding (CSVTABLE_ENCODING, "utf-8" if unset). Ignored
                 for streams.

    Returns:
        Parsed Table.

    Raises:
        FileNotFoundError: If `source` is a path that does not exist.
        EmptyInputError: If the source has no non-empty lines.
        OSError: If the file cannot be opened or read.
        UnicodeDecodeError: If the bytes are not valid in `encoding`.

    Example:
        >>> table = read_table("data/inventory.csv")
        >>> table.headers
        ('name', 'qty')
    """
    if not _is_path(source):
        return Table.parse(source.read())

    path = Path(source)

    # Check if file exists before attempting to read
    if not path.exists():
        raise FileNotFoundError(
            f"Table file not found: {path}. "
            f"Ensure the file exists and the path is correct."
        )

    if encoding is None:
        encoding = get_settings().table.encoding

    with open(path, "r", encoding=encoding, newline="") as f:
        text = f.read()

    return Table.parse(text)


def write_table(
    table: Table,
    dest: "str | os.PathLike | IO[str]",
    encoding: str | None = None,
    line_terminator: str | None = None,
    create_parents: bool = True,
) -> None:
    """
    Write a Table as delimited text to a file (or stream).

    **Functionally**:
      - Serializes with `Table.to_text` (header line only if there are
        headers; rows written as-is, no padding).
      - Creates or truncates the file. Missing parent directories are
        created unless `create_parents=False`.
      - Flushes before returning.

    **Round-trip**: For a rectangular table whose cells contain no commas or
    newlines, `read_table(path)` returns a table equal to the one written.

    Args:
        table: Table to write.
        dest: Path to a file, or a writable text stream.
        encoding: Text encoding for paths. Defaults to CSVTABLE_ENCODING.
        line_terminator: "\\n" or "\\r\\n". Defaults to CSVTABLE_LINE_ENDING.
        create_parents: Create missing parent directories (default True).

    Raises:
        ValueError: If line_terminator is not "\\n" or "\\r\\n".
        OSError: If the file cannot be created or written.

    Returns:
        None (side effect: writes text to `dest`).
    """
    if encoding is None or line_terminator is None:
        table_settings = get_settings().table
        if encoding is None:
            encoding = table_settings.encoding
        if line_terminator is None:
            line_terminator = table_settings.line_terminator

    if line_terminator not in SUPPORTED_LINE_TERMINATORS:
        raise ValueError(
            f"line_terminator must be one of {SUPPORTED_LINE_TERMINATORS!r}, "
            f"got: {line_terminator!r}"
        )

    text = table.to_text(line_terminator=line_terminator)

    if not _is_path(dest):
        dest.write(text)
        dest.flush()
        return

    path = Path(dest)

    if create_parents:
        path.parent.mkdir(parents=True, exist_ok=True)

    # newline="" so the terminator is written verbatim on every platform
    with open(path, "w", encoding=encoding, newline="") as f:
        f.write(text)
        f.flush()
