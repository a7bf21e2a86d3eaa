"""
In-memory table of string cells with header-indexed columns.

**Conceptual**: A `Table` is the single data structure of this package. It
owns an ordered list of header names and an ordered list of rows, where each
row is an ordered list of cell strings. Position `i` in `headers` names
column `i` in every row.

**Ragged rows are legal**: Rows are independent variable-length lists. Nothing
forces a row to have one cell per header, because single-row operations
(`push_cell`, `insert_cell`) grow one row at a time. Column-wide operations
each define how they treat short rows:
  - `column()` returns "" for a row too short to have the cell.
  - `delete_column()` skips rows too short to have the cell.
  - `pop_column()` skips rows that are already empty.

**Two bounds policies** (see `schemas.BOUNDS_POLICY`):
  - LENIENT operations ignore an out-of-range position (`set_header`,
    `push_cell`, `set_cell`, `set_row`) or return None (`delete_row`).
  - STRICT operations raise `TablePositionError` (`insert_header`,
    `delete_header`, `insert_cell`, `delete_column`, `insert_row`).
Negative positions are always out of range; they never count from the end.

**Lookup misses are not errors**: `header_position`, `column`, `row`, `cell`,
`delete_row`, `pop_header` and `pop_row` return None when there is nothing
to return.

**Ownership**: A table is a single-owner value. It does no locking and is not
safe to share between threads without external synchronization. Every row
built from caller input is a fresh list, so the caller's sequences are never
aliased.

Example:
    >>> table = Table.parse("name,qty\\napple,3\\npear,5\\n")
    >>> table.column("qty")
    ['3', '5']
    >>> table.push_row(["plum", "7"])
    >>> table.to_text()
    'name,qty\\napple,3\\npear,5\\nplum,7\\n'
"""

from pathlib import Path
from typing import IO, Iterable, Optional

from csvtable.data.render import render_table
from csvtable.data.schemas import (
    DELIMITER,
    LINE_TERMINATOR,
    EmptyInputError,
    TablePositionError,
)


def _in_range(items: list, position: int) -> bool:
    """True if `position` addresses an existing element of `items`."""
    return 0 <= position < len(items)


def _require_position(operation: str, items: list, position: int, what: str) -> None:
    """Raise TablePositionError unless `position` addresses an existing element."""
    if not _in_range(items, position):
        raise TablePositionError(
            f"{operation}: {what} position {position} out of range "
            f"(length {len(items)})"
        )


def _require_insert_position(operation: str, items: list, position: int, what: str) -> None:
    """Raise TablePositionError unless `0 <= position <= len(items)`."""
    if not 0 <= position <= len(items):
        raise TablePositionError(
            f"{operation}: {what} insert position {position} out of range "
            f"(length {len(items)})"
        )


def _require_str(operation: str, value) -> None:
    """Raise TypeError unless `value` is a string (every header and cell is text)."""
    if not isinstance(value, str):
        raise TypeError(
            f"{operation}: value must be str, got {type(value).__name__}"
        )


def _build_row(values: Iterable[str]) -> list[str]:
    """
    Copy caller-provided values into a freshly owned row.

    Raises:
        TypeError: If any value is not a string.
    """
    row = list(values)
    for index, value in enumerate(row):
        if not isinstance(value, str):
            raise TypeError(
                f"Row values must be str, got {type(value).__name__} at index {index}"
            )
    return row


def _split_lines(text: str) -> list[str]:
    """Split text on newlines, dropping one trailing carriage return per line."""
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


class Table:
    """
    Headers plus rows of string cells, mutated in place.

    **Construction**:
      - `Table()` creates an empty table (no headers, no rows).
      - `Table(headers, rows)` copies the given sequences.
      - `Table.parse(text)` / `Table.read(source)` parse delimited text.

    Attributes:
        headers: Read-only snapshot of header names (tuple).
        rows: Read-only snapshot of all rows (tuple of tuples).
        width: Number of headers.
    """

    def __init__(
        self,
        headers: Optional[Iterable[str]] = None,
        rows: Optional[Iterable[Iterable[str]]] = None,
    ):
        self._headers: list[str] = _build_row([] if headers is None else headers)
        self._rows: list[list[str]] = [_build_row(row) for row in ([] if rows is None else rows)]

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def headers(self) -> tuple[str, ...]:
        return tuple(self._headers)

    @property
    def rows(self) -> tuple[tuple[str, ...], ...]:
        return tuple(tuple(row) for row in self._rows)

    @property
    def width(self) -> int:
        return len(self._headers)

    def __len__(self) -> int:
        return len(self._rows)

    def header_position(self, name: str) -> Optional[int]:
        """
        Return the index of the first header equal to `name`, or None.

        Matching is exact (case-sensitive, no trimming). With duplicate
        headers the first occurrence wins.
        """
        for index, header in enumerate(self._headers):
            if header == name:
                return index
        return None

    def column(self, name: str) -> Optional[list[str]]:
        """
        Project one column across all rows.

        **Short rows**: A row with no cell at the column's index contributes
        an empty string, so the result always has exactly one entry per row.

        Args:
            name: Header name, resolved with `header_position`.

        Returns:
            List of cell strings in row order (empty list for a table with no
            rows), or None if no header has this name.

        Example:
            >>> table = Table(["a", "b"], [["1"], ["2", "x"]])
            >>> table.column("b")
            ['', 'x']
        """
        index = self.header_position(name)
        if index is None:
            return None
        return [row[index] if index < len(row) else "" for row in self._rows]

    def row(self, position: int) -> Optional[tuple[str, ...]]:
        """Return the row at `position` as a tuple, or None if out of range."""
        if not _in_range(self._rows, position):
            return None
        return tuple(self._rows[position])

    def cell(self, row_index: int, col_index: int) -> Optional[str]:
        """Return the cell at (row_index, col_index), or None if either is out of range."""
        if not _in_range(self._rows, row_index):
            return None
        row = self._rows[row_index]
        if not _in_range(row, col_index):
            return None
        return row[col_index]

    # ------------------------------------------------------------------
    # Header mutators
    # ------------------------------------------------------------------

    def push_header(self, name: str) -> None:
        """Append a header. Duplicate names are allowed."""
        _require_str("push_header", name)
        self._headers.append(name)

    def set_header(self, position: int, name: str) -> None:
        """Rename the header at `position`. LENIENT: no-op if out of range."""
        _require_str("set_header", name)
        if not _in_range(self._headers, position):
            return
        self._headers[position] = name

    def insert_header(self, position: int, name: str) -> None:
        """
        Insert a header at `position`, shifting later headers right.

        Rows are not touched. STRICT: `position` may equal the current header
        count (append) but not exceed it.

        Raises:
            TablePositionError: If position is negative or past the end.
        """
        _require_str("insert_header", name)
        _require_insert_position("insert_header", self._headers, position, "header")
        self._headers.insert(position, name)

    def delete_header(self, position: int) -> str:
        """
        Remove and return the header at `position`. Rows are not touched.

        Raises:
            TablePositionError: If position is out of range.
        """
        _require_position("delete_header", self._headers, position, "header")
        return self._headers.pop(position)

    def pop_header(self) -> Optional[str]:
        """Remove and return the last header, or None if there are none."""
        if not self._headers:
            return None
        return self._headers.pop()

    # ------------------------------------------------------------------
    # Cell and column mutators
    # ------------------------------------------------------------------

    def push_cell(self, row_index: int, value: str) -> None:
        """
        Append a cell to the end of one row.

        Only the addressed row grows, so this can leave the row longer than
        the headers. LENIENT: no-op if `row_index` is out of range.
        """
        _require_str("push_cell", value)
        if not _in_range(self._rows, row_index):
            return
        self._rows[row_index].append(value)

    def set_cell(self, row_index: int, col_index: int, value: str) -> None:
        """Replace one cell. LENIENT: no-op if either index is out of range."""
        _require_str("set_cell", value)
        if not _in_range(self._rows, row_index):
            return
        row = self._rows[row_index]
        if not _in_range(row, col_index):
            return
        row[col_index] = value

    def insert_cell(self, row_index: int, position: int, value: str) -> None:
        """
        Insert a cell into one row at `position`, shifting later cells right.

        STRICT on both indices, unlike `push_cell` and `set_cell`.

        Raises:
            TablePositionError: If row_index is out of range, or position is
                                negative or past the end of that row.
        """
        _require_str("insert_cell", value)
        _require_position("insert_cell", self._rows, row_index, "row")
        row = self._rows[row_index]
        _require_insert_position("insert_cell", row, position, "cell")
        row.insert(position, value)

    def delete_column(self, position: int) -> None:
        """
        Remove a whole column: its header and the matching cell of every row.

        **Mixed policy**:
          - Header removal is STRICT (delegates to `delete_header`), and it
            happens before any row is touched, so a failure leaves the table
            unchanged.
          - Cell removal is best-effort: rows too short to have a cell at
            `position` are skipped.

        Raises:
            TablePositionError: If there is no header at `position`.

        Example:
            >>> table = Table(["a", "b", "c"], [["1", "2"], ["3", "4", "5"]])
            >>> table.delete_column(2)
            >>> table.rows
            (('1', '2'), ('3', '4'))
        """
        self.delete_header(position)

        for row in self._rows:
            if position < len(row):
                del row[position]

    def pop_column(self) -> None:
        """
        Remove the last header and the last cell of every row.

        Each part is a no-op where there is nothing to pop: no headers, or an
        empty row. Rows are trimmed by their own last cell, not by the header
        count, so ragged rows each lose exactly one cell.
        """
        self.pop_header()

        for row in self._rows:
            if row:
                row.pop()

    # ------------------------------------------------------------------
    # Row mutators
    # ------------------------------------------------------------------

    def push_row(self, values: Iterable[str]) -> None:
        """Append a row built from a copy of `values`."""
        self._rows.append(_build_row(values))

    def set_row(self, position: int, values: Iterable[str]) -> None:
        """Replace the row at `position`. LENIENT: no-op if out of range."""
        if not _in_range(self._rows, position):
            return
        self._rows[position] = _build_row(values)

    def insert_row(self, position: int, values: Iterable[str]) -> None:
        """
        Insert a row at `position`, shifting later rows down.

        Raises:
            TablePositionError: If position is negative or past the end.
        """
        _require_insert_position("insert_row", self._rows, position, "row")
        self._rows.insert(position, _build_row(values))

    def delete_row(self, position: int) -> Optional[list[str]]:
        """Remove and return the row at `position`, or None if out of range."""
        if not _in_range(self._rows, position):
            return None
        return self._rows.pop(position)

    def pop_row(self) -> Optional[list[str]]:
        """Remove and return the last row, or None if there are no rows."""
        if not self._rows:
            return None
        return self._rows.pop()

    # ------------------------------------------------------------------
    # Parse / serialize
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "Table":
        """
        Parse delimited text into a table.

        **Functionally**:
          1. Split into lines on "\\n" (a trailing "\\r" per line is dropped,
             so CRLF files parse the same as LF files).
          2. Drop lines that are exactly empty. Whitespace-only lines are
             kept and become single-cell rows.
          3. Split every line on "," with no quoting or escaping.
          4. The first line becomes the headers; the rest become rows.

        Args:
            text: Entire source text.

        Returns:
            New Table.

        Raises:
            EmptyInputError: If the text has no non-empty lines.

        Example:
            >>> Table.parse("a,b\\n1,2\\n3,4\\n").rows
            (('1', '2'), ('3', '4'))
        """
        lines = [line for line in _split_lines(text) if line]
        if not lines:
            raise EmptyInputError(
                "Cannot parse table: source has no non-empty lines to use as headers."
            )

        parsed = [line.split(DELIMITER) for line in lines]
        return cls(headers=parsed[0], rows=parsed[1:])

    @classmethod
    def read(cls, source: "str | Path | IO[str]", encoding: str | None = None) -> "Table":
        """
        Read and parse a table from a path or a readable text stream.

        See `csvtable.data.io.read_table` for details.
        """
        # Local import: io depends on this module
        from csvtable.data.io import read_table

        return read_table(source, encoding=encoding)

    def to_text(self, line_terminator: str = LINE_TERMINATOR) -> str:
        """
        Serialize the table to delimited text.

        **Rules**:
          - The header line is written only if there is at least one header.
            With no headers there is no header line at all, not even a blank.
          - Every row is written as-is, whatever its length. No padding, no
            truncation to the header count.
          - Every line, including the last, ends with `line_terminator`.

        Example:
            >>> Table(rows=[["x"]]).to_text()
            'x\\n'
        """
        lines = []
        if self._headers:
            lines.append(DELIMITER.join(self._headers))
        lines.extend(DELIMITER.join(row) for row in self._rows)
        return "".join(line + line_terminator for line in lines)

    def write(
        self,
        dest: "str | Path | IO[str]",
        encoding: str | None = None,
        line_terminator: str | None = None,
    ) -> None:
        """
        Serialize the table to a path or a writable text stream.

        See `csvtable.data.io.write_table` for details.
        """
        from csvtable.data.io import write_table

        write_table(self, dest, encoding=encoding, line_terminator=line_terminator)

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return self._headers == other._headers and self._rows == other._rows

    def __repr__(self) -> str:
        return f"Table(headers={self._headers!r}, rows={len(self._rows)} rows)"

    def __str__(self) -> str:
        return render_table(self)
