"""
Format constants, error taxonomy, and shape checks for delimited tables.

**Conceptual**: This module defines the "data contract" for every table that
enters or leaves the system. The format is intentionally tiny:
  - Fields are separated by a single literal comma.
  - Lines are separated by a newline (an optional trailing carriage return is
    stripped on read).
  - The first non-empty line is the header row.
  - Every cell is text. There are no typed columns.

**No quoting, no escaping**: A comma inside a cell is *always* a field
boundary. This is a deliberate scope boundary, not a bug. Files produced by
spreadsheet tools with quoted fields (e.g. `"Smith, John"`) will split on the
embedded comma. Callers needing dialect support should reach for the standard
library's `csv` module instead.

**Bounds policy**: Position-taking mutators on `Table` follow one of two named
modes (see `BoundsPolicy`). The mode of every operation is recorded in
`BOUNDS_POLICY` so callers and tests can rely on it explicitly rather than on
whatever a list would do by default.
"""

from enum import Enum


# Single fixed field separator (no dialects)
DELIMITER = ","

# Line terminator written after every serialized line
LINE_TERMINATOR = "\n"

# Accepted line terminators for writing
SUPPORTED_LINE_TERMINATORS = ("\n", "\r\n")


class TableError(Exception):
    """
    Base class for all table errors.

    **Usage**: Catch this in scripts to report any contract-level failure
    (empty input, bad position, ragged shape) with a single handler. I/O
    failures are *not* wrapped and surface as `OSError`.
    """
    pass


class EmptyInputError(TableError, ValueError):
    """
    Raised when a source has no non-empty lines to take headers from.

    **Conceptual**: Parsing takes the first line as headers. A source that is
    empty (or only blank lines) has no first line, so there is no sensible
    table to return. An empty `Table()` is not a substitute: it would silently
    turn a missing file body into an empty dataset.
    """
    pass


class TablePositionError(TableError, IndexError):
    """
    Raised by STRICT mutators when a position is out of bounds.

    Subclasses IndexError so that generic sequence-handling code keeps working.
    """
    pass


class TableShapeError(TableError, ValueError):
    """Raised when rows do not line up with the headers where that matters."""
    pass


class BoundsPolicy(Enum):
    """
    How a mutator reacts to an out-of-range position.

    Attributes:
        LENIENT: Out-of-range position is a silent no-op (or returns None).
        STRICT: Out-of-range position raises TablePositionError.
    """
    LENIENT = "lenient"
    STRICT = "strict"


# Mode of every position-taking mutator on Table.
# Changing an entry here is a compatibility break for callers.
BOUNDS_POLICY = {
    "set_header": BoundsPolicy.LENIENT,
    "insert_header": BoundsPolicy.STRICT,
    "delete_header": BoundsPolicy.STRICT,
    "push_cell": BoundsPolicy.LENIENT,
    "set_cell": BoundsPolicy.LENIENT,
    "insert_cell": BoundsPolicy.STRICT,
    "delete_column": BoundsPolicy.STRICT,
    "set_row": BoundsPolicy.LENIENT,
    "insert_row": BoundsPolicy.STRICT,
    "delete_row": BoundsPolicy.LENIENT,
}


def ragged_rows(table) -> list[tuple[int, int]]:
    """
    List rows whose length differs from the header count.

    Args:
        table: Table to inspect.

    Returns:
        List of (row_index, row_length) pairs, in row order. Empty when the
        table is rectangular.
    """
    width = len(table.headers)
    return [
        (index, len(row))
        for index, row in enumerate(table.rows)
        if len(row) != width
    ]


def is_rectangular(table) -> bool:
    """Return True if every row has exactly one cell per header."""
    return not ragged_rows(table)


def validate_rectangular(table, context: str | None = None) -> None:
    """
    Validate that every row has exactly one cell per header.

    **Conceptual**: Tables are allowed to be ragged in memory (pushing a cell
    onto one row does not touch the others). Some consumers cannot cope with
    that: a DataFrame needs a fixed width, and a round-trip through text only
    preserves the table when rows line up. Call this at those boundaries.

    Args:
        table: Table to validate.
        context: Optional label (file path, table name) for the error message.

    Raises:
        TableShapeError: If any row length differs from the header count.
    """
    bad = ragged_rows(table)
    if not bad:
        return

    prefix = f"{context}: " if context else ""
    # Only show the first few offenders to keep messages readable
    shown = ", ".join(f"row {index} has {length}" for index, length in bad[:5])
    more = f" (and {len(bad) - 5} more)" if len(bad) > 5 else ""
    raise TableShapeError(
        f"{prefix}Table is not rectangular: expected {len(table.headers)} cells "
        f"per row, but {shown}{more}."
    )
