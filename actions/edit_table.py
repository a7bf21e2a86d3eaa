#!/usr/bin/env python3
"""
Drop columns and rows from a delimited table file.

**What it does**:
  1. Reads the table at PATH.
  2. Drops every column named with --drop-column (header and cells).
  3. Drops every row listed with --drop-row (0-based, positions refer to the
     table as read, before any row is removed).
  4. Optionally pops the last column (--pop-column).
  5. Writes the result to --output, or back to PATH.

A relative PATH that does not exist is also looked up under CSVTABLE_DATA_DIR
(the same rule as render_table.py). --output is used exactly as given.

**Usage**:
    From project root:
    ```bash
    python actions/edit_table.py data/inventory.csv --drop-column notes
    python actions/edit_table.py data/inventory.csv --drop-row 0 --drop-row 3 \
        --output data/inventory_trimmed.csv
    ```

**Safety**:
  - Overwrites PATH in place unless --output is given (make a backup first).
  - --dry-run reports what would change without writing.
  - --require-rectangular refuses to write a table whose rows do not line up
    with its headers.

**Exit codes**:
  - 0: Success (all requested edits applied)
  - 1: Usage error (missing file, unknown column, row out of range, ragged output)
  - 2: Fatal error (file cannot be read or written)
"""

import argparse
import sys
from pathlib import Path

# Ensure project root is on path for imports
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from csvtable.data.io import read_table, resolve_table_path, write_table
from csvtable.data.schemas import TableError, validate_rectangular
from csvtable.data.table import Table


def apply_edits(
    table: Table,
    drop_columns: list[str] | None = None,
    drop_rows: list[int] | None = None,
    pop_column: bool = False,
) -> dict:
    """
    Apply column and row removals to a table in place.

    **Order of operations**:
      1. Named columns are dropped one by one. Each name is resolved against
         the current headers, so dropping a duplicated name twice removes
         both occurrences.
      2. Rows are dropped highest position first, so every position refers
         to the table as it was before any row removal.
      3. The last column is popped if requested.

    Unknown column names and out-of-range rows are collected rather than
    aborting, so one bad argument does not hide the others.

    Args:
        table: Table to edit (mutated).
        drop_columns: Header names to remove.
        drop_rows: 0-based row positions to remove.
        pop_column: Pop the last header and last cell of every row.

    Returns:
        Dict with keys:
          - 'dropped_columns': names actually removed
          - 'dropped_rows': positions actually removed (ascending)
          - 'missing_columns': names with no matching header
          - 'missing_rows': positions out of range
          - 'popped_column': header popped, or None
    """
    summary = {
        "dropped_columns": [],
        "dropped_rows": [],
        "missing_columns": [],
        "missing_rows": [],
        "popped_column": None,
    }

    for name in drop_columns or []:
        position = table.header_position(name)
        if position is None:
            summary["missing_columns"].append(name)
            continue
        table.delete_column(position)
        summary["dropped_columns"].append(name)

    for position in sorted(set(drop_rows or []), reverse=True):
        if table.delete_row(position) is None:
            summary["missing_rows"].append(position)
        else:
            summary["dropped_rows"].append(position)
    summary["dropped_rows"].sort()
    summary["missing_rows"].sort()

    if pop_column:
        summary["popped_column"] = table.headers[-1] if table.headers else None
        table.pop_column()

    return summary


def parse_args(argv=None):
    """
    Parse command line arguments.

    Returns:
        Namespace with attributes: path, drop_column (list), drop_row (list),
        pop_column (bool), output (str | None), dry_run (bool),
        require_rectangular (bool)
    """
    parser = argparse.ArgumentParser(
        description="Drop columns and rows from a comma-delimited table file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("path", help="Path to the table file")

    parser.add_argument(
        "--drop-column",
        action="append",
        default=[],
        metavar="NAME",
        help="Header name of a column to remove (repeatable)",
    )

    parser.add_argument(
        "--drop-row",
        action="append",
        type=int,
        default=[],
        metavar="N",
        help="0-based position of a row to remove (repeatable)",
    )

    parser.add_argument(
        "--pop-column",
        action="store_true",
        help="Remove the last column",
    )

    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write the result here instead of overwriting PATH",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report changes without writing",
    )

    parser.add_argument(
        "--require-rectangular",
        action="store_true",
        help="Fail if any row length differs from the header count after editing",
    )

    return parser.parse_args(argv)


def main(argv=None) -> int:
    """
    Main entrypoint for table editing.

    **Error handling strategy**:
      - Unknown columns / rows: report all of them and exit 1 without writing.
      - Ragged result with --require-rectangular: exit 1 without writing.
      - Read/write failures: exit 2.
    """
    args = parse_args(argv)
    path = resolve_table_path(args.path)
    output = Path(args.output) if args.output else path

    print(f"Reading {path}...")
    try:
        table = read_table(path)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except TableError as e:
        print(f"Error: {path}: {e}", file=sys.stderr)
        return 1
    except (OSError, UnicodeError) as e:
        print(f"Fatal error reading {path}: {e}", file=sys.stderr)
        return 2
    print(f"  ✓ {table.width} columns, {len(table)} rows")

    summary = apply_edits(
        table,
        drop_columns=args.drop_column,
        drop_rows=args.drop_row,
        pop_column=args.pop_column,
    )

    for name in summary["dropped_columns"]:
        print(f"  ✓ Dropped column '{name}'")
    for position in summary["dropped_rows"]:
        print(f"  ✓ Dropped row {position}")
    if args.pop_column:
        print(f"  ✓ Popped last column ({summary['popped_column']!r})")

    failed = False
    for name in summary["missing_columns"]:
        print(f"  ✗ No column named '{name}'")
        failed = True
    for position in summary["missing_rows"]:
        print(f"  ✗ Row {position} out of range")
        failed = True
    if failed:
        print("Nothing written (fix the arguments above and retry).", file=sys.stderr)
        return 1

    if args.require_rectangular:
        try:
            validate_rectangular(table, context=str(path))
        except TableError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    if args.dry_run:
        print(f"Dry run: would write {table.width} columns, {len(table)} rows to {output}")
        return 0

    try:
        write_table(table, output)
    except OSError as e:
        print(f"Fatal error writing {output}: {e}", file=sys.stderr)
        return 2

    print(f"  ✓ Saved to {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
