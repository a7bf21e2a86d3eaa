#!/usr/bin/env python3
"""
Print a delimited table file as a bordered rendering, or print one column.

**Purpose**: Quick inspection of a table file from the terminal without
opening a spreadsheet. The rendering is for eyes only; it is not a format
that can be read back.

**Usage**:
    From project root:
    ```bash
    # Whole table
    python actions/render_table.py data/inventory.csv

    # One column, one value per line
    python actions/render_table.py data/inventory.csv --column qty

    # One row
    python actions/render_table.py data/inventory.csv --row 0
    ```

Relative paths that do not exist are also looked up under CSVTABLE_DATA_DIR.

**Exit codes**:
  - 0: Success
  - 1: Usage error (file missing, unknown column, row out of range, empty file)
  - 2: Fatal error (unreadable file, bad encoding)
"""

import argparse
import sys
from pathlib import Path

# Ensure project root is on path for imports
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from csvtable.data.io import read_table, resolve_table_path
from csvtable.data.schemas import EmptyInputError


def parse_args(argv=None):
    """
    Parse command line arguments.

    Returns:
        Namespace with attributes: path (str), column (str | None), row (int | None)
    """
    parser = argparse.ArgumentParser(
        description="Render a comma-delimited table file for inspection",
        epilog="""
Examples:
  python actions/render_table.py data/inventory.csv
  python actions/render_table.py data/inventory.csv --column qty
  python actions/render_table.py data/inventory.csv --row 2
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "path",
        help="Path to the table file",
    )

    selection = parser.add_mutually_exclusive_group()
    selection.add_argument(
        "--column",
        type=str,
        default=None,
        help="Print only this column (by header name), one value per line",
    )
    selection.add_argument(
        "--row",
        type=int,
        default=None,
        help="Print only the row at this 0-based position",
    )

    return parser.parse_args(argv)


def main(argv=None) -> int:
    """
    Main entrypoint.

    Steps:
      1. Resolve the path (falling back to CSVTABLE_DATA_DIR).
      2. Read the table.
      3. Print the rendering, the selected column, or the selected row.
    """
    args = parse_args(argv)
    path = resolve_table_path(args.path)

    try:
        table = read_table(path)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except EmptyInputError as e:
        print(f"Error: {path}: {e}", file=sys.stderr)
        return 1
    except (OSError, UnicodeError) as e:
        print(f"Fatal error reading {path}: {e}", file=sys.stderr)
        return 2

    if args.column is not None:
        values = table.column(args.column)
        if values is None:
            print(
                f"Error: no column named '{args.column}'. "
                f"Available columns: {list(table.headers)}",
                file=sys.stderr,
            )
            return 1
        for value in values:
            print(value)
        return 0

    if args.row is not None:
        row = table.row(args.row)
        if row is None:
            print(
                f"Error: row {args.row} out of range (table has {len(table)} rows)",
                file=sys.stderr,
            )
            return 1
        for header, value in zip(table.headers, row):
            print(f"{header}: {value}")
        # Extra cells past the last header
        for value in row[table.width:]:
            print(f"?: {value}")
        return 0

    print(table, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
