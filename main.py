"""
csvtable – Main entry point.

Minimal bootstrap script: builds a small table and prints its rendering to
verify the package imports and runs.
"""

from csvtable.data.table import Table


def main() -> None:
    """Print a rendered sample table."""
    table = Table(["name", "qty"], [["apple", "3"], ["pear", "5"]])
    print(table, end="")
    print("csvtable bootstrap complete")


if __name__ == "__main__":
    main()
