"""
Conversions between Table and pandas DataFrames.

**Conceptual**: A Table is deliberately untyped (every cell is text) and may
be ragged. Analysis code usually wants a DataFrame. These helpers convert in
both directions while keeping the "everything is a string" contract: no
numeric inference, no NaN, no index column.

**Shape rules**:
  - Short rows are padded with "" (the same convention as `Table.column`).
  - A row longer than the headers has cells with no column to go in, so it
    raises TableShapeError instead of being silently truncated.
  - Duplicate header names become duplicate DataFrame columns.
"""

import pandas as pd

from csvtable.data.schemas import TableShapeError
from csvtable.data.table import Table


def table_to_dataframe(table: Table, context: str | None = None) -> pd.DataFrame:
    """
    Convert a Table into a DataFrame of strings.

    Args:
        table: Table to convert.
        context: Optional label (file path, table name) for error messages.

    Returns:
        DataFrame with one column per header (in header order) and one row
        per table row (with a default RangeIndex). All values are `str`.

    Raises:
        TableShapeError: If any row has more cells than there are headers.

    Example:
        >>> table = Table(["a", "b"], [["1"], ["2", "x"]])
        >>> table_to_dataframe(table).values.tolist()
        [['1', ''], ['2', 'x']]
    """
    headers = list(table.headers)
    width = len(headers)

    records = []
    for index, row in enumerate(table.rows):
        if len(row) > width:
            prefix = f"{context}: " if context else ""
            raise TableShapeError(
                f"{prefix}Row {index} has {len(row)} cells but there are only "
                f"{width} headers. Delete or pop the extra cells first."
            )
        records.append(list(row) + [""] * (width - len(row)))

    # Build from a list of lists so duplicate headers survive
    return pd.DataFrame(records, columns=headers, dtype=object)


def table_from_dataframe(df: pd.DataFrame) -> Table:
    """
    Convert a DataFrame into a Table.

    **Functionally**:
      - Headers are the column labels converted with `str`.
      - Missing values (NaN, None, NaT) become "".
      - Every other value is converted with `str`, so 3 -> "3" and
        1.5 -> "1.5". The index is dropped.

    Args:
        df: DataFrame to convert.

    Returns:
        New rectangular Table.
    """
    headers = [str(column) for column in df.columns]
    rows = [
        ["" if pd.isna(value) else str(value) for value in record]
        for record in df.itertuples(index=False, name=None)
    ]
    return Table(headers=headers, rows=rows)
