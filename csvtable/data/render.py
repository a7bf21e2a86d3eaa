"""
Bordered text rendering of a table for terminals and logs.

The rendering is decorative and lossy: cells are not padded to a common
width, so columns only line up when values share a length. Never feed it back
into `Table.parse`.

Layout:
    - --- -- --- -        <- border (one dash run per header)
    - abc -- def -        <- headers
    - --- -- --- -        <- border
    - 1 -- 2 -            <- one line per row
"""


def _segment(text: str) -> str:
    return f"- {text} -"


def _border(headers) -> str:
    return "".join(_segment("-" * len(header)) for header in headers)


def render_table(table) -> str:
    """
    Render headers and rows inside `- ... -` frames.

    Args:
        table: Table to render.

    Returns:
        Multi-line string; every line (border, header, row) ends with "\\n".

    Example:
        >>> print(render_table(Table(["id", "name"], [["1", "ann"]])), end="")
        - -- -- ---- -
        - id -- name -
        - -- -- ---- -
        - 1 -- ann -
    """
    headers = table.headers
    border = _border(headers)

    lines = [
        border,
        "".join(_segment(header) for header in headers),
        border,
    ]
    lines.extend("".join(_segment(cell) for cell in row) for row in table.rows)

    return "".join(line + "\n" for line in lines)
