"""
Table data model, delimited-text contract, and I/O boundary.

Handles parsing and writing comma-delimited text (no quoting), bordered
display rendering, and conversion to and from pandas DataFrames.
"""
