"""
csvtable – in-memory tables of string cells backed by comma-delimited text.

Subpackages:
  - data: the Table type, text parse/serialize, rendering, file I/O, pandas interop.
  - config: environment-driven settings.
"""
