"""Output formatting package for termutil.

Re-exports all public names so consumers can do:
    from termutil.formatters import table
"""

from termutil.formatters._highlight import highlight, syntax
from termutil.formatters._table import (
    ASCII_BORDERS,
    UNICODE_BORDERS,
    BorderStyle,
    RenderedCell,
    column_widths,
    table,
    table_lines,
)
from termutil.formatters._values import (
    CellKind,
    PrettyPrinter,
    RichPrettyPrinter,
    ValueRenderer,
    bold_repr,
    classify,
    default_pretty_printer,
)

__all__ = [
    "ASCII_BORDERS",
    "UNICODE_BORDERS",
    "BorderStyle",
    "CellKind",
    "PrettyPrinter",
    "RenderedCell",
    "RichPrettyPrinter",
    "ValueRenderer",
    "bold_repr",
    "classify",
    "column_widths",
    "default_pretty_printer",
    "highlight",
    "syntax",
    "table",
    "table_lines",
]
