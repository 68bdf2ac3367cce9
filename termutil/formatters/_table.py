"""ANSI-aware table rendering."""

from __future__ import annotations

import re
import sys
from collections.abc import Mapping
from typing import NamedTuple

from termutil._utils import as_list
from termutil.ansi import center_ansi, strip_ansi, visible_len
from termutil.formatters._values import ValueRenderer


class BorderStyle(NamedTuple):
    horizontal: str
    vertical: str
    cross: str


ASCII_BORDERS = BorderStyle("-", "|", "+")
UNICODE_BORDERS = BorderStyle("─", "│", "┼")

# Header labels cycle through ANSI colors 31-37.
HEADER_COLORS = 7

# Pretty-printer width for cells; wide enough that containers stay on one line.
CELL_COLUMNS = 1 << 16

_LINE_BREAK_RE = re.compile(r"[ \t]*[\r\n]+[ \t]*")


class RenderedCell(NamedTuple):
    text: str
    width: int

    @classmethod
    def of(cls, text):
        text = _LINE_BREAK_RE.sub(" ", text).replace("\t", " ")
        return cls(text, visible_len(text))


def _normalize_rows(data, header):
    """Return (rows, header) with mapping input transposed into rows."""
    if isinstance(data, Mapping):
        if header is None:
            header = [str(k) for k in data.keys()]
        cols = [as_list(v) for v in data.values()]
        depth = max((len(c) for c in cols), default=0)
        cols = [c + [None] * (depth - len(c)) for c in cols]
        rows = [list(r) for r in zip(*cols)]
        return rows, header
    return [as_list(r) for r in as_list(data)], header


def _resolve_header(header, columns):
    """Header labels padded to *columns*, a title string, or None."""
    if header is False:
        return None
    if isinstance(header, str):
        return header
    if header is None:
        return [str(i) for i in range(1, columns + 1)]
    labels = as_list(header)
    labels += [None] * (columns - len(labels))
    return ["" if h is None else str(h) for h in labels]


def _min_widths(variable_width, columns):
    if isinstance(variable_width, bool):
        return [0] * columns
    if isinstance(variable_width, int):
        return [variable_width] * columns
    mins = [int(w) for w in as_list(variable_width)]
    return (mins + [0] * columns)[:columns]


def column_widths(cells, header_widths, columns, variable_width=False):
    """Width of each column, including one space of padding on each side."""
    widths = []
    for idx in range(columns):
        natural = [row[idx].width + 2 for row in cells]
        if idx < len(header_widths):
            natural.append(header_widths[idx])
        widths.append(max(natural, default=0))
    if variable_width is False:
        shared = max(widths, default=0)
        return [shared] * columns
    return [max(w, m) for w, m in zip(widths, _min_widths(variable_width, columns))]


def _grow_for_title(widths, title_width, shared):
    """Widen columns one unit at a time until the table fits the title."""
    total = sum(widths) + len(widths) - 1
    while total < title_width:
        if shared:
            widths[:] = [w + 1 for w in widths]
            total += len(widths)
        else:
            narrowest = min(range(len(widths)), key=widths.__getitem__)
            widths[narrowest] += 1
            total += 1
    return total


def _pad_cell(cell, width):
    pre = 0 if strip_ansi(cell.text).startswith("-") else 1
    post = max(0, width - cell.width - pre)
    return " " * pre + cell.text + " " * post


def table_lines(
    data,
    header=None,
    show_none=False,
    separate_rows=False,
    raw_strings=True,
    variable_width=False,
    borders=ASCII_BORDERS,
    renderer=None,
):
    """Build the lines of a table.

    *data* is either a mapping of column name to values or a sequence of
    rows. *header* may be False (no header), None (mapping keys or 1-based
    column numbers), a sequence of labels, or a string shown as a centered
    title spanning the whole table.
    Line breaks and tabs inside a cell are shown as spaces.

    *variable_width* False gives every column the same width; True sizes each
    column to its content; an int or a list of ints sets minimum widths.
    """
    if variable_width is None:
        variable_width = False
    rows, header = _normalize_rows(data, header)
    if header is not None and header is not False and not isinstance(header, str):
        header = as_list(header)
    columns = max((len(r) for r in rows), default=0)
    if isinstance(header, list):
        columns = max(columns, len(header))
    if isinstance(header, str):
        columns = max(columns, 1)
    for r in rows:
        r.extend([None] * (columns - len(r)))

    header = _resolve_header(header, columns)
    if isinstance(header, list):
        header_widths = [visible_len(h) + 2 for h in header]
    else:
        header_widths = []

    if renderer is None:
        renderer = ValueRenderer(
            show_none=show_none, raw_strings=raw_strings, columns=CELL_COLUMNS
        )
    cells = [[RenderedCell.of(renderer.render(v)) for v in r] for r in rows]

    widths = column_widths(cells, header_widths, columns, variable_width)
    total_width = max(0, sum(widths) + columns - 1)

    if isinstance(header, str):
        total_width = _grow_for_title(widths, visible_len(header) + 2, variable_width is False)

    separator = borders.cross.join(borders.horizontal * w for w in widths)

    lines = []
    if isinstance(header, str):
        lines.append(center_ansi(f"\033[1m{header}\033[0m", total_width))
        lines.append(separator)
    elif header is not None:
        lines.append(
            borders.vertical.join(
                f"\033[1;{31 + idx % HEADER_COLORS}m{center_ansi(label, widths[idx])}\033[0m"
                for idx, label in enumerate(header)
            )
        )
        lines.append(separator)

    for idx, row in enumerate(cells):
        lines.append(borders.vertical.join(_pad_cell(c, widths[col]) for col, c in enumerate(row)))
        if separate_rows and idx < len(cells) - 1:
            lines.append(separator)

    return lines


def table(
    data,
    header=None,
    show_none=False,
    separate_rows=False,
    raw_strings=True,
    variable_width=False,
    borders=ASCII_BORDERS,
    emit=True,
    file=None,
    renderer=None,
):
    """Format *data* as a table (see table_lines for the options).

    With *emit* the lines are printed to *file* (stdout by default) and None
    is returned; otherwise the table is returned as one string.
    """
    lines = table_lines(
        data,
        header=header,
        show_none=show_none,
        separate_rows=separate_rows,
        raw_strings=raw_strings,
        variable_width=variable_width,
        borders=borders,
        renderer=renderer,
    )
    if not emit:
        return "\n".join(lines)
    out = file or sys.stdout
    for line in lines:
        print(line, file=out)
    return None
