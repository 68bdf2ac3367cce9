"""
Command implementations for termutil.
Each cmd_*() function receives an argparse.Namespace and handles one CLI command.

The helpers themselves live in ansi.py, colors.py, console.py and the
formatters package. These thin wrappers handle argparse → keyword args,
input reading, and printing.
"""

import csv
import io
import sys

from rich.syntax import Syntax

from termutil import config
from termutil._utils import _safe_json_parse, read_input, warn
from termutil.ansi import center_ansi, strip_ansi, wrap
from termutil.colors import hsv_to_rgb, palette_index, rgb256, rgb_truecolor
from termutil.console import height, width
from termutil.exceptions import CliError
from termutil.formatters import ASCII_BORDERS, UNICODE_BORDERS, syntax, table

# ---------------------------------------------------------------------------
# Table input parsing
# ---------------------------------------------------------------------------


def _records_to_columns(records):
    """Turn a list of JSON objects into a column mapping (keys in first-seen order)."""
    keys = {}
    for rec in records:
        for k in rec:
            keys.setdefault(k, None)
    return {k: [rec.get(k) for rec in records] for k in keys}


def parse_table_input(text, use_csv=False, csv_header=True):
    """Parse table data from JSON or CSV text.

    Returns (data, header) where header is None when the data carries its
    own column names (or none were given).
    """
    if use_csv:
        rows = list(csv.reader(io.StringIO(text)))
        if csv_header and rows:
            return rows[1:], rows[0]
        return rows, None

    data = _safe_json_parse(text, "table input")
    if isinstance(data, dict):
        return data, None
    if not isinstance(data, list):
        raise CliError("[ERROR] Table JSON must be an object of columns or an array of rows.")
    if data and all(isinstance(r, dict) for r in data):
        return _records_to_columns(data), None
    return data, None


def _variable_width(ns):
    if ns.min_width is not None:
        return ns.min_width
    if ns.widths:
        return [int(w) for w in ns.widths.split(",") if w.strip()]
    return ns.variable_width


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_table(ns):
    data, header = parse_table_input(
        read_input(ns.file), use_csv=ns.csv, csv_header=not ns.no_header
    )
    if ns.no_header:
        header = False
    elif ns.title:
        header = ns.title
    elif ns.header:
        header = [h.strip() for h in ns.header.split(",")]
    if not data:
        warn("Table input has no rows.")
    unicode = ns.unicode or config.UNICODE_BORDERS
    table(
        data,
        header=header,
        show_none=ns.show_none,
        separate_rows=ns.separate_rows,
        raw_strings=not ns.quote_strings,
        variable_width=_variable_width(ns),
        borders=UNICODE_BORDERS if unicode else ASCII_BORDERS,
    )


def cmd_strip(ns):
    sys.stdout.write(strip_ansi(read_input(ns.file)))


def cmd_center(ns):
    print(center_ansi(ns.text, ns.width if ns.width is not None else width()))


def cmd_wrap(ns):
    print(wrap(read_input(ns.file), ns.width))


def cmd_size(ns):
    print(f"{width()}x{height()}")


def cmd_color(ns):
    if ns.hsv is not None:
        r, g, b = hsv_to_rgb(*ns.hsv)
    elif ns.rgb is not None:
        r, g, b = ns.rgb
    else:
        raise CliError("[ERROR] Give a color with --rgb R G B or --hsv H S V.")
    if ns.truecolor:
        seq = rgb_truecolor(r, g, b, fallback=ns.fallback, background=ns.background)
    else:
        seq = rgb256(r, g, b, background=ns.background)
    swatch = "      " if ns.background else "██████"
    print(f"{seq}{swatch}\033[0m  rgb({r}, {g}, {b})  palette {palette_index(r, g, b)}  {seq!r}")


def cmd_syntax(ns):
    code = read_input(ns.file)
    language = ns.language
    if not language:
        language = Syntax.guess_lexer(ns.file or "", code=code)
    print(syntax(code, language))
