"""
termutil — terminal helpers: ANSI-aware tables, colors, and text tools
"""

import argparse
import sys

from termutil import config
from termutil.commands import (
    cmd_center,
    cmd_color,
    cmd_size,
    cmd_strip,
    cmd_syntax,
    cmd_table,
    cmd_wrap,
)
from termutil.exceptions import CliError

HELP_TEXT = """\
Usage: termutil <command> [args...]

Global flags:
  --quiet, -q             Suppress warnings
  --version               Show version number

Commands:
  table [file]            - Print JSON or CSV data as a table (stdin if no file)
    --csv                   Input is CSV (first row is the header)
    --header <a,b,c>        Column labels
    --title <text>          Centered title spanning the whole table
    --no-header             Don't print a header row
    --show-none             Print missing/null cells as None
    --separate-rows         Print a separator line between rows
    --quote-strings         Show strings quoted and highlighted
    --variable-width        Size each column to its own content
    --min-width <n>         Minimum width for every column
    --widths <n,n,...>      Minimum width for each column
    --unicode               Use box-drawing characters for borders
  strip [file]            - Remove ANSI escape sequences
  center <text> [width]   - Center text in the terminal (or given width)
  wrap [file]             - Word-wrap text for the terminal
    --width <n>             Wrap width (default: terminal width)
  size                    - Show terminal size as WIDTHxHEIGHT
  color                   - Show the escape sequence for a color
    --rgb <r> <g> <b>       Color channels 0-255
    --hsv <h> <s> <v>       Hue, saturation and value, each 0-1
    --truecolor             24-bit sequence instead of 256-color
    --fallback              Prefix truecolor with the 256-color sequence
    --background            Background instead of foreground color
  syntax <file>           - Print a source file with syntax highlighting
    --language <name>       Language (default: guessed from the file)
"""

# ---------------------------------------------------------------------------
# Global flag extraction (before argparse, so flags work after the subcommand)
# ---------------------------------------------------------------------------


def _extract_global_flags(argv):
    """Extract global flags from argv regardless of position.

    Returns (quiet, remaining_argv). Handles --version directly.
    """
    quiet = False
    remaining = []
    for arg in argv:
        if arg == "--version":
            print(f"termutil {config.VERSION}")
            sys.exit(0)
        elif arg in ("--quiet", "-q"):
            quiet = True
        else:
            remaining.append(arg)
    return quiet, remaining


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


class _SubcommandParser(argparse.ArgumentParser):
    """Subparser that raises CliError instead of printing full help text."""

    def error(self, message):
        raise CliError(f"[ERROR] {message}")


def _positive_int(value):
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("must be a positive integer") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return parsed


def _non_negative_int(value):
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("must be a non-negative integer") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("must be a non-negative integer")
    return parsed


def _widths_list(value):
    parts = [p.strip() for p in value.split(",") if p.strip()]
    for p in parts:
        _non_negative_int(p)
    return ",".join(parts)


def build_parser():
    parser = _SubcommandParser(
        prog="termutil",
        description="Terminal helpers: ANSI-aware tables, colors, and text tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("--help", "-h", action="store_true", dest="show_help")
    sub = parser.add_subparsers(dest="command", parser_class=_SubcommandParser)

    # --- table ---
    p = sub.add_parser("table")
    p.add_argument("file", nargs="?")
    p.add_argument("--csv", action="store_true")
    p.add_argument("--header")
    p.add_argument("--title")
    p.add_argument("--no-header", action="store_true", dest="no_header")
    p.add_argument("--show-none", action="store_true", dest="show_none")
    p.add_argument("--separate-rows", action="store_true", dest="separate_rows")
    p.add_argument("--quote-strings", action="store_true", dest="quote_strings")
    p.add_argument("--variable-width", action="store_true", dest="variable_width")
    p.add_argument("--min-width", type=_non_negative_int, dest="min_width")
    p.add_argument("--widths", type=_widths_list)
    p.add_argument("--unicode", action="store_true")
    p.set_defaults(func=cmd_table)

    # --- strip / wrap ---
    p = sub.add_parser("strip")
    p.add_argument("file", nargs="?")
    p.set_defaults(func=cmd_strip)

    p = sub.add_parser("wrap")
    p.add_argument("file", nargs="?")
    p.add_argument("--width", type=_positive_int)
    p.set_defaults(func=cmd_wrap)

    # --- center ---
    p = sub.add_parser("center")
    p.add_argument("text")
    p.add_argument("width", nargs="?", type=_non_negative_int)
    p.set_defaults(func=cmd_center)

    # --- size ---
    sub.add_parser("size").set_defaults(func=cmd_size)

    # --- color ---
    p = sub.add_parser("color")
    group = p.add_mutually_exclusive_group()
    group.add_argument("--rgb", nargs=3, type=int, metavar=("R", "G", "B"))
    group.add_argument("--hsv", nargs=3, type=float, metavar=("H", "S", "V"))
    p.add_argument("--truecolor", action="store_true")
    p.add_argument("--fallback", action="store_true")
    p.add_argument("--background", action="store_true")
    p.set_defaults(func=cmd_color)

    # --- syntax ---
    p = sub.add_parser("syntax")
    p.add_argument("file")
    p.add_argument("--language")
    p.set_defaults(func=cmd_syntax)

    sub.add_parser("version").set_defaults(func=None)
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------


def _emit_cli_error(err):
    msg = str(err)
    if not msg.startswith("["):
        msg = f"[ERROR] {msg}"
    print(msg, file=sys.stderr)


def main(argv=None):
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")

    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print(HELP_TEXT)
        sys.exit(0)

    quiet, remaining_argv = _extract_global_flags(argv)
    config.RUNTIME_QUIET = quiet

    try:
        parser = build_parser()
        ns = parser.parse_args(remaining_argv)

        if ns.show_help or not ns.command:
            print(HELP_TEXT)
            sys.exit(0)

        if ns.command == "version":
            print(f"termutil {config.VERSION}")
            sys.exit(0)

        handler = getattr(ns, "func", None)
        if handler:
            handler(ns)
        else:
            raise CliError(f"[ERROR] Unknown command: {ns.command}")

    except CliError as e:
        _emit_cli_error(e)
        sys.exit(e.exit_code)


if __name__ == "__main__":
    main()
