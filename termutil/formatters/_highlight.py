"""Syntax highlighting and pretty-printing to ANSI strings via rich."""

from __future__ import annotations

import traceback

from rich.console import Console
from rich.syntax import Syntax

from termutil import config
from termutil.formatters._values import ValueRenderer, default_pretty_printer
from termutil.traces import TraceEntry, color_trace


def _is_trace(obj):
    if isinstance(obj, BaseException):
        return True
    if isinstance(obj, list) and obj:
        return isinstance(obj[0], (traceback.FrameSummary, TraceEntry))
    return False


def highlight(obj, columns=None, pretty_printer=None):
    """Return a colorized string form of *obj*.

    Exceptions and lists of trace frames are formatted as colored traces;
    everything else is pretty-printed. Without a pretty-printer the repr is
    bolded instead.
    """
    if _is_trace(obj):
        return color_trace(obj)
    renderer = ValueRenderer(
        pretty_printer=pretty_printer or default_pretty_printer(),
        raw_strings=False,
        columns=columns,
    )
    return renderer.pretty(obj)


def syntax(code, language="python", theme=None):
    """Return *code* highlighted for the terminal.

    Unknown language names are rendered as plain text.
    """
    code = str(code)
    highlighter = Syntax(
        code, language or "python", theme=theme or config.SYNTAX_THEME, background_color="default"
    )
    text = highlighter.highlight(code)
    text.rstrip()
    console = Console(force_terminal=True, color_system=config.COLOR_SYSTEM, legacy_windows=False)
    with console.capture() as capture:
        console.print(text, end="", soft_wrap=True)
    return capture.get()
