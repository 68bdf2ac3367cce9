"""termutil — terminal helpers: ANSI-aware tables, colors, traces, and prompts."""

from termutil.ansi import center_ansi, strip_ansi, visible_len, wrap
from termutil.bench import BenchmarkJob, bench_csv, jit_enabled, python_info
from termutil.colors import hsv_to_truecolor, rgb256, rgb_truecolor
from termutil.config import VERSION
from termutil.console import headline, height, width
from termutil.debug import all_threads_backtrace, sigquit_backtrace
from termutil.exceptions import CliError, OverwriteError, TraceFormatError
from termutil.files import prevent_mass_overwrite, prevent_overwrite, prompt_yes_no
from termutil.formatters import (
    ASCII_BORDERS,
    UNICODE_BORDERS,
    ValueRenderer,
    highlight,
    syntax,
    table,
    table_lines,
)
from termutil.headers import highlight_header_comment, opt_header_help, read_header_comment
from termutil.system import clock_now, max_pipe_size, pipe_size
from termutil.traces import TraceEntry, color_trace, format_entries, format_error

__all__ = [
    "VERSION",
    "ASCII_BORDERS",
    "UNICODE_BORDERS",
    "BenchmarkJob",
    "CliError",
    "OverwriteError",
    "TraceEntry",
    "TraceFormatError",
    "ValueRenderer",
    "all_threads_backtrace",
    "bench_csv",
    "center_ansi",
    "clock_now",
    "color_trace",
    "format_entries",
    "format_error",
    "headline",
    "height",
    "highlight",
    "highlight_header_comment",
    "hsv_to_truecolor",
    "jit_enabled",
    "max_pipe_size",
    "opt_header_help",
    "pipe_size",
    "prevent_mass_overwrite",
    "prevent_overwrite",
    "prompt_yes_no",
    "python_info",
    "read_header_comment",
    "rgb256",
    "rgb_truecolor",
    "sigquit_backtrace",
    "strip_ansi",
    "syntax",
    "table",
    "table_lines",
    "visible_len",
    "width",
    "wrap",
]
