"""Terminal window queries and simple console decorations."""

import os
import sys

from termutil import config
from termutil.ansi import visible_len


def _terminal_size():
    """Size of the terminal attached to stdout, or None when there isn't one."""
    try:
        return os.get_terminal_size(sys.__stdout__.fileno())
    except (AttributeError, ValueError, OSError):
        return None


def _env_dimension(*names):
    for name in names:
        raw = os.environ.get(name, "")
        if raw.isdigit() and int(raw) > 0:
            return int(raw)
    return None


def width():
    """The width of the terminal window, defaulting to 80 if it can't be determined."""
    size = _terminal_size()
    if size and size.columns > 0:
        return size.columns
    return _env_dimension("COLUMNS") or config.DEFAULT_WIDTH


def height():
    """The height of the terminal window, defaulting to 25 if it can't be determined."""
    size = _terminal_size()
    if size and size.lines > 0:
        return size.lines
    return _env_dimension("LINES", "ROWS") or config.DEFAULT_HEIGHT


def headline(text, color="1;34", fill="-", columns=None, file=None):
    """Print *text* centered in a full-width rule line."""
    columns = columns or width()
    label = f" {text} "
    pad = max(0, columns - visible_len(label))
    line = fill * (pad // 2) + label + fill * (pad - pad // 2)
    print(f"\033[{color}m{line}\033[0m", file=file or sys.stdout)
