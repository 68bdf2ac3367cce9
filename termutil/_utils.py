"""
Shared utility functions for termutil.

Small helpers for warnings, list coercion and input reading, used across
system.py, commands.py, and the formatters.
"""

import json
import sys

from termutil import config
from termutil.exceptions import CliError


def warn(message):
    """Print a tagged warning to stderr unless running in quiet mode."""
    if config.RUNTIME_QUIET:
        return
    print(f"[WARN] {message}", file=sys.stderr)


def as_list(value):
    """Coerce a cell container into a list.

    None becomes an empty list, strings and mappings are single values,
    and any other iterable is expanded.
    """
    if value is None:
        return []
    if isinstance(value, list):
        return list(value)
    if isinstance(value, (str, bytes, dict)):
        return [value]
    try:
        return list(value)
    except TypeError:
        return [value]


def clamp(value, low, high):
    return low if value < low else high if value > high else value


def read_input(path=None):
    """Read text from *path*, or from stdin when *path* is None or "-"."""
    if path in (None, "-"):
        return sys.stdin.read()
    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        raise CliError(f"[ERROR] Cannot read {path}: {e.strerror or e}") from e


def _safe_json_parse(text, context="input"):
    """Parse JSON with friendly error message on failure."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise CliError(f"[ERROR] Invalid JSON in {context}: {e.msg} at position {e.pos}") from None
