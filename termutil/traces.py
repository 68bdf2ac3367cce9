"""Colorized call-site traces and exception chains."""

from __future__ import annotations

import os
import re
import traceback
from typing import NamedTuple

from termutil.exceptions import TraceFormatError

_TRACE_LINE_RE = re.compile(r"^(?P<path>.+):(?P<lineno>\d+):in [`'](?P<label>.*)'$")

NO_TRACE = "[no trace]"

_DIM = "\033[38;5;240m"


class TraceEntry(NamedTuple):
    path: str
    lineno: int
    label: str

    @property
    def raw(self):
        return f"{self.path}:{self.lineno}:in '{self.label}'"

    @classmethod
    def parse(cls, line):
        """Parse a ``path:line:in 'label'`` string."""
        m = _TRACE_LINE_RE.match(line.strip())
        if not m:
            raise TraceFormatError(f"[ERROR] Unrecognized trace line: {line!r}")
        return cls(m.group("path"), int(m.group("lineno")), m.group("label"))


def to_entry(item):
    """Coerce one trace location into a TraceEntry."""
    if isinstance(item, TraceEntry):
        return item
    if isinstance(item, traceback.FrameSummary):
        return TraceEntry(item.filename, item.lineno or 0, item.name)
    if isinstance(item, str):
        return TraceEntry.parse(item)
    if isinstance(item, (tuple, list)) and len(item) == 3:
        path, lineno, label = item
        try:
            return TraceEntry(str(path), int(lineno), str(label))
        except (TypeError, ValueError) as e:
            raise TraceFormatError(f"[ERROR] Invalid trace location: {item!r}") from e
    raise TraceFormatError()


def _short_path(path):
    home = os.path.expanduser("~")
    if home and home != "~" and (path == home or path.startswith(home + os.sep)):
        return "~" + path[len(home) :]
    return path


def _color_entry(entry, prefix):
    directory, sep, name = _short_path(entry.path).rpartition(os.sep)
    return (
        f"{prefix}{_DIM}{directory}{sep}\033[36m{name}{_DIM}:"
        f"\033[1;34m{entry.lineno}\033[0;38;5;240m:"
        f"\033[33min '\033[1;35m{entry.label}\033[0;33m'\033[0m"
    )


def format_entries(entries, exclude=None, prefix=""):
    """Render trace locations as colored lines, one per entry.

    *exclude* is a regular expression (string or compiled); entries whose raw
    ``path:line:in 'label'`` text matches it are skipped.
    """
    if isinstance(entries, (str, bytes)):
        raise TraceFormatError()
    try:
        items = iter(entries)
    except TypeError:
        raise TraceFormatError() from None
    if isinstance(exclude, str):
        exclude = re.compile(exclude)
    lines = []
    for item in items:
        entry = to_entry(item)
        if exclude is not None and exclude.search(entry.raw):
            continue
        lines.append(_color_entry(entry, prefix))
    return "\n".join(lines)


def _cause_of(error):
    if error.__cause__ is not None:
        return error.__cause__
    if not error.__suppress_context__:
        return error.__context__
    return None


def _format_error(error, exclude, prefix, causes, seen):
    seen.add(id(error))
    frames = traceback.extract_tb(error.__traceback__) if error.__traceback__ else None
    if frames:
        trace = format_entries(frames, exclude, prefix + "\t")
    else:
        trace = f"{prefix}\t{NO_TRACE}"
    text = (
        f"{prefix}\033[31m{type(error).__qualname__}: \033[1m{error}\033[22m\n"
        f"{trace}\033[0m"
    )
    if causes:
        cause = _cause_of(error)
        if cause is not None and id(cause) not in seen:
            text += f"\n{prefix}\t\033[33m...caused by\033[0m\n"
            text += _format_error(cause, exclude, prefix + "\t", causes, seen)
    return text


def format_error(error, exclude=None, prefix="", causes=True):
    """Format an exception's type, message and trace, then its causes.

    Each cause is indented one tab deeper than the error it caused and is
    printed at most once, even if the chain loops back on itself.
    """
    return _format_error(error, exclude, prefix, causes, set())


def color_trace(trace):
    """Colorize a list of trace locations, an exception, or None."""
    if trace is None:
        return NO_TRACE
    if isinstance(trace, BaseException):
        return format_error(trace)
    if isinstance(trace, (list, tuple)):
        return format_entries(trace)
    raise TraceFormatError()
