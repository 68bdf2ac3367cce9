"""ANSI-aware text helpers: strip, measure, center, and wrap."""

from __future__ import annotations

import re
import textwrap

# CSI sequences: ESC [ <parameters> <final letter or ~>
ANSI_RE = re.compile(r"\x1b\[[^A-Za-z~]*[A-Za-z~]")
_WHITESPACE_RE = re.compile(r"\s")


def strip_ansi(s: str) -> str:
    """Return a copy of *s* with ANSI escape sequences removed."""
    return ANSI_RE.sub("", s)


def visible_len(s: str) -> int:
    """Length of *s* as displayed, ignoring escape sequences."""
    return len(strip_ansi(s))


def center_ansi(s: str, width: int) -> str:
    """Center *s* in *width* columns, disregarding ANSI sequences.

    All whitespace characters in *s* are replaced with plain spaces. Text that
    is already wider than *width* is returned without padding.
    """
    s = _WHITESPACE_RE.sub(" ", s)
    extra = width - visible_len(s)
    if extra <= 0:
        return s
    pre = extra // 2
    return " " * pre + s + " " * (extra - pre)


def wrap(text: str, width: int | None = None) -> str:
    """Word-wrap *text* for the terminal, keeping existing line breaks.

    Lines are wrapped one column short of *width* so that the cursor never
    lands past the right margin. Escape sequences are counted as text.
    """
    if width is None:
        from termutil.console import width as terminal_width

        width = terminal_width()
    limit = max(1, width - 1)
    out = []
    for line in text.split("\n"):
        if not line.strip():
            out.append(line)
            continue
        out.extend(textwrap.wrap(line, limit, break_long_words=True, replace_whitespace=False))
    return "\n".join(out)
