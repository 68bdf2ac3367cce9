"""Cell value rendering with an optional rich pretty-printer."""

from __future__ import annotations

import enum
from numbers import Number
from typing import Protocol

from rich.console import Console
from rich.pretty import Pretty

from termutil import config


class PrettyPrinter(Protocol):
    def format(self, value: object, columns: int) -> str: ...


class RichPrettyPrinter:
    """Pretty-prints values with rich, capturing the ANSI output as a string."""

    def __init__(self, color_system: str | None = None):
        self.color_system = color_system or config.COLOR_SYSTEM

    def format(self, value, columns):
        console = Console(
            width=max(1, columns),
            force_terminal=True,
            color_system=self.color_system,
            legacy_windows=False,
        )
        with console.capture() as capture:
            console.print(Pretty(value), end="")
        return capture.get()


def default_pretty_printer() -> PrettyPrinter | None:
    """The pretty-printer to use unless one is injected (None when disabled)."""
    if not config.PRETTY_ENABLED:
        return None
    return RichPrettyPrinter()


def bold_repr(value) -> str:
    return f"\033[1m{value!r}\033[0m"


class CellKind(enum.Enum):
    ABSENT = "absent"
    TEXT = "text"
    NUMBER = "number"
    OTHER = "other"


def classify(value) -> CellKind:
    if value is None:
        return CellKind.ABSENT
    if isinstance(value, str):
        return CellKind.TEXT
    if isinstance(value, Number) and not isinstance(value, bool):
        return CellKind.NUMBER
    return CellKind.OTHER


_UNSET = object()


class ValueRenderer:
    """Turns arbitrary cell values into display strings.

    The pretty-printer is chosen once, at construction. Passing
    ``pretty_printer=None`` renders everything that isn't a raw string as a
    bold ``repr()``.
    """

    def __init__(
        self,
        pretty_printer=_UNSET,
        show_none: bool = False,
        raw_strings: bool = True,
        columns: int | None = None,
    ):
        if pretty_printer is _UNSET:
            pretty_printer = default_pretty_printer()
        if columns is None:
            from termutil.console import width

            columns = width()
        self.pretty_printer = pretty_printer
        self.show_none = show_none
        self.raw_strings = raw_strings
        self.columns = columns

    def pretty(self, value) -> str:
        if self.pretty_printer is None:
            return bold_repr(value)
        return self.pretty_printer.format(value, self.columns).strip()

    def render(self, value) -> str:
        kind = classify(value)
        if kind is CellKind.ABSENT:
            return self.pretty(value) if self.show_none else ""
        if kind is CellKind.TEXT and self.raw_strings:
            return value
        return self.pretty(value)
