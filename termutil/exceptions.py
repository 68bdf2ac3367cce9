"""
termutil exception hierarchy.

All custom exceptions live here to avoid circular imports.
"""


class CliError(Exception):
    """Exit code 1 — bad input, unsupported platform, parse errors."""

    exit_code = 1


class TraceFormatError(CliError, ValueError):
    """Raised when a trace is neither structured locations nor a parseable string."""

    def __init__(self, message=None):
        super().__init__(
            message
            or "[ERROR] Provide a list of trace locations "
            "(TraceEntry, FrameSummary, (path, line, label) or \"path:line:in 'label'\") "
            "or an exception"
        )


class OverwriteError(CliError):
    """Exit code 3 — refused to overwrite an existing file."""

    exit_code = 3

    def __init__(self, filename):
        self.filename = filename
        super().__init__(f"[ERROR] File {filename} already exists")
