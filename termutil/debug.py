"""Debugging aids: dump the stack of every live thread, on demand or on SIGQUIT."""

import signal
import sys
import threading
import traceback

from termutil.console import headline
from termutil.exceptions import CliError
from termutil.traces import NO_TRACE, format_entries


def all_threads_backtrace(file=None):
    """Print a headline and a colored stack trace for every live thread."""
    out = file or sys.stdout
    frames = sys._current_frames()
    current = threading.get_ident()
    for thread in threading.enumerate():
        frame = frames.get(thread.ident)
        suffix = " (current thread)" if thread.ident == current else ""
        headline(f"Thread {thread.name} [{thread.ident}]{suffix}", file=out)
        if frame is None:
            print(NO_TRACE, file=out)
        else:
            print(format_entries(traceback.extract_stack(frame)), file=out)


def sigquit_backtrace(title=None, callback=None, file=None):
    """Install a SIGQUIT handler that prints every thread's backtrace.

    Useful when a program seems stuck: send SIGQUIT (Ctrl-\\ in a terminal)
    to see where each thread is without killing the process. *title* is
    printed as a headline first and *callback* is called afterwards.

    Returns the previously installed handler.
    """
    if not hasattr(signal, "SIGQUIT"):
        raise CliError("[ERROR] SIGQUIT is not available on this platform.")

    def _handler(signum, frame):
        if title:
            headline(title, color="1;33", file=file)
        all_threads_backtrace(file)
        if callback:
            callback()

    return signal.signal(signal.SIGQUIT, _handler)
