"""Operating-system helpers: monotonic clock and pipe buffer sizing."""

import sys
import time

from termutil import config
from termutil._utils import warn

# Linux fcntl command number; newer Pythons also expose it as fcntl.F_SETPIPE_SZ.
F_SETPIPE_SZ = 1031

_max_pipe = None


def clock_now():
    """Seconds from the system's monotonically increasing clock."""
    return time.monotonic()


def _is_linux():
    return sys.platform.startswith("linux")


def max_pipe_size():
    """Largest pipe buffer, in bytes, an unprivileged process may request.

    Reads the Linux fs.pipe-max-size sysctl. Returns 4096 on other platforms
    or when the value can't be read.
    """
    if not _is_linux():
        return config.DEFAULT_PIPE_SIZE
    try:
        with open(config.PIPE_MAX_SIZE_PATH) as f:
            size = int(f.read().strip())
    except (OSError, ValueError) as e:
        warn(f"Could not read {config.PIPE_MAX_SIZE_PATH}: {e}")
        return config.DEFAULT_PIPE_SIZE
    return size if size > 0 else config.DEFAULT_PIPE_SIZE


def pipe_size(pipe, size):
    """Resize the kernel buffer of *pipe* (a file object or descriptor).

    Larger buffers let a pipe absorb more data before exerting backpressure.
    The request is capped at max_pipe_size(). Returns the size the kernel
    actually set, or None on platforms other than Linux.

    Raises OSError (EPERM, EBUSY, EBADF) if the kernel refuses the change.
    """
    global _max_pipe
    if not _is_linux():
        warn("Pipe buffer sizes can only be changed on Linux")
        return None
    import fcntl

    if _max_pipe is None:
        _max_pipe = max_pipe_size()
    fd = pipe if isinstance(pipe, int) else pipe.fileno()
    return fcntl.fcntl(fd, F_SETPIPE_SZ, min(size, _max_pipe))
