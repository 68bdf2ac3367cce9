"""Micro-benchmark runner that reports results as CSV.

Example:

    job = BenchmarkJob()
    job.report("sort", lambda: sorted(data))
    job.report("heapq", lambda: heapq.nsmallest(10, data))
    bench_csv(job, prefix=python_info())

Status lines go to stderr; the CSV goes to stdout:

    python,jit,label,user CPU,system CPU,total CPU,realtime
    cpython-3.12.3,False,sort,0.0312,0.0,0.0312,0.0318
    ...
"""

from __future__ import annotations

import csv
import gc
import io
import os
import platform
import sys
import time
from typing import Callable, NamedTuple

CSV_COLUMNS = ["label", "user CPU", "system CPU", "total CPU", "realtime"]

_STD = object()


class Measurement(NamedTuple):
    label: str
    utime: float
    stime: float
    real: float

    @property
    def total(self):
        return self.utime + self.stime

    def __str__(self):
        return f"{self.utime:10.6f} {self.stime:10.6f} {self.total:10.6f} ({self.real:10.6f})"


class BenchmarkJob:
    """An ordered list of labelled callables to benchmark."""

    def __init__(self):
        self.items: list[tuple[str, Callable[[], object]]] = []

    def report(self, label, fn=None):
        """Add *fn* under *label*; usable as a decorator when *fn* is omitted."""
        if fn is None:

            def decorator(func):
                self.items.append((str(label), func))
                return func

            return decorator
        self.items.append((str(label), fn))
        return fn


def measure(label, fn):
    """Run *fn* once, returning its CPU and wall-clock times."""
    t0 = os.times()
    r0 = time.perf_counter()
    fn()
    real = time.perf_counter() - r0
    t1 = os.times()
    return Measurement(label, t1.user - t0.user, t1.system - t0.system, real)


def _total(results, label):
    return Measurement(
        label,
        sum(m.utime for m in results),
        sum(m.stime for m in results),
        sum(m.real for m in results),
    )


def _run(job, stderr, collect):
    results = []
    for label, fn in job.items:
        if collect:
            gc.collect()
        if stderr:
            stderr.write(f"  {label}...")
        result = measure(label, fn)
        if stderr:
            stderr.write(f"\b\b\b -- {result}\n")
        results.append(result)
    return results


def bench_csv(job, prefix=None, stderr=_STD, stdout=_STD):
    """Benchmark every item in *job* twice and report the second run as CSV.

    The first (trial) run warms caches; the garbage collector runs before each
    item of the final run. Progress is written to *stderr* and the CSV to
    *stdout*; pass None for either to silence it.

    *prefix* adds leading columns: a dict maps column names to values, any
    other non-None value becomes a column with an empty name.

    Returns the CSV string.
    """
    if stderr is _STD:
        stderr = sys.stderr
    if stdout is _STD:
        stdout = sys.stdout

    if stderr:
        stderr.write("\033[33mBenchmark trial run:\n")
    trial = _run(job, stderr, collect=False)
    if stderr:
        stderr.write(f"  TRIAL TOTAL: {_total(trial, 'TRIAL TOTAL')}\n")

    if stderr:
        stderr.write("\n\033[1;36mBenchmark final run:\033[22m\n")
    final = _run(job, stderr, collect=True)
    final_total = _total(final, "TOTAL")
    if stderr:
        stderr.write(f"  \033[1mFINAL TOTAL: {final_total}\033[0m\n")

    if prefix is None:
        prefix = {}
    elif not isinstance(prefix, dict):
        prefix = {"": prefix}

    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow([*prefix.keys(), *CSV_COLUMNS])
    for m in [*final, final_total]:
        writer.writerow([*prefix.values(), m.label, m.utime, m.stime, m.total, m.real])

    text = buf.getvalue()
    if stdout:
        stdout.write(text)
    return text


def jit_enabled():
    """True if the running interpreter has a JIT compiler switched on."""
    if sys.implementation.name == "pypy":
        return True
    jit = getattr(sys, "_jit", None)
    if jit is not None and hasattr(jit, "is_enabled"):
        return bool(jit.is_enabled())
    return False


def python_info():
    """Interpreter name/version and JIT status, suitable as a bench_csv prefix."""
    impl = sys.implementation
    v = impl.version
    parts = [impl.name, f"{v.major}.{v.minor}.{v.micro}", platform.python_version()]
    unique = list(dict.fromkeys(parts))
    return {"python": "-".join(unique), "jit": jit_enabled()}
