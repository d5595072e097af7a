"""Reading process statistics from a ``/proc`` filesystem."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

PROC_ROOT = "/proc"
CLOCK_TICKS_PER_SECOND = 100


@dataclass(frozen=True)
class ProcStat:
    """The fields of ``/proc/<pid>/stat`` that the shell uses."""

    pid: int
    comm: str
    state: str
    ppid: int
    tty: int
    utime: int
    stime: int
    start_time: int


def _proc_dir(pid: int, proc_root: str | os.PathLike[str]) -> Path:
    return Path(proc_root) / str(pid)


def read_stat(pid: int, proc_root: str | os.PathLike[str] = PROC_ROOT) -> ProcStat:
    """Parse ``<proc_root>/<pid>/stat``.

    Raises ``OSError`` if the file cannot be read and ``ValueError`` if its
    contents are malformed.
    """
    path = _proc_dir(pid, proc_root) / "stat"
    line = path.read_text().strip()
    head, closing, tail = line.rpartition(")")
    if not closing or "(" not in head:
        raise ValueError(f"malformed stat line in '{path}'")
    pid_text, _, comm = head.partition("(")
    fields = tail.split()
    # fields[0] is the third field of the line (state).
    if len(fields) < 20:
        raise ValueError(f"too few fields in '{path}'")
    return ProcStat(
        pid=int(pid_text),
        comm=comm,
        state=fields[0],
        ppid=int(fields[1]),
        tty=int(fields[4]),
        utime=int(fields[11]),
        stime=int(fields[12]),
        start_time=int(fields[19]),
    )


def read_uptime(proc_root: str | os.PathLike[str] = PROC_ROOT) -> int:
    """Return the system uptime in whole seconds."""
    path = Path(proc_root) / "uptime"
    tokens = path.read_text().split()
    if not tokens:
        raise ValueError(f"empty uptime file '{path}'")
    return int(float(tokens[0]))


def cpu_utilization(pid: int, proc_root: str | os.PathLike[str] = PROC_ROOT) -> int:
    """Return the CPU use of ``pid`` over its lifetime, in whole percent.

    A process with no elapsed lifetime is reported as using 0 percent.
    """
    stat = read_stat(pid, proc_root)
    uptime_ticks = read_uptime(proc_root) * CLOCK_TICKS_PER_SECOND
    elapsed = uptime_ticks - stat.start_time
    if elapsed <= 0:
        return 0
    return int((stat.utime + stat.stime) * 100.0 / elapsed)


def _task_ids(pid: int, proc_root: str | os.PathLike[str]) -> list[str]:
    try:
        entries = os.listdir(_proc_dir(pid, proc_root) / "task")
    except OSError:
        return []
    return sorted(entries, key=lambda name: (not name.isdigit(), int(name) if name.isdigit() else 0, name))


def _children_file(pid: int, tid: str, proc_root: str | os.PathLike[str]) -> Path:
    return _proc_dir(pid, proc_root) / "task" / tid / "children"


def _parse_children(text: str) -> list[int]:
    return [child for child in (int(token) for token in text.split()) if child > 0]


def child_pids(pid: int, proc_root: str | os.PathLike[str] = PROC_ROOT) -> list[int]:
    """Return the children of every thread of ``pid``.

    A process without a task directory has no children. Raises ``OSError``
    if a thread's children file cannot be read.
    """
    children: list[int] = []
    for tid in _task_ids(pid, proc_root):
        children.extend(_parse_children(_children_file(pid, tid, proc_root).read_text()))
    return children


def heuristic(
    pid: int,
    proc_root: str | os.PathLike[str] = PROC_ROOT,
    out: TextIO | None = None,
) -> int:
    """Sum the CPU utilization of the children of ``pid``.

    Each child's share is written to ``out``. If a thread's children file
    cannot be read, an error is written to standard error and 2 is returned.
    """
    out = sys.stdout if out is None else out
    total = 0
    for tid in _task_ids(pid, proc_root):
        path = _children_file(pid, tid, proc_root)
        try:
            children = _parse_children(path.read_text())
        except OSError:
            print(f"Error: failed to open file '{path}'", file=sys.stderr)
            return 2
        for child in children:
            share = cpu_utilization(child, proc_root)
            out.write(f"child {child} utilization {share}%\n")
            total += share
    return total