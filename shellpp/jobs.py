"""Tracking commands that run in the background."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, TextIO


@dataclass
class Job:
    """A background process and the command line that started it.

    ``process`` needs a ``pid`` attribute and a ``poll()`` method that
    returns None while the process runs.
    """

    process: Any
    command: str
    done: bool = False

    @property
    def pid(self) -> int:
        return self.process.pid


class JobTable:
    """Numbered background jobs; numbers start at 1."""

    def __init__(self) -> None:
        self._jobs: list[Job] = []

    def add(self, process: Any, command: str) -> int:
        """Add a job and return its number."""
        self._jobs.append(Job(process, command))
        return len(self._jobs)

    def reap(self, out: TextIO | None = None) -> list[Job]:
        """Report and mark jobs that have finished.

        Finished jobs at the end of the table are dropped so that their
        numbers can be reused. Returns the jobs found finished by this call.
        """
        out = sys.stdout if out is None else out
        finished: list[Job] = []
        for number, job in enumerate(self._jobs, start=1):
            if job.done or job.process.poll() is None:
                continue
            out.write(f"[{number}] Done\t\t{job.command}\n")
            job.done = True
            finished.append(job)
        if finished:
            out.flush()
        while self._jobs and self._jobs[-1].done:
            self._jobs.pop()
        return finished

    def __len__(self) -> int:
        return len(self._jobs)

    def __iter__(self) -> Iterator[Job]:
        return iter(self._jobs)