"""Priority queue of pending print jobs."""

from __future__ import annotations

import bisect
from typing import Iterator, Optional

from printqueue.jobs import PrintJob


def _priority_key(job: PrintJob) -> int:
    return -int(job.user.user_type)


class PrintQueue:
    """Jobs ordered by user priority; equal priorities keep arrival order."""

    def __init__(self) -> None:
        self._jobs: list[PrintJob] = []

    def enqueue(self, job: PrintJob) -> None:
        """Insert ``job`` behind every job of equal or higher priority."""
        bisect.insort_right(self._jobs, job, key=_priority_key)

    def dequeue(self) -> PrintJob:
        """Remove and return the front job; raise IndexError if empty."""
        if not self._jobs:
            raise IndexError("dequeue from an empty print queue")
        return self._jobs.pop(0)

    def peek(self) -> Optional[PrintJob]:
        """Return the front job without removing it, or None if empty."""
        return self._jobs[0] if self._jobs else None

    def find(self, job: PrintJob) -> Optional[PrintJob]:
        """Return ``job`` if this very job is queued, else None."""
        return next((queued for queued in self._jobs if queued is job), None)

    def format(self) -> str:
        """Text listing of the queue, front first."""
        entries = "".join(f"{job.user.name} NumeroFolhas:{job.pages} \n" for job in self._jobs)
        return "proximo --> " + entries

    def __iter__(self) -> Iterator[PrintJob]:
        return iter(self._jobs)

    def __len__(self) -> int:
        return len(self._jobs)