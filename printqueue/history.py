"""Stack of completed print jobs."""

from __future__ import annotations

from typing import Iterator

from printqueue.jobs import PrintJob


class PrintHistory:
    """Completed jobs; the most recent one is on top."""

    def __init__(self) -> None:
        self._jobs: list[PrintJob] = []

    def push(self, job: PrintJob) -> None:
        """Record ``job`` as the most recent one."""
        self._jobs.append(job)

    def pop(self) -> PrintJob:
        """Remove and return the most recent job; raise IndexError if empty."""
        if not self._jobs:
            raise IndexError("pop from an empty print history")
        return self._jobs.pop()

    def peek(self) -> PrintJob:
        """Return the most recent job; raise IndexError if empty."""
        if not self._jobs:
            raise IndexError("peek at an empty print history")
        return self._jobs[-1]

    def format(self) -> str:
        """Text listing of the history, most recent first."""
        entries = "".join(f"{job.user.name} NumeroFolhas:{job.pages} \n" for job in self)
        return "proximo -->" + entries

    def __iter__(self) -> Iterator[PrintJob]:
        return reversed(self._jobs)

    def __len__(self) -> int:
        return len(self._jobs)