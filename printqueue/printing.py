"""Operations that move jobs between the queue and the history."""

from __future__ import annotations

from typing import Optional

from printqueue.history import PrintHistory
from printqueue.jobs import PrintJob
from printqueue.print_queue import PrintQueue
from printqueue.users import User


class EmptyQueueError(IndexError):
    """Raised when printing is requested with no job waiting."""


def create_job(user: User, pages: int) -> PrintJob:
    """Create a print job for ``user``."""
    return PrintJob(user, pages)


def submit_job(job: PrintJob, queue: PrintQueue) -> None:
    """Put ``job`` into the print queue."""
    queue.enqueue(job)


def perform_print(history: PrintHistory, queue: PrintQueue) -> PrintJob:
    """Print the front job of ``queue``, record it and return it."""
    try:
        job = queue.dequeue()
    except IndexError:
        raise EmptyQueueError("Fila vazia.") from None
    history.push(job)
    return job


def take_from_history(history: PrintHistory) -> Optional[PrintJob]:
    """Remove and return the latest printed job, or None if there is none."""
    try:
        return history.pop()
    except IndexError:
        return None