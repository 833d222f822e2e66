"""Statistics over the print history."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from printqueue.jobs import SECONDS_PER_PAGE, PrintJob
from printqueue.users import UserType


@dataclass
class TypeStatistics:
    """Totals for one type of user."""

    jobs: int = 0
    pages: int = 0

    def add(self, job: PrintJob) -> None:
        """Count ``job`` in these totals."""
        self.jobs += 1
        self.pages += job.pages

    @property
    def average_seconds(self) -> Optional[float]:
        """Average estimated time per job, or None when there are no jobs."""
        if self.jobs == 0:
            return None
        return self.pages * SECONDS_PER_PAGE / self.jobs


@dataclass
class Statistics:
    """Totals for every type of user."""

    students: TypeStatistics = field(default_factory=TypeStatistics)
    teachers: TypeStatistics = field(default_factory=TypeStatistics)
    administration: TypeStatistics = field(default_factory=TypeStatistics)

    def for_type(self, user_type: UserType) -> TypeStatistics:
        """Totals for ``user_type``."""
        return {
            UserType.STUDENT: self.students,
            UserType.TEACHER: self.teachers,
            UserType.ADMINISTRATION: self.administration,
        }[UserType(user_type)]


def compute_statistics(history: Iterable[PrintJob]) -> Statistics:
    """Count jobs and pages per user type over ``history``."""
    statistics = Statistics()
    for job in history:
        if job is not None and job.user is not None:
            statistics.for_type(job.user.user_type).add(job)
    return statistics


def format_statistics(statistics: Statistics) -> str:
    """Report text for ``statistics``."""
    rows = (
        ("Estudantes", statistics.students),
        ("Professores", statistics.teachers),
        ("Administracao/Direcao", statistics.administration),
    )
    parts = ["\n--- Estatisticas ---\n", "Total de impressoes:\n"]
    parts.extend(f"{label}: {totals.jobs}\n" for label, totals in rows)
    parts.append("\nNumero total de paginas:\n")
    parts.extend(f"{label}: {totals.pages}\n" for label, totals in rows)
    parts.append("\nTempo medio estimado por prioridade (supondo 5s por pagina):\n")
    for label, totals in rows:
        average = totals.average_seconds
        parts.append(f"{label}: N/A\n" if average is None else f"{label}: {average:.2f} s\n")
    return "".join(parts)