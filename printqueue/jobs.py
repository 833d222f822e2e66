"""Print jobs."""

from __future__ import annotations

from dataclasses import dataclass

from printqueue.users import User

SECONDS_PER_PAGE = 5.0


@dataclass(eq=False)
class PrintJob:
    """A request by a user to print a number of pages."""

    user: User
    pages: int

    def estimated_seconds(self, seconds_per_page: float = SECONDS_PER_PAGE) -> float:
        """Estimated printing time of this job."""
        return self.pages * seconds_per_page