"""Priority print queue with user registry, print history and statistics."""

__version__ = "1.0.0"
__all__ = ["users", "jobs", "print_queue", "history", "printing", "stats", "cli"]