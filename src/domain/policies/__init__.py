"""Domain policies package."""

from .reminders import is_due_date_service, requires_due_date

__all__ = ["is_due_date_service", "requires_due_date"]
