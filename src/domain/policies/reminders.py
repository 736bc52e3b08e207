"""Policies deciding which records produce due-date reminders."""

from collections.abc import Iterable


def _service_key(name: str | None) -> str:
    return (name or "").strip().upper()


def is_due_date_service(
    service_name: str,
    due_date_services: Iterable[str],
) -> bool:
    """Return True when a service is renewed on a due date.

    Args:
        service_name: Name of a contracted service.
        due_date_services: Configured names of renewable services.

    Returns:
        bool: True if the service belongs to a due-date-bearing class.
    """
    wanted = {_service_key(name) for name in due_date_services}
    return _service_key(service_name) in wanted


def requires_due_date(
    services: Iterable[str],
    due_date_services: Iterable[str],
) -> bool:
    """Return True when any selected service is renewable."""
    due_date_services = tuple(due_date_services)
    return any(
        is_due_date_service(name, due_date_services) for name in services
    )
