"""Domain normalization helpers."""


def normalize_text(value: str | None) -> str:
    """Return a stripped string, mapping None to an empty string.

    Args:
        value: Raw form or storage value.

    Returns:
        str: Normalized value.
    """
    if not value:
        return ""
    return value.strip()


def normalize_optional_id(value: str | None) -> str | None:
    """Return a stripped identifier or None when blank."""
    cleaned = normalize_text(value)
    return cleaned or None


def normalize_client_name(name: str | None) -> str:
    """Normalize a client name for grouping incomes and debt payments."""
    return normalize_text(name)


def normalize_service_name(name: str | None) -> str:
    """Normalize a service name for due-date comparisons."""
    return normalize_text(name).upper()


__all__ = [
    "normalize_text",
    "normalize_optional_id",
    "normalize_client_name",
    "normalize_service_name",
]
