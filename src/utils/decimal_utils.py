"""Helpers for Decimal normalization."""

from decimal import Decimal


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL, forms or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None or value == "":
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_storage_float(value) -> float:
    """Convert an amount to the float stored in REAL columns."""
    return float(coerce_decimal(value))


__all__ = ["coerce_decimal", "to_storage_float"]
