"""Domain models for money accounts."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Account:
    """Account holding a running balance.

    Attributes:
        id: Account identifier.
        name: Display name.
        balance: Running sum of every applied delta.
        commission: Fraction retained on incomes credited here (0..1).
        account_type: One of ``ACCOUNT_TYPES``.
    """

    id: str
    name: str
    balance: Decimal
    commission: Decimal
    account_type: str | None = None


__all__ = ["Account"]
