"""Allocation of client debt payments across outstanding incomes."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from src.domain.models.ledger import Income
from src.domain.services.normalization import normalize_client_name
from src.utils.decimal_utils import coerce_decimal


@dataclass(frozen=True)
class DebtAllocation:
    """Portion of a client payment applied to one income."""

    income: Income
    applied: Decimal


def outstanding_amount(income: Income) -> Decimal:
    """Return what the client still owes on an income."""
    return coerce_decimal(income.total_contracted_amount) - coerce_decimal(
        income.amount_paid
    )


def outstanding_incomes(
    incomes: Iterable[Income],
    client_name: str,
) -> list[Income]:
    """Return the client's incomes with a positive debt, oldest first.

    Args:
        incomes: Every income of the user.
        client_name: Client to match after trimming.

    Returns:
        list[Income]: Incomes ordered by date, then timestamp.
    """
    wanted = normalize_client_name(client_name)
    matching = [
        income
        for income in incomes
        if normalize_client_name(income.client) == wanted
        and outstanding_amount(income) > 0
    ]
    return sorted(matching, key=lambda income: (income.date, income.timestamp))


def allocate_client_payment(
    incomes: Iterable[Income],
    amount,
) -> list[DebtAllocation]:
    """Spread a payment greedily over incomes in the given order.

    Each income takes ``min(outstanding, remaining)`` until the payment is
    exhausted. Any surplus beyond the total debt is left unallocated.

    Args:
        incomes: Outstanding incomes, already ordered oldest first.
        amount: Payment amount.

    Returns:
        list[DebtAllocation]: One entry per income that received money.
    """
    remaining = coerce_decimal(amount)
    allocations: list[DebtAllocation] = []
    for income in incomes:
        if remaining <= 0:
            break
        debt = outstanding_amount(income)
        if debt <= 0:
            continue
        applied = min(debt, remaining)
        allocations.append(DebtAllocation(income=income, applied=applied))
        remaining -= applied
    return allocations


__all__ = [
    "DebtAllocation",
    "outstanding_amount",
    "outstanding_incomes",
    "allocate_client_payment",
]
