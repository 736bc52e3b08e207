"""Commission arithmetic for incomes."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from src.domain.models.ledger import ServiceLine
from src.utils.decimal_utils import coerce_decimal


@dataclass(frozen=True)
class IncomeFigures:
    """Amounts derived from an income's services and payment.

    Invariant: ``commission_amount + amount_with_commission == amount_paid``.
    """

    total_contracted_amount: Decimal
    commission_rate: Decimal
    commission_amount: Decimal
    amount_with_commission: Decimal
    remaining_balance: Decimal


def compute_income_figures(
    services_details: Iterable[ServiceLine],
    amount_paid,
    commission_rate,
) -> IncomeFigures:
    """Compute the derived amounts of an income.

    Args:
        services_details: Contracted service lines.
        amount_paid: Amount the client paid now.
        commission_rate: Fraction retained by the receiving account, read
            from the account at save time.

    Returns:
        IncomeFigures: Contracted total, commission split and remaining debt.
    """
    paid = coerce_decimal(amount_paid)
    rate = coerce_decimal(commission_rate)
    total_contracted = sum(
        (coerce_decimal(line.amount) for line in services_details),
        start=Decimal("0"),
    )
    commission_amount = paid * rate
    return IncomeFigures(
        total_contracted_amount=total_contracted,
        commission_rate=rate,
        commission_amount=commission_amount,
        amount_with_commission=paid - commission_amount,
        remaining_balance=total_contracted - paid,
    )


__all__ = ["IncomeFigures", "compute_income_figures"]
