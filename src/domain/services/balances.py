"""Signed balance deltas applied by each mutating record.

A delta mapping associates an account id with the signed amount a record
adds to that account's balance. Creating a record applies its deltas,
deleting it applies ``invert_deltas`` of them, and editing applies
``combine_deltas(invert_deltas(old), new)``.
"""

from decimal import Decimal

from src.domain.constants import ACCOUNT_TRANSFER, WITHDRAWAL
from src.utils.decimal_utils import coerce_decimal

BalanceDeltas = dict[str, Decimal]


def expense_deltas(expense) -> BalanceDeltas:
    """Return ``{payment_account: -amount}`` for an expense."""
    return {expense.payment_account: -coerce_decimal(expense.amount)}


def income_deltas(income) -> BalanceDeltas:
    """Return the net credit of an income.

    The account receives ``amount_with_commission``, i.e. the payment minus
    the commission retained at save time.
    """
    return {
        income.payment_account: coerce_decimal(income.amount_with_commission)
    }


def transaction_deltas(transaction) -> BalanceDeltas:
    """Return the deltas of a withdrawal or an account transfer."""
    amount = coerce_decimal(transaction.amount)
    if transaction.transaction_type == WITHDRAWAL:
        return {transaction.account: -amount}
    if transaction.transaction_type == ACCOUNT_TRANSFER:
        return combine_deltas(
            {transaction.source_account: -amount},
            {transaction.destination_account: amount},
        )
    raise ValueError(
        f"Unsupported transaction type: {transaction.transaction_type}"
    )


def payroll_deltas(payment) -> BalanceDeltas:
    """Return ``{payment_account: -total_amount}`` for a payroll payment."""
    return {payment.payment_account: -coerce_decimal(payment.total_amount)}


def invert_deltas(deltas: BalanceDeltas) -> BalanceDeltas:
    """Return the deltas that undo ``deltas``."""
    return {account_id: -amount for account_id, amount in deltas.items()}


def combine_deltas(*mappings: BalanceDeltas) -> BalanceDeltas:
    """Sum several delta mappings per account.

    Accounts whose combined delta is zero are kept so callers still check
    that they exist; use ``non_zero_deltas`` before writing.
    """
    combined: BalanceDeltas = {}
    for mapping in mappings:
        for account_id, amount in mapping.items():
            combined[account_id] = (
                combined.get(account_id, Decimal("0")) + amount
            )
    return combined


def non_zero_deltas(deltas: BalanceDeltas) -> BalanceDeltas:
    """Drop accounts whose delta is zero."""
    return {
        account_id: amount
        for account_id, amount in deltas.items()
        if amount != 0
    }


def net_delta(deltas: BalanceDeltas) -> Decimal:
    """Return the signed sum of every delta in the mapping."""
    return sum(deltas.values(), start=Decimal("0"))


__all__ = [
    "BalanceDeltas",
    "expense_deltas",
    "income_deltas",
    "transaction_deltas",
    "payroll_deltas",
    "invert_deltas",
    "combine_deltas",
    "non_zero_deltas",
    "net_delta",
]
