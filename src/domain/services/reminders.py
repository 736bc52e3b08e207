"""Derivation of reminders from incomes and admin payments.

There is at most one reminder per source record and it shares the source
record's id, so saving a record upserts its reminder and saving it without
a due date removes it.
"""

from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal

from src.domain.constants import REMINDER_PENDING
from src.domain.models.admin import AdminPayment, Reminder
from src.domain.models.ledger import Income
from src.domain.policies.reminders import is_due_date_service
from src.utils.decimal_utils import coerce_decimal


def build_income_reminder(
    income: Income,
    due_date_services: Iterable[str],
    now: datetime,
) -> Reminder | None:
    """Build the renewal reminder of an income.

    Args:
        income: Saved income, including derived amounts.
        due_date_services: Names of services renewed on a due date.
        now: Timestamp for the reminder.

    Returns:
        Reminder | None: Reminder keyed by the income id, or None when the
        income has no due date or no renewable service.
    """
    due_date_services = tuple(due_date_services)
    renewable = [
        line
        for line in income.services_details
        if is_due_date_service(line.name, due_date_services)
    ]
    if not renewable or income.due_date is None:
        return None

    renewal_amount = sum(
        (coerce_decimal(line.amount) for line in renewable),
        start=Decimal("0"),
    )
    message = (
        f"Renewal reminder: {income.client}'s plan is due on "
        f"{income.due_date.isoformat()}. Amount: ${renewal_amount:.2f}."
    )
    return Reminder(
        id=income.id,
        income_id=income.id,
        admin_payment_id=None,
        client_id=income.client,
        brand_name=income.brand_name,
        service=", ".join(line.name for line in renewable),
        renewal_amount=renewal_amount,
        debt_amount=income.remaining_balance,
        due_date=income.due_date,
        status=REMINDER_PENDING,
        message=message,
        timestamp=now,
    )


def build_admin_payment_reminder(
    payment: AdminPayment,
    now: datetime,
) -> Reminder | None:
    """Build the payment reminder of an administrative obligation.

    Returns None when the payment has no due date.
    """
    if payment.payment_due_date is None:
        return None
    message = (
        f"Payment reminder: {payment.concept_name} is due on "
        f"{payment.payment_due_date.isoformat()}."
    )
    return Reminder(
        id=payment.id,
        income_id=None,
        admin_payment_id=payment.id,
        client_id=payment.provider_name,
        brand_name=payment.concept_name,
        service=payment.category,
        renewal_amount=coerce_decimal(payment.payment_amount),
        debt_amount=Decimal("0"),
        due_date=payment.payment_due_date,
        status=REMINDER_PENDING,
        message=message,
        timestamp=now,
    )


__all__ = ["build_income_reminder", "build_admin_payment_reminder"]
