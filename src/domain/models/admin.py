"""Domain models for administrative payments and reminders."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class AdminPayment:
    """Recurring administrative obligation (rent, utilities, taxes...)."""

    id: str
    concept_name: str
    category: str
    provider_name: str
    payment_amount: Decimal
    payment_frequency: str
    created_at: datetime
    updated_at: datetime
    payment_currency: str = "USD"
    contract_number: str = ""
    reference_number: str = ""
    provider_id: str = ""
    payment_due_date: date | None = None
    renewal_date: date | None = None
    payment_method: str = ""
    beneficiary_bank: str = ""
    beneficiary_account_number: str = ""
    beneficiary_account_type: str | None = None
    notes: str = ""


@dataclass(frozen=True)
class Reminder:
    """Due-date notice derived from an income or an admin payment.

    Exactly one of ``income_id`` and ``admin_payment_id`` is set. The
    reminder id equals the id of its source record.
    """

    id: str
    due_date: date
    timestamp: datetime
    income_id: str | None = None
    admin_payment_id: str | None = None
    client_id: str = ""
    brand_name: str = ""
    service: str = ""
    renewal_amount: Decimal = Decimal("0")
    debt_amount: Decimal = Decimal("0")
    status: str = "pending"
    message: str = ""
    resolved_at: datetime | None = None


__all__ = ["AdminPayment", "Reminder"]
