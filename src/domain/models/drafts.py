"""Unvalidated form values submitted by the presentation layer.

Drafts carry only what a user types. Identifiers, timestamps and derived
amounts are filled in by the use cases.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.domain.models.ledger import ServiceLine


@dataclass(frozen=True)
class AccountDraft:
    name: str
    commission: Decimal
    account_type: str
    balance: Decimal = Decimal("0")


@dataclass(frozen=True)
class ExpenseDraft:
    date: date | None
    expense_type: str
    category: str
    amount: Decimal
    payment_account: str
    responsible: str = ""
    observations: str = ""


@dataclass(frozen=True)
class IncomeDraft:
    date: date | None
    client: str
    country: str
    services_details: list[ServiceLine]
    amount_paid: Decimal
    payment_account: str
    responsible: str
    brand_name: str = ""
    observations: str = ""
    due_date: date | None = None
    status: str = "active"

    @property
    def services(self) -> list[str]:
        return [line.name for line in self.services_details]


@dataclass(frozen=True)
class TransactionDraft:
    transaction_type: str
    date: date | None
    amount: Decimal
    account: str | None = None
    source_account: str | None = None
    destination_account: str | None = None
    observations: str = ""


@dataclass(frozen=True)
class EmployeeDraft:
    name: str
    cedula: str
    phone: str
    bank: str
    bi_weekly_salary: Decimal
    payment_method: str = ""


@dataclass(frozen=True)
class PayrollPaymentDraft:
    employee_id: str
    payment_type: str
    month: int
    year: int
    date: date | None
    total_amount: Decimal
    payment_account: str
    observations: str = ""


@dataclass(frozen=True)
class AdminPaymentDraft:
    concept_name: str
    category: str
    provider_name: str
    payment_amount: Decimal
    payment_frequency: str
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
class ClientPaymentDraft:
    client_name: str
    date: date | None
    amount: Decimal
    account: str


__all__ = [
    "AccountDraft",
    "ExpenseDraft",
    "IncomeDraft",
    "TransactionDraft",
    "EmployeeDraft",
    "PayrollPaymentDraft",
    "AdminPaymentDraft",
    "ClientPaymentDraft",
]
