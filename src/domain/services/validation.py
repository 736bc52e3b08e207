"""Validation rules for form drafts.

Each ``validate_*`` function returns the list of violated constraints so
callers can show every message at once. ``ensure_valid`` turns a non-empty
list into a ``ValidationError``.
"""

from decimal import Decimal, InvalidOperation

from src.domain.constants import (
    ACCOUNT_TRANSFER,
    ACCOUNT_TYPES,
    ADMIN_PAYMENT_CATEGORIES,
    ADMIN_PAYMENT_FREQUENCIES,
    BENEFICIARY_ACCOUNT_TYPES,
    EXPENSE_TYPES,
    INCOME_STATUSES,
    PAYROLL_PAYMENT_TYPES,
    TRANSACTION_TYPES,
    WITHDRAWAL,
)
from src.domain.errors import ValidationError
from src.domain.models.drafts import (
    AccountDraft,
    AdminPaymentDraft,
    ClientPaymentDraft,
    EmployeeDraft,
    ExpenseDraft,
    IncomeDraft,
    PayrollPaymentDraft,
    TransactionDraft,
)
from src.domain.services.normalization import normalize_text


def _as_decimal(value) -> Decimal | None:
    if value is None or value == "":
        return None
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None


def _min_length(value: str | None, length: int) -> bool:
    return len(normalize_text(value)) >= length


def _check_positive(messages: list[str], value, label: str) -> None:
    amount = _as_decimal(value)
    if amount is None or amount <= 0:
        messages.append(f"{label} must be a positive number.")


def validate_account_draft(draft: AccountDraft) -> list[str]:
    messages: list[str] = []
    if not _min_length(draft.name, 2):
        messages.append("Account name must have at least 2 characters.")
    commission = _as_decimal(draft.commission)
    if commission is None or not Decimal("0") <= commission <= Decimal("1"):
        messages.append("Commission must be a fraction between 0 and 1.")
    if draft.account_type not in ACCOUNT_TYPES:
        messages.append("Account type is required.")
    if _as_decimal(draft.balance) is None:
        messages.append("Initial balance must be a number.")
    return messages


def validate_expense_draft(draft: ExpenseDraft) -> list[str]:
    messages: list[str] = []
    if draft.date is None:
        messages.append("Date is required.")
    if draft.expense_type not in EXPENSE_TYPES:
        messages.append("Expense type must be 'fijo' or 'variable'.")
    if not _min_length(draft.category, 2):
        messages.append("Category must have at least 2 characters.")
    _check_positive(messages, draft.amount, "Amount")
    if not normalize_text(draft.payment_account):
        messages.append("Payment account is required.")
    return messages


def validate_income_draft(draft: IncomeDraft) -> list[str]:
    messages: list[str] = []
    if draft.date is None:
        messages.append("Date is required.")
    if not _min_length(draft.client, 2):
        messages.append("Client name is required.")
    if not normalize_text(draft.country):
        messages.append("Country is required.")
    if not draft.services_details:
        messages.append("At least one service must be selected.")
    for line in draft.services_details:
        amount = _as_decimal(line.amount)
        if not normalize_text(line.name):
            messages.append("Service name is required.")
        if amount is None or amount < 0:
            messages.append(
                f"Amount for service {line.name} cannot be negative."
            )
    amount_paid = _as_decimal(draft.amount_paid)
    if amount_paid is None or amount_paid < 0:
        messages.append("Amount paid cannot be negative.")
    if not normalize_text(draft.payment_account):
        messages.append("Payment account is required.")
    if not normalize_text(draft.responsible):
        messages.append("Responsible is required.")
    if draft.status not in INCOME_STATUSES:
        messages.append("Status must be 'active' or 'cancelled'.")
    return messages


def validate_transaction_draft(draft: TransactionDraft) -> list[str]:
    messages: list[str] = []
    if draft.transaction_type not in TRANSACTION_TYPES:
        messages.append("Transaction type must be withdrawal or transfer.")
    if draft.date is None:
        messages.append("Date is required.")
    _check_positive(messages, draft.amount, "Amount")
    if draft.transaction_type == WITHDRAWAL and not normalize_text(
        draft.account
    ):
        messages.append("Account is required for withdrawals.")
    if draft.transaction_type == ACCOUNT_TRANSFER:
        source = normalize_text(draft.source_account)
        destination = normalize_text(draft.destination_account)
        if not source or not destination:
            messages.append(
                "Source and destination accounts are required for transfers."
            )
        elif source == destination:
            messages.append(
                "Source and destination accounts cannot be the same."
            )
    return messages


def validate_employee_draft(draft: EmployeeDraft) -> list[str]:
    messages: list[str] = []
    if not _min_length(draft.name, 2):
        messages.append("Employee name is required.")
    if not _min_length(draft.cedula, 6):
        messages.append("Cedula is required.")
    if not _min_length(draft.phone, 7):
        messages.append("Phone is required.")
    if not _min_length(draft.bank, 2):
        messages.append("Bank is required.")
    _check_positive(messages, draft.bi_weekly_salary, "Bi-weekly salary")
    return messages


def validate_payroll_payment_draft(draft: PayrollPaymentDraft) -> list[str]:
    messages: list[str] = []
    if not normalize_text(draft.employee_id):
        messages.append("Employee is required.")
    if draft.payment_type not in PAYROLL_PAYMENT_TYPES:
        messages.append("Payment type must be 4th, 20th or bonus.")
    if not isinstance(draft.month, int) or not 1 <= draft.month <= 12:
        messages.append("Month must be between 1 and 12.")
    if not isinstance(draft.year, int) or draft.year < 1900:
        messages.append("Year is invalid.")
    if draft.date is None:
        messages.append("Date is required.")
    _check_positive(messages, draft.total_amount, "Amount")
    if not normalize_text(draft.payment_account):
        messages.append("Payment account is required.")
    return messages


def validate_admin_payment_draft(draft: AdminPaymentDraft) -> list[str]:
    messages: list[str] = []
    if not _min_length(draft.concept_name, 2):
        messages.append("Concept name is required.")
    if draft.category not in ADMIN_PAYMENT_CATEGORIES:
        messages.append("Category is invalid.")
    if not _min_length(draft.provider_name, 2):
        messages.append("Provider name is required.")
    _check_positive(messages, draft.payment_amount, "Payment amount")
    if draft.payment_frequency not in ADMIN_PAYMENT_FREQUENCIES:
        messages.append("Payment frequency is invalid.")
    if (
        draft.beneficiary_account_type
        and draft.beneficiary_account_type not in BENEFICIARY_ACCOUNT_TYPES
    ):
        messages.append("Beneficiary account type is invalid.")
    return messages


def validate_client_payment_draft(draft: ClientPaymentDraft) -> list[str]:
    messages: list[str] = []
    if not normalize_text(draft.client_name):
        messages.append("Client is required.")
    if draft.date is None:
        messages.append("Date is required.")
    _check_positive(messages, draft.amount, "Amount")
    if not normalize_text(draft.account):
        messages.append("Payment account is required.")
    return messages


def ensure_valid(messages: list[str]) -> None:
    """Raise ValidationError when any constraint was violated.

    Args:
        messages: Output of one of the ``validate_*`` functions.

    Raises:
        ValidationError: If ``messages`` is not empty.
    """
    if messages:
        raise ValidationError(messages)


__all__ = [
    "validate_account_draft",
    "validate_expense_draft",
    "validate_income_draft",
    "validate_transaction_draft",
    "validate_employee_draft",
    "validate_payroll_payment_draft",
    "validate_admin_payment_draft",
    "validate_client_payment_draft",
    "ensure_valid",
]
