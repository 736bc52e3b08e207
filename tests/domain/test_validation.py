"""Tests for draft validation rules."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.constants import ACCOUNT_TRANSFER, WITHDRAWAL
from src.domain.errors import ValidationError
from src.domain.models import (
    AccountDraft,
    AdminPaymentDraft,
    ClientPaymentDraft,
    EmployeeDraft,
    ExpenseDraft,
    IncomeDraft,
    PayrollPaymentDraft,
    ServiceLine,
    TransactionDraft,
)
from src.domain.services.validation import (
    ensure_valid,
    validate_account_draft,
    validate_admin_payment_draft,
    validate_client_payment_draft,
    validate_employee_draft,
    validate_expense_draft,
    validate_income_draft,
    validate_payroll_payment_draft,
    validate_transaction_draft,
)


def test_valid_account_draft_has_no_messages() -> None:
    """A complete account draft passes."""
    draft = AccountDraft(
        name="Banco", commission=Decimal("0.05"), account_type="Bancario"
    )

    assert validate_account_draft(draft) == []


def test_account_draft_reports_every_violation() -> None:
    """Short names, out-of-range commissions and unknown types are listed."""
    draft = AccountDraft(
        name=" B ", commission=Decimal("1.5"), account_type="Crypto"
    )

    messages = validate_account_draft(draft)

    assert len(messages) == 3


def test_expense_draft_requires_positive_amount() -> None:
    """Zero amounts are rejected."""
    draft = ExpenseDraft(
        date=date(2024, 1, 1),
        expense_type="fijo",
        category="Rent",
        amount=Decimal("0"),
        payment_account="acc",
    )

    assert validate_expense_draft(draft) == [
        "Amount must be a positive number."
    ]


def test_income_draft_requires_services() -> None:
    """An income needs at least one service line."""
    draft = IncomeDraft(
        date=date(2024, 1, 1),
        client="Acme",
        country="EC",
        services_details=[],
        amount_paid=Decimal("10"),
        payment_account="acc",
        responsible="Ana",
    )

    assert "At least one service must be selected." in (
        validate_income_draft(draft)
    )


def test_income_draft_rejects_negative_service_amount() -> None:
    """Service amounts cannot be negative."""
    draft = IncomeDraft(
        date=date(2024, 1, 1),
        client="Acme",
        country="EC",
        services_details=[ServiceLine(name="WEB", amount=Decimal("-1"))],
        amount_paid=Decimal("0"),
        payment_account="acc",
        responsible="Ana",
    )

    assert validate_income_draft(draft) == [
        "Amount for service WEB cannot be negative."
    ]


def test_transfer_requires_distinct_accounts() -> None:
    """Source and destination must differ."""
    draft = TransactionDraft(
        transaction_type=ACCOUNT_TRANSFER,
        date=date(2024, 1, 1),
        amount=Decimal("5"),
        source_account="acc",
        destination_account="acc",
    )

    assert validate_transaction_draft(draft) == [
        "Source and destination accounts cannot be the same."
    ]


def test_withdrawal_requires_account() -> None:
    """Withdrawals without an account are rejected."""
    draft = TransactionDraft(
        transaction_type=WITHDRAWAL,
        date=date(2024, 1, 1),
        amount=Decimal("5"),
    )

    assert validate_transaction_draft(draft) == [
        "Account is required for withdrawals."
    ]


def test_employee_draft_checks_minimum_lengths() -> None:
    """Cedula and phone have minimum lengths."""
    draft = EmployeeDraft(
        name="Luis",
        cedula="123",
        phone="099",
        bank="Pichincha",
        bi_weekly_salary=Decimal("300"),
    )

    assert validate_employee_draft(draft) == [
        "Cedula is required.",
        "Phone is required.",
    ]


def test_payroll_payment_draft_checks_month_range() -> None:
    """Months are 1-based."""
    draft = PayrollPaymentDraft(
        employee_id="emp",
        payment_type="4th",
        month=0,
        year=2024,
        date=date(2024, 1, 4),
        total_amount=Decimal("300"),
        payment_account="acc",
    )

    assert validate_payroll_payment_draft(draft) == [
        "Month must be between 1 and 12."
    ]


def test_admin_payment_draft_checks_beneficiary_type() -> None:
    """Only known beneficiary account types are accepted."""
    draft = AdminPaymentDraft(
        concept_name="Internet",
        category="Servicios Básicos",
        provider_name="ISP",
        payment_amount=Decimal("30"),
        payment_frequency="Mensual",
        beneficiary_account_type="Offshore",
    )

    assert validate_admin_payment_draft(draft) == [
        "Beneficiary account type is invalid."
    ]


def test_client_payment_draft_requires_account() -> None:
    """A debt payment must name the receiving account."""
    draft = ClientPaymentDraft(
        client_name="Acme",
        date=date(2024, 1, 1),
        amount=Decimal("10"),
        account=" ",
    )

    assert validate_client_payment_draft(draft) == [
        "Payment account is required."
    ]


def test_ensure_valid_raises_with_all_messages() -> None:
    """ensure_valid joins the messages into the error."""
    with pytest.raises(ValidationError) as excinfo:
        ensure_valid(["first", "second"])

    assert excinfo.value.messages == ["first", "second"]
    assert str(excinfo.value) == "first, second"


def test_ensure_valid_accepts_empty_list() -> None:
    """No messages means no error."""
    ensure_valid([])
