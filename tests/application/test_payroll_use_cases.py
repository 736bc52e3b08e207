"""Tests for the employee and payroll payment use cases."""

from datetime import date
from decimal import Decimal

from src.application.use_cases import (
    DeleteEmployeeUseCase,
    DeleteExpenseUseCase,
    DeletePayrollPaymentUseCase,
    GetEmployeesUseCase,
    GetExpensesUseCase,
    GetPayrollPaymentsUseCase,
    SaveEmployeeUseCase,
    SaveExpenseUseCase,
    SavePayrollPaymentUseCase,
)
from src.domain.models import EmployeeDraft, ExpenseDraft, PayrollPaymentDraft

USER_ID = "user-1"


def _employee(store, logger, name: str = "Luis") -> str:
    result = SaveEmployeeUseCase(store, logger=logger).execute(
        USER_ID,
        EmployeeDraft(
            name=name,
            cedula="1712345678",
            phone="0991234567",
            bank="Pichincha",
            bi_weekly_salary=Decimal("300"),
        ),
    )
    assert result.success, result.message
    return result.record_id


def _payment(employee_id: str, account_id: str, **overrides):
    values = {
        "employee_id": employee_id,
        "payment_type": "4th",
        "month": 3,
        "year": 2024,
        "date": date(2024, 3, 4),
        "total_amount": Decimal("300"),
        "payment_account": account_id,
    }
    values.update(overrides)
    return PayrollPaymentDraft(**values)


def test_employee_monthly_salary_is_derived(store, logger) -> None:
    """Monthly salary is twice the bi-weekly salary."""
    _employee(store, logger)

    (employee,) = GetEmployeesUseCase(store).execute(USER_ID)

    assert employee.monthly_salary == Decimal("600")


def test_payment_debits_once_and_writes_companion_expense(
    store, logger, clock, make_account, balance_of
) -> None:
    """The payment debits its account; the companion expense does not."""
    account_id = make_account("Banco", balance="1000")
    employee_id = _employee(store, logger)

    result = SavePayrollPaymentUseCase(
        store, logger=logger, clock=clock
    ).execute(USER_ID, _payment(employee_id, account_id))

    assert result.success is True
    assert balance_of(account_id) == Decimal("700")
    (payment,) = GetPayrollPaymentsUseCase(store).execute(USER_ID)
    assert payment.employee_name == "Luis"
    (expense,) = GetExpensesUseCase(store).execute(USER_ID)
    assert expense.id == payment.expense_id
    assert expense.category == "Nómina"
    assert expense.amount == Decimal("300")


def test_edit_payment_updates_companion_expense(
    store, logger, clock, make_account, balance_of
) -> None:
    """Editing reverses the old debit and rewrites the expense."""
    account_id = make_account("Banco", balance="1000")
    employee_id = _employee(store, logger)
    use_case = SavePayrollPaymentUseCase(store, logger=logger, clock=clock)
    created = use_case.execute(USER_ID, _payment(employee_id, account_id))

    result = use_case.execute(
        USER_ID,
        _payment(employee_id, account_id, total_amount=Decimal("350")),
        payment_id=created.record_id,
    )

    assert result.success is True
    assert balance_of(account_id) == Decimal("650")
    (expense,) = GetExpensesUseCase(store).execute(USER_ID)
    assert expense.amount == Decimal("350")


def test_companion_expense_cannot_be_changed_directly(
    store, logger, clock, make_account, balance_of
) -> None:
    """Companion expenses are managed through their payment."""
    account_id = make_account("Banco", balance="1000")
    employee_id = _employee(store, logger)
    SavePayrollPaymentUseCase(store, logger=logger, clock=clock).execute(
        USER_ID, _payment(employee_id, account_id)
    )
    (expense,) = GetExpensesUseCase(store).execute(USER_ID)

    deleted = DeleteExpenseUseCase(store, logger=logger).execute(
        USER_ID, expense.id
    )
    edited = SaveExpenseUseCase(store, logger=logger).execute(
        USER_ID,
        ExpenseDraft(
            date=date(2024, 3, 4),
            expense_type="fijo",
            category="Other",
            amount=Decimal("1"),
            payment_account=account_id,
        ),
        expense_id=expense.id,
    )

    assert deleted.success is False
    assert edited.success is False
    assert balance_of(account_id) == Decimal("700")


def test_delete_payment_restores_balance_and_expense(
    store, logger, clock, make_account, balance_of
) -> None:
    """Deleting a payment credits it back and removes its expense."""
    account_id = make_account("Banco", balance="1000")
    employee_id = _employee(store, logger)
    created = SavePayrollPaymentUseCase(
        store, logger=logger, clock=clock
    ).execute(USER_ID, _payment(employee_id, account_id))

    result = DeletePayrollPaymentUseCase(store, logger=logger).execute(
        USER_ID, created.record_id
    )

    assert result.success is True
    assert balance_of(account_id) == Decimal("1000")
    assert GetPayrollPaymentsUseCase(store).execute(USER_ID) == []
    assert GetExpensesUseCase(store).execute(USER_ID) == []


def test_delete_employee_reverses_their_payments(
    store, logger, clock, make_account, balance_of
) -> None:
    """Employees are deleted together with their payments."""
    account_id = make_account("Banco", balance="1000")
    employee_id = _employee(store, logger)
    other_id = _employee(store, logger, name="Ana")
    use_case = SavePayrollPaymentUseCase(store, logger=logger, clock=clock)
    use_case.execute(USER_ID, _payment(employee_id, account_id))
    use_case.execute(
        USER_ID,
        _payment(employee_id, account_id, payment_type="20th"),
    )
    use_case.execute(USER_ID, _payment(other_id, account_id))

    result = DeleteEmployeeUseCase(store, logger=logger).execute(
        USER_ID, employee_id
    )

    assert result.success is True
    assert balance_of(account_id) == Decimal("700")
    payments = GetPayrollPaymentsUseCase(store).execute(USER_ID)
    assert [payment.employee_id for payment in payments] == [other_id]
    assert len(GetExpensesUseCase(store).execute(USER_ID)) == 1


def test_payment_for_unknown_employee_fails(
    store, logger, make_account
) -> None:
    """Payments must reference an existing employee."""
    account_id = make_account("Banco", balance="1000")

    result = SavePayrollPaymentUseCase(store, logger=logger).execute(
        USER_ID, _payment("ghost", account_id)
    )

    assert result.success is False
    assert result.message == "Employee not found: ghost"
