"""Use cases for employees and payroll payments.

A payroll payment debits its account once. The companion expense written
alongside it records the cost under the payroll category and never moves
a balance itself.
"""

from src.application.ports.ledger_store import LedgerSession
from src.application.use_cases.balances import apply_balance_deltas
from src.application.use_cases.results import (
    LedgerMutationUseCase,
    LedgerQueryUseCase,
    OperationResult,
    new_record_id,
)
from src.domain.constants import (
    PAYROLL_EXPENSE_CATEGORY,
    PAYROLL_EXPENSE_RESPONSIBLE,
    PAYROLL_EXPENSE_TYPE,
)
from src.domain.errors import RecordNotFoundError
from src.domain.models import (
    Employee,
    EmployeeDraft,
    Expense,
    PayrollPayment,
    PayrollPaymentDraft,
)
from src.domain.services.balances import (
    combine_deltas,
    invert_deltas,
    payroll_deltas,
)
from src.domain.services.normalization import normalize_text
from src.domain.services.validation import (
    ensure_valid,
    validate_employee_draft,
    validate_payroll_payment_draft,
)
from src.utils.decimal_utils import coerce_decimal


def build_companion_expense(
    payment: PayrollPayment,
    expense_id: str,
) -> Expense:
    """Return the expense row that mirrors a payroll payment."""
    return Expense(
        id=expense_id,
        date=payment.date,
        expense_type=PAYROLL_EXPENSE_TYPE,
        category=PAYROLL_EXPENSE_CATEGORY,
        amount=payment.total_amount,
        payment_account=payment.payment_account,
        responsible=PAYROLL_EXPENSE_RESPONSIBLE,
        observations=(
            f"Payroll payment to {payment.employee_name}. Ref: {payment.id}"
        ),
        timestamp=payment.timestamp,
    )


def delete_payroll_payment_in_session(
    session: LedgerSession,
    user_id: str,
    payment: PayrollPayment,
    logger,
) -> None:
    """Reverse a payroll payment and remove it with its companion expense."""
    apply_balance_deltas(
        session,
        user_id,
        invert_deltas(payroll_deltas(payment)),
        required_accounts=[],
        logger=logger,
    )
    session.delete_payroll_payment(user_id, payment.id)
    if payment.expense_id:
        session.delete_expense(user_id, payment.expense_id)


class SaveEmployeeUseCase(LedgerMutationUseCase):
    """Create or edit an employee; the monthly salary is derived."""

    failure_message = "Could not save the employee."

    def execute(
        self,
        user_id: str,
        draft: EmployeeDraft,
        employee_id: str | None = None,
    ) -> OperationResult:
        def action() -> str:
            ensure_valid(validate_employee_draft(draft))
            bi_weekly = coerce_decimal(draft.bi_weekly_salary)
            with self._store.unit_of_work() as session:
                if employee_id is not None and (
                    session.get_employee(user_id, employee_id) is None
                ):
                    raise RecordNotFoundError("Employee", employee_id)
                employee = Employee(
                    id=employee_id or new_record_id(),
                    name=normalize_text(draft.name),
                    cedula=normalize_text(draft.cedula),
                    phone=normalize_text(draft.phone),
                    bank=normalize_text(draft.bank),
                    payment_method=normalize_text(draft.payment_method),
                    bi_weekly_salary=bi_weekly,
                    monthly_salary=bi_weekly * 2,
                )
                session.save_employee(user_id, employee)
                return employee.id

        message = (
            "Employee saved." if employee_id is None else "Employee updated."
        )
        return self._run(action, message)


class DeleteEmployeeUseCase(LedgerMutationUseCase):
    """Delete an employee together with their payroll payments.

    Every payment is reversed first, so the accounts end up as if the
    payments had never been made.
    """

    failure_message = "Could not delete the employee."

    def execute(self, user_id: str, employee_id: str) -> OperationResult:
        def action() -> str:
            with self._store.unit_of_work() as session:
                if session.get_employee(user_id, employee_id) is None:
                    raise RecordNotFoundError("Employee", employee_id)
                payments = session.list_payroll_payments(
                    user_id, employee_id=employee_id
                )
                for payment in payments:
                    delete_payroll_payment_in_session(
                        session, user_id, payment, self._logger
                    )
                session.delete_employee(user_id, employee_id)
                return employee_id

        return self._run(action, "Employee deleted.")


class SavePayrollPaymentUseCase(LedgerMutationUseCase):
    """Create or edit a payroll payment and its companion expense."""

    failure_message = "Could not save the payroll payment."

    def execute(
        self,
        user_id: str,
        draft: PayrollPaymentDraft,
        payment_id: str | None = None,
    ) -> OperationResult:
        """Debit the payment account and write the companion expense.

        Args:
            user_id: Owner of the payment.
            draft: Submitted form values. ``month`` is 1-based.
            payment_id: Id of the payment to edit, or None to create one.

        Returns:
            OperationResult: Outcome with the payment id on success.
        """

        def action() -> str:
            ensure_valid(validate_payroll_payment_draft(draft))
            with self._store.unit_of_work() as session:
                employee = session.get_employee(user_id, draft.employee_id)
                if employee is None:
                    raise RecordNotFoundError("Employee", draft.employee_id)
                previous = None
                if payment_id is not None:
                    previous = session.get_payroll_payment(user_id, payment_id)
                    if previous is None:
                        raise RecordNotFoundError(
                            "Payroll payment", payment_id
                        )

                new_id = payment_id or new_record_id()
                expense_id = (
                    previous.expense_id
                    if previous and previous.expense_id
                    else new_record_id()
                )
                payment = PayrollPayment(
                    id=new_id,
                    employee_id=employee.id,
                    employee_name=employee.name,
                    payment_type=draft.payment_type,
                    month=draft.month,
                    year=draft.year,
                    total_amount=coerce_decimal(draft.total_amount),
                    payment_account=normalize_text(draft.payment_account),
                    date=draft.date,
                    observations=normalize_text(draft.observations),
                    timestamp=(
                        previous.timestamp if previous else self._clock()
                    ),
                    expense_id=expense_id,
                )
                reversal = (
                    invert_deltas(payroll_deltas(previous)) if previous else {}
                )
                apply_balance_deltas(
                    session,
                    user_id,
                    combine_deltas(reversal, payroll_deltas(payment)),
                    required_accounts=[payment.payment_account],
                    logger=self._logger,
                )
                session.save_payroll_payment(user_id, payment)
                session.save_expense(
                    user_id, build_companion_expense(payment, expense_id)
                )
                return payment.id

        message = (
            "Payroll payment saved."
            if payment_id is None
            else "Payroll payment updated."
        )
        return self._run(action, message)


class DeletePayrollPaymentUseCase(LedgerMutationUseCase):
    """Delete a payroll payment, credit it back and drop its expense."""

    failure_message = "Could not delete the payroll payment."

    def execute(self, user_id: str, payment_id: str) -> OperationResult:
        def action() -> str:
            with self._store.unit_of_work() as session:
                payment = session.get_payroll_payment(user_id, payment_id)
                if payment is None:
                    raise RecordNotFoundError("Payroll payment", payment_id)
                delete_payroll_payment_in_session(
                    session, user_id, payment, self._logger
                )
                return payment_id

        return self._run(action, "Payroll payment deleted.")


class GetEmployeesUseCase(LedgerQueryUseCase):
    """Return the user's employees ordered by name."""

    def execute(self, user_id: str) -> list[Employee]:
        return self._read(
            lambda session: session.list_employees(user_id), list
        )


class GetPayrollPaymentsUseCase(LedgerQueryUseCase):
    """Return payroll payments, optionally for a single employee."""

    def execute(
        self,
        user_id: str,
        employee_id: str | None = None,
    ) -> list[PayrollPayment]:
        return self._read(
            lambda session: session.list_payroll_payments(
                user_id, employee_id=employee_id
            ),
            list,
        )


__all__ = [
    "build_companion_expense",
    "delete_payroll_payment_in_session",
    "SaveEmployeeUseCase",
    "DeleteEmployeeUseCase",
    "SavePayrollPaymentUseCase",
    "DeletePayrollPaymentUseCase",
    "GetEmployeesUseCase",
    "GetPayrollPaymentsUseCase",
]
