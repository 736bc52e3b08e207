"""Ledger storage ports.

``LedgerStorePort.unit_of_work`` yields a ``LedgerSession``. Every read and
write made through one session commits together or not at all, which is
what keeps balance updates and record writes consistent.
"""

from contextlib import AbstractContextManager
from datetime import datetime
from decimal import Decimal
from typing import Protocol

from src.domain.models import (
    Account,
    AdminPayment,
    ClientPayment,
    Employee,
    Expense,
    Income,
    PayrollPayment,
    Reminder,
    Transaction,
)


class LedgerSession(Protocol):
    """User-scoped access to every ledger table inside one unit of work."""

    # Accounts
    def list_accounts(self, user_id: str) -> list[Account]:
        """Return the user's accounts ordered by name."""

    def get_account(self, user_id: str, account_id: str) -> Account | None:
        """Return one account, or None when it does not exist."""

    def insert_account(self, user_id: str, account: Account) -> None:
        """Insert a new account with its initial balance."""

    def update_account(self, user_id: str, account: Account) -> None:
        """Update name, commission and type. The balance is left untouched."""

    def set_account_balance(
        self, user_id: str, account_id: str, balance: Decimal
    ) -> None:
        """Overwrite the stored balance of an account."""

    def delete_account(self, user_id: str, account_id: str) -> None:
        """Delete an account."""

    def count_account_references(self, user_id: str, account_id: str) -> int:
        """Return how many records reference the account."""

    # Incomes
    def list_incomes(self, user_id: str) -> list[Income]:
        """Return the user's incomes, newest date first."""

    def get_income(self, user_id: str, income_id: str) -> Income | None:
        """Return one income, or None."""

    def save_income(self, user_id: str, income: Income) -> None:
        """Insert or replace an income."""

    def delete_income(self, user_id: str, income_id: str) -> None:
        """Delete an income."""

    # Expenses
    def list_expenses(self, user_id: str) -> list[Expense]:
        """Return the user's expenses, newest date first."""

    def get_expense(self, user_id: str, expense_id: str) -> Expense | None:
        """Return one expense, or None."""

    def save_expense(self, user_id: str, expense: Expense) -> None:
        """Insert or replace an expense."""

    def delete_expense(self, user_id: str, expense_id: str) -> None:
        """Delete an expense."""

    def list_expense_categories(self, user_id: str) -> list[str]:
        """Return the distinct expense categories, sorted."""

    # Transactions
    def list_transactions(self, user_id: str) -> list[Transaction]:
        """Return the user's transactions, newest date first."""

    def get_transaction(
        self, user_id: str, transaction_id: str
    ) -> Transaction | None:
        """Return one transaction, or None."""

    def save_transaction(self, user_id: str, transaction: Transaction) -> None:
        """Insert or replace a transaction."""

    def delete_transaction(self, user_id: str, transaction_id: str) -> None:
        """Delete a transaction."""

    # Employees and payroll
    def list_employees(self, user_id: str) -> list[Employee]:
        """Return the user's employees ordered by name."""

    def get_employee(self, user_id: str, employee_id: str) -> Employee | None:
        """Return one employee, or None."""

    def save_employee(self, user_id: str, employee: Employee) -> None:
        """Insert or replace an employee."""

    def delete_employee(self, user_id: str, employee_id: str) -> None:
        """Delete an employee."""

    def list_payroll_payments(
        self, user_id: str, employee_id: str | None = None
    ) -> list[PayrollPayment]:
        """Return payroll payments, optionally for one employee."""

    def get_payroll_payment(
        self, user_id: str, payment_id: str
    ) -> PayrollPayment | None:
        """Return one payroll payment, or None."""

    def find_payroll_payment_by_expense(
        self, user_id: str, expense_id: str
    ) -> PayrollPayment | None:
        """Return the payroll payment owning a companion expense, or None."""

    def save_payroll_payment(
        self, user_id: str, payment: PayrollPayment
    ) -> None:
        """Insert or replace a payroll payment."""

    def delete_payroll_payment(self, user_id: str, payment_id: str) -> None:
        """Delete a payroll payment."""

    # Administrative payments
    def list_admin_payments(self, user_id: str) -> list[AdminPayment]:
        """Return the user's admin payments ordered by concept name."""

    def get_admin_payment(
        self, user_id: str, payment_id: str
    ) -> AdminPayment | None:
        """Return one admin payment, or None."""

    def save_admin_payment(self, user_id: str, payment: AdminPayment) -> None:
        """Insert or replace an admin payment."""

    def delete_admin_payment(self, user_id: str, payment_id: str) -> None:
        """Delete an admin payment."""

    # Reminders
    def list_reminders(
        self, user_id: str, status: str | None = None
    ) -> list[Reminder]:
        """Return reminders by ascending due date, optionally by status."""

    def get_reminder(self, user_id: str, reminder_id: str) -> Reminder | None:
        """Return one reminder, or None."""

    def save_reminder(self, user_id: str, reminder: Reminder) -> None:
        """Insert or replace a reminder."""

    def delete_reminder(self, user_id: str, reminder_id: str) -> None:
        """Delete the reminder with the given id."""

    def delete_admin_payment_reminders(
        self, user_id: str, admin_payment_id: str
    ) -> None:
        """Delete every reminder derived from an admin payment."""

    def set_reminder_status(
        self,
        user_id: str,
        reminder_id: str,
        status: str,
        resolved_at: datetime | None,
    ) -> None:
        """Update the status of a reminder."""

    # Client debt payments
    def list_client_payments(self, user_id: str) -> list[ClientPayment]:
        """Return recorded client debt payments, newest date first."""

    def save_client_payment(
        self, user_id: str, payment: ClientPayment
    ) -> None:
        """Insert a client debt payment."""


class LedgerStorePort(Protocol):
    """Port opening units of work over the ledger database."""

    def unit_of_work(self) -> AbstractContextManager[LedgerSession]:
        """Open a unit of work.

        Returns:
            AbstractContextManager[LedgerSession]: Context manager that
            commits on normal exit and rolls back when an exception escapes.
        """


__all__ = ["LedgerSession", "LedgerStorePort"]
