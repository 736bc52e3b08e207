"""SQLAlchemy implementation of the ledger storage ports.

Each unit of work wraps one ``engine.begin()`` connection. Amounts are
written as floats into REAL columns and read back as ``Decimal``; dates and
timestamps are ISO-8601 text.
"""

from contextlib import contextmanager
from datetime import date, datetime
from decimal import Decimal
import json
from typing import Iterator

from sqlalchemy import text
from sqlalchemy.engine import Connection

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_store import LedgerSession, LedgerStorePort
from src.domain.models import (
    Account,
    AdminPayment,
    ClientPayment,
    Employee,
    Expense,
    Income,
    PayrollPayment,
    Reminder,
    ServiceLine,
    Transaction,
)
from src.utils.decimal_utils import coerce_decimal, to_storage_float

INCOME_COLUMNS = (
    "id",
    "userId",
    "date",
    "client",
    "brandName",
    "country",
    "servicesDetails",
    "amountPaid",
    "paymentAccount",
    "responsible",
    "observations",
    "dueDate",
    "status",
    "totalContractedAmount",
    "commissionRate",
    "commissionAmount",
    "amountWithCommission",
    "remainingBalance",
    "timestamp",
)
EXPENSE_COLUMNS = (
    "id",
    "userId",
    "date",
    "type",
    "category",
    "amount",
    "paymentAccount",
    "responsible",
    "observations",
    "timestamp",
)
TRANSACTION_COLUMNS = (
    "id",
    "userId",
    "type",
    "date",
    "amount",
    "account",
    "sourceAccount",
    "destinationAccount",
    "observations",
    "timestamp",
)
EMPLOYEE_COLUMNS = (
    "id",
    "userId",
    "name",
    "cedula",
    "phone",
    "bank",
    "paymentMethod",
    "biWeeklySalary",
    "monthlySalary",
)
PAYROLL_COLUMNS = (
    "id",
    "userId",
    "employeeId",
    "employeeName",
    "paymentType",
    "month",
    "year",
    "totalAmount",
    "date",
    "observations",
    "timestamp",
    "paymentAccount",
    "expenseId",
)
ADMIN_PAYMENT_COLUMNS = (
    "id",
    "userId",
    "conceptName",
    "category",
    "providerName",
    "contractNumber",
    "referenceNumber",
    "providerId",
    "paymentAmount",
    "paymentCurrency",
    "paymentFrequency",
    "paymentDueDate",
    "renewalDate",
    "paymentMethod",
    "beneficiaryBank",
    "beneficiaryAccountNumber",
    "beneficiaryAccountType",
    "notes",
    "createdAt",
    "updatedAt",
)
REMINDER_COLUMNS = (
    "id",
    "userId",
    "incomeId",
    "adminPaymentId",
    "clientId",
    "brandName",
    "service",
    "renewalAmount",
    "debtAmount",
    "dueDate",
    "status",
    "message",
    "timestamp",
    "resolvedAt",
)
CLIENT_PAYMENT_COLUMNS = (
    "id",
    "userId",
    "clientName",
    "date",
    "amount",
    "account",
    "incomeIds",
    "timestamp",
)


def _select_sql(table: str, columns: tuple[str, ...], tail: str):
    return text(f"SELECT {', '.join(columns)} FROM {table} {tail}")


def _upsert_sql(table: str, columns: tuple[str, ...]):
    names = ", ".join(columns)
    values = ", ".join(f":{column}" for column in columns)
    updates = ", ".join(
        f"{column} = excluded.{column}"
        for column in columns
        if column not in ("id", "userId")
    )
    return text(
        f"INSERT INTO {table} ({names}) VALUES ({values}) "
        f"ON CONFLICT (id) DO UPDATE SET {updates} "
        f"WHERE {table}.userId = excluded.userId"
    )


def _delete_sql(table: str):
    return text(f"DELETE FROM {table} WHERE userId = :user_id AND id = :id")


SELECT_ACCOUNTS = text(
    """
    SELECT id, name, balance, commission, type
    FROM accounts
    WHERE userId = :user_id
    ORDER BY name
    """
)
SELECT_ACCOUNT = text(
    """
    SELECT id, name, balance, commission, type
    FROM accounts
    WHERE userId = :user_id AND id = :id
    """
)
INSERT_ACCOUNT = text(
    """
    INSERT INTO accounts (id, userId, name, balance, type, commission)
    VALUES (:id, :user_id, :name, :balance, :type, :commission)
    """
)
UPDATE_ACCOUNT = text(
    """
    UPDATE accounts
    SET name = :name, type = :type, commission = :commission
    WHERE userId = :user_id AND id = :id
    """
)
UPDATE_ACCOUNT_BALANCE = text(
    """
    UPDATE accounts
    SET balance = :balance
    WHERE userId = :user_id AND id = :id
    """
)
COUNT_ACCOUNT_REFERENCES = text(
    """
    SELECT
        (SELECT COUNT(*) FROM incomes
         WHERE userId = :user_id AND paymentAccount = :id)
      + (SELECT COUNT(*) FROM expenses
         WHERE userId = :user_id AND paymentAccount = :id)
      + (SELECT COUNT(*) FROM transactions
         WHERE userId = :user_id
           AND (account = :id OR sourceAccount = :id
                OR destinationAccount = :id))
      + (SELECT COUNT(*) FROM payrollPayments
         WHERE userId = :user_id AND paymentAccount = :id)
    """
)

SELECT_INCOMES = _select_sql(
    "incomes",
    INCOME_COLUMNS,
    "WHERE userId = :user_id ORDER BY date DESC, timestamp DESC",
)
SELECT_INCOME = _select_sql(
    "incomes", INCOME_COLUMNS, "WHERE userId = :user_id AND id = :id"
)
UPSERT_INCOME = _upsert_sql("incomes", INCOME_COLUMNS)

SELECT_EXPENSES = _select_sql(
    "expenses",
    EXPENSE_COLUMNS,
    "WHERE userId = :user_id ORDER BY date DESC, timestamp DESC",
)
SELECT_EXPENSE = _select_sql(
    "expenses", EXPENSE_COLUMNS, "WHERE userId = :user_id AND id = :id"
)
UPSERT_EXPENSE = _upsert_sql("expenses", EXPENSE_COLUMNS)
SELECT_EXPENSE_CATEGORIES = text(
    """
    SELECT DISTINCT category
    FROM expenses
    WHERE userId = :user_id
    ORDER BY category
    """
)

SELECT_TRANSACTIONS = _select_sql(
    "transactions",
    TRANSACTION_COLUMNS,
    "WHERE userId = :user_id ORDER BY date DESC, timestamp DESC",
)
SELECT_TRANSACTION = _select_sql(
    "transactions",
    TRANSACTION_COLUMNS,
    "WHERE userId = :user_id AND id = :id",
)
UPSERT_TRANSACTION = _upsert_sql("transactions", TRANSACTION_COLUMNS)

SELECT_EMPLOYEES = _select_sql(
    "employees", EMPLOYEE_COLUMNS, "WHERE userId = :user_id ORDER BY name"
)
SELECT_EMPLOYEE = _select_sql(
    "employees", EMPLOYEE_COLUMNS, "WHERE userId = :user_id AND id = :id"
)
UPSERT_EMPLOYEE = _upsert_sql("employees", EMPLOYEE_COLUMNS)

SELECT_PAYROLL_PAYMENTS = _select_sql(
    "payrollPayments",
    PAYROLL_COLUMNS,
    "WHERE userId = :user_id ORDER BY date DESC, timestamp DESC",
)
SELECT_EMPLOYEE_PAYROLL_PAYMENTS = _select_sql(
    "payrollPayments",
    PAYROLL_COLUMNS,
    "WHERE userId = :user_id AND employeeId = :employee_id "
    "ORDER BY date DESC, timestamp DESC",
)
SELECT_PAYROLL_PAYMENT = _select_sql(
    "payrollPayments",
    PAYROLL_COLUMNS,
    "WHERE userId = :user_id AND id = :id",
)
SELECT_PAYROLL_PAYMENT_BY_EXPENSE = _select_sql(
    "payrollPayments",
    PAYROLL_COLUMNS,
    "WHERE userId = :user_id AND expenseId = :expense_id",
)
UPSERT_PAYROLL_PAYMENT = _upsert_sql("payrollPayments", PAYROLL_COLUMNS)

SELECT_ADMIN_PAYMENTS = _select_sql(
    "adminPayments",
    ADMIN_PAYMENT_COLUMNS,
    "WHERE userId = :user_id ORDER BY conceptName",
)
SELECT_ADMIN_PAYMENT = _select_sql(
    "adminPayments",
    ADMIN_PAYMENT_COLUMNS,
    "WHERE userId = :user_id AND id = :id",
)
UPSERT_ADMIN_PAYMENT = _upsert_sql("adminPayments", ADMIN_PAYMENT_COLUMNS)

SELECT_REMINDERS = _select_sql(
    "reminders",
    REMINDER_COLUMNS,
    "WHERE userId = :user_id ORDER BY dueDate",
)
SELECT_REMINDERS_BY_STATUS = _select_sql(
    "reminders",
    REMINDER_COLUMNS,
    "WHERE userId = :user_id AND status = :status ORDER BY dueDate",
)
SELECT_REMINDER = _select_sql(
    "reminders", REMINDER_COLUMNS, "WHERE userId = :user_id AND id = :id"
)
UPSERT_REMINDER = _upsert_sql("reminders", REMINDER_COLUMNS)
DELETE_ADMIN_PAYMENT_REMINDERS = text(
    """
    DELETE FROM reminders
    WHERE userId = :user_id AND adminPaymentId = :admin_payment_id
    """
)
UPDATE_REMINDER_STATUS = text(
    """
    UPDATE reminders
    SET status = :status, resolvedAt = :resolved_at
    WHERE userId = :user_id AND id = :id
    """
)

SELECT_CLIENT_PAYMENTS = _select_sql(
    "clientPayments",
    CLIENT_PAYMENT_COLUMNS,
    "WHERE userId = :user_id ORDER BY date DESC, timestamp DESC",
)
UPSERT_CLIENT_PAYMENT = _upsert_sql("clientPayments", CLIENT_PAYMENT_COLUMNS)


def _date_text(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None


def _parse_date(value) -> date | None:
    if not value:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _parse_datetime(value) -> datetime | None:
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def _optional_float(value) -> float | None:
    return None if value is None else to_storage_float(value)


def _row_to_account(row) -> Account:
    return Account(
        id=row.id,
        name=row.name,
        balance=coerce_decimal(row.balance),
        commission=coerce_decimal(row.commission),
        account_type=row.type,
    )


def _row_to_income(row) -> Income:
    details = json.loads(row.servicesDetails or "[]")
    return Income(
        id=row.id,
        date=_parse_date(row.date),
        client=row.client,
        brand_name=row.brandName or "",
        country=row.country,
        services_details=[
            ServiceLine(
                name=item["name"], amount=coerce_decimal(item["amount"])
            )
            for item in details
        ],
        amount_paid=coerce_decimal(row.amountPaid),
        payment_account=row.paymentAccount,
        responsible=row.responsible,
        observations=row.observations or "",
        due_date=_parse_date(row.dueDate),
        status=row.status,
        total_contracted_amount=coerce_decimal(row.totalContractedAmount),
        commission_rate=coerce_decimal(row.commissionRate),
        commission_amount=coerce_decimal(row.commissionAmount),
        amount_with_commission=coerce_decimal(row.amountWithCommission),
        remaining_balance=coerce_decimal(row.remainingBalance),
        timestamp=_parse_datetime(row.timestamp),
    )


def _income_params(user_id: str, income: Income) -> dict:
    return {
        "id": income.id,
        "userId": user_id,
        "date": _date_text(income.date),
        "client": income.client,
        "brandName": income.brand_name,
        "country": income.country,
        "servicesDetails": json.dumps(
            [
                {"name": line.name, "amount": to_storage_float(line.amount)}
                for line in income.services_details
            ]
        ),
        "amountPaid": to_storage_float(income.amount_paid),
        "paymentAccount": income.payment_account,
        "responsible": income.responsible,
        "observations": income.observations,
        "dueDate": _date_text(income.due_date),
        "status": income.status,
        "totalContractedAmount": to_storage_float(
            income.total_contracted_amount
        ),
        "commissionRate": to_storage_float(income.commission_rate),
        "commissionAmount": to_storage_float(income.commission_amount),
        "amountWithCommission": to_storage_float(
            income.amount_with_commission
        ),
        "remainingBalance": to_storage_float(income.remaining_balance),
        "timestamp": income.timestamp.isoformat(),
    }


def _row_to_expense(row) -> Expense:
    return Expense(
        id=row.id,
        date=_parse_date(row.date),
        expense_type=row.type,
        category=row.category,
        amount=coerce_decimal(row.amount),
        payment_account=row.paymentAccount,
        responsible=row.responsible or "",
        observations=row.observations or "",
        timestamp=_parse_datetime(row.timestamp),
    )


def _expense_params(user_id: str, expense: Expense) -> dict:
    return {
        "id": expense.id,
        "userId": user_id,
        "date": _date_text(expense.date),
        "type": expense.expense_type,
        "category": expense.category,
        "amount": to_storage_float(expense.amount),
        "paymentAccount": expense.payment_account,
        "responsible": expense.responsible,
        "observations": expense.observations,
        "timestamp": expense.timestamp.isoformat(),
    }


def _row_to_transaction(row) -> Transaction:
    return Transaction(
        id=row.id,
        transaction_type=row.type,
        date=_parse_date(row.date),
        amount=coerce_decimal(row.amount),
        account=row.account,
        source_account=row.sourceAccount,
        destination_account=row.destinationAccount,
        observations=row.observations or "",
        timestamp=_parse_datetime(row.timestamp),
    )


def _transaction_params(user_id: str, transaction: Transaction) -> dict:
    return {
        "id": transaction.id,
        "userId": user_id,
        "type": transaction.transaction_type,
        "date": _date_text(transaction.date),
        "amount": to_storage_float(transaction.amount),
        "account": transaction.account,
        "sourceAccount": transaction.source_account,
        "destinationAccount": transaction.destination_account,
        "observations": transaction.observations,
        "timestamp": transaction.timestamp.isoformat(),
    }


def _row_to_employee(row) -> Employee:
    return Employee(
        id=row.id,
        name=row.name,
        cedula=row.cedula or "",
        phone=row.phone or "",
        bank=row.bank or "",
        payment_method=row.paymentMethod or "",
        bi_weekly_salary=coerce_decimal(row.biWeeklySalary),
        monthly_salary=coerce_decimal(row.monthlySalary),
    )


def _employee_params(user_id: str, employee: Employee) -> dict:
    return {
        "id": employee.id,
        "userId": user_id,
        "name": employee.name,
        "cedula": employee.cedula,
        "phone": employee.phone,
        "bank": employee.bank,
        "paymentMethod": employee.payment_method,
        "biWeeklySalary": to_storage_float(employee.bi_weekly_salary),
        "monthlySalary": to_storage_float(employee.monthly_salary),
    }


def _row_to_payroll_payment(row) -> PayrollPayment:
    return PayrollPayment(
        id=row.id,
        employee_id=row.employeeId,
        employee_name=row.employeeName or "",
        payment_type=row.paymentType,
        month=int(row.month),
        year=int(row.year),
        total_amount=coerce_decimal(row.totalAmount),
        payment_account=row.paymentAccount,
        date=_parse_date(row.date),
        observations=row.observations or "",
        timestamp=_parse_datetime(row.timestamp),
        expense_id=row.expenseId,
    )


def _payroll_params(user_id: str, payment: PayrollPayment) -> dict:
    return {
        "id": payment.id,
        "userId": user_id,
        "employeeId": payment.employee_id,
        "employeeName": payment.employee_name,
        "paymentType": payment.payment_type,
        "month": payment.month,
        "year": payment.year,
        "totalAmount": to_storage_float(payment.total_amount),
        "date": _date_text(payment.date),
        "observations": payment.observations,
        "timestamp": payment.timestamp.isoformat(),
        "paymentAccount": payment.payment_account,
        "expenseId": payment.expense_id,
    }


def _row_to_admin_payment(row) -> AdminPayment:
    return AdminPayment(
        id=row.id,
        concept_name=row.conceptName or "",
        category=row.category or "",
        provider_name=row.providerName or "",
        contract_number=row.contractNumber or "",
        reference_number=row.referenceNumber or "",
        provider_id=row.providerId or "",
        payment_amount=coerce_decimal(row.paymentAmount),
        payment_currency=row.paymentCurrency or "USD",
        payment_frequency=row.paymentFrequency or "",
        payment_due_date=_parse_date(row.paymentDueDate),
        renewal_date=_parse_date(row.renewalDate),
        payment_method=row.paymentMethod or "",
        beneficiary_bank=row.beneficiaryBank or "",
        beneficiary_account_number=row.beneficiaryAccountNumber or "",
        beneficiary_account_type=row.beneficiaryAccountType,
        notes=row.notes or "",
        created_at=_parse_datetime(row.createdAt),
        updated_at=_parse_datetime(row.updatedAt),
    )


def _admin_payment_params(user_id: str, payment: AdminPayment) -> dict:
    return {
        "id": payment.id,
        "userId": user_id,
        "conceptName": payment.concept_name,
        "category": payment.category,
        "providerName": payment.provider_name,
        "contractNumber": payment.contract_number,
        "referenceNumber": payment.reference_number,
        "providerId": payment.provider_id,
        "paymentAmount": to_storage_float(payment.payment_amount),
        "paymentCurrency": payment.payment_currency,
        "paymentFrequency": payment.payment_frequency,
        "paymentDueDate": _date_text(payment.payment_due_date),
        "renewalDate": _date_text(payment.renewal_date),
        "paymentMethod": payment.payment_method,
        "beneficiaryBank": payment.beneficiary_bank,
        "beneficiaryAccountNumber": payment.beneficiary_account_number,
        "beneficiaryAccountType": payment.beneficiary_account_type,
        "notes": payment.notes,
        "createdAt": payment.created_at.isoformat(),
        "updatedAt": payment.updated_at.isoformat(),
    }


def _row_to_reminder(row) -> Reminder:
    return Reminder(
        id=row.id,
        income_id=row.incomeId,
        admin_payment_id=row.adminPaymentId,
        client_id=row.clientId or "",
        brand_name=row.brandName or "",
        service=row.service or "",
        renewal_amount=coerce_decimal(row.renewalAmount),
        debt_amount=coerce_decimal(row.debtAmount),
        due_date=_parse_date(row.dueDate),
        status=row.status,
        message=row.message or "",
        timestamp=_parse_datetime(row.timestamp),
        resolved_at=_parse_datetime(row.resolvedAt),
    )


def _reminder_params(user_id: str, reminder: Reminder) -> dict:
    return {
        "id": reminder.id,
        "userId": user_id,
        "incomeId": reminder.income_id,
        "adminPaymentId": reminder.admin_payment_id,
        "clientId": reminder.client_id,
        "brandName": reminder.brand_name,
        "service": reminder.service,
        "renewalAmount": _optional_float(reminder.renewal_amount),
        "debtAmount": _optional_float(reminder.debt_amount),
        "dueDate": _date_text(reminder.due_date),
        "status": reminder.status,
        "message": reminder.message,
        "timestamp": reminder.timestamp.isoformat(),
        "resolvedAt": (
            reminder.resolved_at.isoformat() if reminder.resolved_at else None
        ),
    }


def _row_to_client_payment(row) -> ClientPayment:
    return ClientPayment(
        id=row.id,
        client_name=row.clientName,
        date=_parse_date(row.date),
        amount=coerce_decimal(row.amount),
        account=row.account,
        income_ids=list(json.loads(row.incomeIds or "[]")),
        timestamp=_parse_datetime(row.timestamp),
    )


def _client_payment_params(user_id: str, payment: ClientPayment) -> dict:
    return {
        "id": payment.id,
        "userId": user_id,
        "clientName": payment.client_name,
        "date": _date_text(payment.date),
        "amount": to_storage_float(payment.amount),
        "account": payment.account,
        "incomeIds": json.dumps(list(payment.income_ids)),
        "timestamp": payment.timestamp.isoformat(),
    }


class SqlAlchemyLedgerSession(LedgerSession):
    """LedgerSession bound to one open SQLAlchemy connection."""

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    def _all(self, query, params: dict) -> list:
        return self._conn.execute(query, params).all()

    def _first(self, query, params: dict):
        return self._conn.execute(query, params).first()

    def _delete(self, table: str, user_id: str, record_id: str) -> None:
        self._conn.execute(
            _delete_sql(table), {"user_id": user_id, "id": record_id}
        )

    # Accounts
    def list_accounts(self, user_id: str) -> list[Account]:
        rows = self._all(SELECT_ACCOUNTS, {"user_id": user_id})
        return [_row_to_account(row) for row in rows]

    def get_account(self, user_id: str, account_id: str) -> Account | None:
        row = self._first(
            SELECT_ACCOUNT, {"user_id": user_id, "id": account_id}
        )
        return _row_to_account(row) if row is not None else None

    def insert_account(self, user_id: str, account: Account) -> None:
        self._conn.execute(
            INSERT_ACCOUNT,
            {
                "id": account.id,
                "user_id": user_id,
                "name": account.name,
                "balance": to_storage_float(account.balance),
                "type": account.account_type,
                "commission": to_storage_float(account.commission),
            },
        )

    def update_account(self, user_id: str, account: Account) -> None:
        self._conn.execute(
            UPDATE_ACCOUNT,
            {
                "id": account.id,
                "user_id": user_id,
                "name": account.name,
                "type": account.account_type,
                "commission": to_storage_float(account.commission),
            },
        )

    def set_account_balance(
        self, user_id: str, account_id: str, balance: Decimal
    ) -> None:
        self._conn.execute(
            UPDATE_ACCOUNT_BALANCE,
            {
                "id": account_id,
                "user_id": user_id,
                "balance": to_storage_float(balance),
            },
        )

    def delete_account(self, user_id: str, account_id: str) -> None:
        self._delete("accounts", user_id, account_id)

    def count_account_references(self, user_id: str, account_id: str) -> int:
        result = self._conn.execute(
            COUNT_ACCOUNT_REFERENCES, {"user_id": user_id, "id": account_id}
        )
        return int(result.scalar_one() or 0)

    # Incomes
    def list_incomes(self, user_id: str) -> list[Income]:
        rows = self._all(SELECT_INCOMES, {"user_id": user_id})
        return [_row_to_income(row) for row in rows]

    def get_income(self, user_id: str, income_id: str) -> Income | None:
        row = self._first(SELECT_INCOME, {"user_id": user_id, "id": income_id})
        return _row_to_income(row) if row is not None else None

    def save_income(self, user_id: str, income: Income) -> None:
        self._conn.execute(UPSERT_INCOME, _income_params(user_id, income))

    def delete_income(self, user_id: str, income_id: str) -> None:
        self._delete("incomes", user_id, income_id)

    # Expenses
    def list_expenses(self, user_id: str) -> list[Expense]:
        rows = self._all(SELECT_EXPENSES, {"user_id": user_id})
        return [_row_to_expense(row) for row in rows]

    def get_expense(self, user_id: str, expense_id: str) -> Expense | None:
        row = self._first(
            SELECT_EXPENSE, {"user_id": user_id, "id": expense_id}
        )
        return _row_to_expense(row) if row is not None else None

    def save_expense(self, user_id: str, expense: Expense) -> None:
        self._conn.execute(UPSERT_EXPENSE, _expense_params(user_id, expense))

    def delete_expense(self, user_id: str, expense_id: str) -> None:
        self._delete("expenses", user_id, expense_id)

    def list_expense_categories(self, user_id: str) -> list[str]:
        rows = self._all(SELECT_EXPENSE_CATEGORIES, {"user_id": user_id})
        return [row.category for row in rows if row.category]

    # Transactions
    def list_transactions(self, user_id: str) -> list[Transaction]:
        rows = self._all(SELECT_TRANSACTIONS, {"user_id": user_id})
        return [_row_to_transaction(row) for row in rows]

    def get_transaction(
        self, user_id: str, transaction_id: str
    ) -> Transaction | None:
        row = self._first(
            SELECT_TRANSACTION, {"user_id": user_id, "id": transaction_id}
        )
        return _row_to_transaction(row) if row is not None else None

    def save_transaction(self, user_id: str, transaction: Transaction) -> None:
        self._conn.execute(
            UPSERT_TRANSACTION, _transaction_params(user_id, transaction)
        )

    def delete_transaction(self, user_id: str, transaction_id: str) -> None:
        self._delete("transactions", user_id, transaction_id)

    # Employees and payroll
    def list_employees(self, user_id: str) -> list[Employee]:
        rows = self._all(SELECT_EMPLOYEES, {"user_id": user_id})
        return [_row_to_employee(row) for row in rows]

    def get_employee(self, user_id: str, employee_id: str) -> Employee | None:
        row = self._first(
            SELECT_EMPLOYEE, {"user_id": user_id, "id": employee_id}
        )
        return _row_to_employee(row) if row is not None else None

    def save_employee(self, user_id: str, employee: Employee) -> None:
        self._conn.execute(
            UPSERT_EMPLOYEE, _employee_params(user_id, employee)
        )

    def delete_employee(self, user_id: str, employee_id: str) -> None:
        self._delete("employees", user_id, employee_id)

    def list_payroll_payments(
        self, user_id: str, employee_id: str | None = None
    ) -> list[PayrollPayment]:
        if employee_id is None:
            rows = self._all(SELECT_PAYROLL_PAYMENTS, {"user_id": user_id})
        else:
            rows = self._all(
                SELECT_EMPLOYEE_PAYROLL_PAYMENTS,
                {"user_id": user_id, "employee_id": employee_id},
            )
        return [_row_to_payroll_payment(row) for row in rows]

    def get_payroll_payment(
        self, user_id: str, payment_id: str
    ) -> PayrollPayment | None:
        row = self._first(
            SELECT_PAYROLL_PAYMENT, {"user_id": user_id, "id": payment_id}
        )
        return _row_to_payroll_payment(row) if row is not None else None

    def find_payroll_payment_by_expense(
        self, user_id: str, expense_id: str
    ) -> PayrollPayment | None:
        row = self._first(
            SELECT_PAYROLL_PAYMENT_BY_EXPENSE,
            {"user_id": user_id, "expense_id": expense_id},
        )
        return _row_to_payroll_payment(row) if row is not None else None

    def save_payroll_payment(
        self, user_id: str, payment: PayrollPayment
    ) -> None:
        self._conn.execute(
            UPSERT_PAYROLL_PAYMENT, _payroll_params(user_id, payment)
        )

    def delete_payroll_payment(self, user_id: str, payment_id: str) -> None:
        self._delete("payrollPayments", user_id, payment_id)

    # Administrative payments
    def list_admin_payments(self, user_id: str) -> list[AdminPayment]:
        rows = self._all(SELECT_ADMIN_PAYMENTS, {"user_id": user_id})
        return [_row_to_admin_payment(row) for row in rows]

    def get_admin_payment(
        self, user_id: str, payment_id: str
    ) -> AdminPayment | None:
        row = self._first(
            SELECT_ADMIN_PAYMENT, {"user_id": user_id, "id": payment_id}
        )
        return _row_to_admin_payment(row) if row is not None else None

    def save_admin_payment(self, user_id: str, payment: AdminPayment) -> None:
        self._conn.execute(
            UPSERT_ADMIN_PAYMENT, _admin_payment_params(user_id, payment)
        )

    def delete_admin_payment(self, user_id: str, payment_id: str) -> None:
        self._delete("adminPayments", user_id, payment_id)

    # Reminders
    def list_reminders(
        self, user_id: str, status: str | None = None
    ) -> list[Reminder]:
        if status is None:
            rows = self._all(SELECT_REMINDERS, {"user_id": user_id})
        else:
            rows = self._all(
                SELECT_REMINDERS_BY_STATUS,
                {"user_id": user_id, "status": status},
            )
        return [_row_to_reminder(row) for row in rows]

    def get_reminder(self, user_id: str, reminder_id: str) -> Reminder | None:
        row = self._first(
            SELECT_REMINDER, {"user_id": user_id, "id": reminder_id}
        )
        return _row_to_reminder(row) if row is not None else None

    def save_reminder(self, user_id: str, reminder: Reminder) -> None:
        self._conn.execute(
            UPSERT_REMINDER, _reminder_params(user_id, reminder)
        )

    def delete_reminder(self, user_id: str, reminder_id: str) -> None:
        self._delete("reminders", user_id, reminder_id)

    def delete_admin_payment_reminders(
        self, user_id: str, admin_payment_id: str
    ) -> None:
        self._conn.execute(
            DELETE_ADMIN_PAYMENT_REMINDERS,
            {"user_id": user_id, "admin_payment_id": admin_payment_id},
        )

    def set_reminder_status(
        self,
        user_id: str,
        reminder_id: str,
        status: str,
        resolved_at: datetime | None,
    ) -> None:
        self._conn.execute(
            UPDATE_REMINDER_STATUS,
            {
                "user_id": user_id,
                "id": reminder_id,
                "status": status,
                "resolved_at": (
                    resolved_at.isoformat() if resolved_at else None
                ),
            },
        )

    # Client debt payments
    def list_client_payments(self, user_id: str) -> list[ClientPayment]:
        rows = self._all(SELECT_CLIENT_PAYMENTS, {"user_id": user_id})
        return [_row_to_client_payment(row) for row in rows]

    def save_client_payment(
        self, user_id: str, payment: ClientPayment
    ) -> None:
        self._conn.execute(
            UPSERT_CLIENT_PAYMENT, _client_payment_params(user_id, payment)
        )


class SqlAlchemyLedgerStore(LedgerStorePort):
    """LedgerStorePort implementation over ``engine.begin()`` units."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    @contextmanager
    def unit_of_work(self) -> Iterator[SqlAlchemyLedgerSession]:
        """Yield a session whose writes commit together.

        Yields:
            SqlAlchemyLedgerSession: Session bound to the open connection.
        """
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            yield SqlAlchemyLedgerSession(conn)


__all__ = ["SqlAlchemyLedgerSession", "SqlAlchemyLedgerStore"]
