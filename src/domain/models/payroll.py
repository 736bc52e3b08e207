"""Domain models for employees and payroll payments."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class Employee:
    """Employee paid twice a month."""

    id: str
    name: str
    cedula: str
    phone: str
    bank: str
    bi_weekly_salary: Decimal
    monthly_salary: Decimal
    payment_method: str = ""


@dataclass(frozen=True)
class PayrollPayment:
    """Payroll payment debited from an account.

    ``expense_id`` points at the companion expense row written with the
    payment. ``month`` is 1-based.
    """

    id: str
    employee_id: str
    employee_name: str
    payment_type: str
    month: int
    year: int
    total_amount: Decimal
    payment_account: str
    date: date
    timestamp: datetime
    observations: str = ""
    expense_id: str | None = None


__all__ = ["Employee", "PayrollPayment"]
