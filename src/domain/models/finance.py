"""Domain models for report aggregates."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from src.domain.models.ledger import ClientPayment
from src.domain.models.payroll import Employee, PayrollPayment


@dataclass(frozen=True)
class EmployeePayrollRow:
    """Payments made to one employee during a payroll period."""

    employee: Employee
    payments: list[PayrollPayment]
    total_paid: Decimal
    bonus: Decimal


@dataclass(frozen=True)
class PayrollSummary:
    """Totals for a payroll period.

    Attributes:
        total_payroll: Sum of monthly salaries.
        total_paid: Sum of payments made in the period.
        total_pending: total_payroll minus total_paid.
        total_bonuses: Sum of max(0, paid - monthly salary) per employee.
    """

    total_payroll: Decimal
    total_paid: Decimal
    total_pending: Decimal
    total_bonuses: Decimal


@dataclass(frozen=True)
class PayrollReport:
    """Payroll report for a (month, year) period."""

    month: int
    year: int
    rows: list[EmployeePayrollRow]
    summary: PayrollSummary
    available_periods: list[tuple[int, int]] = field(default_factory=list)


@dataclass(frozen=True)
class MonthlyAmounts:
    """Income, expense and utility for one calendar month."""

    month: int
    income: Decimal
    expense: Decimal

    @property
    def utility(self) -> Decimal:
        """Return income minus expense."""
        return self.income - self.expense


@dataclass(frozen=True)
class AnnualSummary:
    """Yearly totals with a month-by-month breakdown."""

    year: int
    total_income: Decimal
    total_expense: Decimal
    total_payroll: Decimal
    total_withdrawals: Decimal
    months: list[MonthlyAmounts]

    @property
    def net_utility(self) -> Decimal:
        return self.total_income - self.total_expense - self.total_payroll

    @property
    def final_cash_flow(self) -> Decimal:
        return self.net_utility - self.total_withdrawals


@dataclass(frozen=True)
class ServiceMonth:
    month: int
    units: int
    income: Decimal


@dataclass(frozen=True)
class ServiceReport:
    """Units sold and income earned for one service over a year."""

    service_name: str
    total_units: int
    total_income: Decimal
    months: list[ServiceMonth]


@dataclass(frozen=True)
class ClientDebt:
    """Outstanding balance of a client across their incomes."""

    client_name: str
    service_count: int
    total_contracted: Decimal
    total_paid: Decimal
    payments: list[ClientPayment] = field(default_factory=list)

    @property
    def total_debt(self) -> Decimal:
        return self.total_contracted - self.total_paid


@dataclass(frozen=True)
class ActivityItem:
    """Single line of the dashboard's activity feed."""

    id: str
    kind: str
    description: str
    amount: Decimal
    is_positive: bool
    timestamp: datetime


@dataclass(frozen=True)
class DashboardSummary:
    """Current-month figures shown on the dashboard."""

    month: int
    year: int
    income: Decimal
    expense: Decimal
    cash_on_hand: Decimal
    currency_code: str
    today_activity: list[ActivityItem] = field(default_factory=list)

    @property
    def utility(self) -> Decimal:
        return self.income - self.expense


__all__ = [
    "EmployeePayrollRow",
    "PayrollSummary",
    "PayrollReport",
    "MonthlyAmounts",
    "AnnualSummary",
    "ServiceMonth",
    "ServiceReport",
    "ClientDebt",
    "ActivityItem",
    "DashboardSummary",
]
