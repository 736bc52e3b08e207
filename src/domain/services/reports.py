"""Pure read-side folds behind the reporting pages.

Every function takes already loaded domain records and returns report
models. Nothing here touches storage.
"""

from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Iterable

from src.domain.constants import WITHDRAWAL
from src.domain.models.accounts import Account
from src.domain.models.finance import (
    ActivityItem,
    AnnualSummary,
    ClientDebt,
    DashboardSummary,
    EmployeePayrollRow,
    MonthlyAmounts,
    PayrollReport,
    PayrollSummary,
    ServiceMonth,
    ServiceReport,
)
from src.domain.models.ledger import (
    ClientPayment,
    Expense,
    Income,
    Transaction,
)
from src.domain.models.payroll import Employee, PayrollPayment
from src.domain.services.normalization import normalize_client_name
from src.utils.decimal_utils import coerce_decimal

ZERO = Decimal("0")
MONTHS = range(1, 13)


def _sum(values: Iterable) -> Decimal:
    return sum((coerce_decimal(value) for value in values), start=ZERO)


def _companion_expense_ids(payments: Iterable[PayrollPayment]) -> set[str]:
    return {payment.expense_id for payment in payments if payment.expense_id}


def available_payroll_periods(
    payments: Iterable[PayrollPayment],
    today: date,
) -> list[tuple[int, int]]:
    """Return the (month, year) periods with payments, newest first.

    The current period is always included so the report can be opened
    before the first payment of the month.
    """
    periods = {(payment.month, payment.year) for payment in payments}
    periods.add((today.month, today.year))
    return sorted(
        periods, key=lambda period: (period[1], period[0]), reverse=True
    )


def available_years(dates: Iterable[date], today: date) -> list[int]:
    """Return the years in ``dates`` plus the current one, newest first."""
    years = {value.year for value in dates}
    years.add(today.year)
    return sorted(years, reverse=True)


def compute_payroll_report(
    employees: Iterable[Employee],
    payments: Iterable[PayrollPayment],
    month: int,
    year: int,
    today: date,
) -> PayrollReport:
    """Compute the payroll report for one period.

    Args:
        employees: Every employee of the user.
        payments: Every payroll payment of the user.
        month: 1-based month of the period.
        year: Year of the period.
        today: Current date, used for the list of available periods.

    Returns:
        PayrollReport: One row per employee plus period totals.
    """
    payments = list(payments)
    in_period = [
        payment
        for payment in payments
        if payment.month == month and payment.year == year
    ]
    by_employee: dict[str, list[PayrollPayment]] = defaultdict(list)
    for payment in in_period:
        by_employee[payment.employee_id].append(payment)

    rows: list[EmployeePayrollRow] = []
    for employee in sorted(employees, key=lambda item: item.name.lower()):
        employee_payments = sorted(
            by_employee.get(employee.id, []), key=lambda item: item.date
        )
        total_paid = _sum(item.total_amount for item in employee_payments)
        monthly_salary = coerce_decimal(employee.monthly_salary)
        rows.append(
            EmployeePayrollRow(
                employee=employee,
                payments=employee_payments,
                total_paid=total_paid,
                bonus=max(ZERO, total_paid - monthly_salary),
            )
        )

    total_payroll = _sum(row.employee.monthly_salary for row in rows)
    total_paid = _sum(payment.total_amount for payment in in_period)
    summary = PayrollSummary(
        total_payroll=total_payroll,
        total_paid=total_paid,
        total_pending=total_payroll - total_paid,
        total_bonuses=_sum(row.bonus for row in rows),
    )
    return PayrollReport(
        month=month,
        year=year,
        rows=rows,
        summary=summary,
        available_periods=available_payroll_periods(payments, today),
    )


def _activity_items(
    today: date,
    incomes: Iterable[Income],
    expenses: Iterable[Expense],
    payments: Iterable[PayrollPayment],
    transactions: Iterable[Transaction],
) -> list[ActivityItem]:
    payments = list(payments)
    companion_ids = _companion_expense_ids(payments)
    items: list[ActivityItem] = []
    for income in incomes:
        if income.date == today:
            items.append(
                ActivityItem(
                    id=income.id,
                    kind="income",
                    description=f"Income from {income.client}",
                    amount=coerce_decimal(income.amount_with_commission),
                    is_positive=True,
                    timestamp=income.timestamp,
                )
            )
    for expense in expenses:
        if expense.date == today and expense.id not in companion_ids:
            items.append(
                ActivityItem(
                    id=expense.id,
                    kind="expense",
                    description=expense.category,
                    amount=coerce_decimal(expense.amount),
                    is_positive=False,
                    timestamp=expense.timestamp,
                )
            )
    for payment in payments:
        if payment.date == today:
            items.append(
                ActivityItem(
                    id=payment.id,
                    kind="payroll",
                    description=f"Payroll: {payment.employee_name}",
                    amount=coerce_decimal(payment.total_amount),
                    is_positive=False,
                    timestamp=payment.timestamp,
                )
            )
    for transaction in transactions:
        if transaction.date == today:
            is_withdrawal = transaction.transaction_type == WITHDRAWAL
            items.append(
                ActivityItem(
                    id=transaction.id,
                    kind="transaction",
                    description="Withdrawal" if is_withdrawal else "Transfer",
                    amount=coerce_decimal(transaction.amount),
                    is_positive=False,
                    timestamp=transaction.timestamp,
                )
            )
    return sorted(items, key=lambda item: item.timestamp, reverse=True)


def compute_dashboard_summary(
    today: date,
    accounts: Iterable[Account],
    incomes: Iterable[Income],
    expenses: Iterable[Expense],
    payments: Iterable[PayrollPayment],
    transactions: Iterable[Transaction],
    cash_account_name: str,
    currency_code: str = "USD",
) -> DashboardSummary:
    """Compute current-month income, expense and today's activity.

    Expenses include the companion rows of payroll payments, so payroll is
    counted once in the month's expense.

    Args:
        today: Reference date.
        accounts: Every account of the user.
        incomes: Every income of the user.
        expenses: Every expense of the user.
        payments: Every payroll payment of the user.
        transactions: Every transaction of the user.
        cash_account_name: Name of the account shown as cash on hand.
        currency_code: Currency shown next to the amounts.

    Returns:
        DashboardSummary: Figures for the dashboard cards and feed.
    """
    incomes = list(incomes)
    expenses = list(expenses)

    def in_month(value: date) -> bool:
        return value.year == today.year and value.month == today.month

    income_total = _sum(
        income.amount_with_commission
        for income in incomes
        if in_month(income.date)
    )
    expense_total = _sum(
        expense.amount for expense in expenses if in_month(expense.date)
    )
    cash_on_hand = _sum(
        account.balance
        for account in accounts
        if account.name == cash_account_name
    )
    return DashboardSummary(
        month=today.month,
        year=today.year,
        income=income_total,
        expense=expense_total,
        cash_on_hand=cash_on_hand,
        currency_code=currency_code,
        today_activity=_activity_items(
            today, incomes, expenses, payments, transactions
        ),
    )


def compute_annual_summary(
    year: int,
    incomes: Iterable[Income],
    expenses: Iterable[Expense],
    payments: Iterable[PayrollPayment],
    transactions: Iterable[Transaction],
) -> AnnualSummary:
    """Compute the yearly totals and the monthly breakdown.

    Companion expenses written by payroll payments are left out of
    ``total_expense`` because ``total_payroll`` already counts them. The
    monthly expense column adds payroll back in.
    """
    payments = list(payments)
    companion_ids = _companion_expense_ids(payments)
    year_incomes = [income for income in incomes if income.date.year == year]
    year_expenses = [
        expense
        for expense in expenses
        if expense.date.year == year and expense.id not in companion_ids
    ]
    year_payments = [
        payment for payment in payments if payment.date.year == year
    ]
    withdrawals = [
        transaction
        for transaction in transactions
        if transaction.date.year == year
        and transaction.transaction_type == WITHDRAWAL
    ]

    monthly_income: dict[int, Decimal] = defaultdict(lambda: ZERO)
    monthly_expense: dict[int, Decimal] = defaultdict(lambda: ZERO)
    for income in year_incomes:
        monthly_income[income.date.month] += coerce_decimal(
            income.amount_with_commission
        )
    for expense in year_expenses:
        monthly_expense[expense.date.month] += coerce_decimal(expense.amount)
    for payment in year_payments:
        monthly_expense[payment.date.month] += coerce_decimal(
            payment.total_amount
        )

    return AnnualSummary(
        year=year,
        total_income=_sum(
            income.amount_with_commission for income in year_incomes
        ),
        total_expense=_sum(expense.amount for expense in year_expenses),
        total_payroll=_sum(payment.total_amount for payment in year_payments),
        total_withdrawals=_sum(item.amount for item in withdrawals),
        months=[
            MonthlyAmounts(
                month=month,
                income=monthly_income[month],
                expense=monthly_expense[month],
            )
            for month in MONTHS
        ],
    )


def compute_service_report(
    year: int,
    incomes: Iterable[Income],
) -> list[ServiceReport]:
    """Return units and income per service for a year, best sellers first."""
    units: dict[str, dict[int, int]] = defaultdict(lambda: defaultdict(int))
    amounts: dict[str, dict[int, Decimal]] = defaultdict(
        lambda: defaultdict(lambda: ZERO)
    )
    for income in incomes:
        if income.date.year != year:
            continue
        for line in income.services_details:
            units[line.name][income.date.month] += 1
            amounts[line.name][income.date.month] += coerce_decimal(
                line.amount
            )

    reports = []
    for name in units:
        months = [
            ServiceMonth(
                month=month,
                units=units[name][month],
                income=amounts[name][month],
            )
            for month in MONTHS
        ]
        reports.append(
            ServiceReport(
                service_name=name,
                total_units=sum(item.units for item in months),
                total_income=_sum(item.income for item in months),
                months=months,
            )
        )
    return sorted(
        reports, key=lambda report: report.total_income, reverse=True
    )


def compute_client_debts(
    incomes: Iterable[Income],
    client_payments: Iterable[ClientPayment] = (),
) -> list[ClientDebt]:
    """Group incomes by trimmed client name, largest debt first.

    Args:
        incomes: Every income of the user.
        client_payments: Recorded debt payments, attached to their client.

    Returns:
        list[ClientDebt]: One row per client.
    """
    counts: dict[str, int] = defaultdict(int)
    contracted: dict[str, Decimal] = defaultdict(lambda: ZERO)
    paid: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for income in incomes:
        name = normalize_client_name(income.client)
        counts[name] += 1
        contracted[name] += coerce_decimal(income.total_contracted_amount)
        paid[name] += coerce_decimal(income.amount_paid)

    payments_by_client: dict[str, list[ClientPayment]] = defaultdict(list)
    for payment in client_payments:
        payments_by_client[normalize_client_name(payment.client_name)].append(
            payment
        )

    debts = [
        ClientDebt(
            client_name=name,
            service_count=counts[name],
            total_contracted=contracted[name],
            total_paid=paid[name],
            payments=sorted(
                payments_by_client.get(name, []), key=lambda item: item.date
            ),
        )
        for name in counts
    ]
    return sorted(debts, key=lambda debt: debt.total_debt, reverse=True)


__all__ = [
    "available_payroll_periods",
    "available_years",
    "compute_payroll_report",
    "compute_dashboard_summary",
    "compute_annual_summary",
    "compute_service_report",
    "compute_client_debts",
]
