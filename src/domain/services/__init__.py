"""Domain services package."""

from .balances import (
    BalanceDeltas,
    combine_deltas,
    expense_deltas,
    income_deltas,
    invert_deltas,
    net_delta,
    non_zero_deltas,
    payroll_deltas,
    transaction_deltas,
)
from .commission import IncomeFigures, compute_income_figures
from .debts import (
    DebtAllocation,
    allocate_client_payment,
    outstanding_amount,
    outstanding_incomes,
)
from .normalization import (
    normalize_client_name,
    normalize_optional_id,
    normalize_service_name,
    normalize_text,
)
from .reminders import build_admin_payment_reminder, build_income_reminder
from .reports import (
    available_payroll_periods,
    available_years,
    compute_annual_summary,
    compute_client_debts,
    compute_dashboard_summary,
    compute_payroll_report,
    compute_service_report,
)
from .validation import ensure_valid

__all__ = [
    "BalanceDeltas",
    "combine_deltas",
    "expense_deltas",
    "income_deltas",
    "invert_deltas",
    "net_delta",
    "non_zero_deltas",
    "payroll_deltas",
    "transaction_deltas",
    "IncomeFigures",
    "compute_income_figures",
    "DebtAllocation",
    "allocate_client_payment",
    "outstanding_amount",
    "outstanding_incomes",
    "normalize_client_name",
    "normalize_optional_id",
    "normalize_service_name",
    "normalize_text",
    "build_admin_payment_reminder",
    "build_income_reminder",
    "available_payroll_periods",
    "available_years",
    "compute_annual_summary",
    "compute_client_debts",
    "compute_dashboard_summary",
    "compute_payroll_report",
    "compute_service_report",
    "ensure_valid",
]
