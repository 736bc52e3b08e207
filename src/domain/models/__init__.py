"""Domain models package."""

from .accounts import Account
from .admin import AdminPayment, Reminder
from .drafts import (
    AccountDraft,
    AdminPaymentDraft,
    ClientPaymentDraft,
    EmployeeDraft,
    ExpenseDraft,
    IncomeDraft,
    PayrollPaymentDraft,
    TransactionDraft,
)
from .finance import (
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
from .ledger import ClientPayment, Expense, Income, ServiceLine, Transaction
from .payroll import Employee, PayrollPayment

__all__ = [
    "Account",
    "AdminPayment",
    "Reminder",
    "AccountDraft",
    "AdminPaymentDraft",
    "ClientPaymentDraft",
    "EmployeeDraft",
    "ExpenseDraft",
    "IncomeDraft",
    "PayrollPaymentDraft",
    "TransactionDraft",
    "ActivityItem",
    "AnnualSummary",
    "ClientDebt",
    "DashboardSummary",
    "EmployeePayrollRow",
    "MonthlyAmounts",
    "PayrollReport",
    "PayrollSummary",
    "ServiceMonth",
    "ServiceReport",
    "ClientPayment",
    "Expense",
    "Income",
    "ServiceLine",
    "Transaction",
    "Employee",
    "PayrollPayment",
]
