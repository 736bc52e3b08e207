"""Domain package for business rules and core models."""

from .constants import ACCOUNT_TYPES, DEFAULT_DUE_DATE_SERVICES
from .errors import (
    AccountNotFoundError,
    FinanceError,
    RecordNotFoundError,
    ReferencedRecordError,
    ValidationError,
)
from .models import (
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
from .policies import is_due_date_service, requires_due_date

__all__ = [
    "ACCOUNT_TYPES",
    "DEFAULT_DUE_DATE_SERVICES",
    "AccountNotFoundError",
    "FinanceError",
    "RecordNotFoundError",
    "ReferencedRecordError",
    "ValidationError",
    "Account",
    "AdminPayment",
    "ClientPayment",
    "Employee",
    "Expense",
    "Income",
    "PayrollPayment",
    "Reminder",
    "ServiceLine",
    "Transaction",
    "is_due_date_service",
    "requires_due_date",
]
