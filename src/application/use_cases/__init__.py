"""Application use cases package."""

from .accounts import (
    DeleteAccountUseCase,
    GetAccountsUseCase,
    SaveAccountUseCase,
)
from .admin_payments import (
    DeleteAdminPaymentUseCase,
    ListAdminPaymentsUseCase,
    SaveAdminPaymentUseCase,
)
from .client_payments import (
    ApplyClientPaymentUseCase,
    GetClientPaymentsUseCase,
)
from .expenses import (
    DeleteExpenseUseCase,
    GetExpenseCategoriesUseCase,
    GetExpensesUseCase,
    SaveExpenseUseCase,
)
from .incomes import (
    DeleteIncomeUseCase,
    GetIncomeUseCase,
    GetIncomesUseCase,
    SaveIncomeUseCase,
)
from .payroll import (
    DeleteEmployeeUseCase,
    DeletePayrollPaymentUseCase,
    GetEmployeesUseCase,
    GetPayrollPaymentsUseCase,
    SaveEmployeeUseCase,
    SavePayrollPaymentUseCase,
)
from .reminders import ListRemindersUseCase, ResolveReminderUseCase
from .reports import (
    GetAnnualSummaryUseCase,
    GetClientDebtsUseCase,
    GetDashboardSummaryUseCase,
    GetPayrollReportUseCase,
    GetReportYearsUseCase,
    GetServiceReportUseCase,
)
from .results import OperationResult
from .transactions import (
    DeleteTransactionUseCase,
    GetTransactionsUseCase,
    SaveTransactionUseCase,
)

__all__ = [
    "DeleteAccountUseCase",
    "GetAccountsUseCase",
    "SaveAccountUseCase",
    "DeleteAdminPaymentUseCase",
    "ListAdminPaymentsUseCase",
    "SaveAdminPaymentUseCase",
    "ApplyClientPaymentUseCase",
    "GetClientPaymentsUseCase",
    "DeleteExpenseUseCase",
    "GetExpenseCategoriesUseCase",
    "GetExpensesUseCase",
    "SaveExpenseUseCase",
    "DeleteIncomeUseCase",
    "GetIncomeUseCase",
    "GetIncomesUseCase",
    "SaveIncomeUseCase",
    "DeleteEmployeeUseCase",
    "DeletePayrollPaymentUseCase",
    "GetEmployeesUseCase",
    "GetPayrollPaymentsUseCase",
    "SaveEmployeeUseCase",
    "SavePayrollPaymentUseCase",
    "ListRemindersUseCase",
    "ResolveReminderUseCase",
    "GetAnnualSummaryUseCase",
    "GetClientDebtsUseCase",
    "GetDashboardSummaryUseCase",
    "GetPayrollReportUseCase",
    "GetReportYearsUseCase",
    "GetServiceReportUseCase",
    "OperationResult",
    "DeleteTransactionUseCase",
    "GetTransactionsUseCase",
    "SaveTransactionUseCase",
]
