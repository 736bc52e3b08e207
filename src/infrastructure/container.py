"""Composition root for wiring infrastructure adapters."""

from dataclasses import dataclass

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_store import LedgerStorePort
from src.application.use_cases import (
    ApplyClientPaymentUseCase,
    DeleteAccountUseCase,
    DeleteAdminPaymentUseCase,
    DeleteEmployeeUseCase,
    DeleteExpenseUseCase,
    DeleteIncomeUseCase,
    DeletePayrollPaymentUseCase,
    DeleteTransactionUseCase,
    GetAccountsUseCase,
    GetAnnualSummaryUseCase,
    GetClientDebtsUseCase,
    GetDashboardSummaryUseCase,
    GetEmployeesUseCase,
    GetExpenseCategoriesUseCase,
    GetExpensesUseCase,
    GetIncomesUseCase,
    GetPayrollPaymentsUseCase,
    GetPayrollReportUseCase,
    GetReportYearsUseCase,
    GetServiceReportUseCase,
    GetTransactionsUseCase,
    ListAdminPaymentsUseCase,
    ListRemindersUseCase,
    ResolveReminderUseCase,
    SaveAccountUseCase,
    SaveAdminPaymentUseCase,
    SaveEmployeeUseCase,
    SaveExpenseUseCase,
    SaveIncomeUseCase,
    SavePayrollPaymentUseCase,
    SaveTransactionUseCase,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_store import SqlAlchemyLedgerStore
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import FinanceSettings


@dataclass(frozen=True)
class FinanceUseCases:
    """Every use case the presentation layer calls, wired to one store."""

    save_account: SaveAccountUseCase
    delete_account: DeleteAccountUseCase
    get_accounts: GetAccountsUseCase
    save_income: SaveIncomeUseCase
    delete_income: DeleteIncomeUseCase
    get_incomes: GetIncomesUseCase
    save_expense: SaveExpenseUseCase
    delete_expense: DeleteExpenseUseCase
    get_expenses: GetExpensesUseCase
    get_expense_categories: GetExpenseCategoriesUseCase
    save_transaction: SaveTransactionUseCase
    delete_transaction: DeleteTransactionUseCase
    get_transactions: GetTransactionsUseCase
    save_employee: SaveEmployeeUseCase
    delete_employee: DeleteEmployeeUseCase
    get_employees: GetEmployeesUseCase
    save_payroll_payment: SavePayrollPaymentUseCase
    delete_payroll_payment: DeletePayrollPaymentUseCase
    get_payroll_payments: GetPayrollPaymentsUseCase
    save_admin_payment: SaveAdminPaymentUseCase
    delete_admin_payment: DeleteAdminPaymentUseCase
    list_admin_payments: ListAdminPaymentsUseCase
    list_reminders: ListRemindersUseCase
    resolve_reminder: ResolveReminderUseCase
    apply_client_payment: ApplyClientPaymentUseCase
    get_payroll_report: GetPayrollReportUseCase
    get_dashboard_summary: GetDashboardSummaryUseCase
    get_annual_summary: GetAnnualSummaryUseCase
    get_service_report: GetServiceReportUseCase
    get_client_debts: GetClientDebtsUseCase
    get_report_years: GetReportYearsUseCase


def build_settings() -> FinanceSettings:
    """Return settings read from the environment."""
    return FinanceSettings.from_env()


def build_database_adapter(
    settings: FinanceSettings | None = None,
) -> DatabaseEnginePort:
    """Return a database adapter owning its own engine."""
    resolved = settings or build_settings()
    return SqlAlchemyDatabaseEngineAdapter(resolved.db_url)


def build_ledger_store(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerStorePort:
    """Return the ledger store over the given (or a new) adapter."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerStore(resolved_db)


def build_use_cases(
    db_port: DatabaseEnginePort,
    settings: FinanceSettings | None = None,
    logger=None,
) -> FinanceUseCases:
    """Wire every use case to a single ledger store.

    Args:
        db_port: Adapter whose lifecycle the caller owns.
        settings: Optional settings. Read from the environment when omitted.
        logger: Optional logger shared by every use case.

    Returns:
        FinanceUseCases: Bundle of ready-to-call use cases.
    """
    resolved = settings or build_settings()
    store = build_ledger_store(db_port)
    logger = logger or get_app_logger()
    services = resolved.due_date_services
    return FinanceUseCases(
        save_account=SaveAccountUseCase(store, logger=logger),
        delete_account=DeleteAccountUseCase(store, logger=logger),
        get_accounts=GetAccountsUseCase(store, logger=logger),
        save_income=SaveIncomeUseCase(
            store, due_date_services=services, logger=logger
        ),
        delete_income=DeleteIncomeUseCase(store, logger=logger),
        get_incomes=GetIncomesUseCase(store, logger=logger),
        save_expense=SaveExpenseUseCase(store, logger=logger),
        delete_expense=DeleteExpenseUseCase(store, logger=logger),
        get_expenses=GetExpensesUseCase(store, logger=logger),
        get_expense_categories=GetExpenseCategoriesUseCase(
            store, logger=logger
        ),
        save_transaction=SaveTransactionUseCase(store, logger=logger),
        delete_transaction=DeleteTransactionUseCase(store, logger=logger),
        get_transactions=GetTransactionsUseCase(store, logger=logger),
        save_employee=SaveEmployeeUseCase(store, logger=logger),
        delete_employee=DeleteEmployeeUseCase(store, logger=logger),
        get_employees=GetEmployeesUseCase(store, logger=logger),
        save_payroll_payment=SavePayrollPaymentUseCase(store, logger=logger),
        delete_payroll_payment=DeletePayrollPaymentUseCase(
            store, logger=logger
        ),
        get_payroll_payments=GetPayrollPaymentsUseCase(store, logger=logger),
        save_admin_payment=SaveAdminPaymentUseCase(store, logger=logger),
        delete_admin_payment=DeleteAdminPaymentUseCase(store, logger=logger),
        list_admin_payments=ListAdminPaymentsUseCase(store, logger=logger),
        list_reminders=ListRemindersUseCase(store, logger=logger),
        resolve_reminder=ResolveReminderUseCase(store, logger=logger),
        apply_client_payment=ApplyClientPaymentUseCase(
            store, due_date_services=services, logger=logger
        ),
        get_payroll_report=GetPayrollReportUseCase(store, logger=logger),
        get_dashboard_summary=GetDashboardSummaryUseCase(
            store,
            cash_account_name=resolved.cash_account_name,
            currency=resolved.currency,
            logger=logger,
        ),
        get_annual_summary=GetAnnualSummaryUseCase(store, logger=logger),
        get_service_report=GetServiceReportUseCase(store, logger=logger),
        get_client_debts=GetClientDebtsUseCase(store, logger=logger),
        get_report_years=GetReportYearsUseCase(store, logger=logger),
    )


__all__ = [
    "FinanceUseCases",
    "build_settings",
    "build_database_adapter",
    "build_ledger_store",
    "build_use_cases",
]
