"""Read use cases behind the reporting pages.

Each use case loads what its fold needs in one unit of work and delegates
the arithmetic to ``src.domain.services.reports``. A storage error yields
the report of an empty ledger.
"""

from datetime import date
from itertools import chain

from src.application.use_cases.results import LedgerQueryUseCase
from src.domain.constants import DEFAULT_CASH_ACCOUNT_NAME, DEFAULT_CURRENCY
from src.domain.models import (
    AnnualSummary,
    ClientDebt,
    DashboardSummary,
    PayrollReport,
    ServiceReport,
)
from src.domain.services.reports import (
    available_years,
    compute_annual_summary,
    compute_client_debts,
    compute_dashboard_summary,
    compute_payroll_report,
    compute_service_report,
)


class GetPayrollReportUseCase(LedgerQueryUseCase):
    """Payroll totals per employee for a (month, year) period."""

    def execute(
        self,
        user_id: str,
        month: int,
        year: int,
        today: date | None = None,
    ) -> PayrollReport:
        """Build the payroll report.

        Args:
            user_id: Owner of the payroll.
            month: 1-based month.
            year: Calendar year.
            today: Reference date for the period list. Defaults to today.

        Returns:
            PayrollReport: Rows, summary and available periods.
        """
        today = today or date.today()
        return self._read(
            lambda session: compute_payroll_report(
                session.list_employees(user_id),
                session.list_payroll_payments(user_id),
                month,
                year,
                today,
            ),
            lambda: compute_payroll_report([], [], month, year, today),
        )


class GetDashboardSummaryUseCase(LedgerQueryUseCase):
    """Current-month figures and today's activity."""

    def __init__(
        self,
        store,
        cash_account_name: str = DEFAULT_CASH_ACCOUNT_NAME,
        currency: str = DEFAULT_CURRENCY,
        logger=None,
    ) -> None:
        super().__init__(store, logger=logger)
        self._cash_account_name = cash_account_name
        self._currency = currency

    def execute(
        self,
        user_id: str,
        today: date | None = None,
    ) -> DashboardSummary:
        today = today or date.today()

        def build(accounts, incomes, expenses, payments, transactions):
            return compute_dashboard_summary(
                today,
                accounts,
                incomes,
                expenses,
                payments,
                transactions,
                cash_account_name=self._cash_account_name,
                currency_code=self._currency,
            )

        return self._read(
            lambda session: build(
                session.list_accounts(user_id),
                session.list_incomes(user_id),
                session.list_expenses(user_id),
                session.list_payroll_payments(user_id),
                session.list_transactions(user_id),
            ),
            lambda: build([], [], [], [], []),
        )


class GetAnnualSummaryUseCase(LedgerQueryUseCase):
    """Yearly totals with the 12-month breakdown."""

    def execute(self, user_id: str, year: int) -> AnnualSummary:
        return self._read(
            lambda session: compute_annual_summary(
                year,
                session.list_incomes(user_id),
                session.list_expenses(user_id),
                session.list_payroll_payments(user_id),
                session.list_transactions(user_id),
            ),
            lambda: compute_annual_summary(year, [], [], [], []),
        )


class GetServiceReportUseCase(LedgerQueryUseCase):
    """Units and income per service for a year."""

    def execute(self, user_id: str, year: int) -> list[ServiceReport]:
        return self._read(
            lambda session: compute_service_report(
                year, session.list_incomes(user_id)
            ),
            list,
        )


class GetClientDebtsUseCase(LedgerQueryUseCase):
    """Outstanding balance per client with their recorded payments."""

    def execute(self, user_id: str) -> list[ClientDebt]:
        return self._read(
            lambda session: compute_client_debts(
                session.list_incomes(user_id),
                session.list_client_payments(user_id),
            ),
            list,
        )


class GetReportYearsUseCase(LedgerQueryUseCase):
    """Years with ledger activity, newest first, for the year selectors."""

    def execute(self, user_id: str, today: date | None = None) -> list[int]:
        today = today or date.today()

        def years(session) -> list[int]:
            records = chain(
                session.list_incomes(user_id),
                session.list_expenses(user_id),
                session.list_payroll_payments(user_id),
                session.list_transactions(user_id),
            )
            return available_years((record.date for record in records), today)

        return self._read(years, lambda: [today.year])


__all__ = [
    "GetPayrollReportUseCase",
    "GetDashboardSummaryUseCase",
    "GetAnnualSummaryUseCase",
    "GetServiceReportUseCase",
    "GetClientDebtsUseCase",
    "GetReportYearsUseCase",
]
