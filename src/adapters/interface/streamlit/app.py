"""Streamlit entry point of the finance tracker."""

from collections.abc import Callable, Sequence
from datetime import date
from decimal import Decimal

import streamlit as st

from src.adapters.interface.streamlit.charts import (
    activity_rows,
    build_annual_figure,
    build_monthly_bar_chart,
    build_service_income_chart,
    format_currency,
    month_label,
    prepare_monthly_chart_data,
    prepare_service_chart_data,
)
from src.application.use_cases.results import OperationResult
from src.domain.constants import (
    ACCOUNT_TRANSFER,
    ACCOUNT_TYPES,
    ADMIN_PAYMENT_CATEGORIES,
    ADMIN_PAYMENT_FREQUENCIES,
    ALL_CATEGORIES,
    AVAILABLE_SERVICES,
    BENEFICIARY_ACCOUNT_TYPES,
    EXPENSE_TYPES,
    INCOME_STATUSES,
    PAYROLL_PAYMENT_TYPES,
    REMINDER_PENDING,
    REMINDER_RESOLVED,
    TRANSACTION_TYPES,
    WITHDRAWAL,
)
from src.domain.models import (
    Account,
    AccountDraft,
    AdminPayment,
    AdminPaymentDraft,
    AnnualSummary,
    ClientDebt,
    ClientPaymentDraft,
    DashboardSummary,
    Employee,
    EmployeeDraft,
    Expense,
    ExpenseDraft,
    Income,
    IncomeDraft,
    PayrollPayment,
    PayrollPaymentDraft,
    PayrollReport,
    Reminder,
    ServiceLine,
    ServiceReport,
    Transaction,
    TransactionDraft,
)
from src.domain.policies import requires_due_date
from src.infrastructure.container import (
    FinanceUseCases,
    build_database_adapter,
    build_settings,
    build_use_cases,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.schema import ensure_schema, seed_user
from src.infrastructure.settings import FinanceSettings

NEW_RECORD = "New"
PAGES = (
    "Dashboard",
    "Accounts",
    "Incomes",
    "Expenses",
    "Transactions",
    "Payroll",
    "Payroll Report",
    "Admin Payments",
    "Reminders",
    "Annual Summary",
    "Service Report",
    "Client Debts",
)


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that the numpy/pandas builds Altair relies on are usable."""
    try:
        import numpy
        import pandas
    except ImportError as exc:
        return False, f"Altair dependencies missing: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "numpy is installed but incomplete (no ndarray)."
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas is installed but incomplete (no Timestamp)."
    return True, None


def _build_runtime() -> tuple[FinanceSettings, FinanceUseCases]:
    """Create the adapter, prepare the schema and wire the use cases."""
    settings = build_settings()
    adapter = build_database_adapter(settings)
    engine = adapter.get_engine()
    ensure_schema(engine, logger=get_app_logger())
    seed_user(engine, settings.user_id)
    return settings, build_use_cases(adapter, settings=settings)


@st.cache_resource(show_spinner=False)
def _get_runtime() -> tuple[FinanceSettings, FinanceUseCases]:
    """Process-wide runtime; Streamlit owns the adapter's lifecycle."""
    return _build_runtime()


def _use_cases() -> FinanceUseCases:
    return _get_runtime()[1]


@st.cache_data(show_spinner=False)
def _load_accounts(user_id: str) -> list[Account]:
    return _use_cases().get_accounts.execute(user_id)


@st.cache_data(show_spinner=False)
def _load_incomes(user_id: str) -> list[Income]:
    return _use_cases().get_incomes.execute(user_id)


@st.cache_data(show_spinner=False)
def _load_expenses(user_id: str) -> list[Expense]:
    return _use_cases().get_expenses.execute(user_id)


@st.cache_data(show_spinner=False)
def _load_expense_categories(user_id: str) -> list[str]:
    return _use_cases().get_expense_categories.execute(user_id)


@st.cache_data(show_spinner=False)
def _load_transactions(user_id: str) -> list[Transaction]:
    return _use_cases().get_transactions.execute(user_id)


@st.cache_data(show_spinner=False)
def _load_employees(user_id: str) -> list[Employee]:
    return _use_cases().get_employees.execute(user_id)


@st.cache_data(show_spinner=False)
def _load_payroll_payments(user_id: str) -> list[PayrollPayment]:
    return _use_cases().get_payroll_payments.execute(user_id)


@st.cache_data(show_spinner=False)
def _load_admin_payments(
    user_id: str,
    category: str,
    search: str,
) -> list[AdminPayment]:
    return _use_cases().list_admin_payments.execute(
        user_id, category=category, search=search
    )


@st.cache_data(show_spinner=False)
def _load_reminders(user_id: str, status: str | None) -> list[Reminder]:
    return _use_cases().list_reminders.execute(user_id, status=status)


@st.cache_data(show_spinner=False)
def _load_dashboard(user_id: str, today: date) -> DashboardSummary:
    return _use_cases().get_dashboard_summary.execute(user_id, today=today)


@st.cache_data(show_spinner=False)
def _load_payroll_report(
    user_id: str,
    month: int,
    year: int,
    today: date,
) -> PayrollReport:
    return _use_cases().get_payroll_report.execute(
        user_id, month, year, today=today
    )


@st.cache_data(show_spinner=False)
def _load_annual_summary(user_id: str, year: int) -> AnnualSummary:
    return _use_cases().get_annual_summary.execute(user_id, year)


@st.cache_data(show_spinner=False)
def _load_service_report(user_id: str, year: int) -> list[ServiceReport]:
    return _use_cases().get_service_report.execute(user_id, year)


@st.cache_data(show_spinner=False)
def _load_client_debts(user_id: str) -> list[ClientDebt]:
    return _use_cases().get_client_debts.execute(user_id)


@st.cache_data(show_spinner=False)
def _load_report_years(user_id: str, today: date) -> list[int]:
    return _use_cases().get_report_years.execute(user_id, today=today)


def _show_result(result: OperationResult) -> None:
    """Report a mutation and drop cached reads after a successful one."""
    get_usage_logger().info(
        f"mutation success={result.success} message={result.message}"
    )
    if result.success:
        st.cache_data.clear()
        st.success(result.message)
    else:
        st.error(result.message)


def _to_decimal(value) -> Decimal:
    return Decimal(str(value or 0))


def _account_names(accounts: Sequence[Account]) -> dict[str, str]:
    return {account.id: account.name for account in accounts}


def _pick_record(
    label: str,
    records: Sequence,
    describe: Callable[[object], str],
    key: str,
):
    """Let the user choose a record to edit, or ``New``."""
    options = [NEW_RECORD, *[record.id for record in records]]
    by_id = {record.id: record for record in records}
    choice = st.selectbox(
        label,
        options,
        format_func=lambda value: (
            value if value == NEW_RECORD else describe(by_id[value])
        ),
        key=key,
    )
    return by_id.get(choice)


def _account_select(
    label: str,
    accounts: Sequence[Account],
    current: str | None,
    key: str,
) -> str | None:
    names = _account_names(accounts)
    options = list(names)
    if not options:
        st.warning("Create an account first.")
        return None
    index = options.index(current) if current in options else 0
    return st.selectbox(
        label,
        options,
        index=index,
        format_func=lambda value: names.get(value, value),
        key=key,
    )


def _render_delete_button(
    label: str,
    record_id: str,
    delete: Callable[[str], OperationResult],
    key: str,
) -> None:
    if st.button(label, key=key, type="secondary"):
        _show_result(delete(record_id))


def _render_dashboard(settings: FinanceSettings) -> None:
    today = date.today()
    summary = _load_dashboard(settings.user_id, today)
    currency = summary.currency_code
    st.subheader(f"{month_label(summary.month)} {summary.year}")
    income_col, expense_col, utility_col, cash_col = st.columns(4)
    income_col.metric("Income", format_currency(summary.income, currency))
    expense_col.metric("Expense", format_currency(summary.expense, currency))
    utility_col.metric("Utility", format_currency(summary.utility, currency))
    cash_col.metric(
        settings.cash_account_name,
        format_currency(summary.cash_on_hand, currency),
    )

    annual = _load_annual_summary(settings.user_id, today.year)
    st.altair_chart(
        build_monthly_bar_chart(prepare_monthly_chart_data(annual)),
        width="stretch",
    )

    st.subheader("Today's activity")
    if not summary.today_activity:
        st.info("No activity recorded today.")
        return
    st.dataframe(
        activity_rows(summary.today_activity, currency),
        width="stretch",
        hide_index=True,
    )


def _render_accounts(settings: FinanceSettings) -> None:
    use_cases = _use_cases()
    accounts = _load_accounts(settings.user_id)
    st.dataframe(
        [
            {
                "Name": account.name,
                "Type": account.account_type or "",
                "Commission": f"{account.commission * 100:.2f}%",
                "Balance": format_currency(account.balance, settings.currency),
            }
            for account in accounts
        ],
        width="stretch",
        hide_index=True,
    )

    selected = _pick_record(
        "Account", accounts, lambda item: item.name, key="account_pick"
    )
    with st.form("account_form"):
        name = st.text_input("Name", value=selected.name if selected else "")
        account_type = st.selectbox(
            "Type",
            ACCOUNT_TYPES,
            index=(
                ACCOUNT_TYPES.index(selected.account_type)
                if selected and selected.account_type in ACCOUNT_TYPES
                else 0
            ),
        )
        commission_percent = st.number_input(
            "Commission (%)",
            min_value=0.0,
            max_value=100.0,
            value=float(selected.commission * 100) if selected else 0.0,
        )
        balance = st.number_input(
            "Initial balance",
            value=0.0,
            disabled=selected is not None,
        )
        submitted = st.form_submit_button("Save account")
    if submitted:
        draft = AccountDraft(
            name=name,
            commission=_to_decimal(commission_percent) / Decimal("100"),
            account_type=account_type,
            balance=_to_decimal(balance),
        )
        _show_result(
            use_cases.save_account.execute(
                settings.user_id,
                draft,
                account_id=selected.id if selected else None,
            )
        )
    if selected:
        _render_delete_button(
            "Delete account",
            selected.id,
            lambda record_id: use_cases.delete_account.execute(
                settings.user_id, record_id
            ),
            key="account_delete",
        )


def _render_incomes(settings: FinanceSettings) -> None:
    use_cases = _use_cases()
    accounts = _load_accounts(settings.user_id)
    incomes = _load_incomes(settings.user_id)
    names = _account_names(accounts)
    st.dataframe(
        [
            {
                "Date": income.date.isoformat(),
                "Client": income.client,
                "Services": ", ".join(income.services),
                "Contracted": float(income.total_contracted_amount),
                "Paid": float(income.amount_paid),
                "Net": float(income.amount_with_commission),
                "Pending": float(income.remaining_balance),
                "Account": names.get(
                    income.payment_account, income.payment_account
                ),
                "Status": income.status,
            }
            for income in incomes
        ],
        width="stretch",
        hide_index=True,
    )

    selected = _pick_record(
        "Income",
        incomes,
        lambda item: f"{item.date.isoformat()} · {item.client}",
        key="income_pick",
    )
    previous_amounts = (
        {line.name: line.amount for line in selected.services_details}
        if selected
        else {}
    )
    services = st.multiselect(
        "Services",
        sorted(set(AVAILABLE_SERVICES) | set(previous_amounts)),
        default=list(previous_amounts),
    )
    needs_due_date = requires_due_date(services, settings.due_date_services)
    with st.form("income_form"):
        income_date = st.date_input(
            "Date", value=selected.date if selected else date.today()
        )
        client = st.text_input(
            "Client", value=selected.client if selected else ""
        )
        brand_name = st.text_input(
            "Brand", value=selected.brand_name if selected else ""
        )
        country = st.text_input(
            "Country", value=selected.country if selected else ""
        )
        service_amounts = {
            service: st.number_input(
                f"Amount for {service}",
                min_value=0.0,
                value=float(previous_amounts.get(service, 0)),
                key=f"service_amount_{service}",
            )
            for service in services
        }
        amount_paid = st.number_input(
            "Amount paid",
            min_value=0.0,
            value=float(selected.amount_paid) if selected else 0.0,
        )
        payment_account = _account_select(
            "Payment account",
            accounts,
            selected.payment_account if selected else None,
            key="income_account",
        )
        responsible = st.text_input(
            "Responsible", value=selected.responsible if selected else ""
        )
        due_date = None
        if needs_due_date:
            due_date = st.date_input(
                "Due date",
                value=(
                    selected.due_date
                    if selected and selected.due_date
                    else date.today()
                ),
            )
        status = st.selectbox(
            "Status",
            INCOME_STATUSES,
            index=(
                INCOME_STATUSES.index(selected.status)
                if selected and selected.status in INCOME_STATUSES
                else 0
            ),
        )
        observations = st.text_area(
            "Observations", value=selected.observations if selected else ""
        )
        submitted = st.form_submit_button("Save income")
    if submitted:
        draft = IncomeDraft(
            date=income_date,
            client=client,
            country=country,
            services_details=[
                ServiceLine(name=service, amount=_to_decimal(amount))
                for service, amount in service_amounts.items()
            ],
            amount_paid=_to_decimal(amount_paid),
            payment_account=payment_account or "",
            responsible=responsible,
            brand_name=brand_name,
            observations=observations,
            due_date=due_date,
            status=status,
        )
        _show_result(
            use_cases.save_income.execute(
                settings.user_id,
                draft,
                income_id=selected.id if selected else None,
            )
        )
    if selected:
        _render_delete_button(
            "Delete income",
            selected.id,
            lambda record_id: use_cases.delete_income.execute(
                settings.user_id, record_id
            ),
            key="income_delete",
        )


def _render_expenses(settings: FinanceSettings) -> None:
    use_cases = _use_cases()
    accounts = _load_accounts(settings.user_id)
    expenses = _load_expenses(settings.user_id)
    names = _account_names(accounts)
    st.dataframe(
        [
            {
                "Date": expense.date.isoformat(),
                "Type": expense.expense_type,
                "Category": expense.category,
                "Amount": float(expense.amount),
                "Account": names.get(
                    expense.payment_account, expense.payment_account
                ),
                "Responsible": expense.responsible,
            }
            for expense in expenses
        ],
        width="stretch",
        hide_index=True,
    )

    selected = _pick_record(
        "Expense",
        expenses,
        lambda item: f"{item.date.isoformat()} · {item.category}",
        key="expense_pick",
    )
    categories = _load_expense_categories(settings.user_id)
    if categories:
        st.caption("Known categories: " + ", ".join(categories))
    with st.form("expense_form"):
        expense_date = st.date_input(
            "Date", value=selected.date if selected else date.today()
        )
        expense_type = st.selectbox(
            "Type",
            EXPENSE_TYPES,
            index=(
                EXPENSE_TYPES.index(selected.expense_type)
                if selected and selected.expense_type in EXPENSE_TYPES
                else 0
            ),
        )
        category = st.text_input(
            "Category", value=selected.category if selected else ""
        )
        amount = st.number_input(
            "Amount",
            min_value=0.0,
            value=float(selected.amount) if selected else 0.0,
        )
        payment_account = _account_select(
            "Payment account",
            accounts,
            selected.payment_account if selected else None,
            key="expense_account",
        )
        responsible = st.text_input(
            "Responsible", value=selected.responsible if selected else ""
        )
        observations = st.text_area(
            "Observations", value=selected.observations if selected else ""
        )
        submitted = st.form_submit_button("Save expense")
    if submitted:
        draft = ExpenseDraft(
            date=expense_date,
            expense_type=expense_type,
            category=category,
            amount=_to_decimal(amount),
            payment_account=payment_account or "",
            responsible=responsible,
            observations=observations,
        )
        _show_result(
            use_cases.save_expense.execute(
                settings.user_id,
                draft,
                expense_id=selected.id if selected else None,
            )
        )
    if selected:
        _render_delete_button(
            "Delete expense",
            selected.id,
            lambda record_id: use_cases.delete_expense.execute(
                settings.user_id, record_id
            ),
            key="expense_delete",
        )


def _render_transactions(settings: FinanceSettings) -> None:
    use_cases = _use_cases()
    accounts = _load_accounts(settings.user_id)
    transactions = _load_transactions(settings.user_id)
    names = _account_names(accounts)

    def describe(item: Transaction) -> str:
        if item.transaction_type == WITHDRAWAL:
            return f"Withdrawal from {names.get(item.account, item.account)}"
        return (
            f"{names.get(item.source_account, item.source_account)} → "
            f"{names.get(item.destination_account, item.destination_account)}"
        )

    st.dataframe(
        [
            {
                "Date": item.date.isoformat(),
                "Movement": describe(item),
                "Amount": float(item.amount),
                "Observations": item.observations,
            }
            for item in transactions
        ],
        width="stretch",
        hide_index=True,
    )

    selected = _pick_record(
        "Transaction",
        transactions,
        lambda item: f"{item.date.isoformat()} · {describe(item)}",
        key="transaction_pick",
    )
    transaction_type = st.radio(
        "Type",
        TRANSACTION_TYPES,
        index=(
            TRANSACTION_TYPES.index(selected.transaction_type)
            if selected
            else 0
        ),
        format_func=lambda value: (
            "Withdrawal" if value == WITHDRAWAL else "Account transfer"
        ),
        horizontal=True,
    )
    with st.form("transaction_form"):
        transaction_date = st.date_input(
            "Date", value=selected.date if selected else date.today()
        )
        amount = st.number_input(
            "Amount",
            min_value=0.0,
            value=float(selected.amount) if selected else 0.0,
        )
        account = source = destination = None
        if transaction_type == ACCOUNT_TRANSFER:
            source = _account_select(
                "Source account",
                accounts,
                selected.source_account if selected else None,
                key="transfer_source",
            )
            destination = _account_select(
                "Destination account",
                accounts,
                selected.destination_account if selected else None,
                key="transfer_destination",
            )
        else:
            account = _account_select(
                "Account",
                accounts,
                selected.account if selected else None,
                key="withdrawal_account",
            )
        observations = st.text_area(
            "Observations", value=selected.observations if selected else ""
        )
        submitted = st.form_submit_button("Save transaction")
    if submitted:
        draft = TransactionDraft(
            transaction_type=transaction_type,
            date=transaction_date,
            amount=_to_decimal(amount),
            account=account,
            source_account=source,
            destination_account=destination,
            observations=observations,
        )
        _show_result(
            use_cases.save_transaction.execute(
                settings.user_id,
                draft,
                transaction_id=selected.id if selected else None,
            )
        )
    if selected:
        _render_delete_button(
            "Delete transaction",
            selected.id,
            lambda record_id: use_cases.delete_transaction.execute(
                settings.user_id, record_id
            ),
            key="transaction_delete",
        )


def _render_employee_form(
    settings: FinanceSettings,
    employees: Sequence[Employee],
) -> None:
    use_cases = _use_cases()
    selected = _pick_record(
        "Employee", employees, lambda item: item.name, key="employee_pick"
    )
    with st.form("employee_form"):
        name = st.text_input("Name", value=selected.name if selected else "")
        cedula = st.text_input(
            "Cedula", value=selected.cedula if selected else ""
        )
        phone = st.text_input(
            "Phone", value=selected.phone if selected else ""
        )
        bank = st.text_input("Bank", value=selected.bank if selected else "")
        payment_method = st.text_input(
            "Payment method",
            value=selected.payment_method if selected else "",
        )
        bi_weekly_salary = st.number_input(
            "Bi-weekly salary",
            min_value=0.0,
            value=float(selected.bi_weekly_salary) if selected else 0.0,
        )
        submitted = st.form_submit_button("Save employee")
    if submitted:
        draft = EmployeeDraft(
            name=name,
            cedula=cedula,
            phone=phone,
            bank=bank,
            bi_weekly_salary=_to_decimal(bi_weekly_salary),
            payment_method=payment_method,
        )
        _show_result(
            use_cases.save_employee.execute(
                settings.user_id,
                draft,
                employee_id=selected.id if selected else None,
            )
        )
    if selected:
        st.caption(
            "Deleting an employee also deletes and reverses their payments."
        )
        _render_delete_button(
            "Delete employee",
            selected.id,
            lambda record_id: use_cases.delete_employee.execute(
                settings.user_id, record_id
            ),
            key="employee_delete",
        )


def _render_payroll_payment_form(
    settings: FinanceSettings,
    employees: Sequence[Employee],
    accounts: Sequence[Account],
) -> None:
    use_cases = _use_cases()
    payments = _load_payroll_payments(settings.user_id)
    st.dataframe(
        [
            {
                "Date": payment.date.isoformat(),
                "Employee": payment.employee_name,
                "Type": payment.payment_type,
                "Period": f"{month_label(payment.month)} {payment.year}",
                "Amount": float(payment.total_amount),
            }
            for payment in payments
        ],
        width="stretch",
        hide_index=True,
    )
    if not employees:
        st.info("Add an employee before recording payments.")
        return

    employee_names = {employee.id: employee.name for employee in employees}
    selected = _pick_record(
        "Payroll payment",
        payments,
        lambda item: (
            f"{item.date.isoformat()} · {item.employee_name} · "
            f"{item.payment_type}"
        ),
        key="payroll_pick",
    )
    today = date.today()
    with st.form("payroll_form"):
        employee_ids = list(employee_names)
        employee_id = st.selectbox(
            "Employee",
            employee_ids,
            index=(
                employee_ids.index(selected.employee_id)
                if selected and selected.employee_id in employee_ids
                else 0
            ),
            format_func=lambda value: employee_names[value],
        )
        payment_type = st.selectbox(
            "Payment type",
            PAYROLL_PAYMENT_TYPES,
            index=(
                PAYROLL_PAYMENT_TYPES.index(selected.payment_type)
                if selected and selected.payment_type in PAYROLL_PAYMENT_TYPES
                else 0
            ),
        )
        month = st.selectbox(
            "Month",
            list(range(1, 13)),
            index=(selected.month if selected else today.month) - 1,
            format_func=month_label,
        )
        year = st.number_input(
            "Year",
            min_value=2000,
            max_value=2100,
            value=selected.year if selected else today.year,
            step=1,
        )
        payment_date = st.date_input(
            "Date", value=selected.date if selected else today
        )
        total_amount = st.number_input(
            "Amount",
            min_value=0.0,
            value=float(selected.total_amount) if selected else 0.0,
        )
        payment_account = _account_select(
            "Payment account",
            accounts,
            selected.payment_account if selected else None,
            key="payroll_account",
        )
        observations = st.text_area(
            "Observations", value=selected.observations if selected else ""
        )
        submitted = st.form_submit_button("Save payment")
    if submitted:
        draft = PayrollPaymentDraft(
            employee_id=employee_id,
            payment_type=payment_type,
            month=int(month),
            year=int(year),
            date=payment_date,
            total_amount=_to_decimal(total_amount),
            payment_account=payment_account or "",
            observations=observations,
        )
        _show_result(
            use_cases.save_payroll_payment.execute(
                settings.user_id,
                draft,
                payment_id=selected.id if selected else None,
            )
        )
    if selected:
        _render_delete_button(
            "Delete payment",
            selected.id,
            lambda record_id: use_cases.delete_payroll_payment.execute(
                settings.user_id, record_id
            ),
            key="payroll_delete",
        )


def _render_payroll(settings: FinanceSettings) -> None:
    employees = _load_employees(settings.user_id)
    accounts = _load_accounts(settings.user_id)
    employees_tab, payments_tab = st.tabs(["Employees", "Payments"])
    with employees_tab:
        st.dataframe(
            [
                {
                    "Name": employee.name,
                    "Cedula": employee.cedula,
                    "Phone": employee.phone,
                    "Bank": employee.bank,
                    "Bi-weekly": float(employee.bi_weekly_salary),
                    "Monthly": float(employee.monthly_salary),
                }
                for employee in employees
            ],
            width="stretch",
            hide_index=True,
        )
        _render_employee_form(settings, employees)
    with payments_tab:
        _render_payroll_payment_form(settings, employees, accounts)


def _render_payroll_report(settings: FinanceSettings) -> None:
    today = date.today()
    current = _load_payroll_report(
        settings.user_id, today.month, today.year, today
    )
    period = st.selectbox(
        "Period",
        current.available_periods,
        format_func=lambda item: f"{month_label(item[0])} {item[1]}",
    )
    month, year = period
    report = _load_payroll_report(settings.user_id, month, year, today)
    summary = report.summary
    payroll_col, paid_col, pending_col, bonus_col = st.columns(4)
    payroll_col.metric(
        "Total payroll", format_currency(summary.total_payroll)
    )
    paid_col.metric("Paid", format_currency(summary.total_paid))
    pending_col.metric("Pending", format_currency(summary.total_pending))
    bonus_col.metric("Bonuses", format_currency(summary.total_bonuses))
    st.dataframe(
        [
            {
                "Employee": row.employee.name,
                "Monthly salary": float(row.employee.monthly_salary),
                "Payments": len(row.payments),
                "Paid": float(row.total_paid),
                "Bonus": float(row.bonus),
            }
            for row in report.rows
        ],
        width="stretch",
        hide_index=True,
    )


def _render_admin_payments(settings: FinanceSettings) -> None:
    use_cases = _use_cases()
    filter_col, search_col = st.columns(2)
    category = filter_col.selectbox(
        "Category", [ALL_CATEGORIES, *ADMIN_PAYMENT_CATEGORIES]
    )
    search = search_col.text_input(
        "Search", placeholder="Concept, provider or contract"
    )
    payments = _load_admin_payments(settings.user_id, category, search)
    st.dataframe(
        [
            {
                "Concept": payment.concept_name,
                "Category": payment.category,
                "Provider": payment.provider_name,
                "Amount": (
                    f"{payment.payment_amount:,.2f} "
                    f"{payment.payment_currency}"
                ),
                "Frequency": payment.payment_frequency,
                "Due date": (
                    payment.payment_due_date.isoformat()
                    if payment.payment_due_date
                    else ""
                ),
            }
            for payment in payments
        ],
        width="stretch",
        hide_index=True,
    )

    selected = _pick_record(
        "Administrative payment",
        payments,
        lambda item: f"{item.concept_name} · {item.provider_name}",
        key="admin_pick",
    )
    with st.form("admin_payment_form"):
        concept_name = st.text_input(
            "Concept", value=selected.concept_name if selected else ""
        )
        admin_category = st.selectbox(
            "Category",
            ADMIN_PAYMENT_CATEGORIES,
            index=(
                ADMIN_PAYMENT_CATEGORIES.index(selected.category)
                if selected and selected.category in ADMIN_PAYMENT_CATEGORIES
                else 0
            ),
        )
        provider_name = st.text_input(
            "Provider", value=selected.provider_name if selected else ""
        )
        contract_number = st.text_input(
            "Contract number",
            value=selected.contract_number if selected else "",
        )
        reference_number = st.text_input(
            "Reference number",
            value=selected.reference_number if selected else "",
        )
        provider_id = st.text_input(
            "Provider id", value=selected.provider_id if selected else ""
        )
        payment_amount = st.number_input(
            "Amount",
            min_value=0.0,
            value=float(selected.payment_amount) if selected else 0.0,
        )
        payment_currency = st.text_input(
            "Currency",
            value=selected.payment_currency if selected else settings.currency,
        )
        payment_frequency = st.selectbox(
            "Frequency",
            ADMIN_PAYMENT_FREQUENCIES,
            index=(
                ADMIN_PAYMENT_FREQUENCIES.index(selected.payment_frequency)
                if selected
                and selected.payment_frequency in ADMIN_PAYMENT_FREQUENCIES
                else 0
            ),
        )
        has_due_date = st.checkbox(
            "Has due date",
            value=bool(selected and selected.payment_due_date),
        )
        payment_due_date = st.date_input(
            "Due date",
            value=(
                selected.payment_due_date
                if selected and selected.payment_due_date
                else date.today()
            ),
        )
        has_renewal_date = st.checkbox(
            "Has renewal date",
            value=bool(selected and selected.renewal_date),
        )
        renewal_date = st.date_input(
            "Renewal date",
            value=(
                selected.renewal_date
                if selected and selected.renewal_date
                else date.today()
            ),
        )
        payment_method = st.text_input(
            "Payment method", value=selected.payment_method if selected else ""
        )
        beneficiary_bank = st.text_input(
            "Beneficiary bank",
            value=selected.beneficiary_bank if selected else "",
        )
        beneficiary_account_number = st.text_input(
            "Beneficiary account number",
            value=selected.beneficiary_account_number if selected else "",
        )
        account_type_options = ["", *BENEFICIARY_ACCOUNT_TYPES]
        beneficiary_account_type = st.selectbox(
            "Beneficiary account type",
            account_type_options,
            index=(
                account_type_options.index(selected.beneficiary_account_type)
                if selected
                and selected.beneficiary_account_type in account_type_options
                else 0
            ),
        )
        notes = st.text_area("Notes", value=selected.notes if selected else "")
        submitted = st.form_submit_button("Save payment")
    if submitted:
        draft = AdminPaymentDraft(
            concept_name=concept_name,
            category=admin_category,
            provider_name=provider_name,
            payment_amount=_to_decimal(payment_amount),
            payment_frequency=payment_frequency,
            payment_currency=payment_currency,
            contract_number=contract_number,
            reference_number=reference_number,
            provider_id=provider_id,
            payment_due_date=payment_due_date if has_due_date else None,
            renewal_date=renewal_date if has_renewal_date else None,
            payment_method=payment_method,
            beneficiary_bank=beneficiary_bank,
            beneficiary_account_number=beneficiary_account_number,
            beneficiary_account_type=beneficiary_account_type or None,
            notes=notes,
        )
        _show_result(
            use_cases.save_admin_payment.execute(
                settings.user_id,
                draft,
                payment_id=selected.id if selected else None,
            )
        )
    if selected:
        _render_delete_button(
            "Delete payment",
            selected.id,
            lambda record_id: use_cases.delete_admin_payment.execute(
                settings.user_id, record_id
            ),
            key="admin_delete",
        )


def _render_reminders(settings: FinanceSettings) -> None:
    use_cases = _use_cases()
    status = st.radio(
        "Status",
        [REMINDER_PENDING, REMINDER_RESOLVED, "all"],
        horizontal=True,
    )
    reminders = _load_reminders(
        settings.user_id, None if status == "all" else status
    )
    if not reminders:
        st.info("No reminders.")
        return
    today = date.today()
    for reminder in reminders:
        pending = reminder.status == REMINDER_PENDING
        overdue = pending and reminder.due_date < today
        with st.container(border=True):
            st.markdown(
                f"**{reminder.due_date.isoformat()}** · {reminder.message}"
            )
            if reminder.debt_amount > 0:
                debt = format_currency(reminder.debt_amount)
                st.caption(f"Outstanding debt: {debt}")
            if overdue:
                st.warning("Overdue")
            if reminder.status == REMINDER_PENDING and st.button(
                "Mark as resolved", key=f"resolve_{reminder.id}"
            ):
                _show_result(
                    use_cases.resolve_reminder.execute(
                        settings.user_id, reminder.id
                    )
                )


def _year_selector(settings: FinanceSettings, key: str) -> int:
    years = _load_report_years(settings.user_id, date.today())
    return st.selectbox("Year", years, key=key)


def _render_annual_summary(settings: FinanceSettings) -> None:
    year = _year_selector(settings, key="annual_year")
    summary = _load_annual_summary(settings.user_id, year)
    currency = settings.currency
    cols = st.columns(3)
    cols[0].metric("Income", format_currency(summary.total_income, currency))
    cols[1].metric("Expense", format_currency(summary.total_expense, currency))
    cols[2].metric("Payroll", format_currency(summary.total_payroll, currency))
    cols = st.columns(3)
    cols[0].metric(
        "Net utility", format_currency(summary.net_utility, currency)
    )
    cols[1].metric(
        "Withdrawals", format_currency(summary.total_withdrawals, currency)
    )
    cols[2].metric(
        "Final cash flow", format_currency(summary.final_cash_flow, currency)
    )
    st.plotly_chart(build_annual_figure(summary), width="stretch")
    st.dataframe(
        [
            {
                "Month": month_label(item.month),
                "Income": float(item.income),
                "Expense": float(item.expense),
                "Utility": float(item.utility),
            }
            for item in summary.months
        ],
        width="stretch",
        hide_index=True,
    )


def _render_service_report(settings: FinanceSettings) -> None:
    year = _year_selector(settings, key="service_year")
    reports = _load_service_report(settings.user_id, year)
    if not reports:
        st.info(f"No services sold in {year}.")
        return
    total_income = sum(
        (report.total_income for report in reports), start=Decimal("0")
    )
    income_col, units_col = st.columns(2)
    income_col.metric("Income", format_currency(total_income))
    units_col.metric(
        "Services sold", sum(report.total_units for report in reports)
    )
    st.altair_chart(
        build_service_income_chart(prepare_service_chart_data(reports)),
        width="stretch",
    )
    for report in reports:
        with st.expander(
            f"{report.service_name} · {report.total_units} units · "
            f"{format_currency(report.total_income)}"
        ):
            st.dataframe(
                [
                    {
                        "Month": month_label(item.month),
                        "Units": item.units,
                        "Income": float(item.income),
                    }
                    for item in report.months
                    if item.units
                ],
                width="stretch",
                hide_index=True,
            )


def _render_client_debts(settings: FinanceSettings) -> None:
    use_cases = _use_cases()
    debts = _load_client_debts(settings.user_id)
    accounts = _load_accounts(settings.user_id)
    names = _account_names(accounts)
    st.dataframe(
        [
            {
                "Client": debt.client_name,
                "Services": debt.service_count,
                "Contracted": float(debt.total_contracted),
                "Paid": float(debt.total_paid),
                "Debt": float(debt.total_debt),
            }
            for debt in debts
        ],
        width="stretch",
        hide_index=True,
    )
    debtors = [debt.client_name for debt in debts if debt.total_debt > 0]
    if not debtors:
        st.info("No client has outstanding debt.")
        return

    with st.form("client_payment_form"):
        client_name = st.selectbox("Client", debtors)
        payment_date = st.date_input("Date", value=date.today())
        amount = st.number_input("Amount", min_value=0.0, value=0.0)
        account = _account_select(
            "Account", accounts, None, key="client_payment_account"
        )
        submitted = st.form_submit_button("Apply payment")
    if submitted:
        draft = ClientPaymentDraft(
            client_name=client_name,
            date=payment_date,
            amount=_to_decimal(amount),
            account=account or "",
        )
        _show_result(
            use_cases.apply_client_payment.execute(settings.user_id, draft)
        )

    for debt in debts:
        if not debt.payments:
            continue
        with st.expander(f"Payments from {debt.client_name}"):
            st.dataframe(
                [
                    {
                        "Date": payment.date.isoformat(),
                        "Amount": float(payment.amount),
                        "Account": names.get(payment.account, payment.account),
                        "Incomes": len(payment.income_ids),
                    }
                    for payment in debt.payments
                ],
                width="stretch",
                hide_index=True,
            )


RENDERERS: dict[str, Callable[[FinanceSettings], None]] = {
    "Dashboard": _render_dashboard,
    "Accounts": _render_accounts,
    "Incomes": _render_incomes,
    "Expenses": _render_expenses,
    "Transactions": _render_transactions,
    "Payroll": _render_payroll,
    "Payroll Report": _render_payroll_report,
    "Admin Payments": _render_admin_payments,
    "Reminders": _render_reminders,
    "Annual Summary": _render_annual_summary,
    "Service Report": _render_service_report,
    "Client Debts": _render_client_debts,
}


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Finance Tracker", layout="wide")
    st.title("Finance Tracker")

    ok, message = _check_altair_dependencies()
    if not ok:
        st.error(message)
        return

    settings, _ = _get_runtime()
    page = st.sidebar.selectbox("Page", PAGES)
    get_usage_logger().info(f"page={page} user={settings.user_id}")
    st.header(page)
    RENDERERS[page](settings)


if __name__ == "__main__":  # pragma: no cover
    main()
