"""Use cases for incomes and their renewal reminders."""

from datetime import datetime
from typing import Iterable

from src.application.ports.ledger_store import LedgerSession
from src.application.use_cases.balances import apply_balance_deltas
from src.application.use_cases.results import (
    LedgerMutationUseCase,
    LedgerQueryUseCase,
    OperationResult,
    new_record_id,
)
from src.domain.constants import DEFAULT_DUE_DATE_SERVICES
from src.domain.errors import AccountNotFoundError, RecordNotFoundError
from src.domain.models import Income, IncomeDraft, ServiceLine
from src.domain.services.balances import (
    combine_deltas,
    income_deltas,
    invert_deltas,
)
from src.domain.services.commission import compute_income_figures
from src.domain.services.normalization import normalize_text
from src.domain.services.reminders import build_income_reminder
from src.domain.services.validation import ensure_valid, validate_income_draft
from src.utils.decimal_utils import coerce_decimal


def income_to_draft(income: Income) -> IncomeDraft:
    """Return the editable values of a stored income."""
    return IncomeDraft(
        date=income.date,
        client=income.client,
        country=income.country,
        services_details=list(income.services_details),
        amount_paid=income.amount_paid,
        payment_account=income.payment_account,
        responsible=income.responsible,
        brand_name=income.brand_name,
        observations=income.observations,
        due_date=income.due_date,
        status=income.status,
    )


def save_income_in_session(
    session: LedgerSession,
    user_id: str,
    draft: IncomeDraft,
    income_id: str | None,
    due_date_services: Iterable[str],
    now: datetime,
    logger,
) -> Income:
    """Persist an income and move balances inside an open session.

    The commission rate is read from the payment account as it is now. The
    previous version, when there is one, is reversed with the net amount it
    stored. The income's reminder is rebuilt from scratch.

    Args:
        session: Open ledger session.
        user_id: Owner of the income.
        draft: Validated form values.
        income_id: Id of the income to edit, or None to create one.
        due_date_services: Services that produce renewal reminders.
        now: Timestamp for new records.
        logger: Logger passed to the balance helper.

    Returns:
        Income: The stored income with its derived amounts.

    Raises:
        AccountNotFoundError: If the payment account does not exist.
        RecordNotFoundError: If ``income_id`` does not exist.
    """
    previous = None
    if income_id is not None:
        previous = session.get_income(user_id, income_id)
        if previous is None:
            raise RecordNotFoundError("Income", income_id)

    payment_account = normalize_text(draft.payment_account)
    account = session.get_account(user_id, payment_account)
    if account is None:
        raise AccountNotFoundError(payment_account)

    services_details = [
        ServiceLine(
            name=normalize_text(line.name),
            amount=coerce_decimal(line.amount),
        )
        for line in draft.services_details
    ]
    figures = compute_income_figures(
        services_details, draft.amount_paid, account.commission
    )
    income = Income(
        id=income_id or new_record_id(),
        date=draft.date,
        client=normalize_text(draft.client),
        brand_name=normalize_text(draft.brand_name),
        country=normalize_text(draft.country),
        services_details=services_details,
        amount_paid=coerce_decimal(draft.amount_paid),
        payment_account=payment_account,
        responsible=normalize_text(draft.responsible),
        observations=normalize_text(draft.observations),
        due_date=draft.due_date,
        status=draft.status,
        total_contracted_amount=figures.total_contracted_amount,
        commission_rate=figures.commission_rate,
        commission_amount=figures.commission_amount,
        amount_with_commission=figures.amount_with_commission,
        remaining_balance=figures.remaining_balance,
        timestamp=previous.timestamp if previous else now,
    )

    reversal = invert_deltas(income_deltas(previous)) if previous else {}
    apply_balance_deltas(
        session,
        user_id,
        combine_deltas(reversal, income_deltas(income)),
        required_accounts=[income.payment_account],
        logger=logger,
    )
    session.save_income(user_id, income)

    session.delete_reminder(user_id, income.id)
    reminder = build_income_reminder(income, due_date_services, now)
    if reminder is not None:
        session.save_reminder(user_id, reminder)
    return income


class SaveIncomeUseCase(LedgerMutationUseCase):
    """Create or edit an income and credit its net amount."""

    failure_message = "Could not save the income."

    def __init__(
        self,
        store,
        due_date_services: Iterable[str] = DEFAULT_DUE_DATE_SERVICES,
        logger=None,
        clock=None,
    ) -> None:
        super().__init__(store, logger=logger, clock=clock)
        self._due_date_services = tuple(due_date_services)

    def execute(
        self,
        user_id: str,
        draft: IncomeDraft,
        income_id: str | None = None,
    ) -> OperationResult:
        def action() -> str:
            ensure_valid(validate_income_draft(draft))
            with self._store.unit_of_work() as session:
                income = save_income_in_session(
                    session,
                    user_id,
                    draft,
                    income_id,
                    self._due_date_services,
                    self._clock(),
                    self._logger,
                )
                return income.id

        message = "Income saved." if income_id is None else "Income updated."
        return self._run(action, message)


class DeleteIncomeUseCase(LedgerMutationUseCase):
    """Delete an income, debit its net amount back and drop its reminder."""

    failure_message = "Could not delete the income."

    def execute(self, user_id: str, income_id: str) -> OperationResult:
        def action() -> str:
            with self._store.unit_of_work() as session:
                income = session.get_income(user_id, income_id)
                if income is None:
                    raise RecordNotFoundError("Income", income_id)
                apply_balance_deltas(
                    session,
                    user_id,
                    invert_deltas(income_deltas(income)),
                    required_accounts=[],
                    logger=self._logger,
                )
                session.delete_income(user_id, income_id)
                session.delete_reminder(user_id, income_id)
                return income_id

        return self._run(action, "Income deleted.")


class GetIncomesUseCase(LedgerQueryUseCase):
    """Return the user's incomes, newest first."""

    def execute(self, user_id: str) -> list[Income]:
        return self._read(lambda session: session.list_incomes(user_id), list)


class GetIncomeUseCase(LedgerQueryUseCase):
    """Return one income for the edit form, or None."""

    def execute(self, user_id: str, income_id: str) -> Income | None:
        return self._read(
            lambda session: session.get_income(user_id, income_id),
            lambda: None,
        )


__all__ = [
    "income_to_draft",
    "save_income_in_session",
    "SaveIncomeUseCase",
    "DeleteIncomeUseCase",
    "GetIncomesUseCase",
    "GetIncomeUseCase",
]
