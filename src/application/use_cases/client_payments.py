"""Use case applying a client's debt payment to their incomes."""

from dataclasses import replace
from decimal import Decimal
from typing import Iterable

from src.application.use_cases.incomes import (
    income_to_draft,
    save_income_in_session,
)
from src.application.use_cases.results import (
    LedgerMutationUseCase,
    LedgerQueryUseCase,
    OperationResult,
    new_record_id,
)
from src.domain.constants import DEFAULT_DUE_DATE_SERVICES
from src.domain.errors import AccountNotFoundError, ValidationError
from src.domain.models import ClientPayment, ClientPaymentDraft
from src.domain.services.debts import (
    allocate_client_payment,
    outstanding_incomes,
)
from src.domain.services.normalization import normalize_text
from src.domain.services.validation import (
    ensure_valid,
    validate_client_payment_draft,
)
from src.utils.decimal_utils import coerce_decimal


def _append_note(observations: str, note: str) -> str:
    observations = normalize_text(observations)
    return f"{observations} {note}".strip()


class ApplyClientPaymentUseCase(LedgerMutationUseCase):
    """Spread a client payment over their outstanding incomes.

    The oldest income is paid off first. Each touched income is saved again
    through the income protocol, so the paying account is credited net of
    its commission and the previous credit is reversed.
    """

    failure_message = "Could not apply the client payment."

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
        draft: ClientPaymentDraft,
    ) -> OperationResult:
        """Allocate the payment and record it.

        Args:
            user_id: Owner of the incomes.
            draft: Client, date, amount and paying account.

        Returns:
            OperationResult: Outcome with the client payment id on success.
        """

        def action() -> str:
            ensure_valid(validate_client_payment_draft(draft))
            account_id = normalize_text(draft.account)
            now = self._clock()
            with self._store.unit_of_work() as session:
                if session.get_account(user_id, account_id) is None:
                    raise AccountNotFoundError(account_id)
                pending = outstanding_incomes(
                    session.list_incomes(user_id), draft.client_name
                )
                allocations = allocate_client_payment(pending, draft.amount)
                if not allocations:
                    raise ValidationError(
                        ["The client has no outstanding debt."]
                    )

                applied_total = Decimal("0")
                for allocation in allocations:
                    income = allocation.income
                    note = (
                        f"Payment applied: {allocation.applied:.2f} on "
                        f"{draft.date.isoformat()}."
                    )
                    income_draft = replace(
                        income_to_draft(income),
                        amount_paid=coerce_decimal(income.amount_paid)
                        + allocation.applied,
                        payment_account=account_id,
                        observations=_append_note(income.observations, note),
                    )
                    save_income_in_session(
                        session,
                        user_id,
                        income_draft,
                        income.id,
                        self._due_date_services,
                        now,
                        self._logger,
                    )
                    applied_total += allocation.applied

                payment = ClientPayment(
                    id=new_record_id(),
                    client_name=normalize_text(draft.client_name),
                    date=draft.date,
                    amount=applied_total,
                    account=account_id,
                    income_ids=[item.income.id for item in allocations],
                    timestamp=now,
                )
                session.save_client_payment(user_id, payment)
                return payment.id

        return self._run(action, "Client payment applied.")


class GetClientPaymentsUseCase(LedgerQueryUseCase):
    """Return recorded client debt payments, newest first."""

    def execute(self, user_id: str) -> list[ClientPayment]:
        return self._read(
            lambda session: session.list_client_payments(user_id), list
        )


__all__ = ["ApplyClientPaymentUseCase", "GetClientPaymentsUseCase"]
