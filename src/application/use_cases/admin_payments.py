"""Use cases for administrative payments and their reminders."""

from src.application.use_cases.results import (
    LedgerMutationUseCase,
    LedgerQueryUseCase,
    OperationResult,
    new_record_id,
)
from src.domain.constants import ALL_CATEGORIES
from src.domain.errors import RecordNotFoundError
from src.domain.models import AdminPayment, AdminPaymentDraft
from src.domain.services.normalization import normalize_text
from src.domain.services.reminders import build_admin_payment_reminder
from src.domain.services.validation import (
    ensure_valid,
    validate_admin_payment_draft,
)
from src.utils.decimal_utils import coerce_decimal


def filter_admin_payments(
    payments: list[AdminPayment],
    category: str = ALL_CATEGORIES,
    search: str = "",
) -> list[AdminPayment]:
    """Filter admin payments by category and free-text search.

    Args:
        payments: Payments to filter.
        category: Category to keep, or ``ALL_CATEGORIES`` for every one.
        search: Case-insensitive text matched against concept, provider and
            contract number.

    Returns:
        list[AdminPayment]: Matching payments in their original order.
    """
    term = normalize_text(search).lower()
    matches = []
    for payment in payments:
        if category and category != ALL_CATEGORIES:
            if payment.category != category:
                continue
        if term:
            haystack = " ".join(
                [
                    payment.concept_name,
                    payment.provider_name,
                    payment.contract_number,
                ]
            ).lower()
            if term not in haystack:
                continue
        matches.append(payment)
    return matches


class SaveAdminPaymentUseCase(LedgerMutationUseCase):
    """Create or edit an admin payment and refresh its reminder."""

    failure_message = "Could not save the administrative payment."

    def execute(
        self,
        user_id: str,
        draft: AdminPaymentDraft,
        payment_id: str | None = None,
    ) -> OperationResult:
        def action() -> str:
            ensure_valid(validate_admin_payment_draft(draft))
            now = self._clock()
            with self._store.unit_of_work() as session:
                previous = None
                if payment_id is not None:
                    previous = session.get_admin_payment(user_id, payment_id)
                    if previous is None:
                        raise RecordNotFoundError(
                            "Administrative payment", payment_id
                        )
                payment = AdminPayment(
                    id=payment_id or new_record_id(),
                    concept_name=normalize_text(draft.concept_name),
                    category=draft.category,
                    provider_name=normalize_text(draft.provider_name),
                    contract_number=normalize_text(draft.contract_number),
                    reference_number=normalize_text(draft.reference_number),
                    provider_id=normalize_text(draft.provider_id),
                    payment_amount=coerce_decimal(draft.payment_amount),
                    payment_currency=(
                        normalize_text(draft.payment_currency) or "USD"
                    ),
                    payment_frequency=draft.payment_frequency,
                    payment_due_date=draft.payment_due_date,
                    renewal_date=draft.renewal_date,
                    payment_method=normalize_text(draft.payment_method),
                    beneficiary_bank=normalize_text(draft.beneficiary_bank),
                    beneficiary_account_number=normalize_text(
                        draft.beneficiary_account_number
                    ),
                    beneficiary_account_type=(
                        draft.beneficiary_account_type or None
                    ),
                    notes=normalize_text(draft.notes),
                    created_at=previous.created_at if previous else now,
                    updated_at=now,
                )
                session.save_admin_payment(user_id, payment)
                session.delete_admin_payment_reminders(user_id, payment.id)
                reminder = build_admin_payment_reminder(payment, now)
                if reminder is not None:
                    session.save_reminder(user_id, reminder)
                return payment.id

        message = (
            "Administrative payment saved."
            if payment_id is None
            else "Administrative payment updated."
        )
        return self._run(action, message)


class DeleteAdminPaymentUseCase(LedgerMutationUseCase):
    """Delete an admin payment and its reminder."""

    failure_message = "Could not delete the administrative payment."

    def execute(self, user_id: str, payment_id: str) -> OperationResult:
        def action() -> str:
            with self._store.unit_of_work() as session:
                if session.get_admin_payment(user_id, payment_id) is None:
                    raise RecordNotFoundError(
                        "Administrative payment", payment_id
                    )
                session.delete_admin_payment_reminders(user_id, payment_id)
                session.delete_admin_payment(user_id, payment_id)
                return payment_id

        return self._run(action, "Administrative payment deleted.")


class ListAdminPaymentsUseCase(LedgerQueryUseCase):
    """Return admin payments ordered by concept, filtered for the list page."""

    def execute(
        self,
        user_id: str,
        category: str = ALL_CATEGORIES,
        search: str = "",
    ) -> list[AdminPayment]:
        payments = self._read(
            lambda session: session.list_admin_payments(user_id), list
        )
        return filter_admin_payments(
            payments, category=category, search=search
        )


__all__ = [
    "filter_admin_payments",
    "SaveAdminPaymentUseCase",
    "DeleteAdminPaymentUseCase",
    "ListAdminPaymentsUseCase",
]
