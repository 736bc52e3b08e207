"""Use cases for expenses."""

from src.application.use_cases.balances import apply_balance_deltas
from src.application.use_cases.results import (
    LedgerMutationUseCase,
    LedgerQueryUseCase,
    OperationResult,
    new_record_id,
)
from src.domain.errors import RecordNotFoundError, ReferencedRecordError
from src.domain.models import Expense, ExpenseDraft
from src.domain.services.balances import (
    combine_deltas,
    expense_deltas,
    invert_deltas,
)
from src.domain.services.normalization import normalize_text
from src.domain.services.validation import ensure_valid, validate_expense_draft
from src.utils.decimal_utils import coerce_decimal

PAYROLL_MANAGED_MESSAGE = (
    "This expense belongs to a payroll payment. Edit or delete the payment "
    "instead."
)


class SaveExpenseUseCase(LedgerMutationUseCase):
    """Create or edit an expense and debit its payment account."""

    failure_message = "Could not save the expense."

    def execute(
        self,
        user_id: str,
        draft: ExpenseDraft,
        expense_id: str | None = None,
    ) -> OperationResult:
        """Validate the draft and apply it to the payment account.

        Editing reverses the previous debit and applies the new one in the
        same unit of work, so changing the account updates both accounts.

        Args:
            user_id: Owner of the expense.
            draft: Submitted form values.
            expense_id: Id of the expense to edit, or None to create one.

        Returns:
            OperationResult: Outcome with the expense id on success.
        """

        def action() -> str:
            ensure_valid(validate_expense_draft(draft))
            with self._store.unit_of_work() as session:
                previous = None
                if expense_id is not None:
                    previous = session.get_expense(user_id, expense_id)
                    if previous is None:
                        raise RecordNotFoundError("Expense", expense_id)
                    if session.find_payroll_payment_by_expense(
                        user_id, expense_id
                    ):
                        raise ReferencedRecordError(PAYROLL_MANAGED_MESSAGE)

                expense = Expense(
                    id=expense_id or new_record_id(),
                    date=draft.date,
                    expense_type=draft.expense_type,
                    category=normalize_text(draft.category),
                    amount=coerce_decimal(draft.amount),
                    payment_account=normalize_text(draft.payment_account),
                    responsible=normalize_text(draft.responsible),
                    observations=normalize_text(draft.observations),
                    timestamp=(
                        previous.timestamp if previous else self._clock()
                    ),
                )
                reversal = (
                    invert_deltas(expense_deltas(previous)) if previous else {}
                )
                apply_balance_deltas(
                    session,
                    user_id,
                    combine_deltas(reversal, expense_deltas(expense)),
                    required_accounts=[expense.payment_account],
                    logger=self._logger,
                )
                session.save_expense(user_id, expense)
                return expense.id

        message = (
            "Expense saved." if expense_id is None else "Expense updated."
        )
        return self._run(action, message)


class DeleteExpenseUseCase(LedgerMutationUseCase):
    """Delete an expense and credit its amount back."""

    failure_message = "Could not delete the expense."

    def execute(self, user_id: str, expense_id: str) -> OperationResult:
        def action() -> str:
            with self._store.unit_of_work() as session:
                expense = session.get_expense(user_id, expense_id)
                if expense is None:
                    raise RecordNotFoundError("Expense", expense_id)
                payroll = session.find_payroll_payment_by_expense(
                    user_id, expense_id
                )
                if payroll is not None:
                    raise ReferencedRecordError(PAYROLL_MANAGED_MESSAGE)
                apply_balance_deltas(
                    session,
                    user_id,
                    invert_deltas(expense_deltas(expense)),
                    required_accounts=[],
                    logger=self._logger,
                )
                session.delete_expense(user_id, expense_id)
                return expense_id

        return self._run(action, "Expense deleted.")


class GetExpensesUseCase(LedgerQueryUseCase):
    """Return the user's expenses, newest first."""

    def execute(self, user_id: str) -> list[Expense]:
        return self._read(lambda session: session.list_expenses(user_id), list)


class GetExpenseCategoriesUseCase(LedgerQueryUseCase):
    """Return the distinct categories already used, for form suggestions."""

    def execute(self, user_id: str) -> list[str]:
        return self._read(
            lambda session: session.list_expense_categories(user_id), list
        )


__all__ = [
    "SaveExpenseUseCase",
    "DeleteExpenseUseCase",
    "GetExpensesUseCase",
    "GetExpenseCategoriesUseCase",
]
