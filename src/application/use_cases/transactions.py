"""Use cases for withdrawals and account transfers."""

from src.application.use_cases.balances import apply_balance_deltas
from src.application.use_cases.results import (
    LedgerMutationUseCase,
    LedgerQueryUseCase,
    OperationResult,
    new_record_id,
)
from src.domain.constants import WITHDRAWAL
from src.domain.errors import RecordNotFoundError
from src.domain.models import Transaction, TransactionDraft
from src.domain.services.balances import (
    combine_deltas,
    invert_deltas,
    transaction_deltas,
)
from src.domain.services.normalization import (
    normalize_optional_id,
    normalize_text,
)
from src.domain.services.validation import (
    ensure_valid,
    validate_transaction_draft,
)
from src.utils.decimal_utils import coerce_decimal


def _referenced_accounts(transaction: Transaction) -> list[str]:
    if transaction.transaction_type == WITHDRAWAL:
        return [transaction.account]
    return [transaction.source_account, transaction.destination_account]


class SaveTransactionUseCase(LedgerMutationUseCase):
    """Create or edit a withdrawal or a transfer between accounts."""

    failure_message = "Could not save the transaction."

    def execute(
        self,
        user_id: str,
        draft: TransactionDraft,
        transaction_id: str | None = None,
    ) -> OperationResult:
        """Validate the draft and move the balances it describes.

        A withdrawal debits ``account``. A transfer debits the source and
        credits the destination by the same amount.

        Args:
            user_id: Owner of the transaction.
            draft: Submitted form values.
            transaction_id: Id of the transaction to edit, or None.

        Returns:
            OperationResult: Outcome with the transaction id on success.
        """

        def action() -> str:
            ensure_valid(validate_transaction_draft(draft))
            is_withdrawal = draft.transaction_type == WITHDRAWAL
            with self._store.unit_of_work() as session:
                previous = None
                if transaction_id is not None:
                    previous = session.get_transaction(user_id, transaction_id)
                    if previous is None:
                        raise RecordNotFoundError(
                            "Transaction", transaction_id
                        )
                transaction = Transaction(
                    id=transaction_id or new_record_id(),
                    transaction_type=draft.transaction_type,
                    date=draft.date,
                    amount=coerce_decimal(draft.amount),
                    account=(
                        normalize_optional_id(draft.account)
                        if is_withdrawal
                        else None
                    ),
                    source_account=(
                        None
                        if is_withdrawal
                        else normalize_optional_id(draft.source_account)
                    ),
                    destination_account=(
                        None
                        if is_withdrawal
                        else normalize_optional_id(draft.destination_account)
                    ),
                    observations=normalize_text(draft.observations),
                    timestamp=(
                        previous.timestamp if previous else self._clock()
                    ),
                )
                reversal = (
                    invert_deltas(transaction_deltas(previous))
                    if previous
                    else {}
                )
                apply_balance_deltas(
                    session,
                    user_id,
                    combine_deltas(reversal, transaction_deltas(transaction)),
                    required_accounts=_referenced_accounts(transaction),
                    logger=self._logger,
                )
                session.save_transaction(user_id, transaction)
                return transaction.id

        message = (
            "Transaction saved."
            if transaction_id is None
            else "Transaction updated."
        )
        return self._run(action, message)


class DeleteTransactionUseCase(LedgerMutationUseCase):
    """Delete a transaction and undo its balance movements."""

    failure_message = "Could not delete the transaction."

    def execute(self, user_id: str, transaction_id: str) -> OperationResult:
        def action() -> str:
            with self._store.unit_of_work() as session:
                transaction = session.get_transaction(user_id, transaction_id)
                if transaction is None:
                    raise RecordNotFoundError("Transaction", transaction_id)
                apply_balance_deltas(
                    session,
                    user_id,
                    invert_deltas(transaction_deltas(transaction)),
                    required_accounts=[],
                    logger=self._logger,
                )
                session.delete_transaction(user_id, transaction_id)
                return transaction_id

        return self._run(action, "Transaction deleted.")


class GetTransactionsUseCase(LedgerQueryUseCase):
    """Return the user's transactions, newest first."""

    def execute(self, user_id: str) -> list[Transaction]:
        return self._read(
            lambda session: session.list_transactions(user_id), list
        )


__all__ = [
    "SaveTransactionUseCase",
    "DeleteTransactionUseCase",
    "GetTransactionsUseCase",
]
