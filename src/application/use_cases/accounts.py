"""Use cases managing money accounts."""

from src.application.use_cases.results import (
    LedgerMutationUseCase,
    LedgerQueryUseCase,
    OperationResult,
    new_record_id,
)
from src.domain.errors import RecordNotFoundError, ReferencedRecordError
from src.domain.models import Account, AccountDraft
from src.domain.services.normalization import normalize_text
from src.domain.services.validation import ensure_valid, validate_account_draft
from src.utils.decimal_utils import coerce_decimal


class SaveAccountUseCase(LedgerMutationUseCase):
    """Create an account or edit its name, commission and type.

    The balance is only set on creation. Afterwards it changes exclusively
    through the records that reference the account.
    """

    failure_message = "Could not save the account."

    def execute(
        self,
        user_id: str,
        draft: AccountDraft,
        account_id: str | None = None,
    ) -> OperationResult:
        """Validate and persist the account.

        Args:
            user_id: Owner of the account.
            draft: Submitted form values.
            account_id: Id of the account to edit, or None to create one.

        Returns:
            OperationResult: Outcome with the account id on success.
        """

        def action() -> str:
            ensure_valid(validate_account_draft(draft))
            with self._store.unit_of_work() as session:
                if account_id is None:
                    account = Account(
                        id=new_record_id(),
                        name=normalize_text(draft.name),
                        balance=coerce_decimal(draft.balance),
                        commission=coerce_decimal(draft.commission),
                        account_type=draft.account_type,
                    )
                    session.insert_account(user_id, account)
                    return account.id
                existing = session.get_account(user_id, account_id)
                if existing is None:
                    raise RecordNotFoundError("Account", account_id)
                session.update_account(
                    user_id,
                    Account(
                        id=account_id,
                        name=normalize_text(draft.name),
                        balance=existing.balance,
                        commission=coerce_decimal(draft.commission),
                        account_type=draft.account_type,
                    ),
                )
                return account_id

        message = (
            "Account created." if account_id is None else "Account updated."
        )
        return self._run(action, message)


class DeleteAccountUseCase(LedgerMutationUseCase):
    """Delete an account no record references."""

    failure_message = "Could not delete the account."

    def execute(self, user_id: str, account_id: str) -> OperationResult:
        def action() -> str:
            with self._store.unit_of_work() as session:
                if session.get_account(user_id, account_id) is None:
                    raise RecordNotFoundError("Account", account_id)
                references = session.count_account_references(
                    user_id, account_id
                )
                if references:
                    raise ReferencedRecordError(
                        f"Account is used by {references} record(s) "
                        "and cannot be deleted."
                    )
                session.delete_account(user_id, account_id)
                return account_id

        return self._run(action, "Account deleted.")


class GetAccountsUseCase(LedgerQueryUseCase):
    """Return the user's accounts ordered by name."""

    def execute(self, user_id: str) -> list[Account]:
        return self._read(
            lambda session: session.list_accounts(user_id),
            list,
        )


__all__ = ["SaveAccountUseCase", "DeleteAccountUseCase", "GetAccountsUseCase"]
