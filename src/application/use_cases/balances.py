"""Applies balance deltas inside a ledger unit of work."""

from decimal import Decimal
from typing import Iterable

from src.application.ports.ledger_store import LedgerSession
from src.domain.errors import AccountNotFoundError
from src.domain.services.balances import BalanceDeltas, non_zero_deltas


def apply_balance_deltas(
    session: LedgerSession,
    user_id: str,
    deltas: BalanceDeltas,
    required_accounts: Iterable[str],
    logger,
) -> dict[str, Decimal]:
    """Add signed deltas to account balances.

    Every account is loaded before anything is written, so a missing
    required account aborts the operation with no balance touched. Accounts
    that only appear in a reversal may have been removed since the record
    was saved; those are skipped with a warning.

    Args:
        session: Open ledger session.
        user_id: Owner of the accounts.
        deltas: Mapping of account id to signed amount.
        required_accounts: Accounts referenced by the new version of the
            record. They must exist.
        logger: Logger used for skipped reversals.

    Returns:
        dict[str, Decimal]: New balance of every updated account.

    Raises:
        AccountNotFoundError: If a required account does not exist.
    """
    required = {account_id for account_id in required_accounts if account_id}
    for account_id in sorted(required):
        if account_id not in deltas and session.get_account(
            user_id, account_id
        ) is None:
            raise AccountNotFoundError(account_id)

    accounts = {
        account_id: session.get_account(user_id, account_id)
        for account_id in deltas
        if account_id
    }
    for account_id, account in accounts.items():
        if account is None and account_id in required:
            raise AccountNotFoundError(account_id)

    updated: dict[str, Decimal] = {}
    for account_id, amount in non_zero_deltas(deltas).items():
        account = accounts.get(account_id)
        if account is None:
            logger.warning(
                f"Skipping reversal of {amount} on missing account "
                f"{account_id}"
            )
            continue
        new_balance = account.balance + amount
        session.set_account_balance(user_id, account_id, new_balance)
        updated[account_id] = new_balance
    return updated


__all__ = ["apply_balance_deltas"]
