"""Tests for the account use cases."""

from datetime import date
from decimal import Decimal

from src.application.use_cases import (
    DeleteAccountUseCase,
    GetAccountsUseCase,
    SaveAccountUseCase,
    SaveExpenseUseCase,
)
from src.domain.models import AccountDraft, ExpenseDraft

USER_ID = "user-1"


def test_create_account_sets_initial_balance(store, logger) -> None:
    """New accounts start with the submitted balance."""
    result = SaveAccountUseCase(store, logger=logger).execute(
        USER_ID,
        AccountDraft(
            name="  Banco Pichincha ",
            commission=Decimal("0.05"),
            account_type="Bancario",
            balance=Decimal("100"),
        ),
    )

    assert result.success is True
    assert result.message == "Account created."
    accounts = GetAccountsUseCase(store, logger=logger).execute(USER_ID)
    assert len(accounts) == 1
    assert accounts[0].id == result.record_id
    assert accounts[0].name == "Banco Pichincha"
    assert accounts[0].balance == Decimal("100")
    assert accounts[0].commission == Decimal("0.05")
    logger.info.assert_called()


def test_edit_account_keeps_balance(store, logger, make_account) -> None:
    """Editing changes name, type and commission but not the balance."""
    account_id = make_account("Caja", balance="50")

    result = SaveAccountUseCase(store, logger=logger).execute(
        USER_ID,
        AccountDraft(
            name="Efectivo (Caja)",
            commission=Decimal("0"),
            account_type="Efectivo",
            balance=Decimal("999"),
        ),
        account_id=account_id,
    )

    assert result.success is True
    assert result.message == "Account updated."
    (account,) = GetAccountsUseCase(store).execute(USER_ID)
    assert account.name == "Efectivo (Caja)"
    assert account.account_type == "Efectivo"
    assert account.balance == Decimal("50")


def test_invalid_account_is_rejected(store, logger) -> None:
    """Validation failures are reported and nothing is written."""
    result = SaveAccountUseCase(store, logger=logger).execute(
        USER_ID,
        AccountDraft(name="x", commission=Decimal("2"), account_type="?"),
    )

    assert result.success is False
    assert len(result.errors) == 3
    assert GetAccountsUseCase(store).execute(USER_ID) == []
    logger.warning.assert_called()


def test_delete_unused_account(store, logger, make_account) -> None:
    """Accounts without records can be deleted."""
    account_id = make_account("Temp")

    result = DeleteAccountUseCase(store, logger=logger).execute(
        USER_ID, account_id
    )

    assert result.success is True
    assert GetAccountsUseCase(store).execute(USER_ID) == []


def test_delete_referenced_account_is_rejected(
    store, logger, make_account
) -> None:
    """Accounts used by records cannot be deleted."""
    account_id = make_account("Banco", balance="100")
    SaveExpenseUseCase(store, logger=logger).execute(
        USER_ID,
        ExpenseDraft(
            date=date(2024, 3, 1),
            expense_type="fijo",
            category="Rent",
            amount=Decimal("10"),
            payment_account=account_id,
        ),
    )

    result = DeleteAccountUseCase(store, logger=logger).execute(
        USER_ID, account_id
    )

    assert result.success is False
    assert "cannot be deleted" in result.message
    assert len(GetAccountsUseCase(store).execute(USER_ID)) == 1


def test_accounts_are_isolated_per_user(store, make_account) -> None:
    """Each user only sees their own accounts."""
    make_account("Mine")
    make_account("Theirs", user_id="user-2")

    accounts = GetAccountsUseCase(store).execute(USER_ID)
    names = [account.name for account in accounts]

    assert names == ["Mine"]


def test_delete_missing_account_fails(store, logger) -> None:
    """Unknown ids produce a not-found failure."""
    result = DeleteAccountUseCase(store, logger=logger).execute(
        USER_ID, "missing"
    )

    assert result.success is False
    assert result.message == "Account not found: missing"
