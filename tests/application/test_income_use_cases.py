"""Tests for the income use cases."""

from datetime import date, datetime
from decimal import Decimal

from src.application.use_cases import (
    DeleteIncomeUseCase,
    GetIncomeUseCase,
    GetIncomesUseCase,
    ListRemindersUseCase,
    SaveIncomeUseCase,
)
from src.domain.models import IncomeDraft, ServiceLine

USER_ID = "user-1"


def _draft(account_id: str, **overrides) -> IncomeDraft:
    values = {
        "date": date(2024, 3, 15),
        "client": "Acme",
        "country": "EC",
        "services_details": [
            ServiceLine(name="LOGO", amount=Decimal("250")),
        ],
        "amount_paid": Decimal("200"),
        "payment_account": account_id,
        "responsible": "Ana",
    }
    values.update(overrides)
    return IncomeDraft(**values)


def test_create_income_credits_net_amount(
    store, logger, clock, make_account, balance_of
) -> None:
    """A 200 payment on a 5% account with 100 leaves 290."""
    account_id = make_account("Banco", balance="100", commission="0.05")

    result = SaveIncomeUseCase(store, logger=logger, clock=clock).execute(
        USER_ID, _draft(account_id)
    )

    assert result.success is True
    assert result.message == "Income saved."
    assert balance_of(account_id) == Decimal("290")
    income = GetIncomeUseCase(store).execute(USER_ID, result.record_id)
    assert income.total_contracted_amount == Decimal("250")
    assert income.commission_amount == Decimal("10")
    assert income.amount_with_commission == Decimal("190")
    assert income.remaining_balance == Decimal("50")


def test_income_with_missing_account_is_rejected(store, logger) -> None:
    """Unknown payment accounts abort the save."""
    result = SaveIncomeUseCase(store, logger=logger).execute(
        USER_ID, _draft("missing")
    )

    assert result.success is False
    assert result.message == "Account does not exist: missing"
    assert GetIncomesUseCase(store).execute(USER_ID) == []


def test_edit_income_moves_credit_between_accounts(
    store, logger, clock, make_account, balance_of
) -> None:
    """Editing reverses the stored credit and applies the new one."""
    first = make_account("Banco", balance="100", commission="0.05")
    second = make_account("Caja", balance="0")
    use_case = SaveIncomeUseCase(store, logger=logger, clock=clock)
    created = use_case.execute(USER_ID, _draft(first))

    result = use_case.execute(
        USER_ID,
        _draft(second, amount_paid=Decimal("250")),
        income_id=created.record_id,
    )

    assert result.success is True
    assert result.message == "Income updated."
    assert balance_of(first) == Decimal("100")
    assert balance_of(second) == Decimal("250")
    incomes = GetIncomesUseCase(store).execute(USER_ID)
    assert len(incomes) == 1
    assert incomes[0].remaining_balance == Decimal("0")


def test_delete_income_restores_balance(
    store, logger, clock, make_account, balance_of
) -> None:
    """Deleting reverses the net credit."""
    account_id = make_account("Banco", balance="100", commission="0.05")
    created = SaveIncomeUseCase(store, logger=logger, clock=clock).execute(
        USER_ID, _draft(account_id)
    )

    result = DeleteIncomeUseCase(store, logger=logger).execute(
        USER_ID, created.record_id
    )

    assert result.success is True
    assert balance_of(account_id) == Decimal("100")
    assert GetIncomesUseCase(store).execute(USER_ID) == []


def test_renewable_income_creates_and_drops_reminder(
    store, logger, clock, make_account
) -> None:
    """Renewable services with a due date keep one reminder in sync."""
    account_id = make_account("Banco")
    use_case = SaveIncomeUseCase(store, logger=logger, clock=clock)
    draft = _draft(
        account_id,
        services_details=[
            ServiceLine(name="REDES", amount=Decimal("120")),
            ServiceLine(name="LOGO", amount=Decimal("80")),
        ],
        due_date=date(2024, 4, 15),
    )

    created = use_case.execute(USER_ID, draft)
    reminders = ListRemindersUseCase(store).execute(USER_ID)

    assert len(reminders) == 1
    assert reminders[0].id == created.record_id
    assert reminders[0].renewal_amount == Decimal("120")
    assert reminders[0].due_date == date(2024, 4, 15)

    use_case.execute(
        USER_ID,
        _draft(account_id, due_date=None),
        income_id=created.record_id,
    )

    assert ListRemindersUseCase(store).execute(USER_ID) == []


def test_delete_income_removes_reminder(
    store, logger, clock, make_account
) -> None:
    """Deleting an income deletes its reminder."""
    account_id = make_account("Banco")
    created = SaveIncomeUseCase(store, logger=logger, clock=clock).execute(
        USER_ID,
        _draft(
            account_id,
            services_details=[
                ServiceLine(name="MONSTER HIVE", amount=Decimal("30"))
            ],
            amount_paid=Decimal("30"),
            due_date=date(2024, 4, 1),
        ),
    )

    DeleteIncomeUseCase(store, logger=logger).execute(
        USER_ID, created.record_id
    )

    assert ListRemindersUseCase(store).execute(USER_ID) == []


def test_edit_keeps_original_timestamp(
    store, logger, make_account
) -> None:
    """Edits keep the creation timestamp."""
    account_id = make_account("Banco")
    first = datetime(2024, 1, 1, 8, 0)
    created = SaveIncomeUseCase(
        store, logger=logger, clock=lambda: first
    ).execute(USER_ID, _draft(account_id))

    SaveIncomeUseCase(
        store, logger=logger, clock=lambda: datetime(2024, 2, 1, 8, 0)
    ).execute(
        USER_ID,
        _draft(account_id, client="Acme Corp"),
        income_id=created.record_id,
    )

    income = GetIncomeUseCase(store).execute(USER_ID, created.record_id)
    assert income.client == "Acme Corp"
    assert income.timestamp == first
