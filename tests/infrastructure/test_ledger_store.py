"""Tests for the SQL schema and the SQLAlchemy ledger store."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.exc import IntegrityError

from src.domain.models import Account, Income, Reminder, ServiceLine
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_store import SqlAlchemyLedgerStore
from src.infrastructure.schema import TABLE_NAMES, ensure_schema, seed_user

NOW = datetime(2024, 3, 15, 10, 30)


@pytest.fixture
def adapter(tmp_path):
    adapter = SqlAlchemyDatabaseEngineAdapter(
        f"sqlite:///{tmp_path / 'store.db'}"
    )
    ensure_schema(adapter.get_engine(), logger=MagicMock())
    seed_user(adapter.get_engine(), "u1")
    seed_user(adapter.get_engine(), "u2")
    yield adapter
    adapter.dispose()


def _income(account_id: str) -> Income:
    return Income(
        id="inc-1",
        date=date(2024, 3, 1),
        client="Acme",
        country="EC",
        services_details=[
            ServiceLine(name="REDES", amount=Decimal("120.5")),
            ServiceLine(name="LOGO", amount=Decimal("80")),
        ],
        amount_paid=Decimal("100"),
        payment_account=account_id,
        responsible="Ana",
        total_contracted_amount=Decimal("200.5"),
        commission_rate=Decimal("0.05"),
        commission_amount=Decimal("5"),
        amount_with_commission=Decimal("95"),
        remaining_balance=Decimal("100.5"),
        timestamp=NOW,
        due_date=date(2024, 4, 1),
    )


def _account(account_id: str = "acc-1") -> Account:
    return Account(
        id=account_id,
        name="Banco",
        balance=Decimal("10.25"),
        commission=Decimal("0.05"),
        account_type="Bancario",
    )


def test_ensure_schema_creates_every_table(adapter) -> None:
    """All ledger tables exist after initialization."""
    tables = set(inspect(adapter.get_engine()).get_table_names())

    assert set(TABLE_NAMES) <= tables


def test_ensure_schema_is_idempotent(adapter) -> None:
    """Running the initialization twice is harmless."""
    logger = MagicMock()

    ensure_schema(adapter.get_engine(), logger=logger)
    seed_user(adapter.get_engine(), "u1")

    logger.info.assert_called_with("Ledger schema is ready")


def test_ensure_schema_adds_missing_expense_column(tmp_path) -> None:
    """Older payroll tables get the expenseId column."""
    engine = create_engine(f"sqlite:///{tmp_path / 'old.db'}")
    with engine.begin() as conn:
        conn.execute(
            text(
                "CREATE TABLE payrollPayments ("
                "id TEXT PRIMARY KEY, userId TEXT NOT NULL)"
            )
        )
    logger = MagicMock()

    ensure_schema(engine, logger=logger)

    columns = {
        column["name"]
        for column in inspect(engine).get_columns("payrollPayments")
    }
    engine.dispose()
    assert "expenseId" in columns
    logger.info.assert_any_call("Added payrollPayments.expenseId column")


def test_income_round_trip_preserves_values(adapter) -> None:
    """Services, dates and amounts survive storage."""
    store = SqlAlchemyLedgerStore(adapter)
    with store.unit_of_work() as session:
        session.insert_account("u1", _account())
        session.save_income("u1", _income("acc-1"))

    with store.unit_of_work() as session:
        income = session.get_income("u1", "inc-1")

    assert income.services_details == [
        ServiceLine(name="REDES", amount=Decimal("120.5")),
        ServiceLine(name="LOGO", amount=Decimal("80.0")),
    ]
    assert income.date == date(2024, 3, 1)
    assert income.due_date == date(2024, 4, 1)
    assert income.timestamp == NOW
    assert income.amount_with_commission == Decimal("95")


def test_records_are_scoped_to_their_user(adapter) -> None:
    """Reads and upserts never cross users."""
    store = SqlAlchemyLedgerStore(adapter)
    with store.unit_of_work() as session:
        session.insert_account("u1", _account())
        session.save_income("u1", _income("acc-1"))

    with store.unit_of_work() as session:
        session.save_income("u2", _income("acc-1"))

    with store.unit_of_work() as session:
        assert session.get_income("u2", "inc-1") is None
        assert session.list_incomes("u2") == []
        assert session.get_account("u2", "acc-1") is None
        assert len(session.list_incomes("u1")) == 1


def test_failed_unit_of_work_rolls_back(adapter) -> None:
    """Errors inside a unit of work discard every write."""
    store = SqlAlchemyLedgerStore(adapter)

    with pytest.raises(RuntimeError):
        with store.unit_of_work() as session:
            session.insert_account("u1", _account())
            raise RuntimeError("boom")

    with store.unit_of_work() as session:
        assert session.list_accounts("u1") == []


def test_foreign_keys_reject_unknown_account(adapter) -> None:
    """Incomes must point at an existing account."""
    store = SqlAlchemyLedgerStore(adapter)

    with pytest.raises(IntegrityError):
        with store.unit_of_work() as session:
            session.save_income("u1", _income("ghost"))


def test_reminder_status_update(adapter) -> None:
    """Reminders can be filtered by status after resolution."""
    store = SqlAlchemyLedgerStore(adapter)
    reminder = Reminder(
        id="rem-1",
        due_date=date(2024, 4, 1),
        timestamp=NOW,
        admin_payment_id="adm-1",
        message="Payment reminder",
    )
    with store.unit_of_work() as session:
        session.save_reminder("u1", reminder)
        session.set_reminder_status("u1", "rem-1", "resolved", NOW)

    with store.unit_of_work() as session:
        assert session.list_reminders("u1", status="pending") == []
        (stored,) = session.list_reminders("u1", status="resolved")
        session.delete_admin_payment_reminders("u1", "adm-1")
        remaining = session.list_reminders("u1")

    assert stored.resolved_at == NOW
    assert remaining == []


def test_count_account_references(adapter) -> None:
    """References from incomes are counted."""
    store = SqlAlchemyLedgerStore(adapter)
    with store.unit_of_work() as session:
        session.insert_account("u1", _account())
        session.save_income("u1", _income("acc-1"))

    with store.unit_of_work() as session:
        assert session.count_account_references("u1", "acc-1") == 1
        assert session.count_account_references("u2", "acc-1") == 0
