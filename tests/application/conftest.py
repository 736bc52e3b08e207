"""Fixtures running the use cases against a throwaway SQLite ledger."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases import SaveAccountUseCase
from src.domain.models import AccountDraft
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_store import SqlAlchemyLedgerStore
from src.infrastructure.schema import ensure_schema, seed_user

USER_ID = "user-1"
NOW = datetime(2024, 3, 15, 10, 30)


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def db_port(tmp_path, logger):
    adapter = SqlAlchemyDatabaseEngineAdapter(
        f"sqlite:///{tmp_path / 'ledger.db'}"
    )
    engine = adapter.get_engine()
    ensure_schema(engine, logger=logger)
    seed_user(engine, USER_ID)
    seed_user(engine, "user-2", name="Other", email="other@example.com")
    yield adapter
    adapter.dispose()


@pytest.fixture
def store(db_port) -> SqlAlchemyLedgerStore:
    return SqlAlchemyLedgerStore(db_port)


@pytest.fixture
def make_account(store, logger):
    """Return a helper creating an account and returning its id."""
    use_case = SaveAccountUseCase(store, logger=logger)

    def _make(
        name: str,
        balance: str = "0",
        commission: str = "0",
        account_type: str = "Bancario",
        user_id: str = USER_ID,
    ) -> str:
        result = use_case.execute(
            user_id,
            AccountDraft(
                name=name,
                commission=Decimal(commission),
                account_type=account_type,
                balance=Decimal(balance),
            ),
        )
        assert result.success, result.message
        return result.record_id

    return _make


@pytest.fixture
def balance_of(store):
    """Return a helper reading an account balance."""

    def _balance(account_id: str, user_id: str = USER_ID) -> Decimal:
        with store.unit_of_work() as session:
            return session.get_account(user_id, account_id).balance

    return _balance
