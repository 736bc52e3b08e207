"""Tests for the database CLI adapters."""

from src.adapters import init_db_cli, test_db_connection
from src.infrastructure.settings import FinanceSettings


class _DummyConnection:
    def __init__(self) -> None:
        self.executed: list[str] = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def exec_driver_sql(self, statement: str) -> None:
        self.executed.append(statement)


class _DummyEngine:
    def __init__(self, url: str) -> None:
        self.url = url
        self.connection = _DummyConnection()

    def connect(self):
        return self.connection


class _Adapter:
    def __init__(self, engine: _DummyEngine) -> None:
        self.engine = engine
        self.disposed = False

    def get_engine(self):
        return self.engine

    def dispose(self) -> None:
        self.disposed = True


class _Logger:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def info(self, msg: str) -> None:
        self.messages.append(msg)


def test_main_logs_successful_checks(monkeypatch):
    """The CLI should log the connection URL and execute SELECT 1."""
    engine = _DummyEngine("sqlite:///finance.db")
    adapter = _Adapter(engine)
    logger = _Logger()

    monkeypatch.setattr(
        test_db_connection, "build_database_adapter", lambda: adapter
    )
    monkeypatch.setattr(test_db_connection, "get_app_logger", lambda: logger)

    test_db_connection.main()

    assert "sqlite:///finance.db" in logger.messages[0]
    assert logger.messages[-1] == "Connection is working."
    assert engine.connection.executed == ["SELECT 1"]
    assert adapter.disposed is True


def test_init_db_creates_schema_and_user(monkeypatch):
    """init_db should create the schema and seed the configured user."""
    engine = _DummyEngine("sqlite:///finance.db")
    adapter = _Adapter(engine)
    logger = _Logger()
    settings = FinanceSettings(
        db_url="sqlite:///finance.db", user_id="owner-1"
    )
    calls: list[tuple] = []

    monkeypatch.setattr(init_db_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(init_db_cli, "build_settings", lambda: settings)
    monkeypatch.setattr(
        init_db_cli, "build_database_adapter", lambda _settings: adapter
    )
    monkeypatch.setattr(
        init_db_cli,
        "ensure_schema",
        lambda eng, logger=None: calls.append(("schema", eng)),
    )
    monkeypatch.setattr(
        init_db_cli,
        "seed_user",
        lambda eng, user_id: calls.append(("user", user_id)),
    )

    init_db_cli.main()

    assert calls == [("schema", engine), ("user", "owner-1")]
    assert logger.messages[-1] == "User 'owner-1' is ready."
    assert adapter.disposed is True
