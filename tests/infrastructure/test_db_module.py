"""Tests for the infrastructure.db module."""

import pytest

from src.infrastructure import db as db_module


def test_get_env_var_reads_environment(monkeypatch):
    """_get_env_var should load .env and return the requested value."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("FINANCE_DB_URL", "postgresql://example")

    assert db_module._get_env_var("FINANCE_DB_URL") == "postgresql://example"


def test_get_env_var_raises_when_missing(monkeypatch):
    """Missing env vars should raise a RuntimeError."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.delenv("FINANCE_DB_URL", raising=False)

    with pytest.raises(RuntimeError):
        db_module._get_env_var("FINANCE_DB_URL")


def test_create_engine_passes_pool_configuration(monkeypatch):
    """Server databases get a QueuePool with health checks."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    engine = db_module._create_engine("postgresql://finance")

    assert engine == "engine"
    assert captured["db_url"] == "postgresql://finance"
    assert captured["kwargs"]["poolclass"] is db_module.QueuePool
    assert captured["kwargs"]["pool_size"] == 5
    assert captured["kwargs"]["max_overflow"] == 5
    assert captured["kwargs"]["pool_pre_ping"] is True
    assert captured["kwargs"]["future"] is True


def test_memory_sqlite_uses_static_pool(monkeypatch):
    """In-memory SQLite shares one connection and enables foreign keys."""
    captured = {}
    listened = []

    def fake_create_engine(db_url, **kwargs):
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)
    monkeypatch.setattr(
        db_module.event,
        "listen",
        lambda target, name, fn: listened.append((target, name, fn)),
    )

    engine = db_module._create_engine("sqlite://")

    assert engine == "engine"
    assert captured["kwargs"]["poolclass"] is db_module.StaticPool
    assert captured["kwargs"]["connect_args"] == {"check_same_thread": False}
    assert listened == [
        ("engine", "connect", db_module._enable_sqlite_foreign_keys)
    ]


def test_file_sqlite_enforces_foreign_keys(tmp_path):
    """File-backed SQLite engines turn foreign keys on for each connection."""
    engine = db_module._create_engine(f"sqlite:///{tmp_path / 'fk.db'}")
    try:
        with engine.connect() as conn:
            enabled = conn.exec_driver_sql("PRAGMA foreign_keys").scalar()
    finally:
        engine.dispose()

    assert enabled == 1


def test_adapter_creates_engine_lazily_once(monkeypatch):
    """The adapter memoizes its engine until disposed."""
    created = []

    class _Engine:
        def __init__(self, url: str) -> None:
            self.url = url
            self.disposed = False

        def dispose(self) -> None:
            self.disposed = True

    def fake_create_engine(url):
        created.append(url)
        return _Engine(url)

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter("sqlite:///x.db")
    assert created == []

    engine_one = adapter.get_engine()
    engine_two = adapter.get_engine()

    assert engine_one is engine_two
    assert created == ["sqlite:///x.db"]

    adapter.dispose()

    assert engine_one.disposed is True
    adapter.get_engine()
    assert created == ["sqlite:///x.db", "sqlite:///x.db"]


def test_adapter_reads_url_from_environment(monkeypatch):
    """Without an explicit URL the adapter reads FINANCE_DB_URL."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("FINANCE_DB_URL", "postgresql://from-env")
    monkeypatch.setattr(db_module, "_create_engine", lambda url: f"e:{url}")

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter()

    assert adapter.get_engine() == "e:postgresql://from-env"


def test_dispose_without_engine_is_noop():
    """Disposing an unused adapter does nothing."""
    db_module.SqlAlchemyDatabaseEngineAdapter("sqlite://").dispose()
