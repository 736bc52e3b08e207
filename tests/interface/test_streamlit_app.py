"""Tests for the Streamlit app module."""

from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.adapters.interface.streamlit import app
from src.application.use_cases.results import OperationResult
from src.infrastructure.settings import FinanceSettings


class _FakeCache:
    def __init__(self) -> None:
        self.cleared = False

    def clear(self) -> None:
        self.cleared = True


class _FakeSidebar:
    def __init__(self, page: str) -> None:
        self.page = page
        self.options = None

    def selectbox(self, label, options, **_kwargs):
        self.options = options
        return self.page


class _FakeStreamlit:
    def __init__(self, page: str = "Dashboard") -> None:
        self.config_kwargs = None
        self.title_text = None
        self.header_text = None
        self.errors: list[str] = []
        self.successes: list[str] = []
        self.cache_data = _FakeCache()
        self.sidebar = _FakeSidebar(page)

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text

    def header(self, text: str):
        self.header_text = text

    def error(self, text: str):
        self.errors.append(text)

    def success(self, text: str):
        self.successes.append(text)


def test_show_result_clears_cache_on_success(monkeypatch):
    """Successful mutations invalidate cached reads."""
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "get_usage_logger", lambda: MagicMock())

    app._show_result(OperationResult(True, "Income saved.", "inc-1"))

    assert fake_st.cache_data.cleared is True
    assert fake_st.successes == ["Income saved."]
    assert fake_st.errors == []


def test_show_result_reports_failures(monkeypatch):
    """Failed mutations keep the cache and show the message."""
    fake_st = _FakeStreamlit()
    usage_logger = MagicMock()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "get_usage_logger", lambda: usage_logger)

    app._show_result(OperationResult(False, "Account not found."))

    assert fake_st.cache_data.cleared is False
    assert fake_st.errors == ["Account not found."]
    usage_logger.info.assert_called_once()


def test_load_accounts_delegates_to_use_case(monkeypatch):
    """The cached loader should call the wired use case."""
    calls: list[str] = []

    def _execute(user_id):
        calls.append(user_id)
        return ["Banco", "Caja"]

    use_cases = SimpleNamespace(
        get_accounts=SimpleNamespace(execute=_execute)
    )
    monkeypatch.setattr(app, "_use_cases", lambda: use_cases)
    app._load_accounts.clear()

    result = app._load_accounts("loader-user")

    assert result == ["Banco", "Caja"]
    assert calls == ["loader-user"]
    app._load_accounts.clear()


def test_load_report_years_passes_today(monkeypatch):
    """Year options come from the report years use case."""
    seen = {}

    def _execute(user_id, today):
        seen["args"] = (user_id, today)
        return [2024, 2023]

    use_cases = SimpleNamespace(
        get_report_years=SimpleNamespace(execute=_execute)
    )
    monkeypatch.setattr(app, "_use_cases", lambda: use_cases)
    app._load_report_years.clear()

    result = app._load_report_years("years-user", "2024-03-15")

    assert result == [2024, 2023]
    assert seen["args"] == ("years-user", "2024-03-15")
    app._load_report_years.clear()


def test_to_decimal_and_account_names():
    """Form helpers convert widget values and index account names."""
    accounts = [SimpleNamespace(id="a1", name="Banco")]

    assert app._to_decimal(12.5) == Decimal("12.5")
    assert app._to_decimal(None) == Decimal("0")
    assert app._account_names(accounts) == {"a1": "Banco"}


def test_main_renders_selected_page(monkeypatch):
    """main should dispatch to the renderer of the selected page."""
    fake_st = _FakeStreamlit(page="Accounts")
    settings = FinanceSettings(db_url="sqlite://", user_id="owner-1")
    rendered: list[FinanceSettings] = []

    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(
        app, "_check_altair_dependencies", lambda: (True, None)
    )
    monkeypatch.setattr(app, "_get_runtime", lambda: (settings, None))
    monkeypatch.setattr(app, "get_usage_logger", lambda: MagicMock())
    monkeypatch.setitem(app.RENDERERS, "Accounts", rendered.append)

    app.main()

    assert fake_st.config_kwargs["layout"] == "wide"
    assert fake_st.title_text == "Finance Tracker"
    assert fake_st.sidebar.options == app.PAGES
    assert fake_st.header_text == "Accounts"
    assert rendered == [settings]


def test_main_stops_when_altair_dependencies_fail(monkeypatch):
    """main should show the dependency error and render nothing else."""
    fake_st = _FakeStreamlit()
    runtime = MagicMock()

    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(
        app,
        "_check_altair_dependencies",
        lambda: (False, "numpy is installed but incomplete (no ndarray)."),
    )
    monkeypatch.setattr(app, "_get_runtime", runtime)

    app.main()

    assert fake_st.errors == [
        "numpy is installed but incomplete (no ndarray)."
    ]
    assert fake_st.header_text is None
    runtime.assert_not_called()


def test_every_page_has_a_renderer():
    """The sidebar only lists pages that can be rendered."""
    assert set(app.PAGES) == set(app.RENDERERS)
