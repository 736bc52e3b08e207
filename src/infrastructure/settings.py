"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass, field
import os

import dotenv

from src.domain.constants import (
    DEFAULT_CASH_ACCOUNT_NAME,
    DEFAULT_CURRENCY,
    DEFAULT_DUE_DATE_SERVICES,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root

DEFAULT_USER_ID = "dev_user_id"


@dataclass(frozen=True)
class FinanceSettings:
    """Runtime settings of the finance tracker.

    Attributes:
        db_url: SQLAlchemy URL of the ledger database.
        user_id: Tenant id threaded through every operation.
        due_date_services: Services whose incomes produce reminders.
        cash_account_name: Account shown as cash on hand.
        currency: Currency code displayed next to amounts.
    """

    db_url: str
    user_id: str = DEFAULT_USER_ID
    due_date_services: tuple[str, ...] = field(
        default=DEFAULT_DUE_DATE_SERVICES
    )
    cash_account_name: str = DEFAULT_CASH_ACCOUNT_NAME
    currency: str = DEFAULT_CURRENCY

    @classmethod
    def from_env(cls) -> "FinanceSettings":
        """Build settings from ``.env`` and environment variables.

        Returns:
            FinanceSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        db_url = os.getenv("FINANCE_DB_URL", "").strip()
        if not db_url:
            db_url = cls._default_db_url(logger=logger)
        user_id = os.getenv("FINANCE_USER_ID", "").strip() or DEFAULT_USER_ID
        services = cls._parse_services(os.getenv("FINANCE_DUE_DATE_SERVICES"))
        cash_account = (
            os.getenv("FINANCE_CASH_ACCOUNT", "").strip()
            or DEFAULT_CASH_ACCOUNT_NAME
        )
        currency = (
            os.getenv("FINANCE_CURRENCY", "").strip().upper()
            or DEFAULT_CURRENCY
        )
        return cls(
            db_url=db_url,
            user_id=user_id,
            due_date_services=services,
            cash_account_name=cash_account,
            currency=currency,
        )

    @staticmethod
    def _parse_services(raw: str | None) -> tuple[str, ...]:
        """Parse a comma-separated list of service names.

        Args:
            raw: Raw environment value.

        Returns:
            tuple[str, ...]: Upper-cased names, or the defaults when blank.
        """
        if not raw or not raw.strip():
            return DEFAULT_DUE_DATE_SERVICES
        names = [item.strip().upper() for item in raw.split(",")]
        return tuple(name for name in names if name)

    @staticmethod
    def _default_db_url(logger) -> str:
        """Return the SQLite URL under ``data/``, creating the folder."""
        data_dir = get_project_root() / "data"
        data_dir.mkdir(parents=True, exist_ok=True)
        path = data_dir / "finance.db"
        logger.info(f"FINANCE_DB_URL not set, using {path}")
        return f"sqlite:///{path}"


__all__ = ["FinanceSettings", "DEFAULT_USER_ID"]
