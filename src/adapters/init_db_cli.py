"""CLI creating the ledger schema and the configured user.

Usage: ``python -m src.adapters.init_db_cli``
"""

from src.infrastructure.container import build_database_adapter, build_settings
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.schema import ensure_schema, seed_user


def main() -> None:
    """Create missing tables and seed the user every record references."""
    logger = get_app_logger()
    settings = build_settings()
    adapter = build_database_adapter(settings)
    try:
        engine = adapter.get_engine()
        logger.info(f"Initializing ledger database: {engine.url}")
        ensure_schema(engine, logger=logger)
        seed_user(engine, settings.user_id)
        logger.info(f"User '{settings.user_id}' is ready.")
    finally:
        adapter.dispose()


if __name__ == "__main__":
    main()
