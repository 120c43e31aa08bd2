"""CLI to create the tracker tables and check the database connection.

This adapter is meant for local operations: it builds the database adapter
from the configured settings, creates any missing tables and runs a basic
health check.
"""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.schema import ensure_schema


def main() -> None:
    """Create missing tables and run a connectivity check."""
    adapter = build_database_adapter()
    logger = get_app_logger()

    engine = adapter.get_engine()
    logger.info(f"Tracker DB: {engine.url.render_as_string(hide_password=True)}")

    tables = ensure_schema(adapter, logger=logger)
    with engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")

    logger.info(f"Connection is working. Tables: {', '.join(tables)}")
    print(f"Schema ready: {', '.join(tables)}")


if __name__ == "__main__":
    main()
