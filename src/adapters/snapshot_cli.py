"""CLI to record a net worth snapshot without opening the dashboard.

The snapshot owner is read from NETWORTH_SNAPSHOT_USER_ID and falls back to
NETWORTH_LOCAL_USER_ID, which makes the command usable from cron.
"""

import os

from src.infrastructure.container import (
    build_database_adapter,
    build_take_snapshot_use_case,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import AppSettings


def _resolve_user_id(settings: AppSettings) -> str:
    user_id = os.getenv("NETWORTH_SNAPSHOT_USER_ID", "").strip()
    return user_id or settings.local_user_id


def main() -> int:
    """Take one snapshot for the configured user.

    Returns:
        int: Process exit code, 0 on success and 1 on failure.
    """
    logger = get_app_logger()
    settings = AppSettings.from_env()
    user_id = _resolve_user_id(settings)
    adapter = build_database_adapter(settings)

    result = build_take_snapshot_use_case(adapter, settings).execute(user_id)
    if not result.success:
        logger.error(f"Snapshot failed for user={user_id}: {result.error}")
        print(result.error)
        return 1

    logger.info(f"Snapshot recorded for user={user_id}")
    print(f"Snapshot recorded for {user_id}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
