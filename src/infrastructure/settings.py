"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.domain.constants import DEFAULT_CURRENCY
from src.infrastructure.logging.logger import get_app_logger


AUTH_MODES = ("oidc", "local")


@dataclass(frozen=True)
class AppSettings:
    """Runtime settings for the tracker.

    Attributes:
        database_url: SQLAlchemy URL of the tracker database.
        currency_code: Currency used for display.
        auth_mode: ``oidc`` for the external identity provider or ``local``
            for a single fixed user.
        local_user_id: User id resolved in ``local`` mode.
    """

    database_url: str | None = None
    currency_code: str = DEFAULT_CURRENCY
    auth_mode: str = "oidc"
    local_user_id: str = "local-user"

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Build settings from environment variables and an optional .env.

        Returns:
            AppSettings: Settings sourced from environment variables.

        Raises:
            ValueError: If NETWORTH_AUTH_MODE is not supported.
        """
        dotenv.load_dotenv()
        auth_mode = os.getenv("NETWORTH_AUTH_MODE", "oidc").strip().lower()
        if auth_mode not in AUTH_MODES:
            raise ValueError(
                f"Unsupported auth mode: {auth_mode}. "
                f"Expected one of {', '.join(AUTH_MODES)}."
            )
        currency = (
            os.getenv("NETWORTH_CURRENCY", DEFAULT_CURRENCY).strip().upper()
            or DEFAULT_CURRENCY
        )
        local_user_id = (
            os.getenv("NETWORTH_LOCAL_USER_ID", "local-user").strip()
            or "local-user"
        )
        database_url = os.getenv("DATABASE_URL") or None
        if database_url is None:
            get_app_logger().warning("DATABASE_URL is not set")
        return cls(
            database_url=database_url,
            currency_code=currency,
            auth_mode=auth_mode,
            local_user_id=local_user_id,
        )


__all__ = ["AppSettings", "AUTH_MODES"]
