"""Use case to compute a user's net worth from current entries."""

from src.application.ports.entries_repository import EntriesRepositoryPort
from src.domain.constants import DEFAULT_CURRENCY
from src.domain.models import NetWorthOverview
from src.domain.services.finance import (
    compute_asset_category_breakdown,
    compute_net_worth_summary,
)
from src.infrastructure.logging.logger import get_app_logger


class GetNetWorthSummaryUseCase:
    """Read a user's assets and liabilities and aggregate them."""

    def __init__(
        self,
        assets_repository: EntriesRepositoryPort,
        liabilities_repository: EntriesRepositoryPort,
        currency_code: str = DEFAULT_CURRENCY,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            assets_repository: Repository for the assets table.
            liabilities_repository: Repository for the liabilities table.
            currency_code: Currency used for display.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._assets_repository = assets_repository
        self._liabilities_repository = liabilities_repository
        self._currency_code = currency_code
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str) -> NetWorthOverview:
        """Return the summary, category breakdown and both entry lists.

        Args:
            user_id: Owner of the entries.

        Returns:
            NetWorthOverview: Totals and entries for the dashboard.

        Raises:
            PersistenceError: If either repository read fails.
        """
        assets = self._assets_repository.list_entries(user_id)
        liabilities = self._liabilities_repository.list_entries(user_id)

        summary = compute_net_worth_summary(
            assets,
            liabilities,
            currency_code=self._currency_code,
        )
        breakdown = compute_asset_category_breakdown(
            assets,
            currency_code=self._currency_code,
        )

        self._logger.info(
            f"Net worth computed for user={user_id}: "
            f"assets={summary.asset_total}, "
            f"liabilities={summary.liability_total}"
        )

        return NetWorthOverview(
            summary=summary,
            breakdown=breakdown,
            assets=list(assets),
            liabilities=list(liabilities),
        )


__all__ = ["GetNetWorthSummaryUseCase"]
