"""Monthly rate calculation."""

from __future__ import annotations

import logging
from decimal import Decimal

from underwriting_app.core.errors import ContractNotFound
from underwriting_app.repositories.contract_repository import ContractRepository
from underwriting_app.repositories.coverage_repository import CoverageRepository

logger = logging.getLogger(__name__)


class RatingService:
    """Sums the prices of a contract's coverages valid at its start date."""

    def __init__(self, contract_repo: ContractRepository, coverage_repo: CoverageRepository):
        self._contract_repo = contract_repo
        self._coverage_repo = coverage_repo

    def calc_monthly_rate(self, contract_id: int) -> Decimal:
        """Return the total monthly rate; zero when nothing is priced."""
        logger.info("calc_monthly_rate contract_id=%s", contract_id)
        contract = self._contract_repo.get_contract(contract_id)
        if contract is None:
            raise ContractNotFound(contract_id)

        total = Decimal(0)
        for coverage_type_id, amount in self._coverage_repo.list_coverage_keys(contract_id):
            prices = self._coverage_repo.list_coverage_prices(
                coverage_type_id,
                amount,
                contract.start_date,
            )
            if not prices:
                logger.info(
                    "no price on %s for coverage type %s amount %s",
                    contract.start_date,
                    coverage_type_id,
                    amount,
                )
            total += sum(prices, Decimal(0))

        logger.info("calc_monthly_rate contract_id=%s rate=%s", contract_id, total)
        return total
