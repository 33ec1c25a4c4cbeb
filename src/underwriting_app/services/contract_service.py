"""Contract service."""

from __future__ import annotations

import logging

from underwriting_app.core.errors import (
    ContractAlreadyExists,
    CustomerNotFound,
    PersistenceFailed,
    ProductNotFound,
)
from underwriting_app.core.validation import contract_end_date, validate_start_date
from underwriting_app.models.contract import Contract, ContractCreate
from underwriting_app.models.customer import Customer
from underwriting_app.repositories.contract_repository import ContractRepository
from underwriting_app.repositories.customer_repository import CustomerRepository
from underwriting_app.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ContractService:
    """Coordinates contract creation and the lookups around it."""

    def __init__(
        self,
        contract_repo: ContractRepository,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
    ):
        self._contract_repo = contract_repo
        self._product_repo = product_repo
        self._customer_repo = customer_repo

    def _validate(self, payload: ContractCreate) -> ContractCreate:
        validate_start_date(payload.start_date)
        if not self._product_repo.exists_product(payload.product_id):
            raise ProductNotFound(payload.product_id)
        if not self._customer_repo.exists_customer(payload.customer_id):
            raise CustomerNotFound(payload.customer_id)
        if self._contract_repo.exists_contract(payload.id):
            raise ContractAlreadyExists(payload.id)
        return payload

    def create_contract(self, payload: ContractCreate) -> Contract:
        """Validate and insert a contract running one year from its start date."""
        logger.info(
            "create_contract id=%s product_id=%s customer_id=%s start_date=%s",
            payload.id,
            payload.product_id,
            payload.customer_id,
            payload.start_date,
        )
        validated = self._validate(payload)
        end_date = contract_end_date(validated.start_date)
        inserted = self._contract_repo.insert_contract(
            validated.id,
            validated.product_id,
            validated.customer_id,
            validated.start_date,
            end_date,
        )
        if inserted == 0:
            raise PersistenceFailed("contracts")

        logger.info("contract %s created, end_date=%s", validated.id, end_date)
        return Contract(
            id=validated.id,
            product_id=validated.product_id,
            customer_id=validated.customer_id,
            start_date=validated.start_date,
            end_date=end_date,
        )

    def find_customer_by_id(self, customer_id: int) -> Customer:
        """Fetch one customer by id."""
        customer = self._customer_repo.get_customer(customer_id)
        if customer is None:
            raise CustomerNotFound(customer_id)
        return customer

    def list_product_short_names(self) -> list[str]:
        """Return product short names in display order."""
        names = [product.short_name for product in self._product_repo.list_products()]
        logger.info("list_product_short_names count=%s", len(names))
        return names
