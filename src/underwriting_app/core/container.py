"""Application dependency container."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from underwriting_app.core.config import AppConfig, configure_logging, load_config
from underwriting_app.repositories.contract_repository import ContractRepository
from underwriting_app.repositories.coverage_repository import CoverageRepository
from underwriting_app.repositories.customer_repository import CustomerRepository
from underwriting_app.repositories.database import Database
from underwriting_app.repositories.product_repository import ProductRepository
from underwriting_app.repositories.schema import initialize_schema
from underwriting_app.services.contract_service import ContractService
from underwriting_app.services.rating_service import RatingService
from underwriting_app.services.underwriting_service import UnderwritingService


@dataclass
class ServiceContainer:
    """Wires repositories and services."""

    config: AppConfig | None
    database: Database
    contract_service: ContractService
    underwriting_service: UnderwritingService
    rating_service: RatingService


def build_services(database: Database, config: AppConfig | None = None) -> ServiceContainer:
    """Wire repositories and services on top of an existing database."""
    product_repo = ProductRepository(database)
    customer_repo = CustomerRepository(database)
    contract_repo = ContractRepository(database)
    coverage_repo = CoverageRepository(database)

    return ServiceContainer(
        config=config,
        database=database,
        contract_service=ContractService(contract_repo, product_repo, customer_repo),
        underwriting_service=UnderwritingService(contract_repo, coverage_repo, customer_repo),
        rating_service=RatingService(contract_repo, coverage_repo),
    )


def build_container(config_path: Path | None = None) -> ServiceContainer:
    """Build dependencies from configuration and initialize schema."""
    config = load_config(config_path)
    configure_logging(config.logging)

    database = Database(config.database)
    initialize_schema(database)
    return build_services(database, config)
