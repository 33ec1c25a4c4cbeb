"""Underwriting of new coverages on existing contracts.

``add_coverage`` runs a fixed sequence of gates. Each gate either enriches the
request state or raises one of the typed outcomes from ``core.errors``; the
first failing gate ends the run and nothing is written.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable

from underwriting_app.core.errors import (
    ContractNotFound,
    CoverageTypeNotFound,
    CoverageTypeProductMismatch,
    CustomerNotFound,
    InvalidCoverageAmount,
    NoPriceAvailable,
    PersistenceFailed,
    UnderwritingRejected,
)
from underwriting_app.core.rule_evaluator import evaluate
from underwriting_app.core.rule_parser import parse_condition
from underwriting_app.core.validation import age_on
from underwriting_app.models.contract import Contract
from underwriting_app.models.coverage import (
    CoverageAmountDefinition,
    CoverageCreate,
    CoverageType,
    RejectionRule,
)
from underwriting_app.repositories.contract_repository import ContractRepository
from underwriting_app.repositories.coverage_repository import CoverageRepository
from underwriting_app.repositories.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


@dataclass
class _CoverageRequest:
    """State accumulated while a request passes the gates."""

    payload: CoverageCreate
    contract: Contract | None = None
    coverage_type: CoverageType | None = None
    amount_definition: CoverageAmountDefinition | None = None


class UnderwritingService:
    """Validates and records coverages."""

    def __init__(
        self,
        contract_repo: ContractRepository,
        coverage_repo: CoverageRepository,
        customer_repo: CustomerRepository,
    ):
        self._contract_repo = contract_repo
        self._coverage_repo = coverage_repo
        self._customer_repo = customer_repo
        self._gates: list[Callable[[_CoverageRequest], None]] = [
            self._check_contract,
            self._check_coverage_type,
            self._check_product,
            self._check_amount,
            self._check_price,
            self._check_rejection_rules,
        ]

    def add_coverage(self, payload: CoverageCreate) -> None:
        """Run all gates and insert the coverage when every gate passes."""
        logger.info(
            "add_coverage contract_id=%s coverage_type_id=%s amount=%s",
            payload.contract_id,
            payload.coverage_type_id,
            payload.amount,
        )
        request = _CoverageRequest(payload=payload)
        for gate in self._gates:
            gate(request)

        inserted = self._coverage_repo.insert_coverage(
            payload.contract_id,
            payload.coverage_type_id,
            request.amount_definition.amount_text,
        )
        if inserted == 0:
            raise PersistenceFailed("coverages")
        logger.info(
            "coverage added contract_id=%s coverage_type_id=%s amount=%s",
            payload.contract_id,
            payload.coverage_type_id,
            request.amount_definition.amount_text,
        )

    def _check_contract(self, request: _CoverageRequest) -> None:
        contract = self._contract_repo.get_contract(request.payload.contract_id)
        if contract is None:
            logger.info("contract %s not found", request.payload.contract_id)
            raise ContractNotFound(request.payload.contract_id)
        request.contract = contract

    def _check_coverage_type(self, request: _CoverageRequest) -> None:
        coverage_type = self._coverage_repo.get_coverage_type(request.payload.coverage_type_id)
        if coverage_type is None:
            logger.info("coverage type %s not found", request.payload.coverage_type_id)
            raise CoverageTypeNotFound(request.payload.coverage_type_id)
        request.coverage_type = coverage_type

    def _check_product(self, request: _CoverageRequest) -> None:
        if request.coverage_type.product_id != request.contract.product_id:
            logger.info(
                "coverage type %s belongs to product %s, contract %s to product %s",
                request.coverage_type.id,
                request.coverage_type.product_id,
                request.contract.id,
                request.contract.product_id,
            )
            raise CoverageTypeProductMismatch(request.contract.id, request.coverage_type.id)

    def _check_amount(self, request: _CoverageRequest) -> None:
        coverage_type_id = request.coverage_type.id
        amount = request.payload.amount
        definition = self._coverage_repo.find_amount_definition(coverage_type_id, amount)
        if definition is not None:
            request.amount_definition = definition
            return

        definitions = self._coverage_repo.list_amount_definitions(coverage_type_id)
        if not definitions:
            logger.warning("coverage type %s has no amount tiers configured", coverage_type_id)
            raise InvalidCoverageAmount(coverage_type_id, amount)

        logger.info(
            "amount %s not among tiers %s of coverage type %s",
            amount,
            [str(definition.amount) for definition in definitions],
            coverage_type_id,
        )
        raise InvalidCoverageAmount(coverage_type_id, amount)

    def _check_price(self, request: _CoverageRequest) -> None:
        start_date = request.contract.start_date
        if not self._coverage_repo.price_exists(request.amount_definition.id, start_date):
            logger.info(
                "no price for amount tier %s on %s",
                request.amount_definition.id,
                start_date,
            )
            raise NoPriceAvailable(request.coverage_type.id, request.payload.amount, start_date)

    def _check_rejection_rules(self, request: _CoverageRequest) -> None:
        customer = self._customer_repo.get_customer(request.contract.customer_id)
        if customer is None:
            raise CustomerNotFound(request.contract.customer_id)
        age = age_on(customer.birth_date, request.contract.start_date)

        for rule in self._coverage_repo.list_rejection_rules(request.coverage_type.id):
            if self._rule_matches(rule, request.payload.amount, age):
                logger.info(
                    "coverage type %s rejected: amount=%s (%s) age=%s (%s)",
                    request.coverage_type.id,
                    request.payload.amount,
                    rule.amount_condition,
                    age,
                    rule.age_condition,
                )
                raise UnderwritingRejected(request.coverage_type.id)

    @staticmethod
    def _rule_matches(rule: RejectionRule, amount: Decimal, age: int) -> bool:
        """A rule rejects only when both of its conditions hold."""
        amount_condition = parse_condition(rule.amount_condition)
        age_condition = parse_condition(rule.age_condition)
        return evaluate(amount, amount_condition) and evaluate(age, age_condition)
