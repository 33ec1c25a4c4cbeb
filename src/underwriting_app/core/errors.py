"""Typed underwriting outcomes and the generic data fault."""

from __future__ import annotations

from datetime import date
from decimal import Decimal


class UnderwritingError(Exception):
    """Base class for expected business outcomes the caller branches on."""


class ContractNotFound(UnderwritingError):
    def __init__(self, contract_id: int):
        super().__init__(f"contract not found: {contract_id}")
        self.contract_id = contract_id


class CoverageTypeNotFound(UnderwritingError):
    def __init__(self, coverage_type_id: int):
        super().__init__(f"coverage type not found: {coverage_type_id}")
        self.coverage_type_id = coverage_type_id


class CoverageTypeProductMismatch(UnderwritingError):
    def __init__(self, contract_id: int, coverage_type_id: int):
        super().__init__(
            f"coverage type {coverage_type_id} does not belong to the product of contract {contract_id}"
        )
        self.contract_id = contract_id
        self.coverage_type_id = coverage_type_id


class InvalidCoverageAmount(UnderwritingError):
    def __init__(self, coverage_type_id: int, amount: Decimal):
        super().__init__(f"amount {amount} is not insurable for coverage type {coverage_type_id}")
        self.coverage_type_id = coverage_type_id
        self.amount = amount


class NoPriceAvailable(UnderwritingError):
    def __init__(self, coverage_type_id: int, amount: Decimal, on_date: date):
        super().__init__(
            f"no price for coverage type {coverage_type_id} amount {amount} on {on_date.isoformat()}"
        )
        self.coverage_type_id = coverage_type_id
        self.amount = amount
        self.on_date = on_date


class UnderwritingRejected(UnderwritingError):
    """A rejection rule of the coverage type matched the proposal."""

    def __init__(self, coverage_type_id: int):
        super().__init__(f"coverage type {coverage_type_id} rejected by underwriting rule")
        self.coverage_type_id = coverage_type_id


class StartDateInPast(UnderwritingError):
    def __init__(self, start_date: date):
        super().__init__(f"start date lies in the past: {start_date.isoformat()}")
        self.start_date = start_date


class ProductNotFound(UnderwritingError):
    def __init__(self, product_id: int):
        super().__init__(f"product not found: {product_id}")
        self.product_id = product_id


class CustomerNotFound(UnderwritingError):
    def __init__(self, customer_id: int):
        super().__init__(f"customer not found: {customer_id}")
        self.customer_id = customer_id


class ContractAlreadyExists(UnderwritingError):
    def __init__(self, contract_id: int):
        super().__init__(f"contract already exists: {contract_id}")
        self.contract_id = contract_id


class DataError(Exception):
    """Storage or data-integrity fault. The original cause is chained."""


class RuleExpressionError(DataError):
    """Rejection rule text that cannot be parsed or evaluated."""


class PersistenceFailed(DataError):
    """An insert reported zero affected rows."""

    def __init__(self, table: str):
        super().__init__(f"insert into {table} affected no rows")
        self.table = table
