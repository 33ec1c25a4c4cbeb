"""Date and amount rules shared by the contract and underwriting workflows."""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal, InvalidOperation

from underwriting_app.core.errors import DataError, StartDateInPast


def validate_start_date(start_date: date, today: date | None = None) -> date:
    """Disallow contract start dates before today."""
    if start_date < (today or date.today()):
        raise StartDateInPast(start_date)
    return start_date


def contract_end_date(start_date: date) -> date:
    """Return start + 1 year - 1 day; Feb 29 rolls to Feb 28 before subtracting."""
    try:
        anniversary = start_date.replace(year=start_date.year + 1)
    except ValueError:
        anniversary = start_date.replace(year=start_date.year + 1, day=28)
    return anniversary - timedelta(days=1)


def age_on(birth_date: date, on_date: date) -> int:
    """Whole years elapsed between birth_date and on_date."""
    age = on_date.year - birth_date.year
    if (on_date.month, on_date.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def to_date(value: object) -> date:
    """Convert a stored ISO date text into date."""
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError as error:
        raise DataError(f"Not an ISO date: {value!r}") from error


def to_decimal(value: object) -> Decimal:
    """Convert a stored numeric value into Decimal without float rounding."""
    try:
        return Decimal(str(value).strip())
    except InvalidOperation as error:
        raise DataError(f"Not a decimal value: {value!r}") from error

