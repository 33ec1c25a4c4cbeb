"""Tests for date and amount rules."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from underwriting_app.core.errors import DataError, StartDateInPast
from underwriting_app.core.validation import (
    age_on,
    contract_end_date,
    to_date,
    to_decimal,
    validate_start_date,
)


def test_validate_start_date_accepts_today_and_future() -> None:
    today = date(2025, 1, 10)
    assert validate_start_date(today, today=today) == today
    assert validate_start_date(today + timedelta(days=30), today=today) == date(2025, 2, 9)


def test_validate_start_date_rejects_past() -> None:
    with pytest.raises(StartDateInPast) as excinfo:
        validate_start_date(date.today() - timedelta(days=1))
    assert excinfo.value.start_date == date.today() - timedelta(days=1)


@pytest.mark.parametrize(
    ("start", "end"),
    [
        (date(2024, 3, 1), date(2025, 2, 28)),
        (date(2025, 1, 10), date(2026, 1, 9)),
        (date(2023, 3, 1), date(2024, 2, 29)),
        (date(2024, 2, 29), date(2025, 2, 27)),
        (date(2025, 1, 1), date(2025, 12, 31)),
    ],
)
def test_contract_end_date_is_one_year_minus_one_day(start: date, end: date) -> None:
    assert contract_end_date(start) == end
    assert (end - start).days in {364, 365}


def test_age_on_counts_whole_years() -> None:
    assert age_on(date(2007, 6, 1), date(2025, 1, 10)) == 17
    assert age_on(date(1994, 5, 5), date(2025, 1, 10)) == 30
    assert age_on(date(1994, 1, 10), date(2025, 1, 10)) == 31
    assert age_on(date(2000, 2, 29), date(2025, 2, 28)) == 24
    assert age_on(date(2000, 2, 29), date(2025, 3, 1)) == 25


def test_to_decimal_keeps_exact_value() -> None:
    assert to_decimal("12.50") == Decimal("12.50")
    assert to_decimal(1000) == Decimal("1000")
    with pytest.raises(DataError):
        to_decimal("twelve")


def test_to_date_reads_iso_text() -> None:
    assert to_date("2025-01-10") == date(2025, 1, 10)
    assert to_date(" 2024-02-29 ") == date(2024, 2, 29)


@pytest.mark.parametrize("value", ["05.05.1994", "2025-1-10", "", None])
def test_to_date_wraps_bad_text_as_data_error(value) -> None:
    with pytest.raises(DataError) as excinfo:
        to_date(value)
    assert isinstance(excinfo.value.__cause__, ValueError)
