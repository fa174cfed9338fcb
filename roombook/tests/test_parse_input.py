from __future__ import annotations

from datetime import date, time

import pytest

from roombook.core.use_cases.parse_input import InputValidationError, parse_date, parse_time


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("0001-01-01", date(1, 1, 1)),
        ("9999-12-31", date(9999, 12, 31)),
        ("2024-02-29", date(2024, 2, 29)),
        (" 2024-01-10 ", date(2024, 1, 10)),
    ],
)
def test_parse_date_accepts_days_within_supported_range(raw: str, expected: date) -> None:
    assert parse_date(raw) == expected


def test_parse_date_rejects_year_zero_as_out_of_range() -> None:
    with pytest.raises(InputValidationError, match=r"\[1, 9999\]"):
        parse_date("0000-06-15")


@pytest.mark.parametrize("raw", ["10000-01-01", "2024-1-10", "10/01/2024", "", "2023-02-29", "2024-13-01"])
def test_parse_date_rejects_malformed_or_impossible_days(raw: str) -> None:
    with pytest.raises(InputValidationError):
        parse_date(raw)


def test_parse_time_reads_hours_and_minutes() -> None:
    assert parse_time("09:30") == time(9, 30)
    assert parse_time("23:59") == time(23, 59)


@pytest.mark.parametrize("raw", ["24:00", "9h30", "09:60", "", "09:30:00"])
def test_parse_time_rejects_bad_format(raw: str) -> None:
    with pytest.raises(InputValidationError):
        parse_time(raw)


def test_input_validation_error_is_a_value_error() -> None:
    assert issubclass(InputValidationError, ValueError)


@pytest.mark.parametrize("raw", ["２０２４-01-10", "2024-٠١-10"])
def test_parse_date_accepts_ascii_digits_only(raw: str) -> None:
    with pytest.raises(InputValidationError, match="Format de date invalide"):
        parse_date(raw)
