# tests/test_formatting.py

from __future__ import annotations

import datetime as dt

from src.data.models import Employee
from src.ui.components.formatting import (
    UNKNOWN_EMPLOYEE,
    employee_name,
    format_currency,
    format_date,
    format_number,
)


def test_format_currency_brl() -> None:
    assert format_currency(1234.5) == "R$ 1.234,50"
    assert format_currency(0) == "R$ 0,00"
    assert format_currency(1_250_000) == "R$ 1.250.000,00"
    assert format_currency(-10) == "-R$ 10,00"


def test_format_currency_missing_values() -> None:
    assert format_currency(None) == "–"
    assert format_currency("abc") == "–"  # type: ignore[arg-type]


def test_format_number() -> None:
    assert format_number(12345.678, 1) == "12.345,7"
    assert format_number(None) == "–"


def test_format_date() -> None:
    assert format_date(dt.date(2024, 4, 5)) == "05/04/2024"
    assert format_date(dt.datetime(2024, 12, 31, 23, 0)) == "31/12/2024"
    assert format_date("2024-04-05") == "05/04/2024"
    assert format_date("not a date") == "–"
    assert format_date(None) == "–"


def test_employee_name_falls_back_to_unknown() -> None:
    employees = [Employee(1, "Ana"), Employee(2, "Bruno")]
    assert employee_name(2, employees) == "Bruno"
    assert employee_name(99, employees) == UNKNOWN_EMPLOYEE
    assert employee_name(None, []) == UNKNOWN_EMPLOYEE
