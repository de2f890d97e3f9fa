"""
Utility helpers for formatting numbers, BRL currency strings, dates and employee references.
"""

from __future__ import annotations

import datetime as dt
from typing import Iterable, Optional, Union

from src.data.models import Employee

UNKNOWN_EMPLOYEE = "Desconhecido"
MISSING = "–"


def _pt_br(formatted: str) -> str:
    # "1,234.56" -> "1.234,56"
    return formatted.replace(",", "_").replace(".", ",").replace("_", ".")


def format_number(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return MISSING
    try:
        return _pt_br(f"{value:,.{decimals}f}")
    except (TypeError, ValueError):
        return MISSING


def format_currency(value: Optional[float], symbol: str = "R$", decimals: int = 2) -> str:
    if value is None:
        return MISSING
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return MISSING
    sign = "-" if numeric < 0 else ""
    return f"{sign}{symbol} {_pt_br(f'{abs(numeric):,.{decimals}f}')}"


def format_date(value: Union[dt.date, str, None]) -> str:
    if value is None:
        return MISSING
    if isinstance(value, dt.datetime):
        value = value.date()
    if not isinstance(value, dt.date):
        try:
            value = dt.date.fromisoformat(str(value).strip()[:10])
        except ValueError:
            return MISSING
    return value.strftime("%d/%m/%Y")


def employee_name(employee_id: Optional[int], employees: Iterable[Employee]) -> str:
    for employee in employees:
        if employee.id == employee_id:
            return employee.name
    return UNKNOWN_EMPLOYEE
