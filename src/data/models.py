"""
Domain records held by the data store: employees, their tasks and the
per-municipality finance rows.

Records validate themselves on construction, so `dataclasses.replace` and
`from_dict` both reject blank names and negative or non-finite amounts.
"""

from __future__ import annotations

import datetime as dt
import math
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Tuple


class TaskStatus(str, Enum):
    PENDING = "Pendente"
    IN_PROGRESS = "Em Andamento"
    COMPLETED = "Concluída"

    @classmethod
    def parse(cls, value: Any) -> "TaskStatus":
        if isinstance(value, TaskStatus):
            return value
        text = str(value or "").strip()
        for status in cls:
            if text in (status.value, status.name):
                return status
        raise ValueError(f"Status de tarefa inválido: {value!r}")


OPEN_STATUSES = frozenset({TaskStatus.PENDING, TaskStatus.IN_PROGRESS})


def _check_text(value: Any, label: str) -> str:
    text = str(value or "").strip()
    if not text:
        raise ValueError(f"O campo '{label}' é obrigatório.")
    return text


def _check_amount(value: Any, label: str) -> float:
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"O campo '{label}' deve ser numérico.") from None
    if not math.isfinite(amount):
        raise ValueError(f"O campo '{label}' deve ser um número finito.")
    if amount < 0:
        raise ValueError(f"O campo '{label}' não pode ser negativo.")
    return amount


def _optional_text(data: Mapping[str, Any], key: str) -> str:
    return str(data.get(key) or "").strip()


def _non_negative(data: Mapping[str, Any], key: str, label: str) -> float:
    raw = data.get(key)
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return 0.0
    return _check_amount(raw, label)


def _as_date(value: Any) -> dt.date:
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError("O campo 'Data' é obrigatório.")
    try:
        return dt.date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        raise ValueError(f"Data inválida: {value!r}") from None


def _as_id(data: Mapping[str, Any], key: str) -> int:
    try:
        return int(data[key])
    except KeyError:
        raise ValueError(f"Campo '{key}' ausente.") from None
    except (TypeError, ValueError):
        raise ValueError(f"Identificador inválido em '{key}': {data[key]!r}") from None


@dataclass(frozen=True)
class Employee:
    id: int
    name: str
    role: str = ""
    department: str = ""
    email: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", _check_text(self.name, "Nome"))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Employee":
        return cls(
            id=_as_id(data, "id"),
            name=data.get("name"),
            role=_optional_text(data, "role"),
            department=_optional_text(data, "department"),
            email=_optional_text(data, "email"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Task:
    id: int
    employee_id: int
    title: str
    date: dt.date
    status: TaskStatus = TaskStatus.PENDING
    description: str = ""
    hours: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "title", _check_text(self.title, "Título"))
        object.__setattr__(self, "status", TaskStatus.parse(self.status))
        object.__setattr__(self, "hours", _check_amount(self.hours, "Horas"))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Task":
        return cls(
            id=_as_id(data, "id"),
            employee_id=_as_id(data, "employee_id"),
            title=data.get("title"),
            date=_as_date(data.get("date")),
            status=TaskStatus.parse(data.get("status", TaskStatus.PENDING)),
            description=_optional_text(data, "description"),
            hours=_non_negative(data, "hours", "Horas"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "title": self.title,
            "description": self.description,
            "date": self.date.isoformat(),
            "status": self.status.value,
            "hours": self.hours,
        }


@dataclass(frozen=True)
class FinanceData:
    id: int
    municipality: str
    paid: float = 0.0
    pending: float = 0.0

    def __post_init__(self) -> None:
        municipality = _check_text(self.municipality, "Nome do Município").upper()
        object.__setattr__(self, "municipality", municipality)
        object.__setattr__(self, "paid", _check_amount(self.paid, "Valor Pago"))
        object.__setattr__(self, "pending", _check_amount(self.pending, "Valor Pendente"))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FinanceData":
        return cls(
            id=_as_id(data, "id"),
            municipality=data.get("municipality"),
            paid=_non_negative(data, "paid", "Valor Pago"),
            pending=_non_negative(data, "pending", "Valor Pendente"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DataSnapshot:
    """Immutable view of all three collections.

    Returned by every store mutation and sent as the AI analysis context.
    """

    employees: Tuple[Employee, ...] = field(default_factory=tuple)
    tasks: Tuple[Task, ...] = field(default_factory=tuple)
    finance_data: Tuple[FinanceData, ...] = field(default_factory=tuple)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "employees": [e.to_dict() for e in self.employees],
            "tasks": [t.to_dict() for t in self.tasks],
            "financeData": [f.to_dict() for f in self.finance_data],
        }
