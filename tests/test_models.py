# tests/test_models.py

from __future__ import annotations

import datetime as dt
import json

import pytest

from src.data.models import DataSnapshot, Employee, FinanceData, Task, TaskStatus
from src.data.seed import demo_snapshot


def test_task_from_dict_coerces_form_values() -> None:
    task = Task.from_dict(
        {
            "id": "3",
            "employee_id": "2",
            "title": "  Parecer  ",
            "date": "2024-04-02T10:00:00",
            "status": "Em Andamento",
            "hours": "6.5",
        }
    )
    assert task.id == 3
    assert task.employee_id == 2
    assert task.title == "Parecer"
    assert task.date == dt.date(2024, 4, 2)
    assert task.status is TaskStatus.IN_PROGRESS
    assert task.hours == 6.5


def test_task_status_accepts_enum_names() -> None:
    assert TaskStatus.parse("COMPLETED") is TaskStatus.COMPLETED
    assert TaskStatus.parse(TaskStatus.PENDING) is TaskStatus.PENDING
    with pytest.raises(ValueError):
        TaskStatus.parse("Arquivada")


@pytest.mark.parametrize(
    "data",
    [
        {"id": 1, "employee_id": 1, "title": " ", "date": "2024-01-01"},
        {"id": 1, "employee_id": 1, "title": "x", "date": ""},
        {"id": 1, "employee_id": 1, "title": "x", "date": "01/02/2024"},
        {"id": 1, "employee_id": 1, "title": "x", "date": "2024-01-01", "hours": -2},
        {"id": 1, "employee_id": "abc", "title": "x", "date": "2024-01-01"},
    ],
)
def test_task_from_dict_rejects_invalid_input(data) -> None:
    with pytest.raises(ValueError):
        Task.from_dict(data)


def test_finance_from_dict_uppercases_and_validates() -> None:
    row = FinanceData.from_dict({"id": 1, "municipality": "campina grande", "paid": "10.5"})
    assert row.municipality == "CAMPINA GRANDE"
    assert row.paid == 10.5
    assert row.pending == 0.0

    with pytest.raises(ValueError):
        FinanceData.from_dict({"id": 1, "municipality": "X", "pending": -0.01})
    with pytest.raises(ValueError):
        FinanceData.from_dict({"id": 1, "municipality": "X", "paid": "muito"})


def test_employee_requires_name() -> None:
    with pytest.raises(ValueError):
        Employee.from_dict({"id": 1, "name": ""})


def test_snapshot_payload_is_json_ready() -> None:
    payload = demo_snapshot().to_payload()

    assert set(payload) == {"employees", "tasks", "financeData"}
    assert payload["tasks"][0]["employeeId"] == 1
    assert payload["tasks"][0]["status"] == "Concluída"
    assert payload["tasks"][0]["date"] == "2024-03-28"
    # round-trips through json without custom encoders
    assert json.loads(json.dumps(payload)) == payload


def test_empty_snapshot_payload() -> None:
    assert DataSnapshot().to_payload() == {"employees": [], "tasks": [], "financeData": []}


def test_direct_construction_validates_and_normalizes() -> None:
    row = FinanceData(1, " pombal ", 3, 0)
    assert row.municipality == "POMBAL"
    assert isinstance(row.paid, float)
    assert Task(1, 1, " Parecer ", dt.date(2024, 1, 1), "Concluída").status is TaskStatus.COMPLETED

    with pytest.raises(ValueError):
        FinanceData(1, "PATOS", float("inf"))
    with pytest.raises(ValueError):
        Employee(1, "")
    with pytest.raises(ValueError):
        Task(1, 1, "x", dt.date(2024, 1, 1), hours=float("nan"))
