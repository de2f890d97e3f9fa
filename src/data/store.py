"""
In-memory store owning the employee, task and municipality collections.

Every mutator returns the resulting :class:`DataSnapshot`; views re-render
from snapshots and never keep their own copies of the records.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Callable, Dict, Generic, Iterable, List, Mapping, Optional, Tuple, Type, TypeVar

from src.data.models import DataSnapshot, Employee, FinanceData, Task

logger = logging.getLogger(__name__)

R = TypeVar("R", Employee, Task, FinanceData)


class RecordNotFoundError(LookupError):
    """Raised when an update or delete targets an id that is not in the collection."""

    def __init__(self, kind: str, record_id: int) -> None:
        super().__init__(f"{kind} com id {record_id} não encontrado.")
        self.kind = kind
        self.record_id = record_id


class _Collection(Generic[R]):
    def __init__(self, kind: str, factory: Callable[[Mapping[str, Any]], R]) -> None:
        self.kind = kind
        self._factory = factory
        self._items: List[R] = []
        self._next_id = 1

    @property
    def items(self) -> Tuple[R, ...]:
        return tuple(self._items)

    def load(self, records: Iterable[R]) -> None:
        self._items = list(records)
        self._next_id = max((r.id for r in self._items), default=0) + 1

    def get(self, record_id: int) -> Optional[R]:
        return next((r for r in self._items if r.id == record_id), None)

    def add(self, data: Mapping[str, Any]) -> R:
        payload: Dict[str, Any] = dict(data)
        payload["id"] = self._next_id
        record = self._factory(payload)
        self._items.append(record)
        self._next_id += 1
        logger.debug("added %s id=%s", self.kind, record.id)
        return record

    def _index_of(self, record_id: int) -> int:
        for idx, current in enumerate(self._items):
            if current.id == record_id:
                return idx
        logger.warning("%s id=%s not found", self.kind, record_id)
        raise RecordNotFoundError(self.kind, record_id)

    def update(self, record: R) -> None:
        idx = self._index_of(record.id)
        # replace() re-runs __post_init__ validation
        record = dataclasses.replace(record)
        self._items[idx] = record
        logger.debug("updated %s id=%s", self.kind, record.id)

    def delete(self, record_id: int) -> None:
        idx = self._index_of(record_id)
        del self._items[idx]
        logger.debug("deleted %s id=%s", self.kind, record_id)


def _checked(record: Any, expected: Type[Any]) -> Any:
    if not isinstance(record, expected):
        raise TypeError(f"Esperado {expected.__name__}, recebido {type(record).__name__}.")
    return record


class DataStore:
    def __init__(self, seed: Optional[DataSnapshot] = None) -> None:
        self._employees: _Collection[Employee] = _Collection("Funcionário", Employee.from_dict)
        self._tasks: _Collection[Task] = _Collection("Tarefa", Task.from_dict)
        self._finance: _Collection[FinanceData] = _Collection("Município", FinanceData.from_dict)
        if seed is not None:
            self.reset(seed)

    # ---- snapshots ----
    @property
    def employees(self) -> Tuple[Employee, ...]:
        return self._employees.items

    @property
    def tasks(self) -> Tuple[Task, ...]:
        return self._tasks.items

    @property
    def finance_data(self) -> Tuple[FinanceData, ...]:
        return self._finance.items

    def snapshot(self) -> DataSnapshot:
        return DataSnapshot(
            employees=self.employees,
            tasks=self.tasks,
            finance_data=self.finance_data,
        )

    def reset(self, seed: Optional[DataSnapshot] = None) -> DataSnapshot:
        seed = seed or DataSnapshot()
        self._employees.load(seed.employees)
        self._tasks.load(seed.tasks)
        self._finance.load(seed.finance_data)
        logger.info(
            "store reset: %d employees, %d tasks, %d municipalities",
            len(seed.employees),
            len(seed.tasks),
            len(seed.finance_data),
        )
        return self.snapshot()

    # ---- lookups ----
    def get_employee(self, employee_id: int) -> Optional[Employee]:
        return self._employees.get(employee_id)

    def get_task(self, task_id: int) -> Optional[Task]:
        return self._tasks.get(task_id)

    def get_municipality(self, record_id: int) -> Optional[FinanceData]:
        return self._finance.get(record_id)

    # ---- employees ----
    def add_employee(self, data: Mapping[str, Any]) -> DataSnapshot:
        self._employees.add(data)
        return self.snapshot()

    def update_employee(self, record: Employee) -> DataSnapshot:
        self._employees.update(_checked(record, Employee))
        return self.snapshot()

    def delete_employee(self, employee_id: int) -> DataSnapshot:
        # Tasks keep their employee_id; the views fall back to an "unknown" label.
        self._employees.delete(employee_id)
        return self.snapshot()

    # ---- tasks ----
    def add_task(self, data: Mapping[str, Any]) -> DataSnapshot:
        self._tasks.add(data)
        return self.snapshot()

    def update_task(self, record: Task) -> DataSnapshot:
        self._tasks.update(_checked(record, Task))
        return self.snapshot()

    def delete_task(self, task_id: int) -> DataSnapshot:
        self._tasks.delete(task_id)
        return self.snapshot()

    # ---- municipalities ----
    def add_municipality(self, data: Mapping[str, Any]) -> DataSnapshot:
        self._finance.add(data)
        return self.snapshot()

    def update_municipality(self, record: FinanceData) -> DataSnapshot:
        self._finance.update(_checked(record, FinanceData))
        return self.snapshot()

    def delete_municipality(self, record_id: int) -> DataSnapshot:
        self._finance.delete(record_id)
        return self.snapshot()
