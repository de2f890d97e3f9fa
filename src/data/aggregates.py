"""
Derived figures for the dashboard and municipality tabs.

Everything here is recomputed from the current snapshot on each render.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

import pandas as pd

from src.data.models import OPEN_STATUSES, FinanceData, Task, TaskStatus

RECENT_TASKS_LIMIT = 5


def completed_count(tasks: Iterable[Task]) -> int:
    return sum(1 for task in tasks if task.status is TaskStatus.COMPLETED)


def open_count(tasks: Iterable[Task]) -> int:
    return sum(1 for task in tasks if task.status in OPEN_STATUSES)


def recent_tasks(tasks: Sequence[Task], limit: int = RECENT_TASKS_LIMIT) -> List[Task]:
    # sorted() is stable, so tasks sharing a date keep their input order
    return sorted(tasks, key=lambda task: task.date, reverse=True)[: max(limit, 0)]


def status_breakdown(tasks: Iterable[Task]) -> pd.DataFrame:
    counts = {status.value: 0 for status in TaskStatus}
    for task in tasks:
        counts[task.status.value] += 1
    return pd.DataFrame({"Status": list(counts.keys()), "Tarefas": list(counts.values())})


def finance_totals(records: Iterable[FinanceData]) -> Tuple[float, float]:
    paid = 0.0
    pending = 0.0
    for record in records:
        paid += record.paid
        pending += record.pending
    return paid, pending


def finance_frame(records: Sequence[FinanceData]) -> pd.DataFrame:
    if not records:
        return pd.DataFrame(columns=["Município", "Situação", "Valor"])
    wide = pd.DataFrame(
        {
            "Município": [r.municipality for r in records],
            "Pago": [r.paid for r in records],
            "Pendente": [r.pending for r in records],
        }
    )
    return wide.melt(id_vars="Município", var_name="Situação", value_name="Valor")
