"""
Demo records loaded into a fresh session when INFOCO_SEED_DEMO_DATA is on.
"""

from __future__ import annotations

import datetime as dt

from src.data.models import DataSnapshot, Employee, FinanceData, Task, TaskStatus

EMPLOYEES = (
    Employee(1, "Ana Souza", "Analista Contábil", "Contabilidade", "ana.souza@infoco.com.br"),
    Employee(2, "Bruno Lima", "Assessor Jurídico", "Jurídico", "bruno.lima@infoco.com.br"),
    Employee(3, "Carla Mendes", "Auditora", "Auditoria", "carla.mendes@infoco.com.br"),
    Employee(4, "Diego Rocha", "Técnico de Sistemas", "TI", "diego.rocha@infoco.com.br"),
)

TASKS = (
    Task(1, 1, "Fechamento contábil de março", dt.date(2024, 3, 28), TaskStatus.COMPLETED,
         "Conciliação bancária e balancete.", 12.0),
    Task(2, 2, "Parecer sobre contrato de iluminação", dt.date(2024, 4, 2), TaskStatus.IN_PROGRESS,
         "Análise das cláusulas de reajuste.", 6.5),
    Task(3, 3, "Auditoria da folha de pagamento", dt.date(2024, 4, 5), TaskStatus.PENDING,
         "", 8.0),
    Task(4, 4, "Atualização do portal da transparência", dt.date(2024, 4, 8), TaskStatus.COMPLETED,
         "Publicação dos relatórios do 1º trimestre.", 4.0),
    Task(5, 1, "Relatório de gestão fiscal", dt.date(2024, 4, 10), TaskStatus.PENDING,
         "RGF do 1º quadrimestre.", 10.0),
    Task(6, 3, "Revisão de empenhos", dt.date(2024, 4, 12), TaskStatus.IN_PROGRESS,
         "", 5.5),
)

FINANCE_DATA = (
    FinanceData(1, "CAMPINA GRANDE", 125_000.00, 18_500.00),
    FinanceData(2, "PATOS", 84_300.50, 0.0),
    FinanceData(3, "SOUSA", 46_750.00, 12_250.75),
    FinanceData(4, "CAJAZEIRAS", 39_900.00, 21_000.00),
)


def demo_snapshot() -> DataSnapshot:
    return DataSnapshot(employees=EMPLOYEES, tasks=TASKS, finance_data=FINANCE_DATA)
