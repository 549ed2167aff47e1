from __future__ import annotations

from typing import Optional, Sequence

from ..database.memory_base import InMemoryTable
from .model import PayrollRecord
from .repository import PayrollRepository


class InMemoryPayrollRepository(PayrollRepository):
    def __init__(self):
        self._table: InMemoryTable[PayrollRecord] = InMemoryTable("payroll_id")

    def get_by_id(self, payroll_id: int) -> Optional[PayrollRecord]:
        return self._table.get(payroll_id)

    def list_by_employee_id(self, employee_id: int) -> Sequence[PayrollRecord]:
        return self._table.filter(lambda r: r.employee_id == int(employee_id))

    def add(self, record: PayrollRecord) -> PayrollRecord:
        return self._table.insert(record)

    def update(self, record: PayrollRecord) -> PayrollRecord:
        return self._table.overwrite(record)

    def list_all(self) -> Sequence[PayrollRecord]:
        return self._table.all()
