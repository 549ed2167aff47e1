from __future__ import annotations

from typing import Optional, Sequence

from ..database.memory_base import InMemoryTable
from .model import Employee
from .repository import EmployeeRepository


class InMemoryEmployeeRepository(EmployeeRepository):
    def __init__(self):
        self._table: InMemoryTable[Employee] = InMemoryTable("employee_id")

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._table.get(employee_id)

    def add(self, employee: Employee) -> Employee:
        return self._table.insert(employee)

    def update(self, employee: Employee) -> Employee:
        return self._table.overwrite(employee)

    def delete(self, employee_id: int) -> bool:
        return self._table.remove(employee_id)

    def list_all(self) -> Sequence[Employee]:
        return self._table.all()
