from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from ..core.enums import EmploymentStatus


@dataclass(frozen=True)
class Employee:
    """Domain entity: a hotel staff member."""

    employee_id: int
    first_name: str
    last_name: str
    email: str
    phone_number: str
    department: str
    position: str
    hire_date: date
    base_salary: Decimal
    status: EmploymentStatus = EmploymentStatus.ACTIVE

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
