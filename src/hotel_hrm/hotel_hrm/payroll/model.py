from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import PayrollStatus
from ..employees.model import Employee


@dataclass(frozen=True)
class PayrollRecord:
    """Domain entity: pay for one employee over one period.

    `employee` is a snapshot taken when the record was processed, so later
    edits to the employee do not change historical figures.
    """

    payroll_id: int
    employee_id: int
    employee: Optional[Employee]
    pay_period_start: date
    pay_period_end: date
    base_salary: Decimal
    bonus: Decimal
    deductions: Decimal
    gross_pay: Decimal
    net_pay: Decimal
    processed_date: datetime
    status: PayrollStatus
