from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class PayBreakdown:
    days_in_period: int
    monthly_rate: Decimal
    daily_rate: Decimal
    base_salary_for_period: Decimal
    gross_pay: Decimal
    net_pay: Decimal


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(
        self,
        *,
        annual_salary: Decimal,
        period_start: date,
        period_end: date,
        bonus: Decimal,
        deductions: Decimal,
    ) -> PayBreakdown:
        raise NotImplementedError
