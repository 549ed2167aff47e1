from __future__ import annotations

from datetime import date
from decimal import Decimal

from ...core.constants import DAYS_PER_MONTH, MONTHS_PER_YEAR
from .base import PayBreakdown, PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: pro-rata salary over a fixed 30-day month.

    days = (end - start) + 1, daily = annual / 12 / 30,
    gross = daily * days + bonus, net = gross - deductions. No rounding.
    """

    def calculate(
        self,
        *,
        annual_salary: Decimal,
        period_start: date,
        period_end: date,
        bonus: Decimal,
        deductions: Decimal,
    ) -> PayBreakdown:
        days_in_period = (period_end - period_start).days + 1
        monthly_rate = annual_salary / MONTHS_PER_YEAR
        daily_rate = monthly_rate / DAYS_PER_MONTH
        base_salary_for_period = daily_rate * days_in_period

        gross_pay = base_salary_for_period + bonus
        net_pay = gross_pay - deductions

        return PayBreakdown(
            days_in_period=days_in_period,
            monthly_rate=monthly_rate,
            daily_rate=daily_rate,
            base_salary_for_period=base_salary_for_period,
            gross_pay=gross_pay,
            net_pay=net_pay,
        )
