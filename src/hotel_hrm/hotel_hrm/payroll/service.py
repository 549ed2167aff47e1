from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Any, Callable, Optional, Sequence

from ..auth.permissions import can_modify_payroll_data, requires_permission
from ..auth.session import AuthStateProvider
from ..common.datetime_utils import now_local
from ..common.validators import require_non_negative, require_period, to_decimal
from ..core.enums import PayrollStatus
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollRecord
from .repository import PayrollRepository

logger = logging.getLogger(__name__)


class PayrollService:
    def __init__(
        self,
        payroll: PayrollRepository,
        employees: EmployeeRepository,
        auth_state: AuthStateProvider,
        *,
        calculator: Optional[PayrollCalculator] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._payroll = payroll
        self._employees = employees
        self._auth_state = auth_state
        self._calculator = calculator or StandardPayrollCalculator()
        self._clock = clock

    def list_payroll_records(self) -> Sequence[PayrollRecord]:
        return self._payroll.list_all()

    def get_payroll_record(self, payroll_id: int) -> PayrollRecord:
        record = self._payroll.get_by_id(payroll_id)
        if not record:
            raise NotFoundError(f"Payroll record {payroll_id} not found")
        return record

    def list_payroll_records_for_employee(self, employee_id: int) -> Sequence[PayrollRecord]:
        return self._payroll.list_by_employee_id(employee_id)

    @requires_permission(can_modify_payroll_data, "You do not have permission to process payroll")
    def process_payroll(
        self,
        employee_id: int,
        period_start: date,
        period_end: date,
        bonus: Any = 0,
        deductions: Any = 0,
    ) -> PayrollRecord:
        bonus = require_non_negative(to_decimal(bonus, "Bonus"), "Bonus")
        deductions = require_non_negative(to_decimal(deductions, "Deductions"), "Deductions")
        require_period(period_start, period_end)

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(f"Employee with ID {employee_id} not found")

        pay = self._calculator.calculate(
            annual_salary=employee.base_salary,
            period_start=period_start,
            period_end=period_end,
            bonus=bonus,
            deductions=deductions,
        )

        record = self._payroll.add(
            PayrollRecord(
                payroll_id=0,
                employee_id=employee.employee_id,
                employee=replace(employee),
                pay_period_start=period_start,
                pay_period_end=period_end,
                base_salary=pay.base_salary_for_period,
                bonus=bonus,
                deductions=deductions,
                gross_pay=pay.gross_pay,
                net_pay=pay.net_pay,
                processed_date=self._clock(),
                status=PayrollStatus.PROCESSED,
            )
        )
        logger.info(
            "Payroll %s processed for employee %s (%s..%s): net %s",
            record.payroll_id,
            employee.employee_id,
            period_start,
            period_end,
            record.net_pay,
        )
        return record
