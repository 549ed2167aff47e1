from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import PayrollRecord


class PayrollRepository(Protocol):
    def get_by_id(self, payroll_id: int) -> Optional[PayrollRecord]:
        raise NotImplementedError

    def list_by_employee_id(self, employee_id: int) -> Sequence[PayrollRecord]:
        raise NotImplementedError

    def add(self, record: PayrollRecord) -> PayrollRecord:
        """Insert and return the record with its newly assigned id."""

        raise NotImplementedError

    def update(self, record: PayrollRecord) -> PayrollRecord:
        """Overwrite by id; unknown ids are left untouched."""

        raise NotImplementedError

    def list_all(self) -> Sequence[PayrollRecord]:
        raise NotImplementedError
