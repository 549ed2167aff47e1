from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for authorization."""

    EMPLOYEE = "Employee"
    HR = "HR"
    ADMIN = "Admin"


class EmploymentStatus(str, Enum):
    ACTIVE = "Active"
    ON_LEAVE = "OnLeave"
    TERMINATED = "Terminated"


class PayrollStatus(str, Enum):
    """Lifecycle of a payroll record."""

    PENDING = "Pending"
    PROCESSED = "Processed"
    PAID = "Paid"
